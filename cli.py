#!/usr/bin/env python3
"""
CLI для Article API.

Использование:
    python cli.py serve --port 8000
    python cli.py routes
    python cli.py show-config
"""

import click
from rich.console import Console
from rich.table import Table

from src.infrastructure.config.settings import get_settings

console = Console()


@click.group()
def cli():
    """Article API CLI."""
    pass


@cli.command()
@click.option('--host', default=None, help='Адрес (по умолчанию из настроек)')
@click.option('--port', default=None, type=int, help='Порт (по умолчанию из настроек)')
@click.option('--reload', is_flag=True, help='Перезапуск при изменении кода')
def serve(host, port, reload):
    """
    Запустить HTTP сервер.

    Примеры:
        python cli.py serve
        python cli.py serve --port 9000 --reload
    """
    import uvicorn

    settings = get_settings()
    host = host or settings.host
    port = settings.port if port is None else port

    console.print(f"\n🚀 [bold green]Запуск Article API[/bold green] на {host}:{port}\n")
    uvicorn.run(
        "src.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.get_log_level().lower(),
    )


@cli.command()
def routes():
    """Показать зарегистрированные маршруты."""
    from fastapi.routing import APIRoute
    from src.main import create_app

    table = Table(title="Routes")
    table.add_column("Method", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Handler")

    for route in create_app().routes:
        if not isinstance(route, APIRoute):
            continue
        for method in sorted(route.methods):
            table.add_row(method, route.path, route.name)

    console.print(table)


@cli.command(name="show-config")
def show_config():
    """Показать текущие настройки."""
    table = Table(title="Settings")
    table.add_column("Name", style="cyan")
    table.add_column("Value", style="green")

    for name, value in get_settings().model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


if __name__ == '__main__':
    cli()
