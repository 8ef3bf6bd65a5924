"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from adapters.http_client import build_async_client
from cli.ui_components import build_settings_table
from core.config import AppSettings
from core.services.clock import current_moment

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.dataset_url, params={"$limit": 1})
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


def run(ctx: typer.Context) -> None:
    """Show the effective settings, the local clock and dataset reachability."""

    settings = ctx.obj if isinstance(ctx.obj, AppSettings) else AppSettings()
    table = build_settings_table(settings, current_moment())

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("Dataset reachable", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] check FOODTRUCK_DATASET_URL or your network connection."
        )
