"""Command line entry points for the fact fetcher."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import click
import httpx

from apps.analytics.services import build_analytics_client
from apps.core.posthog import configure_posthog, shutdown_posthog
from apps.factfetch.controller import FactFetchController
from apps.factfetch.services.fact_source import FactSourceClient
from apps.factfetch.terminal import TerminalHost
from factfetch_project.settings import AppSettings, configure_logging, get_settings

logger = logging.getLogger(__name__)


def build_controller(
    settings: AppSettings,
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FactFetchController:
    """Wire a controller from settings, including optional analytics."""

    fact_source = FactSourceClient(
        settings.fact_source_url,
        timeout=settings.timeout_seconds,
        transport=transport,
    )
    analytics = build_analytics_client(
        configure_posthog(settings),
        distinct_id=settings.posthog_distinct_id,
    )
    return FactFetchController(
        fact_source=fact_source,
        display_delay=settings.display_delay_seconds,
        analytics=analytics,
    )


def _resolve_settings(url: Optional[str], delay_ms: Optional[int], debug: bool) -> AppSettings:
    settings = get_settings()
    updates: dict[str, Any] = {}
    if url:
        updates["fact_source_url"] = url
    if delay_ms is not None:
        updates["display_delay_ms"] = delay_ms
    if debug:
        updates["debug"] = True
    if updates:
        settings = settings.model_copy(update=updates)
    return settings


@click.group()
@click.option(
    "--url",
    default=None,
    help="Fact source endpoint (overrides FACTFETCH_FACT_SOURCE_URL)",
)
@click.option(
    "--delay-ms",
    type=click.IntRange(min=0),
    default=None,
    help="Delay before a fetched fact is shown",
)
@click.option("--debug", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, url: Optional[str], delay_ms: Optional[int], debug: bool) -> None:
    """Fetch fun facts from a remote fact source."""
    ctx.ensure_object(dict)
    settings = _resolve_settings(url, delay_ms, debug)
    configure_logging(debug=settings.debug)
    ctx.obj["settings"] = settings
    ctx.call_on_close(shutdown_posthog)


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Interactive mode: press Enter to fetch a fact."""
    controller = build_controller(ctx.obj["settings"], transport=ctx.obj.get("transport"))
    host = TerminalHost(controller, stdin=ctx.obj.get("stdin"))
    try:
        asyncio.run(host.run())
    except KeyboardInterrupt:
        logger.debug("Interrupted, exiting")


@cli.command()
@click.pass_context
def fetch(ctx: click.Context) -> None:
    """Run a single fetch cycle and print the result."""
    controller = build_controller(ctx.obj["settings"], transport=ctx.obj.get("transport"))
    controller.initialize()
    asyncio.run(controller.request_fact())

    if controller.last_error is not None:
        click.echo(controller.display.text, err=True)
        ctx.exit(1)
    click.echo(controller.display.text)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
