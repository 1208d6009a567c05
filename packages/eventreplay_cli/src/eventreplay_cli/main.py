"""Main CLI entry point"""

import logging

import click
from rich.console import Console

from eventreplay_cli.commands.inspect import inspect_recording
from eventreplay_cli.commands.play import play
from eventreplay_cli.config import Settings
from eventreplay_cli.utils.output import OutputFormatter


def setup_logging(debug: bool = False) -> None:
    """Configure logging"""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.option('--json', 'json_mode', is_flag=True, help='Output as JSON lines')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, json_mode: bool, debug: bool):
    """eventreplay - replay recorded event streams

    Examples:
        eventreplay play session.json
        eventreplay --json play session.json --max-delay 100
        eventreplay inspect session.yaml
    """
    settings = Settings()
    json_mode = json_mode or settings.json_output
    debug = debug or settings.debug

    setup_logging(debug)

    ctx.ensure_object(dict)
    ctx.obj['settings'] = settings
    ctx.obj['debug'] = debug

    console = Console()
    ctx.obj['console'] = console
    ctx.obj['formatter'] = OutputFormatter(json_mode=json_mode, console=console)


cli.add_command(play)
cli.add_command(inspect_recording)


if __name__ == '__main__':
    cli()
