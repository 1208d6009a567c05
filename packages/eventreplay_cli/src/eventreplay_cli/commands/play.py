"""Play command - replay a recording with its original timing"""

import asyncio

import click

from eventreplay_loader import load_recording_from_file
from eventreplay_player import COMPLETE, ERROR, EVENT, PlaybackScheduler, create_player_from_recording
from eventreplay_player.models import item_data, item_name, item_time


@click.command('play')
@click.argument('recording_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--max-delay', type=float, default=None,
              help='Cap every wait at this many milliseconds')
@click.pass_context
def play(ctx, recording_file: str, max_delay: float):
    """Replay a recording file

    Example:
        eventreplay play session.json
        eventreplay play session.yaml --max-delay 100
    """
    formatter = ctx.obj['formatter']
    settings = ctx.obj['settings']

    try:
        recording = load_recording_from_file(recording_file)
    except (FileNotFoundError, ValueError) as e:
        formatter.error("Failed to load recording", str(e))
        raise click.Abort()

    cap = max_delay if max_delay is not None else settings.max_delay_ms
    player = create_player_from_recording(recording, max_delay_ms=cap)

    def elapsed_ms() -> float:
        started = player.play_started_at
        if started is None:
            return 0.0
        return (asyncio.get_running_loop().time() - started) * 1000.0

    player.on(EVENT, lambda item: formatter.event(
        elapsed_ms(), item_name(item), item_time(item), item_data(item)
    ))
    player.on(ERROR, lambda item: formatter.malformed(elapsed_ms(), item))

    try:
        asyncio.run(_play_until_complete(player))
    except KeyboardInterrupt:
        player.stop()
        formatter.error("Playback interrupted", f"{player.pending_count} item(s) not played")
        raise click.Abort()

    stats = player.get_stats()
    formatter.success("Playback complete", {
        "emitted": stats["emitted"],
        "errors": stats["errors"],
    })


async def _play_until_complete(player: PlaybackScheduler) -> None:
    """Start the player and wait for its complete notification"""
    done = asyncio.Event()
    player.once(COMPLETE, done.set)
    player.start()
    try:
        await done.wait()
    finally:
        player.stop()
