"""Inspect command - summarize a recording without playing it"""

import click

from eventreplay_loader import load_recording_from_file


@click.command('inspect')
@click.argument('recording_file', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def inspect_recording(ctx, recording_file: str):
    """Show item counts and playback length of a recording

    Example:
        eventreplay inspect session.json
    """
    formatter = ctx.obj['formatter']

    try:
        recording = load_recording_from_file(recording_file)
    except (FileNotFoundError, ValueError) as e:
        formatter.error("Failed to load recording", str(e))
        raise click.Abort()

    summary = recording.summary()
    formatter.table(recording_file, {
        "start_time": recording.start_time,
        "items": summary.item_count,
        "missing_time": summary.missing_time,
        "missing_name": summary.missing_name,
        "span_ms": summary.span_ms,
    })
