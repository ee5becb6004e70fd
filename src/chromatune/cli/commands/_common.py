"""Options and error reporting shared by the CLI commands."""

import logging
import sys
from typing import NoReturn

import click

from chromatune.exceptions import format_error_for_display
from chromatune.models import MusicAnalysisData

logger = logging.getLogger(__name__)

_UNIT = click.FloatRange(0.0, 1.0)


def music_options(func):
    """Attach the audio-feature options used to build MusicAnalysisData."""
    options = [
        click.option('--energy', '-e', type=_UNIT, default=None, help='Energy 0-1'),
        click.option('--valence', '-V', type=_UNIT, default=None, help='Valence 0-1'),
        click.option('--danceability', '-d', type=_UNIT, default=None, help='Danceability 0-1'),
        click.option('--tempo', '-t', type=click.FloatRange(min=0.0), default=None, help='Tempo in BPM'),
        click.option('--acousticness', type=_UNIT, default=None, help='Acousticness 0-1'),
        click.option('--instrumentalness', type=_UNIT, default=None, help='Instrumentalness 0-1'),
        click.option('--genre', '-g', type=str, default=None, help='Genre label (e.g. "jazz", "hip hop")'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_music_data(**features) -> MusicAnalysisData:
    return MusicAnalysisData(**{k: v for k, v in features.items() if v is not None})


def fail(error: Exception) -> NoReturn:
    """Print a clean error message and exit with status 1."""
    logger.debug("Command failed", exc_info=error)
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"ERROR: {user_message}", err=True)
    if recovery_hint:
        click.echo(recovery_hint, err=True)
    sys.exit(1)
