"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from chromatune import __version__

from .commands import classify, config, convert, gradient, presets, process

logger = logging.getLogger(__name__)

_CONSOLE_HANDLER = "chromatune-console"
_FILE_HANDLER = "chromatune-file"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, log at DEBUG to ./chromatune-debug.log as well
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if (debug or log_file) else level)

    # Invoking the CLI twice in one process replaces our handlers
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_CONSOLE_HANDLER, _FILE_HANDLER):
            root_logger.removeHandler(handler)
            handler.close()

    # Console output goes to stderr so JSON on stdout stays parseable
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    console_handler.set_name(_CONSOLE_HANDLER)
    root_logger.addHandler(console_handler)

    if debug and not log_file:
        log_file = Path.cwd() / "chromatune-debug.log"
        log_level = "DEBUG"

    if log_file:
        # Rotating file handler (keeps last 5 files, max 10MB each)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5
        )
        file_handler.setLevel(getattr(logging, log_level.upper()))
        file_handler.setFormatter(formatter)
        file_handler.set_name(_FILE_HANDLER)
        root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.version_option(version=__version__, prog_name="chromatune")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./chromatune-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    Chromatune - music-aware perceptual color processing.

    Turns audio features and an extracted album-art palette into an
    enhanced palette, an accent color and a flat set of style variables.

    \b
    Examples:
      # Process a palette for an energetic track
      chromatune process -c VIBRANT=#89b4fa -c PROMINENT=#cba6f7 --energy 0.8 --valence 0.85

      # Classify the emotional state of a track
      chromatune classify --energy 0.2 --valence 0.8

      # Inspect a color in OKLAB / OKLCH
      chromatune convert "#89b4fa"

      # Perceptual gradient between two colors
      chromatune gradient "#89b4fa" "#f38ba8" --steps 7

      # Show the enhancement presets
      chromatune presets
    """
    setup_logging(verbose, debug, log_file, log_level)


cli.add_command(process)
cli.add_command(classify)
cli.add_command(convert)
cli.add_command(gradient)
cli.add_command(presets)
cli.add_command(config)

if __name__ == "__main__":
    cli()
