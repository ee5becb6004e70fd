"""config show / init commands."""

from pathlib import Path
from typing import Optional

import click

from chromatune.exceptions import ChromatuneError
from chromatune.models import PipelineConfig
from chromatune.models.config import DEFAULT_CONFIG_PATH

from ._common import fail

_path_option = click.option(
    '--path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f'Config file (default: {DEFAULT_CONFIG_PATH})'
)


@click.group()
def config():
    """Inspect or create the pipeline configuration file."""
    pass


@config.command(name="show")
@_path_option
def show(path: Optional[Path]):
    """Display the effective configuration."""
    path = path or DEFAULT_CONFIG_PATH
    try:
        pipeline_config = PipelineConfig.load_or_default(path)
    except ChromatuneError as e:
        fail(e)

    source = str(path) if path.exists() else "defaults (no config file)"
    click.echo(f"Source: {source}\n")
    for field, value in pipeline_config.model_dump().items():
        click.echo(f"  {field}: {value}")


@config.command(name="init")
@_path_option
@click.option('--force', is_flag=True, help='Overwrite an existing file (a .bak copy is kept)')
def init(path: Optional[Path], force: bool):
    """Write a config file with default values."""
    path = path or DEFAULT_CONFIG_PATH
    if path.exists() and not force:
        click.echo(f"Config already exists: {path} (use --force to overwrite)", err=True)
        raise SystemExit(1)

    try:
        PipelineConfig().save(path)
    except (ChromatuneError, OSError) as e:
        fail(e)
    click.echo(f"Wrote default config to {path}")
