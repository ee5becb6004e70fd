"""process / classify commands."""

from pathlib import Path
from typing import Optional

import click

from chromatune.coordination import ProcessingCoordinator
from chromatune.emotion import EmotionalStateClassifier
from chromatune.exceptions import ChromatuneError
from chromatune.models import CoordinationOptions, MusicalColorContext, PipelineConfig

from ._common import build_music_data, fail, music_options


def _parse_colors(ctx, param, values: tuple[str, ...]) -> dict[str, str]:
    colors: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=#hex, got {item!r}")
        colors[key.strip().upper()] = value.strip()
    return colors


@click.command()
@click.option(
    '--color', '-c', 'colors',
    multiple=True,
    callback=_parse_colors,
    help='Named palette color as KEY=#hex (repeatable)'
)
@music_options
@click.option('--track-id', type=str, default="", help='Track identifier (cache key)')
@click.option(
    '--prefer',
    type=click.Choice(['genre', 'emotion'], case_sensitive=False),
    default=None,
    help='Force the genre-primary or emotion-primary strategy'
)
@click.option('--intensity', type=float, default=1.0, help='Chroma multiplier for balanced blends')
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.chromatune/config.json)'
)
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON')
@click.option('--variables', 'show_variables', is_flag=True, help='Also print the style variables')
def process(
    colors: dict[str, str],
    track_id: str,
    prefer: Optional[str],
    intensity: float,
    config_path: Optional[Path],
    as_json: bool,
    show_variables: bool,
    **features,
):
    """Enhance a palette using the track's audio features."""
    try:
        pipeline_config = PipelineConfig.load_or_default(config_path)
    except ChromatuneError as e:
        fail(e)

    prefer_genre = None if prefer is None else prefer.lower() == "genre"
    coordinator = ProcessingCoordinator(config=pipeline_config)
    result = coordinator.process(
        MusicalColorContext(
            music_data=build_music_data(**features),
            raw_colors=colors,
            track_id=track_id,
        ),
        CoordinationOptions(prefer_genre_over_emotion=prefer_genre, intensity_multiplier=intensity),
    )

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    emotion = result.emotional_result
    click.echo(f"Accent:    {result.accent_hex} ({result.accent_rgb.to_css_triplet()})")
    click.echo(f"Strategy:  {result.strategy.value}")
    click.echo(f"Preset:    {result.preset.name}")
    click.echo(f"Genre:     {result.detected_genre}")
    secondary = f" + {emotion.secondary.value} @ {emotion.blend_ratio}" if emotion.secondary else ""
    click.echo(f"Emotion:   {emotion.primary.value}{secondary} (intensity {emotion.intensity:.2f})")
    click.echo(f"Influence: {result.music_influence_strength:.2f}")

    if result.enhanced_colors:
        click.echo("\nEnhanced colors:")
        for key, hex_color in result.enhanced_colors.items():
            click.echo(f"  {key:<14} {colors.get(key, '?')} -> {hex_color}")

    if show_variables:
        click.echo("\nVariables:")
        for name, value in result.variables.items():
            click.echo(f"  {name}: {value}")


@click.command()
@music_options
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON')
def classify(as_json: bool, **features):
    """Classify the emotional state of a track."""
    result = EmotionalStateClassifier().classify(build_music_data(**features))

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    click.echo(f"Primary:     {result.primary.value}")
    if result.secondary:
        click.echo(f"Secondary:   {result.secondary.value} (blend {result.blend_ratio})")
    click.echo(f"Intensity:   {result.intensity:.3f}")
    click.echo(f"Temperature: {result.temperature}K")
    click.echo(f"Preset:      {result.preset.name}")
    click.echo(f"Color:       {result.perceptual_hex}")
