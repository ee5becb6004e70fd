"""convert / gradient / presets commands."""

import click

from chromatune.color import PerceptualColorEnhancer, hex_to_rgb, oklab_to_oklch, rgb_to_oklab
from chromatune.exceptions import ChromatuneError
from chromatune.models import PRESETS, get_preset

from ._common import fail


@click.command()
@click.argument('hex_color')
def convert(hex_color: str):
    """Show a hex color as RGB, OKLAB and OKLCH."""
    try:
        rgb = hex_to_rgb(hex_color)
    except ChromatuneError as e:
        fail(e)

    oklab = rgb_to_oklab(rgb)
    oklch = oklab_to_oklch(oklab)
    click.echo(f"HEX:   {rgb.to_hex()}")
    click.echo(f"RGB:   {rgb.to_css_triplet()}")
    click.echo(f"OKLAB: L={oklab.L:.4f} a={oklab.a:.4f} b={oklab.b:.4f}")
    click.echo(f"OKLCH: L={oklch.L:.4f} C={oklch.C:.4f} H={oklch.H:.2f}")


@click.command()
@click.argument('start')
@click.argument('end')
@click.option('--steps', '-n', type=click.IntRange(min=2), default=5, help='Number of stops (>= 2)')
@click.option(
    '--preset', '-p',
    type=click.Choice(list(PRESETS), case_sensitive=False),
    default='STANDARD',
    help='Enhancement preset applied to every stop'
)
def gradient(start: str, end: str, steps: int, preset: str):
    """Perceptual gradient between two colors, interpolated in OKLAB."""
    try:
        stops = PerceptualColorEnhancer().generate_oklab_gradient(
            start, end, steps, get_preset(preset)
        )
    except ChromatuneError as e:
        fail(e)

    for i, stop in enumerate(stops):
        click.echo(f"[{i}] {stop.enhanced_hex}  shadow {stop.shadow_hex}")


@click.command()
def presets():
    """List the built-in enhancement presets."""
    click.echo(f"{'NAME':<10} {'LIGHT':>6} {'CHROMA':>7} {'SHADOW':>7} {'THRESH':>7}  DESCRIPTION")
    for preset in PRESETS.values():
        click.echo(
            f"{preset.name:<10} {preset.lightness_boost:>6.2f} {preset.chroma_boost:>7.2f} "
            f"{preset.shadow_reduction:>7.2f} {preset.vibrant_threshold:>7.2f}  {preset.description}"
        )
