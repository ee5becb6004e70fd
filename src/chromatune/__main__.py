"""Allow `python -m chromatune`."""

from chromatune.cli.main import cli

if __name__ == "__main__":
    cli()
