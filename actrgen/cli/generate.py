"""Generate command for actrgen CLI."""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from actrgen.amod.loader import load_model_file
from actrgen.errors import ActrGenError
from actrgen.framework.pyactr import PyACTR


@click.command()
@click.argument('model', type=click.Path(exists=True, dir_okay=False))
@click.option('--goal', '-g', default="", help='Initial goal, e.g. "[countFrom: 2 5 starting]"')
@click.option('--out', '-o', 'out_dir', type=click.Path(file_okay=False), default=".",
              help='Directory to write the script into')
def generate_command(model, goal, out_dir):
    """Generate a pyactr script from a JSON model."""
    try:
        framework = PyACTR()
        framework.set_model(load_model_file(model))

        out_path = Path(out_dir)
        out_path.mkdir(parents=True, exist_ok=True)

        script_path = framework.write_model(out_path, goal)
        click.echo(f"✓ Generated {script_path}")

    except ValidationError as e:
        click.echo(f"Error: invalid model - {e}", err=True)
        sys.exit(1)
    except (ActrGenError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
