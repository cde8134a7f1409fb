"""Run command for actrgen CLI."""

import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from actrgen.amod.loader import load_model_file
from actrgen.errors import ActrGenError, ExecutionError
from actrgen.framework.config import FrameworkConfig
from actrgen.framework.pyactr import PyACTR


@click.command()
@click.argument('model', type=click.Path(exists=True, dir_okay=False))
@click.option('--goal', '-g', default="", help='Initial goal, e.g. "[countFrom: 2 5 starting]"')
@click.option('--tmp', 'tmp_dir', type=click.Path(file_okay=False), default="tmp",
              help='Directory for the generated script')
@click.option('--interpreter', default="python3", help='Python interpreter with pyactr installed')
@click.option('--timeout', type=float, default=None, help='Seconds to wait for the simulation')
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
@click.option('--show-code', is_flag=True, help='Print the generated script')
def run_command(model, goal, tmp_dir, interpreter, timeout, json_output, show_code):
    """Generate a pyactr script from a JSON model and run it."""
    config = FrameworkConfig(interpreter=interpreter, tmp_path=Path(tmp_dir), timeout=timeout)

    try:
        framework = PyACTR(config)
        framework.set_model(load_model_file(model))
        framework.initialize()

        result = framework.run(goal)

    except ExecutionError as e:
        if json_output:
            click.echo(json.dumps({"success": False, "output": e.output}, indent=2), err=True)
        else:
            click.echo(f"Error: execution failed:\n{e}", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Error: invalid model - {e}", err=True)
        sys.exit(1)
    except (ActrGenError, OSError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if json_output:
        output = {
            "success": True,
            "script": str(result.script_path),
            "output": result.output,
        }
        if show_code:
            output["code"] = result.generated_code
        click.echo(json.dumps(output, indent=2))
    else:
        if show_code:
            click.echo(result.generated_code)
        click.echo(result.output)
