"""Check and version commands for actrgen CLI."""

import sys

import click

from actrgen import __version__
from actrgen.errors import PreflightError
from actrgen.framework.config import FrameworkConfig
from actrgen.framework.probe import check_for_executable, check_for_package, identify


@click.command()
@click.option('--interpreter', default="python3", help='Python interpreter with pyactr installed')
def check_command(interpreter):
    """Check that the interpreter and the pyactr package are available."""
    config = FrameworkConfig(interpreter=interpreter)
    try:
        check_for_executable(config.interpreter)
        click.echo(identify("pyactr", config.interpreter))
        check_for_package(config.package, config.interpreter)
    except PreflightError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✓ {config.package} is available")


@click.command()
def version_command():
    """Show version info."""
    click.echo(f"actrgen v{__version__}")
