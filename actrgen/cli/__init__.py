"""actrgen CLI package - click command group."""

import logging

import click

from actrgen.cli.generate import generate_command
from actrgen.cli.run import run_command
from actrgen.cli.check import check_command, version_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose):
    """actrgen - compile ACT-R models to pyactr and run them."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


main.add_command(generate_command, "generate")
main.add_command(run_command, "run")
main.add_command(check_command, "check")
main.add_command(version_command, "version")

__all__ = [
    "main",
    "generate_command",
    "run_command",
    "check_command",
    "version_command",
]
