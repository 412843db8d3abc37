"""Click command for creating a new STRATO dapp project."""

import os
import re

import click

from strato_dapp.create_cmd.command_runner import CommandRunner
from strato_dapp.create_cmd.create_opts import CreateOpts
from strato_dapp.create_cmd.fixtures import FIXTURES_DIR
from strato_dapp.create_cmd.scaffold import ProjectScaffolder

_PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")

USAGE_EXAMPLE = """\
For example:
   strato-dapp create my-strato-dapp"""


def validate_project_directory(ctx, param, value):
    """Reject names that cannot be used as a single directory name."""
    if value in (".", "..") or not _PROJECT_NAME_PATTERN.match(value):
        raise click.BadParameter(
            f"'{value}' is not a valid project name. "
            "Use letters, digits, '.', '_' and '-' only.\n\n" + USAGE_EXAMPLE
        )
    return value


@click.command("create", epilog=USAGE_EXAMPLE)
@click.argument("project_directory", callback=validate_project_directory)
@click.option(
    "--fixtures-dir",
    type=click.Path(exists=True, file_okay=False),
    default=str(FIXTURES_DIR),
    show_default=False,
    help="Directory containing server/ and ui/ fixture trees.",
)
def create_cmd(project_directory, fixtures_dir):
    """Create a new STRATO dapp in PROJECT_DIRECTORY."""
    opts = CreateOpts(
        project_directory=project_directory,
        start_dir=os.getcwd(),
        fixtures_dir=fixtures_dir,
    )
    ProjectScaffolder(CommandRunner()).run(opts)
