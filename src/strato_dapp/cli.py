"""Top-level Click group for the strato-dapp CLI."""

import click

from strato_dapp.create_cmd.cli import create_cmd


@click.group()
@click.version_option(package_name="create-strato-dapp", prog_name="strato-dapp")
def main():
    """strato-dapp - scaffold STRATO dapp projects."""


main.add_command(create_cmd)
