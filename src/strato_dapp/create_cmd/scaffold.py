"""ProjectScaffolder: builds the server, UI, and nginx directories of a new dapp."""

import os
import sys

import click

from strato_dapp.create_cmd.fixtures import copy_fixture_tree
from strato_dapp.create_cmd.git_setup import add_blockapps_sol_submodule, ensure_git_repository
from strato_dapp.create_cmd.oauth_config import (
    CONFIG_RELATIVE_PATH,
    collect_oauth_details,
    update_config_file,
)
from strato_dapp.create_cmd.package_manifest import extend_scripts, replace_scripts

SERVER_DEPENDENCIES = [
    "blockapps-rest@latest",
    "express",
    "helmet",
    "body-parser",
    "winston",
    "express-winston",
    "moment",
    "chai",
    "dotenv",
    "mocha",
    "cors",
]

SERVER_DEV_DEPENDENCIES = [
    "@babel/core",
    "@babel/cli",
    "@babel/node",
    "@babel/preset-env",
    "@babel/register",
]

UI_DEPENDENCIES = [
    "@blueprintjs/core",
    "connected-react-router",
    "history",
    "normalize.css",
    "prop-types@^15.0.0",
    "react-redux",
    "react-router",
    "react-router-dom",
    "redux",
    "redux-logger",
    "redux-saga",
]

SERVER_SCRIPTS = {
    "start": "babel-node index",
    "deploy": (
        "cp config/${SERVER:-localhost}.config.yaml config.yaml && "
        "yarn mocha-babel dapp/dapp/dapp.deploy.js "
        "--config config/${SERVER:-localhost}.config.yaml "
        "-bmocha dapp/dapp/dapp.deploy.js -b"
    ),
    "build": "cd blockapps-sol && yarn install && yarn build && cd ..",
}

UI_SCRIPTS = {
    "develop": "REACT_APP_URL=http://localhost:3030 yarn start",
}


class ProjectScaffolder:
    """Runs the scaffold steps in order using injected collaborators.

    Every step works on absolute paths taken from CreateOpts; the process
    working directory is never changed.
    """

    def __init__(self, command_runner, prompt_config=None, submodule_fn=None):
        self._command_runner = command_runner
        self._prompt_config = prompt_config
        self._submodule_fn = submodule_fn or add_blockapps_sol_submodule

    def run(self, opts):
        self._ensure_targets_absent(opts)

        click.echo("Recording oAuth Info...")
        oauth_details = collect_oauth_details(opts.project_directory, self._prompt_config)

        click.echo(f"Ensuring directory {opts.project_directory}...")
        os.makedirs(opts.project_dir, exist_ok=True)

        click.echo("Setting up your application. This might take a few minutes:")
        click.echo("\tChecking git status...")
        if ensure_git_repository(opts.project_dir):
            click.echo("\t\tInitialized git")

        click.echo("\tCreating folder structure...")
        for directory in (opts.server_dir, opts.ui_dir, opts.nginx_dir):
            _make_directory(directory)

        self.setup_server(opts, oauth_details)
        self.setup_ui(opts)

        click.echo("Happy BUIDLing!")

    def setup_server(self, opts, oauth_details):
        click.echo("\tSetting up server")
        click.echo("\t\tInitializing server package.json...")
        self._yarn(["init", "-yp"], opts.server_dir)

        click.echo("\t\tInstalling server node modules...")
        for package in SERVER_DEPENDENCIES:
            self._yarn(["add", package], opts.server_dir)
        for package in SERVER_DEV_DEPENDENCIES:
            self._yarn(["add", "--dev", package], opts.server_dir)

        click.echo("\t\tInitializing blockapps-sol submodule")
        self._submodule_fn(opts.server_dir)

        click.echo("\t\tCopying server fixtures...")
        copy_fixture_tree(opts.server_fixtures_dir, opts.server_dir)

        click.echo("\t\tRecording oAuth config...")
        update_config_file(os.path.join(opts.server_dir, CONFIG_RELATIVE_PATH), oauth_details)

        click.echo("\t\tUpdating server scripts...")
        replace_scripts(os.path.join(opts.server_dir, "package.json"), SERVER_SCRIPTS)

    def setup_ui(self, opts):
        click.echo("\tSetting up UI")
        click.echo("\t\tInitializing create-react-app...")
        self._command_runner.run(["create-react-app", opts.ui_directory], cwd=opts.project_dir)

        click.echo("\t\tInstalling ui node modules...")
        for package in UI_DEPENDENCIES:
            self._yarn(["add", package], opts.ui_dir)

        click.echo("\t\tCopying ui fixtures...")
        copy_fixture_tree(opts.ui_fixtures_dir, opts.ui_dir)

        click.echo("\t\tUpdating ui scripts...")
        extend_scripts(os.path.join(opts.ui_dir, "package.json"), UI_SCRIPTS)

    def _yarn(self, args, cwd):
        return self._command_runner.run(["yarn"] + args, cwd=cwd)

    def _ensure_targets_absent(self, opts):
        if os.path.exists(opts.project_dir) and not os.path.isdir(opts.project_dir):
            print(f"Error: Not a directory: {opts.project_dir}", file=sys.stderr)
            raise SystemExit(1)

        existing = [
            d for d in (opts.server_dir, opts.ui_dir, opts.nginx_dir)
            if os.path.exists(d)
        ]
        if existing:
            for directory in existing:
                print(f"Error: Directory already exists: {directory}", file=sys.stderr)
            raise SystemExit(1)


def _make_directory(path):
    try:
        os.mkdir(path)
    except FileExistsError:
        print(f"Error: Directory already exists: {path}", file=sys.stderr)
        raise SystemExit(1)
