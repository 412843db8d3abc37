"""Options dataclass for the create command."""

import os
from dataclasses import dataclass

from strato_dapp.create_cmd.fixtures import FIXTURES_DIR

NGINX_DIRECTORY = "nginx-docker"


@dataclass
class CreateOpts:
    """All options for the create command, with the paths derived from them."""

    project_directory: str
    start_dir: str
    fixtures_dir: str = str(FIXTURES_DIR)

    @property
    def project_dir(self):
        return os.path.join(os.path.abspath(self.start_dir), self.project_directory)

    @property
    def server_directory(self):
        return f"{self.project_directory}-server"

    @property
    def ui_directory(self):
        return f"{self.project_directory}-ui"

    @property
    def server_dir(self):
        return os.path.join(self.project_dir, self.server_directory)

    @property
    def ui_dir(self):
        return os.path.join(self.project_dir, self.ui_directory)

    @property
    def nginx_dir(self):
        return os.path.join(self.project_dir, NGINX_DIRECTORY)

    @property
    def server_fixtures_dir(self):
        return os.path.join(self.fixtures_dir, "server")

    @property
    def ui_fixtures_dir(self):
        return os.path.join(self.fixtures_dir, "ui")
