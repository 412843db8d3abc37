"""CommandRunner: runs external tools (yarn, create-react-app) to completion."""

import os
import subprocess
import sys

COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs one external command at a time, waiting for it to finish.

    Failures are reported as warnings rather than raised, so a scaffold run
    keeps going when a single install step fails.
    """

    def run(self, cmd, cwd):
        """Run cmd in cwd with inherited stdio and return the CompletedProcess."""
        if not os.path.isdir(cwd):
            print(f"Warning: skipping '{' '.join(cmd)}', directory not found: {cwd}", file=sys.stderr)
            return subprocess.CompletedProcess(args=cmd, returncode=COMMAND_NOT_FOUND)

        try:
            result = subprocess.run(cmd, cwd=cwd)
        except FileNotFoundError:
            print(f"Warning: command not found: {cmd[0]}", file=sys.stderr)
            return subprocess.CompletedProcess(args=cmd, returncode=COMMAND_NOT_FOUND)

        if result.returncode != 0:
            print(
                f"Warning: '{' '.join(cmd)}' exited with status {result.returncode}",
                file=sys.stderr,
            )
        return result
