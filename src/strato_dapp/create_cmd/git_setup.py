"""Git setup for a new project: repository detection and the blockapps-sol submodule."""

import sys

from git import Git, Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

BLOCKAPPS_SOL_URL = "https://github.com/blockapps/blockapps-sol"
BLOCKAPPS_SOL_BRANCH = "SER-25_compatibilityWithRest"


def is_git_repository(path: str) -> bool:
    """Return True if path is inside a Git working tree."""
    try:
        Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return True


def ensure_git_repository(path: str) -> bool:
    """Initialize a Git repository at path unless one already contains it.

    Returns True if a new repository was created.
    """
    if is_git_repository(path):
        return False
    Repo.init(path)
    return True


def add_blockapps_sol_submodule(server_dir: str) -> bool:
    """Add the pinned blockapps-sol submodule inside server_dir.

    Returns False (after printing a warning) if git refuses.
    """
    try:
        Git(server_dir).submodule("add", "-b", BLOCKAPPS_SOL_BRANCH, BLOCKAPPS_SOL_URL)
    except GitCommandError as e:
        print(f"Warning: could not add blockapps-sol submodule: {e}", file=sys.stderr)
        return False
    return True
