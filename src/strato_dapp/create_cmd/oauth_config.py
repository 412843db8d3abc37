"""OAuth configuration: collect answers and merge them into a node config file."""

import sys
from dataclasses import dataclass
from typing import Optional

import yaml

from strato_dapp.create_cmd.prompt import ask

CONFIG_RELATIVE_PATH = "config/localhost.config.yaml"


@dataclass
class OauthField:
    """One question asked while recording OAuth details."""

    name: str
    default: Optional[str] = None
    required: bool = False


def oauth_fields(project_name):
    """Return the OAuth questions, in the order they are asked."""
    return [
        OauthField("appTokenCookieName", default=f"{project_name}_session"),
        OauthField("clientId", required=True),
        OauthField("clientSecret", required=True),
        OauthField("openIdDiscoveryUrl", default="${SERVER:-localhost}"),
        OauthField(
            "redirectUri",
            default="http:${nodeHost}/api/v1/authentication/callback",
        ),
        OauthField("logoutRedirectUri", default="http:${nodeHost}"),
    ]


def validate_not_empty(answer):
    return answer != ""


def collect_oauth_details(project_name, prompt_config=None):
    """Ask every OAuth question and return the answers keyed by field name."""
    answers = {}
    for oauth_field in oauth_fields(project_name):
        answers[oauth_field.name] = ask(
            oauth_field.name,
            default=oauth_field.default,
            validate=validate_not_empty if oauth_field.required else None,
            config=prompt_config,
        )
    return answers


def merge_oauth_details(doc, answers):
    """Merge answers into the oauth section of the first node, in place.

    Existing oauth keys that were not asked about are left untouched.
    """
    node = doc["nodes"][0]
    oauth = node.get("oauth") or {}
    oauth.update(answers)
    node["oauth"] = oauth
    return doc


def update_config_file(config_path, answers):
    """Read the YAML config at config_path, merge answers, and write it back.

    Raises:
        SystemExit: If the file is missing, malformed, has no node entry,
            or cannot be written.
    """
    doc = _load_config(config_path)

    try:
        merge_oauth_details(doc, answers)
    except (KeyError, IndexError, TypeError, AttributeError):
        print(f"Error: No node entry found in {config_path}", file=sys.stderr)
        raise SystemExit(1)

    try:
        with open(config_path, "w") as f:
            yaml.safe_dump(doc, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        print(f"Error: Could not write {config_path}: {e}", file=sys.stderr)
        raise SystemExit(1)


def _load_config(config_path):
    try:
        with open(config_path) as f:
            return yaml.safe_load(f)
    except FileNotFoundError:
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        raise SystemExit(1)
    except yaml.YAMLError as e:
        print(f"Error: Could not parse {config_path}: {e}", file=sys.stderr)
        raise SystemExit(1)
