"""Rewrite the scripts section of a generated package.json."""

import json
import os
import sys


def _read_manifest(package_json):
    if not os.path.isfile(package_json):
        print(f"Error: package.json not found: {package_json}", file=sys.stderr)
        raise SystemExit(1)
    try:
        with open(package_json, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        print(f"Error: Could not parse {package_json}: {e}", file=sys.stderr)
        raise SystemExit(1)


def _write_manifest(package_json, manifest):
    with open(package_json, "w") as f:
        json.dump(manifest, f, indent=2)
        f.write("\n")


def replace_scripts(package_json, scripts):
    """Set the scripts object of package_json to exactly scripts."""
    manifest = _read_manifest(package_json)
    manifest["scripts"] = dict(scripts)
    _write_manifest(package_json, manifest)


def extend_scripts(package_json, scripts):
    """Add scripts to package_json, keeping the entries already there."""
    manifest = _read_manifest(package_json)
    manifest["scripts"] = {**manifest.get("scripts", {}), **scripts}
    _write_manifest(package_json, manifest)
