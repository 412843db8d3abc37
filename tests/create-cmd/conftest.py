"""Shared fixtures and utilities for create command tests."""

import io
import os
import sys

import pytest
import yaml

# Ensure tests/create-cmd/ is on sys.path so test files can import
# fake_command_runner unambiguously.
sys.path.insert(0, os.path.dirname(__file__))

from fake_command_runner import FakeCommandRunner  # noqa: E402, F401

from strato_dapp.create_cmd.prompt import PromptConfig  # noqa: E402


def scripted_prompt_config(answers, output=None):
    """PromptConfig that replays answers in order, recording prompt texts."""
    remaining = iter(answers)
    prompts = []

    def input_fn(prompt_text):
        prompts.append(prompt_text)
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    config = PromptConfig(input_fn=input_fn, output=output or io.StringIO())
    config.prompts = prompts
    return config


def write_node_config(path, oauth=None, extra=None):
    """Write a minimal node config YAML file with an optional oauth section."""
    node = {"id": 0, "url": "http://localhost:80"}
    if oauth is not None:
        node["oauth"] = oauth
    doc = {"timeout": 600000, "nodes": [node]}
    if extra:
        doc.update(extra)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(doc, f, sort_keys=False)
    return path


def pytest_collection_modifyitems(items):
    for item in items:
        if "create-cmd" in str(item.fspath) and not item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.unit)
