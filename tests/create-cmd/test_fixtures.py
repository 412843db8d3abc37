"""Tests for copy_fixture_tree and the bundled fixture layout."""

import os

import pytest

from strato_dapp.create_cmd.fixtures import FIXTURES_DIR, copy_fixture_tree


@pytest.mark.unit
class TestCopyFixtureTree:

    def test_copies_nested_files(self, tmp_path):
        source = tmp_path / "fixtures"
        (source / "config").mkdir(parents=True)
        (source / "config" / "localhost.config.yaml").write_text("nodes: []\n")
        target = tmp_path / "app-server"
        target.mkdir()

        copy_fixture_tree(str(source), str(target))

        assert (target / "config" / "localhost.config.yaml").read_text() == "nodes: []\n"

    def test_merges_into_existing_tree(self, tmp_path):
        source = tmp_path / "fixtures"
        source.mkdir()
        (source / "index.js").write_text("fixture\n")
        target = tmp_path / "app-server"
        target.mkdir()
        (target / "package.json").write_text("{}")
        (target / "index.js").write_text("old\n")

        copy_fixture_tree(str(source), str(target))

        assert (target / "package.json").read_text() == "{}"
        assert (target / "index.js").read_text() == "fixture\n"

    def test_missing_source_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit):
            copy_fixture_tree(str(tmp_path / "nope"), str(tmp_path))
        assert "fixture directory not found" in capsys.readouterr().err


@pytest.mark.unit
class TestBundledFixtures:

    def test_server_and_ui_trees_exist(self):
        assert os.path.isdir(os.path.join(FIXTURES_DIR, "server"))
        assert os.path.isdir(os.path.join(FIXTURES_DIR, "ui"))

    def test_server_config_present(self):
        assert os.path.isfile(
            os.path.join(FIXTURES_DIR, "server", "config", "localhost.config.yaml")
        )
