"""
Tests for the command line interface.
"""

import pytest
from click.testing import CliRunner

import main
from watchlist_manager import create_service
from watchlist_manager.storage import MemoryBackend


@pytest.fixture
def runner(monkeypatch):
    backend = MemoryBackend()

    def fake_create_service(**kwargs):
        return create_service(backend=backend, **kwargs)

    monkeypatch.setattr(main, "create_service", fake_create_service)
    runner = CliRunner()
    runner.backend = backend
    return runner


def test_add_and_list(runner):
    result = runner.invoke(main.cli, ["add", "-t", "Dune", "-s", "watching", "-g", "sci-fi", "--season", "1"])
    assert result.exit_code == 0, result.output
    assert "Movie added to your watchlist!" in result.output

    result = runner.invoke(main.cli, ["list"])
    assert result.exit_code == 0
    assert "Dune" in result.output


def test_add_duplicate_fails(runner):
    runner.invoke(main.cli, ["add", "-t", "Dune", "-s", "watching", "-g", "sci-fi"])
    result = runner.invoke(main.cli, ["add", "-t", "dune", "-s", "watching", "-g", "sci-fi"])

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_edit_status(runner):
    runner.invoke(main.cli, ["add", "-t", "Dune", "-s", "watching", "-g", "sci-fi"])

    result = runner.invoke(main.cli, ["edit", "1", "-s", "completed"])
    assert result.exit_code == 0, result.output
    assert "Movie updated successfully!" in result.output

    result = runner.invoke(main.cli, ["stats"])
    assert "Completed" in result.output


def test_edit_keeps_unchanged_fields(runner):
    runner.invoke(main.cli, ["add", "-t", "Lost", "-s", "watching", "-g", "drama", "--season", "2", "--image", "https://example.com/lost.jpg"])

    result = runner.invoke(main.cli, ["edit", "1", "--episode", "5"])
    assert result.exit_code == 0, result.output

    entry = main.create_service().entries[0]
    assert (entry.title, entry.season, entry.episode) == ("Lost", "2", "5")
    assert entry.image == "https://example.com/lost.jpg"


def test_edit_unknown_position(runner):
    result = runner.invoke(main.cli, ["edit", "3", "-s", "completed"])
    assert result.exit_code == 1
    assert "No watchlist entry" in result.output


def test_remove_with_prompt(runner):
    runner.invoke(main.cli, ["add", "-t", "Dune", "-s", "watching", "-g", "sci-fi"])

    declined = runner.invoke(main.cli, ["remove", "1"], input="n\n")
    assert "Nothing removed" in declined.output

    removed = runner.invoke(main.cli, ["remove", "1", "--yes"])
    assert removed.exit_code == 0
    assert "has been removed" in removed.output
    assert "No movies in your watchlist yet" in removed.output


def test_config_check(runner):
    result = runner.invoke(main.cli, ["config-check"])
    assert result.exit_code == 0
    assert "Storage backend" in result.output
