"""Fixtures for CLI workflow tests."""

import pytest
from click.testing import CliRunner
from jot.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def jot(runner, repo, monkeypatch):
    """Invoke the CLI from inside an initialized repository."""
    monkeypatch.chdir(repo.work_tree)

    def _invoke(*args):
        return runner.invoke(cli, list(args))
    return _invoke
