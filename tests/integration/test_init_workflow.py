"""Integration tests for repository initialization."""

from jot.cli.main import cli
from jot.core.repository import Repository


def test_init_creates_jot_directory(runner, tmp_path, monkeypatch):
    """Test that init creates the .jot records."""
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(cli, ['init'])

    assert result.exit_code == 0
    assert 'Initialized empty Jot repository' in result.output
    for name in ('index', 'commits', 'contents', 'HEAD', 'config'):
        assert (tmp_path / '.jot' / name).exists()


def test_init_twice_reports_existing(runner, tmp_path, monkeypatch):
    """Test that initializing twice is not an error."""
    monkeypatch.chdir(tmp_path)
    runner.invoke(cli, ['init'])
    result = runner.invoke(cli, ['init'])

    assert result.exit_code == 0
    assert 'already exists' in result.output


def test_init_with_path_creates_directory(runner, tmp_path):
    target = tmp_path / 'project'
    result = runner.invoke(cli, ['init', str(target)])

    assert result.exit_code == 0
    assert Repository.find_repository(str(target)) is not None


def test_commands_outside_repository(runner, tmp_path, monkeypatch):
    """Test commands report a missing repository without crashing."""
    monkeypatch.chdir(tmp_path)
    for args in (['status'], ['log'], ['add', 'x'], ['commit', 'm', 'a'],
                 ['remove', 'x'], ['checkout', 'abcd']):
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert 'Not a jot repository' in result.output


def test_unknown_command(runner):
    result = runner.invoke(cli, ['frobnicate'])
    assert result.exit_code == 2
    assert 'No such command' in result.output


def test_missing_argument(runner):
    result = runner.invoke(cli, ['add'])
    assert result.exit_code == 2
    assert 'Missing argument' in result.output


def test_help_shows_banner(runner):
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'a minimal local version control' in result.output
