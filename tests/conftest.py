"""Shared pytest fixtures for Jot tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from jot.core.repository import Repository
from jot.core.config import Config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the real ~/.jotconfig and JOT_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.jotconfig')
    monkeypatch.delenv('JOT_USER_NAME', raising=False)
    return home / '.jotconfig'


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def write_file(repo):
    """Write a file into the working tree and return its path."""
    def _write(name, content):
        path = repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path
    return _write


@pytest.fixture
def repo_with_commits(repo, write_file):
    """Repository with two commits of a.txt: 'hello' then 'world'."""
    write_file('a.txt', 'hello')
    repo.add_file('a.txt')
    first = repo.commit('first', 'alice')

    write_file('a.txt', 'world')
    repo.add_file('a.txt')
    second = repo.commit('second', 'alice')

    repo.first_commit = first
    repo.second_commit = second
    return repo
