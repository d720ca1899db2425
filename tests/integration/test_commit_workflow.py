"""Integration tests for add, commit, log, status and remove."""

from pathlib import Path
from jot.core.repository import Repository


def test_add_and_commit_single_file(jot, repo):
    """Test adding and committing a single file."""
    (repo.work_tree / 'a.txt').write_text('hello')

    result = jot('add', 'a.txt')
    assert result.exit_code == 0
    assert 'Added 1 file(s)' in result.output

    result = jot('commit', 'first', 'alice')
    assert result.exit_code == 0
    assert 'Created commit' in result.output
    assert '(root commit)' in result.output

    reloaded = Repository(str(repo.work_tree))
    assert reloaded.head is not None
    assert reloaded.log()[0].author == 'alice'
    assert len(reloaded.index) == 0


def test_add_missing_file(jot):
    result = jot('add', 'missing.txt')
    assert result.exit_code == 1
    assert 'File not found' in result.output


def test_add_directory(jot, repo):
    """Test directories are added file by file, skipping hidden entries."""
    (repo.work_tree / 'src').mkdir()
    (repo.work_tree / 'src' / 'main.py').write_text('# main')
    (repo.work_tree / 'src' / '.hidden').write_text('secret')

    result = jot('add', 'src')
    assert result.exit_code == 0

    staged = Repository(str(repo.work_tree)).status().staged
    assert list(staged) == ['src/main.py']


def test_add_from_subdirectory(jot, repo, monkeypatch):
    """Test paths are taken relative to the current directory."""
    sub = repo.work_tree / 'docs'
    sub.mkdir()
    (sub / 'guide.md').write_text('# guide')
    monkeypatch.chdir(sub)

    result = jot('add', 'guide.md')
    assert result.exit_code == 0
    assert 'docs/guide.md' in Repository(str(repo.work_tree)).status().staged


def test_commit_nothing_staged(jot, repo):
    result = jot('commit', 'empty', 'alice')
    assert result.exit_code == 1
    assert 'Nothing to commit' in result.output
    assert Repository(str(repo.work_tree)).head is None


def test_commit_author_from_config(jot, repo):
    """Test author falls back to user.name."""
    (repo.work_tree / 'a.txt').write_text('hello')
    jot('add', 'a.txt')
    jot('config', 'set', 'user.name', 'bob')

    result = jot('commit', 'configured')
    assert result.exit_code == 0
    assert 'Author: bob' in result.output


def test_commit_author_from_environment(jot, repo, monkeypatch):
    (repo.work_tree / 'a.txt').write_text('hello')
    jot('add', 'a.txt')
    monkeypatch.setenv('JOT_USER_NAME', 'erin')

    result = jot('commit', 'from env')
    assert result.exit_code == 0
    assert 'Author: erin' in result.output


def test_commit_without_author(jot, repo):
    """Test missing author is reported without committing."""
    (repo.work_tree / 'a.txt').write_text('hello')
    jot('add', 'a.txt')

    result = jot('commit', 'no author')
    assert result.exit_code == 1
    assert 'Author required' in result.output
    assert Repository(str(repo.work_tree)).head is None


def test_log_oldest_first(jot, repo):
    path = repo.work_tree / 'a.txt'
    for i, message in enumerate(['one', 'two', 'three']):
        path.write_text(str(i))
        jot('add', 'a.txt')
        jot('commit', message, 'alice')

    result = jot('log')
    assert result.exit_code == 0
    out = result.output
    assert out.index('one') < out.index('two') < out.index('three')
    assert 'Author: alice' in out

    result = jot('log', '--oneline', '-n', '2')
    lines = [line for line in result.output.splitlines() if line.strip()]
    assert len(lines) == 2
    assert 'three' not in result.output


def test_log_no_commits(jot):
    result = jot('log')
    assert result.exit_code == 0
    assert 'No commits yet' in result.output


def test_status(jot, repo):
    result = jot('status')
    assert 'No commits yet' in result.output
    assert 'Nothing staged' in result.output

    (repo.work_tree / 'a.txt').write_text('hello')
    jot('add', 'a.txt')
    result = jot('status')
    assert 'a.txt' in result.output

    jot('commit', 'first', 'alice')
    head = Repository(str(repo.work_tree)).head
    result = jot('status')
    assert f'HEAD at {head}' in result.output
    assert 'Nothing staged' in result.output


def test_remove_staged_file(jot, repo):
    path = repo.work_tree / 'a.txt'
    path.write_text('hello')
    jot('add', 'a.txt')

    result = jot('remove', 'a.txt')
    assert result.exit_code == 0
    assert 'Unstaged a.txt' in result.output
    assert path.exists()
    assert Repository(str(repo.work_tree)).status().staged == {}


def test_remove_untracked_file(jot, repo):
    """Test removing a never-staged file warns and changes nothing."""
    (repo.work_tree / 'b.txt').write_text('staged')
    jot('add', 'b.txt')

    result = jot('remove', 'a.txt')
    assert result.exit_code == 0
    assert 'not tracked' in result.output
    assert list(Repository(str(repo.work_tree)).status().staged) == ['b.txt']
