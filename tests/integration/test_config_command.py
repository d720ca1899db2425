"""Integration tests for config command."""

from jot.cli.main import cli


class TestConfigCommand:
    """Tests for jot config command."""

    def test_config_set_and_get(self, jot):
        result = jot('config', 'set', 'user.name', 'Test User')
        assert result.exit_code == 0
        assert 'Set repository config' in result.output

        result = jot('config', 'get', 'user.name')
        assert result.output.strip() == 'Test User'

    def test_config_get_nonexistent(self, jot):
        result = jot('config', 'get', 'nonexistent.key')
        assert result.exit_code == 1
        assert 'not found' in result.output

    def test_config_list(self, jot):
        jot('config', 'set', 'user.name', 'Test User')
        result = jot('config', 'list')
        assert 'user.name=Test User' in result.output
        assert 'core.repositoryformatversion=0' in result.output

    def test_config_unset(self, jot):
        jot('config', 'set', 'user.name', 'Test User')
        result = jot('config', 'unset', 'user.name')
        assert result.exit_code == 0

        result = jot('config', 'get', 'user.name')
        assert result.exit_code == 1

    def test_config_global(self, runner, tmp_path, monkeypatch, isolated_config):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ['config', 'set', '--global', 'user.name', 'Global'])
        assert result.exit_code == 0
        assert isolated_config.exists()

        result = runner.invoke(cli, ['config', 'get', 'user.name'])
        assert result.output.strip() == 'Global'

    def test_repository_overrides_global(self, jot):
        jot('config', 'set', '--global', 'user.name', 'Global')
        jot('config', 'set', 'user.name', 'Local')
        result = jot('config', 'get', 'user.name')
        assert result.output.strip() == 'Local'

    def test_config_set_outside_repository(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ['config', 'set', 'user.name', 'x'])
        assert result.exit_code == 1
        assert 'Not a jot repository' in result.output
