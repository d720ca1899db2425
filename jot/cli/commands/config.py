"""Config command - manage repository configuration."""

import click
from jot.core.repository import Repository
from jot.core.config import Config, get_config, parse_key
from jot.cli.output import success, error, info


def _load_config(is_global):
    """Config for the current repository, or global-only config."""
    if is_global:
        return Config()
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository (use --global for global config)"))
        raise click.Abort()
    return get_config(repo)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        jot config set user.name "Your Name"
        jot config set --global user.name "Your Name"
    """
    config = _load_config(is_global)
    section, option = parse_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Examples:
        jot config get user.name
    """
    repo = None if is_global else Repository.find_repository()
    config = get_config(repo)
    section, option = parse_key(key)

    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        jot config unset user.name
    """
    config = _load_config(is_global)
    section, option = parse_key(key)

    if not config.unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        raise click.Abort()
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        jot config list
        jot config list --global
    """
    repo = None if is_global else Repository.find_repository()
    values = get_config(repo).list_all(global_only=is_global)

    if not values:
        click.echo(info("No configuration set"))
        return

    for section, items in values.items():
        for key, value in items.items():
            click.echo(f"{section}.{key}={value}")
