"""Commit command - create a commit from staged changes."""

import click
from jot.core.repository import Repository
from jot.core.config import get_config
from jot.core.errors import JotError, NothingToCommitError
from jot.cli.output import success, error, info, short


@click.command('commit')
@click.argument('message')
@click.argument('author', required=False)
def commit_cmd(message, author):
    """
    Record the staged files as a new commit.

    AUTHOR defaults to the configured user.name.

    Examples:
        jot commit "Initial commit" alice
        jot config set user.name alice && jot commit "Fix typo"
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    if not author:
        author = get_config(repo).get_user_name()
    if not author:
        click.echo(error("Author required. Pass it as an argument or set user.name"))
        click.echo(info("  jot config set user.name \"Your Name\""))
        raise click.Abort()

    try:
        staged = len(repo.index)
        commit = repo.commit(message, author)
    except NothingToCommitError as e:
        click.echo(error(str(e)))
        click.echo(info("Use 'jot add <file>' to stage changes"))
        raise click.Abort()
    except JotError as e:
        click.echo(error(f"Failed to create commit: {e}"))
        raise click.Abort()

    click.echo(success(f"Created commit {short(commit.hash)}"))
    click.echo(info(f"Author: {commit.author}"))
    click.echo(info(f"Message: {commit.message}"))
    if commit.parent_hash:
        click.echo(info(f"Parent: {commit.parent_hash[:7]}"))
    else:
        click.echo(info("(root commit)"))
    click.echo(info(f"Tree: {commit.tree_hash[:7]}"))
    click.echo(info(f"Files: {staged}"))
