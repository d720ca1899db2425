"""Checkout command - restore the working tree to a commit."""

import click
from jot.core.repository import Repository
from jot.core.errors import JotError, CommitNotFoundError
from jot.cli.output import success, error, info, warning, short


@click.command('checkout')
@click.argument('commit')
def checkout_cmd(commit):
    """
    Restore files from a commit and move HEAD to it.

    COMMIT is a full hash or a unique prefix of at least 4 characters.
    Files not recorded in the commit are left alone. The staging area
    is empty afterwards.

    Examples:
        jot checkout 3f2a9c1
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    try:
        result = repo.checkout(commit)
    except CommitNotFoundError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    except JotError as e:
        click.echo(error(f"Checkout failed: {e}"))
        raise click.Abort()

    summary = result.commit.message.split('\n')[0]
    click.echo(success(f"HEAD is now at {short(result.commit.hash)} {summary}"))
    for path in result.restored:
        click.echo(info(f"  restored {path}"))
    for path in result.missing:
        click.echo(warning(f"  content missing for {path}"))
    for path in result.failed:
        click.echo(warning(f"  could not write {path}"))
