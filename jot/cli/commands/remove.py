"""Remove command - unstage a file."""

import click
from pathlib import Path
from jot.core.repository import Repository
from jot.core.errors import JotError, NotTrackedError
from jot.cli.output import success, error, warning


@click.command('remove')
@click.argument('path')
def remove_cmd(path):
    """
    Remove a file from the staging area.

    The file in the working tree is not deleted.

    Examples:
        jot remove notes.txt
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    try:
        repo.remove_file(str(Path.cwd() / path))
    except NotTrackedError:
        click.echo(warning(f"{path} is not tracked, nothing to remove"))
        return
    except JotError as e:
        click.echo(error(f"Failed to remove {path}: {e}"))
        raise click.Abort()

    click.echo(success(f"Unstaged {path}"))
