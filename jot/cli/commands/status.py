"""Status command - show staged files and HEAD."""

import click
from colorama import Fore, Style
from jot.core.repository import Repository
from jot.cli.output import error, info


@click.command('status')
def status_cmd():
    """
    Show the current commit and the staged files.

    Examples:
        jot status
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    status = repo.status()

    if status.has_commits:
        click.echo(f"HEAD at {Fore.CYAN}{status.head}{Style.RESET_ALL}")
    else:
        click.echo("No commits yet")
    click.echo()

    if status.staged:
        click.echo(Fore.GREEN + "Changes to be committed:" + Style.RESET_ALL)
        click.echo(info("  (use \"jot remove <file>...\" to unstage)"))
        click.echo()
        for path, content_hash in status.staged.items():
            click.echo(f"  {Fore.GREEN}{path}{Style.RESET_ALL} {content_hash[:7]}")
        click.echo()
    else:
        click.echo(info("Nothing staged (use \"jot add <file>\")"))
