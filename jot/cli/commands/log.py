"""Log command - show commit history."""

import click
from colorama import Fore, Style
from jot.core.repository import Repository
from jot.cli.output import error, info


def format_timestamp(timestamp):
    """Format commit timestamp to readable date."""
    return timestamp.strftime("%a %b %d %H:%M:%S %Y %z")


def display_commit(commit, is_head=False):
    """Display commit in full format."""
    head_marker = f" {Fore.CYAN}(HEAD){Style.RESET_ALL}" if is_head else ""
    click.echo(f"{Fore.YELLOW}commit {commit.hash}{Style.RESET_ALL}{head_marker}")
    if commit.parent_hash:
        click.echo(f"Parent: {commit.parent_hash}")
    click.echo(f"Author: {commit.author}")
    click.echo(f"Date:   {format_timestamp(commit.timestamp)}")
    click.echo(f"Tree:   {commit.tree_hash}")
    click.echo()
    for line in commit.message.split('\n'):
        click.echo(f"    {line}")
    click.echo()


def display_commit_oneline(commit, is_head=False):
    """Display commit in one-line format."""
    message = commit.message.split('\n')[0]
    if len(message) > 60:
        message = message[:57] + "..."
    head_marker = f" {Fore.CYAN}(HEAD){Style.RESET_ALL}" if is_head else ""
    click.echo(f"{Fore.YELLOW}{commit.hash[:7]}{Style.RESET_ALL}{head_marker} {message} "
               f"{Fore.BLUE}<{commit.author}>{Style.RESET_ALL}")


@click.command('log')
@click.option('-n', '--max-count', type=int, help='Limit number of commits to show')
@click.option('--oneline', is_flag=True, help='Show commits in one-line format')
def log_cmd(max_count, oneline):
    """
    Show commit history, oldest first.

    Examples:
        jot log
        jot log --oneline
        jot log -n 5
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    history = repo.log()
    if not history:
        click.echo(info("No commits yet"))
        return

    if max_count is not None:
        history = history[:max_count]

    for commit in history:
        is_head = commit.hash == repo.head
        if oneline:
            display_commit_oneline(commit, is_head)
        else:
            display_commit(commit, is_head)
