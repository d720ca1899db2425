"""Initialize a new Jot repository."""

import click
from pathlib import Path
from jot.core.repository import Repository
from jot.core.errors import JotError
from jot.cli.output import success, error, info, warning


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new Jot repository.

    Creates a .jot directory holding the index, commit history,
    content store and HEAD. Running init on an existing repository
    leaves it untouched.

    Examples:
        jot init                    # Initialize in current directory
        jot init my-project         # Initialize in my-project directory
    """
    try:
        repo_path = Path(path).resolve()

        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))

        repo = Repository(str(repo_path))
        if not repo.init():
            click.echo(warning(f"Repository already exists at {repo.jot_dir}"))
            return

        click.echo(success(f"Initialized empty Jot repository in {repo.jot_dir}"))
        click.echo(info("You can now start tracking files with:"))
        click.echo(info("  jot add <file>"))
        click.echo(info("  jot commit <message> <author>"))

    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"))
        raise click.Abort()
    except (JotError, OSError) as e:
        click.echo(error(f"Failed to initialize repository: {e}"))
        raise click.Abort()
