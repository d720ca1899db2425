"""Add command - stage files for commit."""

import click
from pathlib import Path
from jot.core.repository import Repository
from jot.core.errors import JotError
from jot.cli.output import success, error, info


def expand_paths(repo, paths):
    """Expand directories into the files they contain, skipping hidden entries."""
    for path_arg in paths:
        path = Path(path_arg)
        if not path.is_absolute():
            path = Path.cwd() / path

        if path.is_dir():
            for file_path in sorted(path.rglob('*')):
                if not file_path.is_file():
                    continue
                try:
                    rel_parts = file_path.relative_to(repo.work_tree).parts
                except ValueError:
                    rel_parts = file_path.parts
                if any(part.startswith('.') for part in rel_parts):
                    continue
                yield str(file_path), str(file_path)
        else:
            yield path_arg, str(path)


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Stage files for the next commit. Modified files must be added
    again to stage the new changes. Directories are added recursively.

    Examples:
        jot add file.txt
        jot add src
    """
    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not a jot repository"))
        raise click.Abort()

    added_files = []
    failed_files = []

    for display, path in expand_paths(repo, paths):
        try:
            repo.add_file(path)
            added_files.append(repo.relative_name(path))
        except JotError as e:
            failed_files.append((display, str(e)))

    if added_files:
        click.echo(success(f"Added {len(added_files)} file(s) to staging area"))
        for file in added_files:
            click.echo(info(f"  {file}"))

    if failed_files:
        click.echo(error(f"Failed to add {len(failed_files)} file(s):"))
        for file, reason in failed_files:
            click.echo(error(f"  {file}: {reason}"))
        if not added_files:
            raise click.Abort()
