"""CLI commands for Jot."""

from jot.cli.commands.init import init_cmd
from jot.cli.commands.add import add_cmd
from jot.cli.commands.commit import commit_cmd
from jot.cli.commands.log import log_cmd
from jot.cli.commands.status import status_cmd
from jot.cli.commands.remove import remove_cmd
from jot.cli.commands.checkout import checkout_cmd
from jot.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'commit_cmd', 'log_cmd', 'status_cmd',
           'remove_cmd', 'checkout_cmd', 'config_cmd']
