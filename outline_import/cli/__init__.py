"""Command-line interface for outline-import.

This package provides the `outline-import` CLI tool: it either lists the
collections visible to an API token or imports a folder of Markdown files
into one collection, reporting progress and a summary on the terminal.
"""

from .import_command import ImportCommand
from .list_command import ListCollectionsCommand
from .models import ExitCode
from .output import OutputHandler

__all__ = [
    'ImportCommand',
    'ListCollectionsCommand',
    'ExitCode',
    'OutputHandler',
]
