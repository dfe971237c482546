"""Import command orchestration for CLI.

This module provides the ImportCommand class that validates configuration,
runs the ImportOrchestrator over the source folder and reports the outcome.
Per-file and per-folder failures are reported but do not change the exit
code; only configuration and traversal errors do.
"""

import logging
from typing import Optional

from ..folder_mapper.errors import TraversalError
from ..folder_mapper.import_orchestrator import ImportOrchestrator
from ..folder_mapper.models import ImportTask
from ..outline_client.api_wrapper import APIWrapper
from ..outline_client.auth import Authenticator
from ..outline_client.errors import ConfigurationError
from .models import ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)


class ImportCommand:
    """Runs a Markdown tree import and maps the outcome to an exit code.

    Example:
        >>> output = OutputHandler(verbose=True)
        >>> cmd = ImportCommand(authenticator=Authenticator(token=token), output_handler=output)
        >>> exit_code = cmd.run(folder="./docs", collection_id=collection_id)
        >>> sys.exit(exit_code)
    """

    def __init__(
        self,
        authenticator: Optional[Authenticator] = None,
        output_handler: Optional[OutputHandler] = None,
        api: Optional[APIWrapper] = None,
    ):
        """Initialize import command with dependencies.

        Args:
            authenticator: Authenticator for the Outline API (optional)
            output_handler: OutputHandler for terminal output (optional)
            api: APIWrapper to use instead of building one (optional)
        """
        self.authenticator = authenticator or Authenticator()
        self.output_handler = output_handler or OutputHandler()
        self.api = api

    def run(self, folder: str, collection_id: Optional[str]) -> ExitCode:
        """Import every Markdown file under folder into the collection.

        Args:
            folder: Source directory
            collection_id: Target collection ID

        Returns:
            ExitCode.SUCCESS when the run completed (even with per-file
            failures), ExitCode.GENERAL_ERROR on configuration or traversal
            errors
        """
        try:
            # Pre-flight: both checks happen before any remote call
            self.authenticator.get_credentials()
            if not collection_id:
                raise ConfigurationError(
                    "A valid collection ID must be provided via --collection, "
                    "or use --list to view collections",
                    config_field="collection",
                )

            if self.api is None:
                self.api = APIWrapper(self.authenticator)

            orchestrator = ImportOrchestrator(self.api, on_progress=self._report_progress)
            result = orchestrator.run(folder, collection_id)

        except ConfigurationError as e:
            logger.error(str(e))
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except TraversalError as e:
            logger.error(f"Error walking folder: {e}")
            self.output_handler.error(f"Error walking folder: {e}")
            return ExitCode.GENERAL_ERROR

        self.output_handler.print_import_summary(result)
        return ExitCode.SUCCESS

    def _report_progress(self, index: int, task: ImportTask) -> None:
        self.output_handler.print_progress(index, task.file_path)
