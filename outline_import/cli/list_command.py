"""List-collections command for CLI."""

import logging
from typing import Optional

from ..outline_client.api_wrapper import APIWrapper
from ..outline_client.auth import Authenticator
from ..outline_client.errors import (
    ConfigurationError,
    InvalidCredentialsError,
    RemoteError,
)
from .models import ExitCode
from .output import OutputHandler

logger = logging.getLogger(__name__)


class ListCollectionsCommand:
    """Prints the collections visible to the API token."""

    def __init__(
        self,
        authenticator: Optional[Authenticator] = None,
        output_handler: Optional[OutputHandler] = None,
        api: Optional[APIWrapper] = None,
    ):
        self.authenticator = authenticator or Authenticator()
        self.output_handler = output_handler or OutputHandler()
        self.api = api

    def run(self) -> ExitCode:
        """List collections.

        Returns:
            ExitCode.SUCCESS, or GENERAL_ERROR / AUTH_ERROR / NETWORK_ERROR
        """
        try:
            self.authenticator.get_credentials()
            if self.api is None:
                self.api = APIWrapper(self.authenticator)
            collections = self.api.list_collections()

        except ConfigurationError as e:
            logger.error(str(e))
            self.output_handler.error(str(e))
            return ExitCode.GENERAL_ERROR

        except InvalidCredentialsError as e:
            logger.error(f"Authentication failed: {e}")
            self.output_handler.error(f"Authentication failed: {e}")
            self.output_handler.info("Check the --token option or OUTLINE_API_TOKEN")
            return ExitCode.AUTH_ERROR

        except RemoteError as e:
            logger.error(f"Error listing collections: {e}")
            self.output_handler.error(f"Error listing collections: {e}")
            return ExitCode.NETWORK_ERROR

        self.output_handler.print_collections(collections)
        return ExitCode.SUCCESS
