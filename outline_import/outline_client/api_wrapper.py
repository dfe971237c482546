"""API wrapper for the Outline REST API.

This module wraps the three Outline endpoints the importer needs
(documents.create, documents.import, collections.list) on top of a
requests Session, and translates failures into our typed exception
hierarchy. Calls are never retried: every failure is returned to the caller
as a terminal result for that call.
"""

import logging
import os
import re
from typing import Any, Dict, List, Optional

import requests
from requests.exceptions import RequestException

from .auth import Authenticator, Credentials
from .errors import APIUnreachableError, InvalidCredentialsError, RemoteError
from .models import Collection

logger = logging.getLogger(__name__)

CREATE_DOCUMENT_ENDPOINT = "/api/documents.create"
IMPORT_DOCUMENT_ENDPOINT = "/api/documents.import"
LIST_COLLECTIONS_ENDPOINT = "/api/collections.list"

COLLECTIONS_PAGE_SIZE = 100


class APIWrapper:
    """Thin client over the Outline API with error translation.

    The underlying ``requests.Session`` is created lazily on first use, so
    constructing the wrapper never touches credentials or the network.

    Example:
        >>> api = APIWrapper(Authenticator(token="ol_api_..."))
        >>> folder_id = api.create_folder_document("guides", collection_id)
        >>> api.import_file("guides/intro.md", collection_id, parent_id=folder_id)
    """

    def __init__(self, authenticator: Authenticator):
        """Initialize the API wrapper.

        Args:
            authenticator: Authenticator used to resolve host and token
        """
        self._authenticator = authenticator
        self._credentials: Optional[Credentials] = None
        self._session: Optional[requests.Session] = None

    def _get_session(self) -> requests.Session:
        """Get or create the authenticated session.

        Raises:
            ConfigurationError: If the API token is missing
        """
        if self._session is None:
            self._credentials = self._authenticator.get_credentials()
            session = requests.Session()
            session.headers.update({
                "Authorization": f"Bearer {self._credentials.api_token}",
                "Accept": "application/json",
            })
            self._session = session
        return self._session

    def _url(self, endpoint: str) -> str:
        # Credentials are set by _get_session() before any URL is built
        return self._credentials.host + endpoint  # type: ignore[union-attr]

    def _sanitize_credentials(self, text: str) -> str:
        """Mask bearer tokens (and the configured token itself) in text."""
        if not text:
            return text

        sanitized = re.sub(
            r'Bearer\s+[^\s\n\r]+',
            'Bearer ***REDACTED***',
            text,
            flags=re.IGNORECASE
        )
        if self._credentials is not None and self._credentials.api_token:
            sanitized = sanitized.replace(self._credentials.api_token, "***REDACTED***")
        return sanitized

    def _post(self, endpoint: str, **kwargs: Any) -> Dict[str, Any]:
        """POST to an endpoint and return the decoded JSON body.

        Success requires HTTP 200 and ``"ok": true`` in the body.

        Raises:
            APIUnreachableError: If no response was received
            InvalidCredentialsError: On HTTP 401
            RemoteError: On any other non-200 status, invalid JSON or ok=false
        """
        session = self._get_session()
        url = self._url(endpoint)

        try:
            response = session.post(url, **kwargs)
        except RequestException as e:
            reason = self._sanitize_credentials(str(e))
            logger.error(f"Request to {endpoint} failed: {reason}")
            raise APIUnreachableError(endpoint, reason=reason) from e

        body = self._sanitize_credentials(response.text)

        if response.status_code == 401:
            raise InvalidCredentialsError(endpoint, body=body)

        if response.status_code != 200:
            raise RemoteError(endpoint, body=body, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteError(
                endpoint,
                body=body,
                status_code=response.status_code,
                message=f"Outline API call {endpoint} returned invalid JSON: {body}",
            ) from e

        if not isinstance(payload, dict) or not payload.get("ok"):
            raise RemoteError(
                endpoint,
                body=body,
                status_code=response.status_code,
                message=f"Outline API call {endpoint} reported not ok: {body}",
            )

        return payload

    def create_folder_document(
        self,
        name: str,
        collection_id: str,
        parent_id: Optional[str] = None
    ) -> str:
        """Create an empty, unpublished document standing in for a folder.

        Args:
            name: Document title (the directory name)
            collection_id: Target collection
            parent_id: Parent document ID; omitted means top-level in the collection

        Returns:
            The new document's ID

        Raises:
            RemoteError: If Outline rejects the request
        """
        payload: Dict[str, Any] = {
            "collectionId": collection_id,
            "title": name,
            "text": "",
            "template": False,
            "publish": False,
        }
        if parent_id:
            payload["parentDocumentId"] = parent_id

        logger.debug(
            f"Creating folder document: {name} (parent: {parent_id or 'none'})"
        )
        result = self._post(CREATE_DOCUMENT_ENDPOINT, json=payload)

        document_id = (result.get("data") or {}).get("id")
        if not document_id:
            raise RemoteError(
                CREATE_DOCUMENT_ENDPOINT,
                body=str(result),
                status_code=200,
                message=f"Outline did not return an id for folder '{name}'",
            )

        logger.debug(f"Created folder '{name}' with ID: {document_id}")
        return document_id

    def import_file(
        self,
        path: str,
        collection_id: str,
        parent_id: Optional[str] = None
    ) -> str:
        """Upload a Markdown file as a published document.

        The file is streamed as a multipart upload; the handle is closed as
        soon as the request completes, whether or not it succeeded.

        Args:
            path: Path to the Markdown file
            collection_id: Target collection
            parent_id: Parent document ID; omitted means top-level in the collection

        Returns:
            The imported document's ID ("" if Outline did not return one)

        Raises:
            RemoteError: If the file cannot be read or Outline rejects the upload
        """
        data = {
            "collectionId": collection_id,
            "template": "false",
            "publish": "true",
        }
        if parent_id:
            data["parentDocumentId"] = parent_id

        logger.debug(f"Importing file: {path} (parent: {parent_id or 'none'})")

        try:
            with open(path, "rb") as fh:
                files = {"file": (os.path.basename(path), fh, "text/markdown")}
                result = self._post(IMPORT_DOCUMENT_ENDPOINT, data=data, files=files)
        except OSError as e:
            raise RemoteError(
                IMPORT_DOCUMENT_ENDPOINT,
                message=f"Could not read {path}: {e.strerror or e}",
            ) from e

        document_id = (result.get("data") or {}).get("id") or ""
        logger.debug(f"Imported file: {path} as document {document_id or 'unknown'}")
        return document_id

    def list_collections(self) -> List[Collection]:
        """List collections visible to the token.

        Only the first page (100 collections) is requested.

        Returns:
            Collections in the order Outline returned them

        Raises:
            RemoteError: If Outline rejects the request
        """
        logger.debug(f"Listing collections via {LIST_COLLECTIONS_ENDPOINT}")
        result = self._post(
            LIST_COLLECTIONS_ENDPOINT,
            json={"offset": 0, "limit": COLLECTIONS_PAGE_SIZE},
        )
        return [Collection.from_api(item) for item in result.get("data") or []]
