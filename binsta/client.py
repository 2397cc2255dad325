# client.py
import logging
from typing import Optional

import requests

from .config import ClientConfig, Settings
from .files import FilesClient
from .folders import FoldersClient
from .transport import Transport

logger = logging.getLogger(__name__)


class Client:
    """
    Entry point to the Binsta API for one bearer token.

    The configuration is fixed at construction; use ``with_options`` to get a
    client pointed at another environment.
    """

    def __init__(
        self,
        config: ClientConfig,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.token = token
        self.transport = Transport(config, token=token, session=session)
        self.files = FilesClient(self.transport)
        self.folders = FoldersClient(self.transport)

    def with_options(
        self, *, api_url: Optional[str] = None, anon_key: Optional[str] = None
    ) -> "Client":
        """Returns a new client sharing this client's token and session."""
        config = ClientConfig.resolve(
            api_url=api_url if api_url is not None else self.config.api_url,
            anon_key=anon_key if anon_key is not None else self.config.anon_key,
        )
        return Client(config, token=self.token, session=self.transport.session)

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def create_client(
    token: Optional[str] = None,
    *,
    api_url: Optional[str] = None,
    anon_key: Optional[str] = None,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> Client:
    """
    Creates a client. Anything not passed explicitly is taken from the settings
    (environment variables or .env).
    """
    config = ClientConfig.resolve(api_url=api_url, anon_key=anon_key, settings=settings)
    if token is None and settings is not None:
        token = settings.BINSTA_TOKEN
    logger.debug(f"Creating client for {config.api_url} (authenticated: {token is not None}).")
    return Client(config, token=token, session=session)
