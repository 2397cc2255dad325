# transport.py
import logging
from typing import Any, Mapping, Optional

import requests

from .config import ClientConfig
from .exceptions import classify, raise_for_response

logger = logging.getLogger(__name__)


class Transport:
    """
    Issues HTTP calls against the metadata API on behalf of one client.
    Every failure leaves this class as exactly one typed ApiError.
    """

    def __init__(
        self,
        config: ClientConfig,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.token = token
        self.session = session or requests.Session()

    @property
    def auth_headers(self) -> dict:
        # The service answers UNAUTHENTICATED for "Bearer None".
        return {"authorization": f"Bearer {self.token}"}

    @property
    def anon_headers(self) -> dict:
        return {"authorization": f"Bearer {self.config.anon_key}"}

    def url_for(self, path: str) -> str:
        """Absolute URLs (signed upload URLs) are used verbatim, paths go under the API URL."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.config.api_url}/{path.lstrip('/')}"

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        data: Any = None,
        files: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Performs one HTTP call and returns the parsed response body.

        :param method: HTTP method, e.g. ``"GET"``.
        :param path: API path, or an absolute URL.
        :param headers: Request headers; defaults to the bearer token headers.
        :return: Decoded JSON, the raw text for non-JSON bodies, or None when empty.
        """
        url = self.url_for(path)
        logger.info(f"{method} {url}")
        try:
            response = self.session.request(
                method,
                url,
                json=json,
                data=data,
                files=files,
                headers=dict(headers) if headers is not None else self.auth_headers,
            )
        except requests.RequestException as e:
            error = classify(e.response)
            logger.error(f"{method} {url} failed before a response was received: {e}")
            raise error from e

        raise_for_response(response)
        return self._parse_body(response)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, url: str, **kwargs) -> Any:
        return self.request("PUT", url, **kwargs)

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
