"""
Forkify connector using the requests library.

This connector is the single place where HTTP calls to the Forkify API happen.

The connector:
- GETs {API_URL}{id} for a single recipe
- GETs {API_URL}?search={query} for search results
- POSTs {API_URL}?key={KEY} with a JSON body to upload a recipe
- Applies a timeout to every request (FORKIFY_TIMEOUT_SEC, default 10s)
- Maps failures onto NetworkError / NotFoundError with the API's own message

The API reports failures as {"status": "fail", "message": "..."} together with a
4xx status; the message and status code are combined into "{message} ({status})".
"""

import logging
from typing import Any, Dict, Optional

import requests

from forkify.config import ForkifyConfig, validate_upload_config
from forkify.errors import NetworkError, NotFoundError

from .base import BaseRecipeConnector

logger = logging.getLogger(__name__)


class ForkifyConnector(BaseRecipeConnector):
    """
    Connector for the Forkify recipe API.

    Configuration is read from the environment (see forkify.config) unless
    passed explicitly.
    """
    source = "forkify"

    def __init__(
        self,
        api_url: Optional[str] = None,
        key: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            api_url: Base recipes URL (optional, reads FORKIFY_API_URL if not provided)
            key: API key for uploads (optional, reads FORKIFY_KEY if not provided)
            timeout_sec: Request timeout (optional, reads FORKIFY_TIMEOUT_SEC if not provided)
            session: requests.Session to reuse connections (optional)
        """
        self.api_url = api_url or ForkifyConfig.get_api_url()
        self.key = key
        self.timeout_sec = timeout_sec or ForkifyConfig.get_timeout_sec()
        self.session = session

    def _request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send one request and return the parsed JSON body.

        Raises:
            NotFoundError: If the API answers 404
            NetworkError: On timeouts, connection errors, failure statuses or non-JSON bodies
        """
        sender = self.session if self.session is not None else requests
        logger.debug("%s %s params=%s", method, url, params)

        try:
            response = sender.request(
                method,
                url,
                params=params,
                json=json_body,
                timeout=self.timeout_sec,
            )
        except requests.exceptions.Timeout as e:
            raise NetworkError(
                f"Request took too long! Timeout after {self.timeout_sec} seconds"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Could not connect to the recipe API: {e}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"An error occurred while calling the recipe API: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise NetworkError(
                f"Recipe API returned a non-JSON response ({response.status_code})",
                status_code=response.status_code,
            ) from e

        if response.status_code >= 400:
            message = data.get("message") if isinstance(data, dict) else None
            message = f"{message or response.reason} ({response.status_code})"
            if response.status_code == 404:
                raise NotFoundError(message, status_code=404)
            raise NetworkError(message, status_code=response.status_code)

        return data

    def get_recipe(self, recipe_id: str) -> Dict[str, Any]:
        return self._request("GET", f"{self.api_url}{recipe_id}")

    def search_recipes(self, query: str) -> Dict[str, Any]:
        return self._request("GET", self.api_url, params={"search": query})

    def upload_recipe(self, recipe: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a recipe to the API under the configured key.

        Raises:
            ConfigError: If no key was passed and FORKIFY_KEY is not set
        """
        key = self.key or validate_upload_config()
        return self._request("POST", self.api_url, params={"key": key}, json_body=recipe)
