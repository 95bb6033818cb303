"""
API Client for the restvpn service
"""
import json
import logging
from typing import Any, Dict, Optional

import requests

from .config import Config
from .exceptions import RequestBuildError, TransportError
from .resources import Params, Resource

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-Api-Key"


class APIClient:
    """Issues exactly one synchronous request per operation.

    Response bodies are returned untouched whatever the status code; the
    caller decides what to do with them.
    """

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Release the pooled connections of the underlying session"""
        self.session.close()

    def build_request(self, method: str, path: str,
                      body: Optional[Dict[str, Any]] = None) -> requests.PreparedRequest:
        """Compose a request without sending it"""
        headers = {}
        data = None
        if body is not None:
            try:
                data = json.dumps(body, separators=(",", ":")).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise RequestBuildError(f"Failed composing request body: {e}") from e
            headers["Content-Type"] = "application/json"
        # An empty key means no header at all, never an empty one
        if self.config.has_api_key:
            headers[API_KEY_HEADER] = self.config.api_key

        url = f"{self.config.api_addr}{path}"
        try:
            return self.session.prepare_request(
                requests.Request(method, url, headers=headers, data=data)
            )
        except (requests.exceptions.RequestException, ValueError, TypeError) as e:
            raise RequestBuildError(f"Failed composing request: {e}") from e

    def request(self, method: str, path: str,
                body: Optional[Dict[str, Any]] = None) -> bytes:
        """Send one request and return the raw response body"""
        prepared = self.build_request(method, path, body)
        logger.debug("%s %s (api key %s)", prepared.method, prepared.url,
                     "attached" if self.config.has_api_key else "not set")

        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)
        try:
            with self.session.send(prepared, **settings) as response:
                content = response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {prepared.url} failed: {e}") from e

        logger.debug("HTTP %s, %d bytes", response.status_code, len(content))
        return content

    def list(self, resource: Resource) -> bytes:
        """List every instance of a resource"""
        return self.request("GET", resource.item_path(""))

    def get(self, resource: Resource, identity: str) -> bytes:
        """Get the instances registered under one identity"""
        return self.request("GET", resource.item_path(identity))

    def add(self, resource: Resource, params: Params) -> bytes:
        """Create a new instance"""
        return self.request("POST", resource.collection_path, params.create_body())

    def update(self, resource: Resource, params: Params) -> bytes:
        """Update the mutable fields of one instance"""
        return self.request(
            "PUT",
            resource.item_path(params.identity, params.remote_ip),
            params.update_body(),
        )

    def delete(self, resource: Resource, params: Params) -> bytes:
        """Delete one instance"""
        return self.request("DELETE", resource.item_path(params.identity, params.remote_ip))
