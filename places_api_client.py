"""Places API client.

A thin wrapper around the Places REST API built on ``requests``.  Each
method returns a tuple ``(data, error)``: on success ``error`` is
``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The API answers errors
with plain-text bodies, which end up in ``message`` unchanged.

Example::

    api = PlacesAPI(base_url="http://localhost:8080")
    place, error = api.create_place({"name": "Park", "address": "1 Main St"})
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PlacesAPI:
    """Client for the ``/places`` resource."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``
                or ``http://localhost:8080/v1``.
            api_key: Optional token sent as ``Authorization: Bearer``.
                The service itself does not check it; it is forwarded
                for deployments behind an authenticating proxy.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode a JSON body if there is one."""
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def list_places(self, name: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """List places, optionally filtered by a case-insensitive name substring."""
        params = {"name": name} if name else None
        data, error = self._request("GET", "/places", params=params)
        if error:
            return [], error
        return data or [], None

    def get_place(self, place_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/places/{place_id}")

    def create_place(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a place and return it including the new ``id``."""
        return self._request("POST", "/places", json_body=payload)

    def update_place(self, place_id: Any, payload: Dict[str, Any]) -> Tuple[bool, Optional[Error]]:
        """Replace all fields of a place.  Fields missing from ``payload`` are cleared."""
        _, error = self._request("PUT", f"/places/{place_id}", json_body=payload)
        return error is None, error

    def delete_place(self, place_id: Any) -> Tuple[bool, Optional[Error]]:
        _, error = self._request("DELETE", f"/places/{place_id}")
        return error is None, error
