"""HTTP client for the property backend's REST surface."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
from requests import Response

from ..config import API_BASE_URL, API_TIMEOUT
from ..utils.logging import get_logger

LOGGER = get_logger("db.api_client")

PROPERTIES_PATH = "/properties"
ANALYTICS_PATH = "/properties/analytics"


class PropertiesAPIClient:
    """Thin wrapper over ``requests`` that raises on any non-success status.

    Translating failures into dashboard errors is left to the callers, which
    know whether a failure belongs to a fetch cycle or to a mutation.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = API_TIMEOUT,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def list_properties(self) -> List[Dict[str, Any]]:
        data = self._request("GET", PROPERTIES_PATH).json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array from {PROPERTIES_PATH}, got {type(data).__name__}")
        return data

    def get_analytics(self) -> Dict[str, Any]:
        data = self._request("GET", ANALYTICS_PATH).json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {ANALYTICS_PATH}, got {type(data).__name__}")
        return data

    def create_property(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._json_or_none(self._request("POST", PROPERTIES_PATH, json=payload))

    def update_property(self, property_id: str, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._json_or_none(self._request("PUT", f"{PROPERTIES_PATH}/{property_id}", json=payload))

    def delete_property(self, property_id: str) -> None:
        self._request("DELETE", f"{PROPERTIES_PATH}/{property_id}")

    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs: Any) -> Response:
        url = f"{self.base_url}{path}"
        LOGGER.debug("api_request method=%s url=%s", method, url)
        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        self._raise_for_status(resp)
        return resp

    def _raise_for_status(self, response: Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError:
            LOGGER.warning("api_error status=%s url=%s", response.status_code, response.url)
            raise

    @staticmethod
    def _json_or_none(response: Response) -> Optional[Dict[str, Any]]:
        if not response.content:
            return None
        try:
            data = response.json()
        except ValueError:
            # Status already checked; the write landed even if the body is not JSON.
            LOGGER.warning("api_unparsed_body status=%s url=%s", response.status_code, response.url)
            return None
        return data if isinstance(data, dict) else None


def response_detail(exc: requests.RequestException) -> str:
    """Best human-readable detail for a failed request: the body if there is one."""

    response = getattr(exc, "response", None)
    if response is not None:
        body = (response.text or "").strip()
        if body:
            return body
        return f"HTTP {response.status_code}"
    return str(exc) or exc.__class__.__name__


__all__ = ["PropertiesAPIClient", "response_detail"]
