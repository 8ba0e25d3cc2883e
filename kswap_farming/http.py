"""HTTP client helpers used by the farming SDK."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, MutableMapping, Optional

import requests

from .errors import FarmingSDKError

HttpRequestor = Callable[[str, Mapping[str, Any]], requests.Response]


def _graphql_error_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, Mapping):
        return None
    errors = payload.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], Mapping):
        return errors[0].get("message")
    error = payload.get("error")
    if isinstance(error, Mapping):
        return error.get("message") or error.get("Message")
    if isinstance(error, str):
        return error
    return None


@dataclass
class HttpClient:
    """Small convenience wrapper around :mod:`requests` with SDK defaults."""

    requestor: Optional[HttpRequestor] = None
    user_agent: str = "python-kswap-farming-sdk/0.1"

    def __post_init__(self) -> None:
        if self.requestor is None:
            session = requests.Session()

            def _requestor(url: str, kwargs: Mapping[str, Any]) -> requests.Response:
                return session.request(url=url, **dict(kwargs))

            self.requestor = _requestor

    def send_post_request(
        self,
        base_url: str,
        base_path: str,
        endpoint: str,
        body: Mapping[str, Any],
        *,
        bearer_token: Optional[str] = None,
    ) -> Any:
        url = f"{base_url.rstrip('/')}{base_path}{endpoint}"
        headers: MutableMapping[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"

        kwargs: MutableMapping[str, Any] = {
            "method": "POST",
            "headers": headers,
            "json": body,
            "timeout": 30,
        }

        assert self.requestor is not None
        response = self.requestor(url, kwargs)

        if not response.ok:
            try:
                payload = response.json()
            except ValueError:
                payload = response.text
            raise FarmingSDKError.from_http_response(
                url, response.status_code, payload, _graphql_error_message(payload)
            )

        try:
            return response.json()
        except ValueError:
            return response.text
