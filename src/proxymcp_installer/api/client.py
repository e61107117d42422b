"""HTTP client for the Konrado control plane"""

from typing import Any, Dict, Optional

import httpx


class APIError(Exception):
    """Base exception for API errors"""

    pass


class UnauthorizedError(APIError):
    """Unauthorized access"""

    pass


class Client:
    """Control plane API client.

    ``base_url`` is the callback URL handed out by the control plane, so the
    registration call posts to it directly.
    """

    def __init__(
        self,
        base_url: str,
        token: str = "",
        timeout: float = 30.0,
        verify: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.verify = verify
        self.transport = transport

    def register_server(
        self,
        api_key: str,
        server_url: Optional[str] = None,
        port: Optional[int] = None,
    ) -> Any:
        """Bind this host's Proxy MCP installation to the account"""
        payload: Dict[str, Any] = {"api_key": api_key}
        if server_url:
            payload["server_url"] = server_url
        if port is not None:
            payload["port"] = port
        return self._post("", payload)

    def _post(self, path: str, data: Any = None) -> Any:
        """Execute POST request"""
        return self._request("POST", path, json=data)

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """Execute HTTP request"""
        url = self.base_url + path

        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        with httpx.Client(timeout=self.timeout, verify=self.verify, transport=self.transport) as client:
            try:
                response = client.request(method, url, headers=headers, **kwargs)
            except httpx.HTTPError as e:
                raise APIError(f"Request to {url} failed: {e}") from e

            if response.status_code in (401, 403):
                raise UnauthorizedError("Unauthorized: check the API key")
            elif response.status_code >= 400:
                raise APIError(
                    f"API error {response.status_code}: {response.text}"
                )

            if not response.text:
                return None

            try:
                return response.json()
            except ValueError:
                return response.text
