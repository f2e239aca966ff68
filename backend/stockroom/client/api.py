"""httpx client for the stock REST API, sending the session's bearer token."""

from __future__ import annotations

import logging
from typing import IO, Union

import httpx

from .errors import ApiRequestError
from .session import ClientSession

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
NETWORK_ERROR_MESSAGE = "Server error. Try again later."

ImageContent = Union[bytes, IO[bytes]]


def create_http_client(base_url: str, timeout: float = DEFAULT_TIMEOUT) -> httpx.Client:
    return httpx.Client(base_url=base_url, timeout=timeout)


class StockApi:
    def __init__(self, http: httpx.Client, session: ClientSession):
        self.http = http
        self.session = session

    def _headers(self) -> dict:
        token = self.session.token
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    def _send(self, method: str, url: str, **kwargs):
        try:
            response = self.http.request(method, url, headers=self._headers(), **kwargs)
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiRequestError(None, NETWORK_ERROR_MESSAGE) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise ApiRequestError(response.status_code, message or f"HTTP {response.status_code}")
        if data is None:
            raise ApiRequestError(response.status_code, "Invalid server response")
        return data

    def register(self, username: str, password: str) -> str:
        data = self._send("POST", "/api/register", json={"username": username, "password": password})
        return data.get("message", "")

    def login(self, username: str, password: str) -> dict:
        """Log in and keep the returned username and token in the session."""
        data = self._send("POST", "/api/login", json={"username": username, "password": password})
        self.session.store(data.get("username") or username, data.get("token"))
        return data

    def list_stock(self) -> list[dict]:
        return self._send("GET", "/api/stock")

    def add_stock(
        self,
        name: str,
        purchase_price,
        quantity,
        image_name: str,
        image: ImageContent,
        date: str | None = None,
    ) -> dict:
        form = {
            "name": name,
            "purchasePrice": str(purchase_price),
            "quantity": str(quantity),
        }
        if date:
            form["date"] = date
        files = {"image": (image_name, image)}
        return self._send("POST", "/api/stock", data=form, files=files)
