from __future__ import annotations

from typing import MutableMapping


class ClientSession:
    """
    The browser's local-storage entries for the logged-in user.

    `username` doubles as the login marker checked by the router and every
    controller. `token` is the bearer token returned by /api/login and is sent
    on stock requests. Both live in `storage`, so a persistent mapping (a
    shelve, a dict synced to disk) keeps a session across restarts.
    """

    USERNAME_KEY = "username"
    TOKEN_KEY = "token"

    def __init__(self, storage: MutableMapping[str, str] | None = None):
        self._storage = storage if storage is not None else {}

    @property
    def username(self) -> str | None:
        return self._storage.get(self.USERNAME_KEY) or None

    @property
    def token(self) -> str | None:
        return self._storage.get(self.TOKEN_KEY) or None

    @property
    def is_logged_in(self) -> bool:
        return self.username is not None

    def store(self, username: str, token: str | None) -> None:
        self._storage[self.USERNAME_KEY] = username
        if token:
            self._storage[self.TOKEN_KEY] = token
        else:
            self._storage.pop(self.TOKEN_KEY, None)

    def clear(self) -> None:
        self._storage.pop(self.USERNAME_KEY, None)
        self._storage.pop(self.TOKEN_KEY, None)
