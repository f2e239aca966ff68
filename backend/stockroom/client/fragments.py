"""Sources of view markup: over HTTP from the server, or from a local directory."""

from __future__ import annotations

import os
import re
import time

import httpx

from .errors import FragmentLoadError, FragmentNotFound

_VIEW_ID = re.compile(r"[A-Za-z0-9_-]+")

DEFAULT_VIEWS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "public", "views")


def _check_view_id(view_id: str) -> None:
    if not view_id or not _VIEW_ID.fullmatch(view_id):
        raise FragmentNotFound(view_id)


class HttpFragmentLoader:
    """GET /views/<id>.html with a no-cache query parameter."""

    def __init__(self, http: httpx.Client, base_path: str = "/views"):
        self.http = http
        self.base_path = base_path.rstrip("/")

    def fetch(self, view_id: str) -> str:
        _check_view_id(view_id)
        try:
            response = self.http.get(
                f"{self.base_path}/{view_id}.html",
                params={"no-cache": int(time.time() * 1000)},
            )
        except httpx.HTTPError as e:
            raise FragmentLoadError(view_id, f"Failed to load view {view_id}: {e}") from e

        if response.status_code == 404:
            raise FragmentNotFound(view_id)
        if not response.is_success:
            raise FragmentLoadError(view_id, f"Failed to load view {view_id}: HTTP {response.status_code}")
        return response.text


class DirectoryFragmentLoader:
    """Reads <directory>/<id>.html; defaults to the fragments shipped with the package."""

    def __init__(self, directory: str | None = None):
        self.directory = directory or DEFAULT_VIEWS_DIR

    def fetch(self, view_id: str) -> str:
        _check_view_id(view_id)
        path = os.path.join(self.directory, f"{view_id}.html")
        try:
            with open(path, encoding="utf-8") as fh:
                return fh.read()
        except FileNotFoundError:
            raise FragmentNotFound(view_id)
        except OSError as e:
            raise FragmentLoadError(view_id, f"Failed to load view {view_id}: {e}") from e
