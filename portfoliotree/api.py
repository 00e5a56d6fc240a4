"""Helpers for the returns web API."""

from __future__ import annotations

import json
import os
import re
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from portfoliotree.component import (
    COMPONENT_TYPE_PORTFOLIO,
    COMPONENT_TYPE_SECURITY,
    Component,
)

SERVER_URL_ENVIRONMENT_VARIABLE_NAME = "PORTFOLIO_TREE_URL"
DEFAULT_URL = "https://portfoliotree.com"
RETURNS_URL_PATH = "/api/returns"

_OBJECT_ID = re.compile(r"[0-9a-fA-F]{24}")


def portfolio_tree_url() -> str:
    """Return the server URL, taken from the environment when it is set."""
    return os.environ.get(SERVER_URL_ENVIRONMENT_VARIABLE_NAME) or DEFAULT_URL


def parse_components_from_url(
    values: Mapping[str, Sequence[str]], prefix: str
) -> list[Component]:
    """Return the components named by the prefix-id query parameters."""
    key = f"{prefix}-id"
    if key not in values:
        raise ValueError("use asset-id parameters to specify asset returns")
    return [
        Component(
            type=COMPONENT_TYPE_PORTFOLIO if _OBJECT_ID.fullmatch(v) else COMPONENT_TYPE_SECURITY,
            id=v,
        )
        for v in values[key]
    ]


def do_json_request(send: Callable[[Any], Any], request: Any) -> Any:
    """Send the request and decode its JSON body.

    The response must have status, headers and read(); a status other than
    200 or 201 raises RuntimeError.
    """
    request.add_header("accept", "application/json")
    response = send(request)
    try:
        status = response.status
        if status not in (200, 201):
            content_type = response.headers.get("content-type") or ""
            if content_type.startswith("text/plain"):
                try:
                    message = response.read().decode("utf-8", errors="replace")
                except Exception:
                    message = ""
            else:
                reason = getattr(response, "reason", "") or ""
                message = f"request failed {status} {reason}".rstrip()
            raise RuntimeError(message)
        body = response.read()
        return json.loads(body)
    finally:
        close = getattr(response, "close", None)
        if callable(close):
            close()