"""Encode a task type and option set into a shareable URL and back."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Mapping
from urllib.parse import parse_qs, urlencode, urlsplit

from pydantic import ValidationError as PydanticValidationError

from .core.exceptions import ShareDecodeError, ShareError
from .core.model import SharedConfig

CONFIG_PARAM = "config"
MAX_SHARE_URL_LENGTH = 2000


def encode_config(task_type: str, options: Mapping[str, Any]) -> str:
    """Base64 of the compact JSON ``{"type": ..., "options": {...}}``."""
    payload = json.dumps(
        {"type": task_type, "options": dict(options)},
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_config(token: str) -> SharedConfig:
    """Decode a token produced by :func:`encode_config`.

    Raises:
        ShareDecodeError: If the token is not base64, not JSON or not a
            ``{type, options}`` object
    """
    # "+" arrives as a space when the token was pasted into a URL unquoted
    cleaned = token.strip().replace(" ", "+")
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ShareDecodeError("Invalid share token format") from e

    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ShareDecodeError("Invalid share token content") from e

    if not isinstance(data, dict):
        raise ShareDecodeError("Invalid share token data")
    try:
        return SharedConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ShareDecodeError(f"Invalid share token data: {e}") from e


def build_share_url(base_url: str, task_type: str, options: Mapping[str, Any]) -> str:
    """Append the encoded configuration to ``base_url``.

    Raises:
        ShareError: If the resulting URL is too long to share reliably
    """
    query = urlencode({CONFIG_PARAM: encode_config(task_type, options)})
    separator = "&" if "?" in base_url else "?"
    url = f"{base_url}{separator}{query}"
    if len(url) > MAX_SHARE_URL_LENGTH:
        raise ShareError(
            f"Configuration too large for sharing ({len(url)} > {MAX_SHARE_URL_LENGTH} characters)"
        )
    return url


def is_share_url(value: str) -> bool:
    """Tell a share URL from a bare token, which may itself end in ``config=``."""
    value = value.strip()
    return bool(urlsplit(value).scheme) or "?" in value


def config_from_url(url: str) -> SharedConfig:
    values = parse_qs(urlsplit(url).query).get(CONFIG_PARAM)
    if not values:
        raise ShareDecodeError(f"No '{CONFIG_PARAM}' parameter in {url}")
    return decode_config(values[0])
