"""Decoding of pipeline documents given as JSON text."""

from __future__ import annotations

import json
from typing import Any

from .errors import ConfigError


def parse_json_if_needed(document: str | bytes | Any) -> Any:
    """Decode a pipeline document written as JSON.

    Text (``str``, ``bytes``, ``bytearray``) is decoded; dicts and node
    models are already structured and pass through untouched.

    Raises:
        ConfigError: If the text is not a JSON document
    """
    if not isinstance(document, (str, bytes, bytearray)):
        return document
    try:
        return json.loads(document)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Pipeline document is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            document,
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Pipeline document is not UTF-8 encoded JSON: {e.reason}", document) from e
