"""Pipeline document errors."""

from __future__ import annotations

from typing import Any


class ConfigError(Exception):
    """A pipeline document could not be compiled into a producer.

    Attributes:
        document: The offending document, or the part of it that failed
            (a node, or an unknown transform/predicate name).
        location: Path to the failing node inside the document, as reported
            by validation (e.g. ``("chain", "children", 1)``); empty when
            the whole document is at fault.
    """

    def __init__(self, message: str, document: Any, location: tuple[Any, ...] = ()) -> None:
        super().__init__(message)
        self.document = document
        self.location = location

    def __str__(self) -> str:
        message = super().__str__()
        if self.location:
            path = ".".join(str(part) for part in self.location)
            return f"{message} (at {path})"
        return message
