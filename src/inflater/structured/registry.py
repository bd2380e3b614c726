"""Named transform and predicate registry for pipeline documents."""

from __future__ import annotations

from collections.abc import Callable

from .errors import ConfigError

Transform = Callable[[str], str]
Predicate = Callable[[str], bool]


class TransformRegistry:
    """Registry resolving ``map`` and ``filter`` node names to functions."""

    def __init__(self) -> None:
        self._transforms: dict[str, Transform] = {}
        self._predicates: dict[str, Predicate] = {}

    def register_transform(self, name: str, fn: Transform) -> None:
        """Register a transform usable by ``map`` nodes."""
        self._transforms[name] = fn

    def register_predicate(self, name: str, fn: Predicate) -> None:
        """Register a predicate usable by ``filter`` nodes."""
        self._predicates[name] = fn

    def transform(self, name: str) -> Transform:
        """Get a transform by name."""
        if name not in self._transforms:
            raise ConfigError(f"Transform '{name}' not found in registry", name)
        return self._transforms[name]

    def predicate(self, name: str) -> Predicate:
        """Get a predicate by name."""
        if name not in self._predicates:
            raise ConfigError(f"Predicate '{name}' not found in registry", name)
        return self._predicates[name]


def default_registry() -> TransformRegistry:
    """Create a registry with the built-in string transforms and predicates."""
    registry = TransformRegistry()

    registry.register_transform("upper", str.upper)
    registry.register_transform("lower", str.lower)
    registry.register_transform("strip", str.strip)
    registry.register_transform("title", str.title)

    registry.register_predicate("nonempty", lambda s: bool(s))
    registry.register_predicate("ascii", str.isascii)
    return registry
