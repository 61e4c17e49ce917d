"""A minimal object factory keyed by entity name."""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from phrasebook.exceptions import UnknownFactory

logger = logging.getLogger(__name__)


class Factories:
    """Registry of builders called as ``builder(**attributes)``.

    Any object with a matching ``build(name, attributes)`` method can stand in
    for this class in a scenario context; this one covers projects that just
    want to point entity names at model constructors.
    """

    def __init__(self) -> None:
        self._builders: Dict[str, Callable[..., Any]] = {}

    def register(self, name: str, builder: Optional[Callable[..., Any]] = None):
        """Register ``builder`` for ``name``; returns a decorator when omitted."""
        if builder is None:
            def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
                self.register(name, func)
                return func
            return decorator

        self._builders[name] = builder
        return builder

    def build(self, name: str, attributes: Mapping[str, Any]) -> Any:
        try:
            builder = self._builders[name]
        except KeyError:
            raise UnknownFactory(name) from None
        logger.debug("Building %s with %s", name, dict(attributes))
        return builder(**attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._builders
