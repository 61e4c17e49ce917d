"""Named path builders.

Steps refer to pages by name ("widget_page") and the registry turns the name
plus any resolved arguments into a URL path.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from phrasebook.exceptions import UnknownPath

logger = logging.getLogger(__name__)

PathBuilder = Callable[..., str]


def to_param(value: Any) -> Any:
    """Return the URL parameter for ``value``: its ``id`` when it has one."""
    return getattr(value, "id", value)


class PathRegistry:
    """Mapping of path names to path-building callables.

    Example:
        paths = PathRegistry()
        paths.add_template("home_page", "/")
        paths.add_template("widget_page", "/widgets/{}")

        @paths.register("user_widgets_page")
        def user_widgets(user):
            return f"/users/{user.id}/widgets"

        paths.path_for("widget_page", widget)  # "/widgets/7"
    """

    def __init__(self) -> None:
        self._builders: Dict[str, PathBuilder] = {}

    def register(self, name: str, builder: Optional[PathBuilder] = None):
        """Register ``builder`` under ``name``; returns a decorator when omitted."""
        if builder is None:
            def decorator(func: PathBuilder) -> PathBuilder:
                self.register(name, func)
                return func
            return decorator

        self._builders[name] = builder
        logger.debug("Registered path '%s'", name)
        return builder

    def add_template(self, name: str, template: str) -> PathBuilder:
        """Register a builder formatting positional arguments into ``template``."""
        def build(*args: Any) -> str:
            return template.format(*(to_param(arg) for arg in args))

        build.__name__ = f"{name}_path"
        return self.register(name, build)

    def path_for(self, name: str, *args: Any) -> str:
        """Build the path registered under ``name``.

        Raises:
            UnknownPath: If nothing is registered under ``name``
        """
        try:
            builder = self._builders[name]
        except KeyError:
            raise UnknownPath(name) from None
        return builder(*args)

    def names(self) -> List[str]:
        return sorted(self._builders)

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __len__(self) -> int:
        return len(self._builders)
