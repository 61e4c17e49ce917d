"""Scenario context and the collaborator interfaces step bodies rely on."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

from phrasebook.exceptions import MissingCollaborator
from phrasebook.paths import PathRegistry
from phrasebook.settings import Settings

logger = logging.getLogger(__name__)


class Element(Protocol):
    """A located page element."""

    @property
    def text(self) -> str: ...

    def find(self, selector: str) -> "Element": ...


class Browser(Protocol):
    """Page inspection and interaction primitives.

    Lookups raise ``ElementNotFound`` when the target is absent.
    ``has_content`` may wait for the text to appear unless ``wait`` is False.
    """

    def current_path(self) -> str: ...

    def has_content(self, text: str, wait: bool = True) -> bool: ...

    def find(self, selector: str) -> Element: ...

    def visit(self, path: str) -> None: ...

    def click_link(self, text: str) -> None: ...

    def click_button(self, text: str) -> None: ...


class ObjectFactory(Protocol):
    def build(self, name: str, attributes: Mapping[str, Any]) -> Any: ...


class Response(Protocol):
    """The last HTTP response of the scenario."""

    @property
    def status(self) -> int: ...

    @property
    def content_type(self) -> str: ...

    @property
    def body(self) -> str: ...


@dataclass
class ScenarioContext:
    """State and collaborators for one running scenario.

    ``state`` holds values captured by earlier steps (created entities, parsed
    JSON). Steps refer to those values by name; ``resolve`` swaps a name for
    the stored value.
    """

    settings: Settings = field(default_factory=Settings)
    browser: Optional[Browser] = None
    response: Optional[Response] = None
    factory: Optional[ObjectFactory] = None
    paths: PathRegistry = field(default_factory=PathRegistry)
    state: Dict[str, Any] = field(default_factory=dict)

    def resolve(self, value: Any) -> Any:
        """Return the stored value when ``value`` names a state entry, else ``value``."""
        if isinstance(value, str) and value in self.state:
            logger.debug("Resolved '%s' from scenario state", value)
            return self.state[value]
        return value

    def resolve_all(self, values: Iterable[Any]) -> List[Any]:
        return [self.resolve(value) for value in values]

    def resolve_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: self.resolve(value) for key, value in attributes.items()}

    def require_browser(self) -> Browser:
        if self.browser is None:
            raise MissingCollaborator("No browser configured for this scenario")
        return self.browser

    def require_response(self) -> Response:
        if self.response is None:
            raise MissingCollaborator("No response recorded in this scenario")
        return self.response

    def require_factory(self) -> ObjectFactory:
        if self.factory is None:
            raise MissingCollaborator("No object factory configured for this scenario")
        return self.factory
