"""Mock collaborators for unit testing phrasebook steps."""

from .mock_browser import MockBrowser, MockElement, MockPage
from .mock_factory import MockFactory

__all__ = [
    "MockBrowser",
    "MockElement",
    "MockFactory",
    "MockPage",
]
