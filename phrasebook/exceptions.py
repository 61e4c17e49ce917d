"""Exceptions raised by phrasebook.

Assertion failures inside step bodies are plain ``AssertionError`` and JSON
parse failures are ``json.JSONDecodeError``; everything here covers lookups
and wiring problems.
"""


class PhrasebookError(Exception):
    """Base class for phrasebook errors."""


class ElementNotFound(PhrasebookError, LookupError):
    """A browser adapter could not locate content, an element, a link or a button."""


class UnknownPath(PhrasebookError, KeyError):
    """No path builder is registered under the requested name."""


class UnknownFactory(PhrasebookError, KeyError):
    """No factory is registered under the requested entity name."""


class MissingCollaborator(PhrasebookError, RuntimeError):
    """A step body needs a browser, response or factory the scenario was not given."""


class SettingsError(PhrasebookError, ValueError):
    """A settings file could not be read or has the wrong shape."""


class DuplicateStep(PhrasebookError, ValueError):
    """Two declarations passed to one ``register_steps`` call share keyword and phrase."""
