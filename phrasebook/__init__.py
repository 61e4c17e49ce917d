"""Declarative Given/When/Then web steps for pytest-bdd."""

from phrasebook.context import ScenarioContext
from phrasebook.declaration import StepDeclaration, StepKeyword
from phrasebook.exceptions import (
    DuplicateStep,
    ElementNotFound,
    MissingCollaborator,
    PhrasebookError,
    SettingsError,
    UnknownFactory,
    UnknownPath,
)
from phrasebook.factories import Factories
from phrasebook.humanize import humanize, humanize_path
from phrasebook.paths import PathRegistry
from phrasebook.registration import register_steps
from phrasebook.responses import HttpResponse
from phrasebook.settings import Settings, load_settings
from phrasebook.web_steps import (
    given_a,
    then_flash,
    then_json_response,
    then_not_on_path,
    then_on_path,
    then_should_not_see,
    then_should_see,
    then_status,
    when_click_button,
    when_click_link,
    when_visit_path,
)

__all__ = [
    "DuplicateStep",
    "ElementNotFound",
    "Factories",
    "HttpResponse",
    "MissingCollaborator",
    "PathRegistry",
    "PhrasebookError",
    "ScenarioContext",
    "Settings",
    "SettingsError",
    "StepDeclaration",
    "StepKeyword",
    "UnknownFactory",
    "UnknownPath",
    "given_a",
    "humanize",
    "humanize_path",
    "load_settings",
    "register_steps",
    "then_flash",
    "then_json_response",
    "then_not_on_path",
    "then_on_path",
    "then_should_not_see",
    "then_should_see",
    "then_status",
    "when_click_button",
    "when_click_link",
    "when_visit_path",
]
