"""Generators for common web acceptance steps.

Each function builds the step phrase from its arguments and returns a
StepDeclaration whose body runs against the scenario context. Nothing is
registered until the declarations are passed to ``register_steps``:

    register_steps(
        given_a("user", {"name": "Duke"}),
        given_a("widget", {"owner": "user", "label": "Sprocket"}),
        when_visit_path("widget_page", "widget"),
        then_should_see("Sprocket"),
    )

String arguments that name an entry in the scenario state (``"user"`` above,
stored by the first step) are replaced by the stored value when the step runs.
"""

import json
import logging
from typing import Any, Mapping, Optional

from phrasebook.context import ScenarioContext
from phrasebook.declaration import StepDeclaration, StepKeyword
from phrasebook.humanize import humanize, humanize_path

logger = logging.getLogger(__name__)


# ============================================================================
# Given
# ============================================================================

def given_a(
    entity_name: str, attributes: Optional[Mapping[str, Any]] = None, **more: Any
) -> StepDeclaration:
    """Build an entity with the object factory and store it under its name.

    Reads like "Given a gi_joe with name of 'Blowtorch' and habit of 'swearing'".

    Args:
        entity_name: Factory name, also the state key the entity is stored under
        attributes: Ordered attributes passed to the factory
        **more: Extra attributes appended after ``attributes``
    """
    declared = dict(attributes or {})
    declared.update(more)
    phrase = f"a {entity_name} {humanize(declared)}".rstrip()

    def body(context: ScenarioContext) -> None:
        factory = context.require_factory()
        resolved = context.resolve_attributes(declared)
        entity = factory.build(entity_name, resolved)
        context.state[entity_name] = entity
        logger.info("✓ Created %s with %s", entity_name, resolved)

    return StepDeclaration(StepKeyword.GIVEN, phrase, body)


# ============================================================================
# Page content
# ============================================================================

def then_should_see(text: str) -> StepDeclaration:
    """Assert the page has ``text``: "Then I should see 'You're not cookin!'"."""

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        assert browser.has_content(text), f'Page doesn\'t have "{text}"'

    return StepDeclaration(StepKeyword.THEN, f"I should see '{text}'", body)


def then_should_not_see(text: str) -> StepDeclaration:
    """Assert the page lacks ``text``."""

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        assert not browser.has_content(text, wait=False), f'Page has "{text}"'

    return StepDeclaration(StepKeyword.THEN, f"I should not see '{text}'", body)


def then_flash(level: str, message: str) -> StepDeclaration:
    """Assert the flash area holds a ``level`` notification containing ``message``.

    Reads like "Then I should see the flash error 'PORKCHOP SANDWICHES'".
    A missing flash container or level element raises ElementNotFound from the
    browser adapter.
    """

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        container = browser.find(context.settings.flash_container)
        flash = container.find(context.settings.flash_level(level))
        text = flash.text
        assert message in text, (
            f"Flash {level} '{text}' doesn't include \"{message}\""
        )

    return StepDeclaration(
        StepKeyword.THEN, f"I should see the flash {level} '{message}'", body
    )


# ============================================================================
# HTTP responses
# ============================================================================

def then_json_response() -> StepDeclaration:
    """Assert the last response is JSON and store the parsed body.

    The parsed value is stored under the configured state key (``json`` by
    default). A body that does not parse raises json.JSONDecodeError.
    """

    def body(context: ScenarioContext) -> None:
        response = context.require_response()
        expected = context.settings.json_media_type
        assert response.content_type == expected, (
            f"Expected content type '{expected}' but got '{response.content_type}'"
        )
        key = context.settings.json_state_key
        context.state[key] = json.loads(response.body)
        logger.debug("Stored parsed JSON response as '%s'", key)

    return StepDeclaration(StepKeyword.THEN, "I should get a JSON response", body)


def then_status(code: int) -> StepDeclaration:
    """Assert the last response status: "Then I should receive a 200 response"."""

    def body(context: ScenarioContext) -> None:
        response = context.require_response()
        assert response.status == code, (
            f"Expected a {code} response but got {response.status}"
        )

    return StepDeclaration(StepKeyword.THEN, f"I should receive a {code} response", body)


# ============================================================================
# Navigation
# ============================================================================

def _expected_path(context: ScenarioContext, path_name: str, refs: tuple) -> str:
    args = context.resolve_all(refs)
    return context.paths.path_for(path_name, *args)


def then_not_on_path(path_name: str, *refs: Any) -> StepDeclaration:
    """Assert the browser is not on the named path.

    Args:
        path_name: Registered path name, e.g. "user_profile"
        *refs: Names of state entries (or literals) passed to the path builder
    """

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        expected = _expected_path(context, path_name, refs)
        current = browser.current_path()
        assert current != expected, f"I am on '{current}' but I shouldn't be"

    return StepDeclaration(
        StepKeyword.THEN, f"I should not be on {humanize_path(path_name)}", body
    )


def then_on_path(path_name: str, *refs: Any) -> StepDeclaration:
    """Assert the browser is on the named path."""

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        expected = _expected_path(context, path_name, refs)
        current = browser.current_path()
        assert current == expected, f"I am on '{current}' but expected '{expected}'"

    return StepDeclaration(
        StepKeyword.THEN, f"I should be on {humanize_path(path_name)}", body
    )


def when_visit_path(path_name: str, *refs: Any) -> StepDeclaration:
    """Visit the named path: "When I visit the pork chop sandwich kitchen".

    Args:
        path_name: Registered path name
        *refs: Names of state entries set by earlier steps (see given_a)
    """

    def body(context: ScenarioContext) -> None:
        browser = context.require_browser()
        path = _expected_path(context, path_name, refs)
        logger.info("Visiting %s", path)
        browser.visit(path)

    return StepDeclaration(
        StepKeyword.WHEN, f"I visit the {humanize_path(path_name)}", body
    )


# ============================================================================
# Interaction
# ============================================================================

def when_click_link(link: str) -> StepDeclaration:
    """Click a link by its text: "When I click the link 'Sign out'"."""

    def body(context: ScenarioContext) -> None:
        context.require_browser().click_link(str(link))

    return StepDeclaration(StepKeyword.WHEN, f"I click the link '{link}'", body)


def when_click_button(button: str) -> StepDeclaration:
    """Click a button by its label: "When I click the button 'Save'"."""

    def body(context: ScenarioContext) -> None:
        context.require_browser().click_button(str(button))

    return StepDeclaration(StepKeyword.WHEN, f"I click the button '{button}'", body)
