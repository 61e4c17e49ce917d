"""Robot Framework keywords running the phrasebook web steps.

Each keyword builds the same declaration the pytest-bdd steps use and runs it
against a context owned by the library instance, so a new context exists for
every test.

Usage:
    *** Settings ***
    Library    phrasebook.robot_keywords.WebStepKeywords

    *** Test Cases ***
    Owner Sees Widget
        Use browser    ${BROWSER}
        Use factory    ${FACTORIES}
        Register path    widget_page    /widgets/{}
        Create factory entity    widget    label=Sprocket
        I visit path    widget_page    widget
        Then I should see 'Sprocket'
"""

import logging
from typing import Any, Optional

from robot.api.deco import keyword

from phrasebook import web_steps
from phrasebook.context import ScenarioContext
from phrasebook.declaration import StepDeclaration
from phrasebook.settings import Settings, load_settings

logger = logging.getLogger(__name__)


class WebStepKeywords:
    """Keywords for web acceptance steps with scenario-scoped state."""

    ROBOT_LIBRARY_SCOPE = "TEST"
    ROBOT_LIBRARY_DOC_FORMAT = "TEXT"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.context = ScenarioContext(settings=settings or load_settings())

    def _run(self, declaration: StepDeclaration) -> None:
        logger.info("%s", declaration)
        declaration.run(self.context)

    # =========================================================================
    # Wiring
    # =========================================================================

    @keyword("Use browser")
    def use_browser(self, browser: Any) -> None:
        """Set the Browser adapter (SeleniumBrowser, PlaywrightBrowser, ...)."""
        self.context.browser = browser

    @keyword("Use response")
    def use_response(self, response: Any) -> None:
        """Record the last HTTP response (anything with status, content_type, body)."""
        self.context.response = response

    @keyword("Use factory")
    def use_factory(self, factory: Any) -> None:
        self.context.factory = factory

    @keyword("Register path")
    def register_path(self, path_name: str, template: str) -> None:
        """Register a path template such as ``/widgets/{}``."""
        self.context.paths.add_template(path_name, template)

    @keyword("Get stored value")
    def get_stored_value(self, name: str) -> Any:
        """Return a value captured by an earlier step (entity or parsed JSON)."""
        return self.context.state[name]

    # =========================================================================
    # Steps
    # =========================================================================

    @keyword("Create factory entity")
    def create_factory_entity(self, entity_name: str, **attributes: Any) -> Any:
        """Maps to "Given a <entity> with <attributes>"; returns the entity."""
        self._run(web_steps.given_a(entity_name, attributes))
        return self.context.state[entity_name]

    @keyword("I should see '${text}'")
    def i_should_see(self, text: str) -> None:
        self._run(web_steps.then_should_see(text))

    @keyword("I should not see '${text}'")
    def i_should_not_see(self, text: str) -> None:
        self._run(web_steps.then_should_not_see(text))

    @keyword("I should get a JSON response")
    def i_should_get_a_json_response(self) -> Any:
        """Returns the parsed body."""
        self._run(web_steps.then_json_response())
        return self.context.state[self.context.settings.json_state_key]

    @keyword("I should receive a ${status} response")
    def i_should_receive_a_response(self, status: int) -> None:
        self._run(web_steps.then_status(int(status)))

    @keyword("I should see the flash ${level} '${message}'")
    def i_should_see_the_flash(self, level: str, message: str) -> None:
        self._run(web_steps.then_flash(level, message))

    @keyword("I should be on path")
    def i_should_be_on_path(self, path_name: str, *refs: Any) -> None:
        self._run(web_steps.then_on_path(path_name, *refs))

    @keyword("I should not be on path")
    def i_should_not_be_on_path(self, path_name: str, *refs: Any) -> None:
        self._run(web_steps.then_not_on_path(path_name, *refs))

    @keyword("I visit path")
    def i_visit_path(self, path_name: str, *refs: Any) -> None:
        self._run(web_steps.when_visit_path(path_name, *refs))

    @keyword("I click the link '${link}'")
    def i_click_the_link(self, link: str) -> None:
        self._run(web_steps.when_click_link(link))

    @keyword("I click the button '${button}'")
    def i_click_the_button(self, button: str) -> None:
        self._run(web_steps.when_click_button(button))
