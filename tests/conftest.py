"""Step registrations and collaborators for the widget feature."""

import pytest

from phrasebook import (
    PathRegistry,
    given_a,
    register_steps,
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
from tests.unit.mocks import MockBrowser, MockElement, MockFactory, MockPage

register_steps(
    given_a("user", name="Duke"),
    given_a("widget", {"owner": "user", "label": "Sprocket"}),
    given_a("widget", {"label": "Sprocket", "colour": "red", "size": "small"}),
    when_visit_path("widget_page", "widget"),
    when_click_link("Home"),
    when_click_button("Save"),
    then_should_see("Sprocket"),
    then_should_see("Saved"),
    then_should_not_see("Gizmo"),
    then_on_path("widget_page", "widget"),
    then_on_path("home_page"),
    then_not_on_path("home_page"),
    then_flash("notice", "Welcome back"),
    then_json_response(),
    then_status(200),
)


@pytest.fixture
def phrasebook_browser() -> MockBrowser:
    """A two-page site: widget 1 and the home page with a welcome flash."""
    welcome = MockElement(children={".notice": MockElement("Welcome back, friend")})
    return MockBrowser(
        pages={
            "/widgets/1": MockPage(
                content="Sprocket Saved",
                links={"Home": "/"},
                buttons={"Save": "/widgets/1"},
            ),
            "/": MockPage(content="Home", elements={"#flash": welcome}),
        },
        path="/",
    )


@pytest.fixture
def phrasebook_factory() -> MockFactory:
    return MockFactory()


@pytest.fixture
def phrasebook_paths() -> PathRegistry:
    paths = PathRegistry()
    paths.add_template("home_page", "/")
    paths.add_template("widget_page", "/widgets/{}")
    return paths
