"""Unit test conftest for phrasebook.

Overrides the collaborator fixtures from phrasebook.plugin with in-memory
doubles so the real ``scenario_context`` fixture can be used directly.
"""

import pytest

from phrasebook.context import ScenarioContext
from phrasebook.paths import PathRegistry
from phrasebook.settings import Settings
from tests.unit.mocks import MockBrowser, MockFactory


# -- Mock Collaborator Fixtures --


@pytest.fixture
def browser() -> MockBrowser:
    """Mock browser starting on the home page with no pages configured."""
    return MockBrowser()


@pytest.fixture
def factory() -> MockFactory:
    """Mock object factory."""
    return MockFactory()


@pytest.fixture
def paths() -> PathRegistry:
    """Path registry with the pages used across the unit tests."""
    registry = PathRegistry()
    registry.add_template("home_page", "/")
    registry.add_template("widget_page", "/widgets/{}")
    registry.add_template("user_profile", "/users/{}/profile")
    return registry


# -- Plugin Fixture Overrides --


@pytest.fixture
def phrasebook_settings() -> Settings:
    """Default settings without reading $PHRASEBOOK_SETTINGS."""
    return Settings()


@pytest.fixture
def phrasebook_browser(browser: MockBrowser) -> MockBrowser:
    return browser


@pytest.fixture
def phrasebook_factory(factory: MockFactory) -> MockFactory:
    return factory


@pytest.fixture
def phrasebook_paths(paths: PathRegistry) -> PathRegistry:
    return paths


@pytest.fixture
def context(scenario_context: ScenarioContext) -> ScenarioContext:
    """Shorter name for the plugin's scenario_context."""
    return scenario_context
