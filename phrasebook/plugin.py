"""pytest plugin providing the scenario context used by phrasebook steps.

Enable it from the root conftest.py:

    pytest_plugins = ["phrasebook.plugin"]

and override the collaborator fixtures for your application:

    @pytest.fixture
    def phrasebook_browser(page):
        return PlaywrightBrowser(page, "http://localhost:8000")

    @pytest.fixture
    def phrasebook_paths():
        paths = PathRegistry()
        paths.add_template("home_page", "/")
        return paths
"""

from typing import Any, Iterator, Optional

import pytest

from phrasebook.context import Browser, ObjectFactory, ScenarioContext
from phrasebook.paths import PathRegistry
from phrasebook.settings import Settings, load_settings


@pytest.fixture(scope="session")
def phrasebook_settings() -> Settings:
    """Settings from the packaged defaults and $PHRASEBOOK_SETTINGS."""
    return load_settings()


@pytest.fixture
def phrasebook_browser() -> Optional[Browser]:
    """Browser adapter for the scenario. Override in your conftest.py."""
    return None


@pytest.fixture
def phrasebook_factory() -> Optional[ObjectFactory]:
    """Object factory for Given steps. Override in your conftest.py."""
    return None


@pytest.fixture
def phrasebook_paths() -> PathRegistry:
    """Path registry for navigation steps. Override in your conftest.py."""
    return PathRegistry()


@pytest.fixture
def scenario_context(
    phrasebook_settings: Settings,
    phrasebook_browser: Any,
    phrasebook_factory: Any,
    phrasebook_paths: PathRegistry,
) -> Iterator[ScenarioContext]:
    """A fresh context for each scenario; state is dropped afterwards."""
    context = ScenarioContext(
        settings=phrasebook_settings,
        browser=phrasebook_browser,
        factory=phrasebook_factory,
        paths=phrasebook_paths,
    )
    yield context
    context.state.clear()
