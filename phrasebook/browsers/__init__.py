"""Browser adapters implementing the phrasebook Browser interface."""

from phrasebook.browsers.playwright_browser import PlaywrightBrowser, PlaywrightElement
from phrasebook.browsers.selenium_browser import SeleniumBrowser, SeleniumElement

__all__ = [
    "PlaywrightBrowser",
    "PlaywrightElement",
    "SeleniumBrowser",
    "SeleniumElement",
]
