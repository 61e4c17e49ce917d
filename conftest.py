"""Root conftest.py - enable the phrasebook pytest plugin."""

pytest_plugins = ["phrasebook.plugin"]
