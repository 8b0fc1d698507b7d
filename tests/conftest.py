"""Shared fixtures for the imagestyle test suite."""

import pytest

from imagestyle.capabilities.schemas import CapabilitySet
from imagestyle.diagnostics.reporter import DiagnosticsReporter
from imagestyle.styles.registry import DefaultCatalog


@pytest.fixture(scope="session")
def catalog():
    """The built-in catalog, loaded from the packaged definitions."""
    return DefaultCatalog()


@pytest.fixture
def reporter():
    """A reporter that keeps diagnostics in memory instead of logging them."""
    sunk = []
    return DiagnosticsReporter(sink=sunk.append)


@pytest.fixture
def both():
    return CapabilitySet(block=True, inline=True)


@pytest.fixture
def block_only():
    return CapabilitySet(block=True, inline=False)


@pytest.fixture
def inline_only():
    return CapabilitySet(block=False, inline=True)


@pytest.fixture
def neither():
    return CapabilitySet()
