"""
Shared fixtures for the widget factory tests.
"""

import pytest

from abstract.factory.concrete_factory_mac import MacFactory
from abstract.factory.concrete_factory_win import WinFactory


@pytest.fixture
def win_factory() -> WinFactory:
    return WinFactory()


@pytest.fixture
def mac_factory() -> MacFactory:
    return MacFactory()


@pytest.fixture(params=[("win", WinFactory), ("mac", MacFactory)], ids=["win", "mac"])
def family_factory(request):
    """Yield (variant tag, factory instance) for every family."""
    family, factory_cls = request.param
    return family.upper(), factory_cls()
