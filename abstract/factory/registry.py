from __future__ import annotations
from typing import Dict, Optional, Type
import platform
from .abstract_factory import GUIFactory
from .concrete_factory_win import WinFactory
from .concrete_factory_mac import MacFactory
from utils.logger import Logger

NATIVE = "native"

FACTORIES: Dict[str, Type[GUIFactory]] = {
    WinFactory.family: WinFactory,
    MacFactory.family: MacFactory,
}

# platform.system() -> family
SYSTEM_FAMILIES: Dict[str, str] = {
    "Windows": WinFactory.family,
    "Darwin": MacFactory.family,
}


class UnsupportedPlatformError(RuntimeError):
    pass


def native_family(system: Optional[str] = None) -> str:
    """Family matching the running OS (or the given platform.system() name)."""
    system = system if system is not None else platform.system()
    try:
        return SYSTEM_FAMILIES[system]
    except KeyError:
        raise UnsupportedPlatformError(f"Unsupported system: {system!r}") from None


def create_factory(family: str) -> GUIFactory:
    name = family.strip().lower()
    if name == NATIVE:
        name = native_family()

    factory_cls = FACTORIES.get(name)
    if factory_cls is None:
        known = ", ".join(sorted([*FACTORIES, NATIVE]))
        raise ValueError(f"Unknown widget family {family!r}, expected one of: {known}")

    Logger().debug("Selected factory %s for family %r", factory_cls.__name__, family)
    return factory_cls()
