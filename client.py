from __future__ import annotations
from typing import List
from abstract.factory.abstract_factory import GUIFactory
from utils.logger import Logger


def client_code(factory: GUIFactory) -> List[str]:
    """
    Works with factories and products only through the abstract types,
    so any GUIFactory subclass can be passed in.

    Returns the checkbox's own result followed by its collaboration
    with the button created by the same factory.
    """
    if not isinstance(factory, GUIFactory):
        raise TypeError(f"factory must be a GUIFactory, got {type(factory).__name__}")

    button = factory.create_button()
    checkbox = factory.create_checkbox()

    lines = [
        checkbox.useful_function_b(),
        checkbox.another_useful_function_b(button),
    ]
    for line in lines:
        Logger().debug("client: %s", line)
    return lines
