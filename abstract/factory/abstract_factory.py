from abc import ABC, abstractmethod
from ..product.abstract_product import Button, Checkbox
# ──────────────────────────────────────────────────────────────
# Abstract Factory
# ──────────────────────────────────────────────────────────────

class GUIFactory(ABC):
    """
    Creates one family of widgets. Every product returned by the same
    factory belongs to the same variant, so they are safe to combine.
    """
    family: str = ""

    @abstractmethod
    def create_button(self) -> Button: ...

    @abstractmethod
    def create_checkbox(self) -> Checkbox: ...
