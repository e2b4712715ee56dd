from .abstract_factory import GUIFactory
from ..product.abstract_product import Button, Checkbox
from ..product.concrete_products_mac import MacButton, MacCheckbox
from utils.logger import Logger

class MacFactory(GUIFactory):
    family = "mac"

    def create_button(self) -> Button:
        Logger().debug("MacFactory: creating MacButton")
        return MacButton()

    def create_checkbox(self) -> Checkbox:
        Logger().debug("MacFactory: creating MacCheckbox")
        return MacCheckbox()
