from .abstract_factory import GUIFactory
from ..product.abstract_product import Button, Checkbox
from ..product.concrete_products_win import WinButton, WinCheckbox
from utils.logger import Logger

class WinFactory(GUIFactory):
    family = "win"

    def create_button(self) -> Button:
        Logger().debug("WinFactory: creating WinButton")
        return WinButton()

    def create_checkbox(self) -> Checkbox:
        Logger().debug("WinFactory: creating WinCheckbox")
        return WinCheckbox()
