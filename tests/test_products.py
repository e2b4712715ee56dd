"""
Tests for the concrete buttons and checkboxes.
"""

import pytest

from abstract.product.abstract_product import Button, Checkbox
from abstract.product.concrete_products_mac import MacButton, MacCheckbox
from abstract.product.concrete_products_win import WinButton, WinCheckbox


class TestAbstractProducts:
    """The product interfaces cannot be used on their own."""

    def test_button_is_abstract(self):
        with pytest.raises(TypeError):
            Button()

    def test_checkbox_is_abstract(self):
        with pytest.raises(TypeError):
            Checkbox()

    def test_incomplete_checkbox_cannot_be_built(self):
        class HalfCheckbox(Checkbox):
            def useful_function_b(self) -> str:
                return "half"

        with pytest.raises(TypeError):
            HalfCheckbox()


class TestDeterminism:
    """Repeated calls on one instance return the same string."""

    @pytest.mark.parametrize("product", [WinButton(), MacButton()], ids=["win", "mac"])
    def test_button_is_stable(self, product):
        results = {product.useful_function_a() for _ in range(5)}
        assert len(results) == 1

    @pytest.mark.parametrize("product", [WinCheckbox(), MacCheckbox()], ids=["win", "mac"])
    def test_checkbox_is_stable(self, product):
        results = {product.useful_function_b() for _ in range(5)}
        assert len(results) == 1


class TestCollaboration:
    """Checkboxes embed the collaborating button's result verbatim."""

    def test_win_checkbox_with_win_button(self):
        result = WinCheckbox().another_useful_function_b(WinButton())
        assert result == (
            "The result of the WIN_CHECKBOX collaborating with the "
            "(The result of the product WIN_BUTTON.)"
        )

    def test_mac_checkbox_with_mac_button(self):
        result = MacCheckbox().another_useful_function_b(MacButton())
        assert result == (
            "The result of the MAC_CHECKBOX collaborating with the "
            "(The result of the product MAC_BUTTON.)"
        )

    def test_embeds_exact_collaborator_output(self):
        class OddButton(Button):
            def useful_function_a(self) -> str:
                return "  (odd) text with ) and trailing space "

        result = WinCheckbox().another_useful_function_b(OddButton())
        assert result == (
            "The result of the WIN_CHECKBOX collaborating with the "
            "(  (odd) text with ) and trailing space )"
        )

    def test_collaborator_called_once(self):
        class CountingButton(Button):
            calls = 0

            def useful_function_a(self) -> str:
                self.calls += 1
                return "counted"

        button = CountingButton()
        MacCheckbox().another_useful_function_b(button)
        assert button.calls == 1

    def test_cross_family_is_permitted(self):
        result = WinCheckbox().another_useful_function_b(MacButton())
        assert result == (
            "The result of the WIN_CHECKBOX collaborating with the "
            "(The result of the product MAC_BUTTON.)"
        )

    def test_cross_family_other_direction(self):
        result = MacCheckbox().another_useful_function_b(WinButton())
        assert "MAC_CHECKBOX" in result
        assert "WIN_BUTTON" in result


class TestCollaboratorTypeCheck:
    """Values that are not a Button are rejected before formatting."""

    @pytest.mark.parametrize("checkbox", [WinCheckbox(), MacCheckbox()], ids=["win", "mac"])
    @pytest.mark.parametrize("bad", [None, "WIN_BUTTON", 42, WinCheckbox()])
    def test_rejects_non_button(self, checkbox, bad):
        with pytest.raises(TypeError, match="collaborator must be a Button"):
            checkbox.another_useful_function_b(bad)

    def test_rejects_duck_typed_button(self):
        class LooksLikeButton:
            def useful_function_a(self) -> str:
                return "fake"

        with pytest.raises(TypeError):
            WinCheckbox().another_useful_function_b(LooksLikeButton())
