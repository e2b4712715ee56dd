from .abstract_product import Button, Checkbox

# ──────────────────────────────────────────────────────────────
# Concrete Products for Windows
# ──────────────────────────────────────────────────────────────
class WinButton(Button):
    def useful_function_a(self) -> str:
        return "The result of the product WIN_BUTTON."


class WinCheckbox(Checkbox):
    def useful_function_b(self) -> str:
        return "The result of the product WIN_CHECKBOX."

    def another_useful_function_b(self, collaborator: Button) -> str:
        """Works correctly only with WinButton, but accepts any Button."""
        result = self._check_collaborator(collaborator).useful_function_a()
        return f"The result of the WIN_CHECKBOX collaborating with the ({result})"
