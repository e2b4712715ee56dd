from .abstract_product import Button, Checkbox

# ──────────────────────────────────────────────────────────────
# Concrete Products for Mac
# ──────────────────────────────────────────────────────────────
class MacButton(Button):
    def useful_function_a(self) -> str:
        return "The result of the product MAC_BUTTON."


class MacCheckbox(Checkbox):
    def useful_function_b(self) -> str:
        return "The result of the product MAC_CHECKBOX."

    def another_useful_function_b(self, collaborator: Button) -> str:
        result = self._check_collaborator(collaborator).useful_function_a()
        return f"The result of the MAC_CHECKBOX collaborating with the ({result})"
