from abc import ABC, abstractmethod

# --- Abstract Products ---

class Button(ABC):
    @abstractmethod
    def useful_function_a(self) -> str: ...


class Checkbox(ABC):
    """
    A checkbox does its own thing, and can also collaborate with a Button.
    Proper interaction is only guaranteed with a button of the same family.
    """

    @abstractmethod
    def useful_function_b(self) -> str: ...

    @abstractmethod
    def another_useful_function_b(self, collaborator: Button) -> str: ...

    @staticmethod
    def _check_collaborator(collaborator: Button) -> Button:
        # Any family is accepted, only the Button contract is enforced
        if not isinstance(collaborator, Button):
            raise TypeError(
                f"collaborator must be a Button, got {type(collaborator).__name__}"
            )
        return collaborator
