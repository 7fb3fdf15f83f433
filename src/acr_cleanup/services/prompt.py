"""Interactive yes/no questions for the operator."""

from collections.abc import Callable

__all__ = ["ask_yes_no"]


def ask_yes_no(
    question: str, default: bool, *, ask: Callable[[str], str] = input
) -> bool:
    """Ask until the operator answers "yes" or "no".

    An empty answer means the default.  Anything else that isn't "yes" or
    "no" (in any case) asks again.
    """
    default_answer = "Yes" if default else "No"
    while True:
        answer = ask(f"{question} (Yes/No, default {default_answer}): ")
        match (answer or default_answer).lower():
            case "yes":
                return True
            case "no":
                return False
