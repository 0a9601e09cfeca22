"""Errors raised by the Schulze engine."""

from typing import Any


class UnknownChoiceError(ValueError):
    """A ballot references a choice that is not in the current choice sequence."""

    def __init__(self, choice: Any) -> None:
        super().__init__(f"unknown choice {choice}")
        self.choice = choice


__all__ = ["UnknownChoiceError"]
