from typing import Any

from .values import coerce


class PositionalArg:
    """An unnamed slot bound to the next plain token, in registration order."""

    def __init__(self, value_type: type = str, description: str = "", default: Any = None):
        self.value_type = value_type
        self.description = description
        self.value = default
        self.is_bound = False

    def consume(self, text: str) -> None:
        self.value = coerce(self.value_type, text)
        self.is_bound = True

    def unbind(self) -> None:
        self.is_bound = False
