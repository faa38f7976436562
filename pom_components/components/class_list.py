"""
Class-list helpers.

The "opened" / "expanded" state of cards is encoded by the target UI as a
class token. All string matching against class lists lives here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Union


class CardState(Enum):
    OPEN = "open"
    CLOSED = "closed"


def class_list_text(classes: Union[str, Iterable[str], None]) -> str:
    """Normalise a classList value (string, list or None) into one string."""
    if classes is None:
        return ""
    if isinstance(classes, str):
        return classes
    if isinstance(classes, dict):
        # DOMTokenList serialised as {"0": "a", "1": "b"}
        classes = classes.values()
    return " ".join(str(name) for name in classes)


def class_list_contains(classes: Any, token: str) -> bool:
    """Substring search over the class list; generated class names carry suffixes."""
    return token in class_list_text(classes)


def card_state_from_classes(classes: Any, open_token: str) -> CardState:
    if class_list_contains(classes, open_token):
        return CardState.OPEN
    return CardState.CLOSED


__all__ = [
    "CardState",
    "card_state_from_classes",
    "class_list_contains",
    "class_list_text",
]
