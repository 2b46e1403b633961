"""Selector part categories and combinators."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """A kind of simple selector part, in CSS3 precedence order.

    Each member's value is ``(precedence, prefix, suffix, single)``.
    """

    ELEMENT = (1, "", "", True)
    ID = (2, "#", "", True)
    CLASS = (3, ".", "", False)
    ATTRIBUTE = (4, "[", "]", False)
    PSEUDO_CLASS = (5, ":", "", False)
    PSEUDO_ELEMENT = (6, "::", "", True)

    @property
    def precedence(self) -> int:
        return self.value[0]

    @property
    def single(self) -> bool:
        """True if the part may occur at most once in a compound selector."""
        return self.value[3]

    @property
    def counter(self) -> str:
        """Name of the builder field counting parts of this category."""
        if self is Category.ATTRIBUTE:
            return "attr_count"
        return f"{self.name.lower()}_count"

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        _, prefix, suffix, _ = self.value
        return f"{prefix}{value}{suffix}"

    def later(self) -> list[Category]:
        """Categories that must come after this one."""
        return [c for c in Category if c.precedence > self.precedence]


class Combinator(Enum):
    """Tokens joining two selectors into a structural relationship."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def parse(cls, token: str) -> Combinator:
        """Look up a combinator by token (``"+"``) or member name (``"child"``)."""
        for member in cls:
            if token == member.value:
                return member
        name = token.strip().upper().replace("-", "_")
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown combinator: {token!r}") from None

    def __str__(self) -> str:
        return self.value
