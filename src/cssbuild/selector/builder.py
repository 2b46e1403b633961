"""Immutable fluent builder for CSS3 selector strings.

Parts are appended in the order element, id, class, attribute, pseudo-class,
pseudo-element::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")
    # a[href$=".png"]:focus

Every call returns a new builder; the shared root is never modified.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from cssbuild.selector.errors import DuplicateViolation, OrderViolation
from cssbuild.selector.model import Category, Combinator

logger = logging.getLogger("cssbuild.selector")


@dataclass(frozen=True)
class SelectorBuilder:
    """A selector under construction: its text plus one counter per category."""

    text: str = ""
    element_count: int = 0
    id_count: int = 0
    class_count: int = 0
    attr_count: int = 0
    pseudo_class_count: int = 0
    pseudo_element_count: int = 0
    combined: bool = False  # produced by combine()

    # --- appends --------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def append(self, category: Category, value: str) -> SelectorBuilder:
        """Append a part of *category*; the generic form of the methods above."""
        return self._append(category, value)

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        if category.single and self.count(category) > 0:
            logger.debug("Duplicate %s %r after %r", category.label, value, self.text)
            raise DuplicateViolation(category, self.text)
        if any(self.count(later) > 0 for later in category.later()):
            logger.debug("Out of order %s %r after %r", category.label, value, self.text)
            raise OrderViolation(category, self.text)
        if self.combined:
            logger.debug(
                "Appending %s %r to combined selector %r", category.label, value, self.text
            )
        return replace(
            self,
            text=self.text + category.render(value),
            **{category.counter: self.count(category) + 1},
        )

    # --- queries --------------------------------------------------------------

    def count(self, category: Category) -> int:
        """Number of parts of *category* appended so far."""
        return getattr(self, category.counter)

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- combination ----------------------------------------------------------

    @staticmethod
    def combine(
        first: SelectorBuilder, combinator: str | Combinator, second: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator*, surrounded by single spaces.

        The result has all counters reset. Any token is accepted; tokens other
        than ``" "``, ``">"``, ``"+"`` and ``"~"`` are only logged.
        """
        token = str(combinator)
        if token not in {c.value for c in Combinator}:
            logger.warning("Unrecognised combinator %r", token)
        return SelectorBuilder(
            text=f"{first.stringify()} {token} {second.stringify()}",
            combined=True,
        )


css_selector_builder = SelectorBuilder()


def combine(
    first: SelectorBuilder, combinator: str | Combinator, second: SelectorBuilder
) -> SelectorBuilder:
    return SelectorBuilder.combine(first, combinator, second)


def stringify(builder: SelectorBuilder) -> str:
    return builder.stringify()
