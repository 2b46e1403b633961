"""CSS selector builder -- public API.

The functions below start a new chain from the shared empty builder.
"""

from cssbuild.selector.builder import (
    SelectorBuilder,
    combine,
    css_selector_builder,
    stringify,
)
from cssbuild.selector.errors import DuplicateViolation, OrderViolation, SelectorError
from cssbuild.selector.model import Category, Combinator


def element(value: str) -> SelectorBuilder:
    return css_selector_builder.element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return css_selector_builder.id(value)


def class_(value: str) -> SelectorBuilder:
    return css_selector_builder.class_(value)


def attr(value: str) -> SelectorBuilder:
    return css_selector_builder.attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return css_selector_builder.pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return css_selector_builder.pseudo_element(value)


__all__ = [
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    "stringify",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    # model
    "Category",
    "Combinator",
    # errors
    "SelectorError",
    "DuplicateViolation",
    "OrderViolation",
]
