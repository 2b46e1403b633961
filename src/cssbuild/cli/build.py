"""CLI commands: cssbuild build / cssbuild categories."""

from __future__ import annotations

import sys

import click

from cssbuild.selector import (
    Category,
    Combinator,
    SelectorBuilder,
    SelectorError,
    combine,
    css_selector_builder,
)

# Accepted spellings for each part kind on the command line.
_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "el": Category.ELEMENT,
    "id": Category.ID,
    "class": Category.CLASS,
    "cls": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "attribute": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pc": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
    "pe": Category.PSEUDO_ELEMENT,
}


def _parse_part(raw: str) -> Category | Combinator:
    """Classify a command-line part as a combinator or a ``kind=value`` part."""
    try:
        return Combinator.parse(raw)
    except ValueError:
        pass
    kind, sep, _ = raw.partition("=")
    if not sep or kind.lower() not in _KINDS:
        raise click.BadParameter(
            f"expected KIND=VALUE or a combinator, got {raw!r}", param_hint="PARTS"
        )
    return _KINDS[kind.lower()]


def split_parts(
    parts: tuple[str, ...] | list[str],
) -> tuple[list[list[tuple[Category, str]]], list[Combinator]]:
    """Split raw parts into compound selectors and the combinators between them."""
    compounds: list[list[tuple[Category, str]]] = [[]]
    combinators: list[Combinator] = []
    for raw in parts:
        parsed = _parse_part(raw)
        if isinstance(parsed, Combinator):
            if not compounds[-1]:
                raise click.BadParameter(
                    f"combinator {raw!r} must follow a selector part",
                    param_hint="PARTS",
                )
            combinators.append(parsed)
            compounds.append([])
        else:
            compounds[-1].append((parsed, raw.partition("=")[2]))
    if not compounds[-1]:
        raise click.BadParameter("selector cannot end with a combinator", param_hint="PARTS")
    return compounds, combinators


def build_selector(
    compounds: list[list[tuple[Category, str]]], combinators: list[Combinator]
) -> SelectorBuilder:
    """Build each compound, then fold them right-nested with their combinators."""
    built = []
    for compound in compounds:
        selector = css_selector_builder
        for category, value in compound:
            selector = selector.append(category, value)
        built.append(selector)

    result = built[-1]
    for selector, combinator in zip(reversed(built[:-1]), reversed(combinators)):
        result = combine(selector, combinator, result)
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build a selector from PARTS given in order.

    Each part is KIND=VALUE (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator (+, ~, >, descendant).

    \b
    Example:
        cssbuild build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    compounds, combinators = split_parts(parts)
    try:
        selector = build_selector(compounds, combinators)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
def categories() -> None:
    """List selector part categories in the order they must appear."""
    for category in Category:
        limit = "once" if category.single else "many"
        click.echo(
            f"{category.precedence}. {category.label:<15} {category.render('VALUE'):<10} {limit}"
        )
