"""CLI commands: cssbuilder build / cssbuilder combine."""

from __future__ import annotations

import shlex
import sys
from typing import Callable

import click

from cssbuilder.config import BuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.selector import CssSelectorBuilder, SimpleSelector, Stage

_APPENDERS: dict[Stage, Callable[[SimpleSelector, str], SimpleSelector]] = {
    Stage.ELEMENT: SimpleSelector.element,
    Stage.ID: SimpleSelector.id,
    Stage.CLASS: SimpleSelector.class_,
    Stage.ATTRIBUTE: SimpleSelector.attr,
    Stage.PSEUDO_CLASS: SimpleSelector.pseudo_class,
    Stage.PSEUDO_ELEMENT: SimpleSelector.pseudo_element,
}


def parse_fragment(token: str) -> tuple[Stage, str]:
    """Split a ``kind=value`` token; the value may itself contain ``=``."""
    kind, sep, value = token.partition("=")
    if not sep:
        raise ValueError(f"Expected kind=value, got {token!r}")
    return Stage.from_name(kind), value


def build_selector(tokens: list[str], config: BuilderConfig) -> SimpleSelector:
    """Apply fragment tokens to a fresh selector in the order given."""
    selector = SimpleSelector(config)
    for token in tokens:
        stage, value = parse_fragment(token)
        _APPENDERS[stage](selector, value)
    return selector


def _config(normalized: bool) -> BuilderConfig:
    return BuilderConfig.normalized() if normalized else BuilderConfig()


@click.command()
@click.argument("fragments", nargs=-1, required=True)
@click.option("--normalized", is_flag=True, help="Emit standard CSS spacing")
def build(fragments: tuple[str, ...], normalized: bool) -> None:
    """Build a simple selector from kind=value FRAGMENTS.

    Kinds: element, id, class, attr, pseudo-class, pseudo-element.
    """
    try:
        selector = build_selector(list(fragments), _config(normalized))
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
@click.option("--normalized", is_flag=True, help="Emit standard CSS spacing")
def combine(left: str, combinator: str, right: str, normalized: bool) -> None:
    """Join two selectors with COMBINATOR.

    LEFT and RIGHT are kind=value fragment lists, split with shell quoting
    rules so a quoted value may contain spaces.
    """
    config = _config(normalized)
    try:
        selector1 = build_selector(shlex.split(left), config)
        selector2 = build_selector(shlex.split(right), config)
    except (SelectorError, ValueError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    builder = CssSelectorBuilder(config)
    click.echo(builder.combine(selector1, combinator, selector2).stringify())
