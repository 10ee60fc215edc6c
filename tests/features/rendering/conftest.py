"""BDD step definitions for record rendering features."""

import io
from collections.abc import Callable
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from prettylog.core.attrs import group, int64, string
from prettylog.core.handler import PrettyHandler
from prettylog.core.models import Attr, Level, Record
from tests.helpers import FIXED_STAMP, FIXED_TIME


@dataclass
class RenderingContext:
    """Mutable state shared between the steps of one scenario."""

    handler: PrettyHandler | None = None
    children: list[PrettyHandler] = field(default_factory=list)


@pytest.fixture
def ctx() -> RenderingContext:
    """Fresh scenario context for each test."""
    return RenderingContext()


def _emit(ctx: RenderingContext, level: str, message: str, *attrs: Attr) -> None:
    assert ctx.handler is not None
    ctx.handler.handle(
        Record(time=FIXED_TIME, level=Level[level], message=message, attrs=attrs)
    )


def _expand(text: str) -> str:
    return text.replace("{ts}", FIXED_STAMP).replace("\\n", "\n")


# === Given Steps ===
@given(parsers.parse("a handler with {layout} layout"))
def step_handler(ctx: RenderingContext, make_handler: Callable[..., PrettyHandler], layout: str) -> None:
    ctx.handler = make_handler(multiline=layout == "multiline")


@given(parsers.parse("a handler with {layout} layout and threshold {level}"))
def step_handler_with_threshold(
    ctx: RenderingContext,
    make_handler: Callable[..., PrettyHandler],
    layout: str,
    level: str,
) -> None:
    ctx.handler = make_handler(multiline=layout == "multiline", level=Level[level])


@given(parsers.parse('the handler is derived with group "{name}"'))
def step_derive_group(ctx: RenderingContext, name: str) -> None:
    assert ctx.handler is not None
    ctx.handler = ctx.handler.with_group(name)


@given(parsers.parse('the handler is derived with attribute {key}="{value}"'))
def step_derive_attr(ctx: RenderingContext, key: str, value: str) -> None:
    assert ctx.handler is not None
    ctx.handler = ctx.handler.with_attrs([string(key, value)])


@given(parsers.parse('a child handler derived with attribute {key}="{value}"'))
def step_child_attr(ctx: RenderingContext, key: str, value: str) -> None:
    assert ctx.handler is not None
    ctx.children.append(ctx.handler.with_attrs([string(key, value)]))


# === When Steps ===
@when(parsers.parse('an {level} record "{message}" is emitted with no attributes'))
def step_emit_plain(ctx: RenderingContext, level: str, message: str) -> None:
    _emit(ctx, level, message)


@when(parsers.parse('an {level} record "{message}" is emitted with {key}={value:d}'))
def step_emit_int(ctx: RenderingContext, level: str, message: str, key: str, value: int) -> None:
    _emit(ctx, level, message, int64(key, value))


@when(
    parsers.parse(
        'an {level} record "{message}" is emitted with a "{outer}" group '
        'holding an empty "{inner}" group'
    )
)
def step_emit_nested_empty(
    ctx: RenderingContext, level: str, message: str, outer: str, inner: str
) -> None:
    _emit(ctx, level, message, group(outer, group(inner)))


# === Then Steps ===
@then(parsers.parse('the output is "{expected}"'))
def step_output_is(stream: io.BytesIO, expected: str) -> None:
    assert stream.getvalue().decode("utf-8") == _expand(expected)


@then(parsers.parse('the output contains "{expected}"'))
def step_output_contains(stream: io.BytesIO, expected: str) -> None:
    assert _expand(expected) in stream.getvalue().decode("utf-8")


@then("nothing is written")
def step_nothing_written(stream: io.BytesIO) -> None:
    assert stream.getvalue() == b""
