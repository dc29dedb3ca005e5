# topmark:header:start
#
#   project      : ColorFormat
#   file         : cli_types.py
#   file_relpath : src/colorformat/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the ColorFormat CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, Protocol, TypeVar, cast

import click

from colorformat.sink.colors import TermColor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Click parameter type converting a string to a member of a string Enum.

    Matching is case-insensitive on the member *value*; dashes and underscores
    are interchangeable (``bright-red`` matches ``bright_red``).
    """

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices = [cast("str", member.value) for member in cast("Iterable[E]", enum_cls)]

    @staticmethod
    def _normalize(text: str) -> str:
        return text.strip().lower().replace("-", "_")

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert `value` to an enum member.

        Raises:
            click.BadParameter: If `value` names no member.
        """
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            self._normalize(cast("str", member.value)): member
            for member in cast("Iterable[E]", self.enum_cls)
        }
        member: E | None = lookup.get(self._normalize(str(value)))
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_COLORFORMAT_COMPLETE=bash_source colorformat)"`
        """
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = self._normalize(incomplete or "")
        return [
            RuntimeCompletionItem(choice)
            for choice in self.choices
            if self._normalize(choice).startswith(prefix)
        ]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"


def ColorParam() -> EnumChoiceParam[TermColor]:
    """Return the parameter type used for color arguments."""
    return EnumChoiceParam(TermColor)
