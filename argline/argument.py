# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the position-preserving `Argument` model used by Argline to turn an
input line into typed values and back again.

Every `Argument` records the text of one token together with the verbatim
whitespace/quoting around it (`prefix` and `suffix`) and its `start`/`end`
offsets in the original line. Because

    prefix + text + suffix

reproduces the exact substring the token came from, a single token can be
replaced (for example by a completion) and the line rebuilt without
disturbing anything else.

Arguments are immutable. `beget`, `merge`, `beget_shifted` and `assign` all
return new instances.

Variants:
- `Argument`: A plain token.
- `MergedArgument`: Several tokens fused into one logical argument
  (e.g. the free-text tail of `echo a b c`).
- `NamedArgument`: A `--flag value` pair whose value is the effective text.
- `BooleanNamedArgument`: A presence-only `--flag`.
- `ArrayArgument`: An ordered group of arguments bound to one parameter.

`ArgumentLike` is the union of all five; code that needs to treat them
differently matches on the variant rather than testing types ad hoc.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property, reduce
from typing import Sequence, Union

from argline.exceptions import ArgumentError, ArgumentMismatchError

AT_CURSOR = -1
"""Offset used when a position is the live cursor rather than a fixed place."""

QUOTE = "'"


def _offset(position: int, distance: int) -> int:
    """Move `position` by `distance`, leaving the cursor sentinel untouched."""
    if position == AT_CURSOR:
        return position
    return position + distance


def _quote_for(text: str) -> str:
    """Return the quote needed to keep `text` a single token, if any."""
    if not text or any(char.isspace() for char in text):
        return QUOTE
    return ""


class BaseArgument:
    """
    Behaviour shared by every argument variant.

    Subclasses provide `text`, `prefix`, `suffix`, `start` and `end`, either as
    dataclass fields or as properties derived from their constituents.
    """

    text: str
    prefix: str
    suffix: str
    start: int
    end: int

    def merge(self, following: ArgumentLike) -> Argument:
        """Return a plain Argument spanning this argument and `following`."""
        return Argument(
            self.text + self.suffix + following.prefix + following.text,
            self.prefix,
            following.suffix,
            self.start,
            following.end,
        )

    def is_blank(self) -> bool:
        """Is there any visible content to this argument?"""
        return self.text == "" and not self.prefix.strip() and not self.suffix.strip()

    def update_cli_args(self, args: list[ArgumentLike], old_arg: ArgumentLike) -> None:
        """
        Replace every occurrence of `old_arg` in `args` with this argument.

        If `old_arg` is not in the list this argument is appended to the end of
        the command line instead.
        """
        updated = False
        for index, arg in enumerate(args):
            if arg is old_arg:
                args[index] = self  # type: ignore[assignment]
                updated = True
        if not updated:
            args.append(self)  # type: ignore[arg-type]

    def equals(self, other: ArgumentLike | None) -> bool:
        """
        Structural equality over text, prefix, suffix, start and end.

        Raises:
            ArgumentMismatchError: If `other` is a different argument variant.
        """
        if self is other:
            return True
        if other is None:
            return False
        if type(other) is not type(self):
            raise ArgumentMismatchError(
                f"Can not compare {type(self).__name__} with {type(other).__name__}"
            )
        return (
            self.text == other.text
            and self.prefix == other.prefix
            and self.suffix == other.suffix
            and self.start == other.start
            and self.end == other.end
        )

    def __str__(self) -> str:
        return self.prefix + self.text + self.suffix


@dataclass(frozen=True)
class Argument(BaseArgument):
    """
    A single token of command line input.

    Attributes:
        text (str): The token content, without quotes.
        prefix (str): Whitespace and opening quote found before the text.
        suffix (str): Closing quote (and trailing whitespace on the last token).
        start (int): Offset of the token in the input line, or AT_CURSOR.
        end (int): Offset just past the token, or AT_CURSOR.
        assignment (str | None): Name of the parameter this token was bound to.
    """

    text: str = ""
    prefix: str = ""
    suffix: str = ""
    start: int = AT_CURSOR
    end: int = AT_CURSOR
    assignment: str | None = field(default=None, compare=False, repr=False)

    def beget(self, text: str, prefix_space: bool | None = None) -> Argument:
        """
        Return a new Argument like this one with its text replaced by `text`.

        The end offset moves by the change in text length. When `prefix_space`
        is given the prefix and suffix are rebuilt: the prefix is a single space
        (if `prefix_space` is true) followed by a quote when `text` is empty or
        contains whitespace, and the suffix is the matching quote.
        """
        start = self.start
        prefix = self.prefix
        suffix = self.suffix
        quote = _quote_for(text)

        if prefix_space is not None:
            prefix = (" " if prefix_space else "") + quote
            start = _offset(start, len(prefix) - len(self.prefix))

        end = _offset(self.end, len(text) - len(self.text))

        if prefix_space is not None:
            suffix = quote
            end = _offset(end, len(suffix) - len(self.suffix))

        return Argument(text, prefix, suffix, start, end, self.assignment)

    def beget_shifted(self, distance: int) -> Argument:
        """Return a new Argument like this one but slid along by `distance`."""
        return replace(
            self, start=_offset(self.start, distance), end=_offset(self.end, distance)
        )

    def assign(self, assignment: str | None) -> Argument:
        """Return a copy of this argument bound to the named parameter."""
        return replace(self, assignment=assignment)


@dataclass(frozen=True)
class MergedArgument(BaseArgument):
    """
    Several arguments fused into one, for commands that take a free-text tail.

    The text, prefix, suffix and offsets are those of `merge_arguments(args)`.
    """

    args: tuple[Argument, ...]
    assignment: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.args, (list, tuple)) or not self.args:
            raise ArgumentError("MergedArgument needs a non-empty sequence of Arguments")
        object.__setattr__(self, "args", tuple(self.args))

    @cached_property
    def _merged(self) -> Argument:
        return reduce(lambda joined, arg: joined.merge(arg), self.args)

    @property
    def text(self) -> str:  # type: ignore[override]
        return self._merged.text

    @property
    def prefix(self) -> str:  # type: ignore[override]
        return self._merged.prefix

    @property
    def suffix(self) -> str:  # type: ignore[override]
        return self._merged.suffix

    @property
    def start(self) -> int:  # type: ignore[override]
        return self._merged.start

    @property
    def end(self) -> int:  # type: ignore[override]
        return self._merged.end

    def beget(self, text: str, prefix_space: bool | None = None) -> MergedArgument:
        """Like `Argument.beget`, but merged text never needs quoting."""
        start = self.start
        prefix = self.prefix
        suffix = self.suffix

        if prefix_space is not None:
            prefix = " " if prefix_space else ""
            start = _offset(start, len(prefix) - len(self.prefix))

        end = _offset(self.end, len(text) - len(self.text))

        if prefix_space is not None:
            suffix = ""
            end = _offset(end, -len(self.suffix))

        return MergedArgument(
            (Argument(text, prefix, suffix, start, end, self.assignment),),
            self.assignment,
        )

    def beget_shifted(self, distance: int) -> MergedArgument:
        return MergedArgument(
            tuple(arg.beget_shifted(distance) for arg in self.args), self.assignment
        )

    def assign(self, assignment: str | None) -> MergedArgument:
        return MergedArgument(
            tuple(arg.assign(assignment) for arg in self.args), assignment
        )


@dataclass(frozen=True)
class NamedArgument(BaseArgument):
    """
    A `--param value` pair.

    The effective text and offsets are the value's; the flag token is folded
    into the prefix so the pair still renders as the original input.
    """

    name_arg: Argument
    value_arg: Argument
    assignment: str | None = field(default=None, compare=False, repr=False)

    @property
    def text(self) -> str:  # type: ignore[override]
        return self.value_arg.text

    @property
    def prefix(self) -> str:  # type: ignore[override]
        return str(self.name_arg) + self.value_arg.prefix

    @property
    def suffix(self) -> str:  # type: ignore[override]
        return self.value_arg.suffix

    @property
    def start(self) -> int:  # type: ignore[override]
        return self.value_arg.start

    @property
    def end(self) -> int:  # type: ignore[override]
        return self.value_arg.end

    def beget(self, text: str, prefix_space: bool | None = None) -> NamedArgument:
        return replace(self, value_arg=self.value_arg.beget(text, prefix_space))

    def beget_shifted(self, distance: int) -> NamedArgument:
        return replace(
            self,
            name_arg=self.name_arg.beget_shifted(distance),
            value_arg=self.value_arg.beget_shifted(distance),
        )

    def assign(self, assignment: str | None) -> NamedArgument:
        return NamedArgument(
            self.name_arg.assign(assignment),
            self.value_arg.assign(assignment),
            assignment,
        )


@dataclass(frozen=True)
class BooleanNamedArgument(BaseArgument):
    """A presence-only flag such as `--verbose`; the opposite of the flag is ''."""

    arg: Argument
    assignment: str | None = field(default=None, compare=False, repr=False)

    @property
    def text(self) -> str:  # type: ignore[override]
        return self.arg.text

    @property
    def prefix(self) -> str:  # type: ignore[override]
        return self.arg.prefix

    @property
    def suffix(self) -> str:  # type: ignore[override]
        return self.arg.suffix

    @property
    def start(self) -> int:  # type: ignore[override]
        return self.arg.start

    @property
    def end(self) -> int:  # type: ignore[override]
        return self.arg.end

    def beget(self, text: str, prefix_space: bool | None = None) -> BooleanNamedArgument:
        return replace(self, arg=self.arg.beget(text, prefix_space))

    def beget_shifted(self, distance: int) -> BooleanNamedArgument:
        return replace(self, arg=self.arg.beget_shifted(distance))

    def assign(self, assignment: str | None) -> BooleanNamedArgument:
        return BooleanNamedArgument(self.arg.assign(assignment), assignment)


@dataclass(frozen=True)
class ArrayArgument(BaseArgument):
    """
    An ordered group of arguments bound to one multi-valued parameter.

    An ArrayArgument has no text of its own; it renders as `{a,b,c}`.
    """

    args: tuple[ArgumentLike, ...] = ()
    assignment: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    def add_arguments(self, args: Sequence[ArgumentLike]) -> ArrayArgument:
        """Return a new ArrayArgument with `args` appended."""
        return ArrayArgument(self.args + tuple(args), self.assignment)

    @property
    def start(self) -> int:  # type: ignore[override]
        return self.args[0].start if self.args else AT_CURSOR

    @property
    def end(self) -> int:  # type: ignore[override]
        return self.args[-1].end if self.args else AT_CURSOR

    def merge(self, following: ArgumentLike) -> Argument:
        raise ArgumentError("ArrayArgument has no text to merge")

    def beget(self, text: str, prefix_space: bool | None = None) -> ArrayArgument:
        raise ArgumentError("ArrayArgument has no text to replace")

    def beget_shifted(self, distance: int) -> ArrayArgument:
        return ArrayArgument(
            tuple(arg.beget_shifted(distance) for arg in self.args), self.assignment
        )

    def is_blank(self) -> bool:
        return all(arg.is_blank() for arg in self.args)

    def assign(self, assignment: str | None) -> ArrayArgument:
        return ArrayArgument(tuple(arg.assign(assignment) for arg in self.args), assignment)

    def update_cli_args(self, args: list[ArgumentLike], old_arg: ArgumentLike) -> None:
        """
        Swap the span of `old_arg` in `args` for this argument's constituents.

        Every constituent of `old_arg` is removed from the list; the new
        constituents are inserted, in order, where the first removal happened
        (or at the end of the list when nothing was removed).
        """
        match old_arg:
            case ArrayArgument(args=old_args):
                pass
            case _:
                old_args = (old_arg,)

        first_match = len(args)
        index = 0
        while index < len(args):
            if any(args[index] is old for old in old_args):
                first_match = min(first_match, index)
                del args[index]
            else:
                index += 1

        args[first_match:first_match] = self.args

    def equals(self, other: ArgumentLike | None) -> bool:
        if self is other:
            return True
        if other is None:
            return False
        match other:
            case ArrayArgument(args=other_args):
                if len(self.args) != len(other_args):
                    return False
                return all(
                    mine.equals(theirs) for mine, theirs in zip(self.args, other_args)
                )
            case _:
                raise ArgumentMismatchError(
                    f"Can not compare ArrayArgument with {type(other).__name__}"
                )

    def __str__(self) -> str:
        return "{" + ",".join(str(arg) for arg in self.args) + "}"


ArgumentLike = Union[
    Argument, MergedArgument, NamedArgument, BooleanNamedArgument, ArrayArgument
]


def merge_arguments(
    args: Sequence[ArgumentLike], start: int = 0, end: int | None = None
) -> ArgumentLike | None:
    """
    Merge `args[start:end]` into a single argument by folding `merge` left to right.

    Returns:
        ArgumentLike | None: The merged argument, or None for an empty range.
    """
    selected = list(args)[start:end]
    if not selected:
        return None
    return reduce(lambda joined, arg: joined.merge(arg), selected)
