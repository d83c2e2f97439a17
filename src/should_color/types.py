"""The three-valued color choice shared across should-color."""

from __future__ import annotations

from enum import StrEnum

from should_color.errors import InvalidColorChoiceError


class ColorChoice(StrEnum):
    """Possible color choices for the output.

    Members are ordered ``NEVER < AUTO < ALWAYS``. The ordering follows declaration order rather
    than the alphabetical order of the string values.
    """

    NEVER = "never"
    """The output will not be colorized."""
    AUTO = "auto"
    """The output will be colorized if the destination is an interactive terminal."""
    ALWAYS = "always"
    """The output will be colorized."""

    @classmethod
    def from_str(cls, value: str) -> ColorChoice:
        """Parse *value* case-insensitively, ignoring surrounding whitespace."""
        try:
            return cls(value.strip().lower())
        except ValueError as err:
            choices = ", ".join(member.value for member in cls)
            msg = f"Unsupported color choice: {value!r}. Expected one of: {choices}"
            raise InvalidColorChoiceError(msg) from err

    @property
    def rank(self) -> int:
        return _RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ColorChoice):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ColorChoice):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ColorChoice):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ColorChoice):
            return NotImplemented
        return self.rank >= other.rank

    def for_stream(self, is_terminal: bool) -> bool:  # noqa: FBT001
        """Materialize the choice for a stream whose terminal status is *is_terminal*.

        ``NEVER`` and ``ALWAYS`` give ``False`` and ``True`` respectively; ``AUTO`` defers to
        *is_terminal*.
        """
        if self is ColorChoice.ALWAYS:
            return True
        if self is ColorChoice.NEVER:
            return False
        return bool(is_terminal)


_RANK: dict[ColorChoice, int] = {choice: index for index, choice in enumerate(ColorChoice)}


__all__ = ["ColorChoice"]
