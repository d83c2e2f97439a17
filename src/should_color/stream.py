"""Turn a resolved :class:`ColorChoice` into a yes/no answer for a concrete stream."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from should_color._meta import logger
from should_color.resolver import resolve
from should_color.types import ColorChoice

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import IO

    from should_color.resolver import ResolverConfig


def for_stream(choice: ColorChoice, is_terminal: bool) -> bool:  # noqa: FBT001
    """Return whether to emit color given *choice* and the stream's terminal status."""
    return choice.for_stream(is_terminal)


def stream_is_terminal(stream: object) -> bool:
    """Report whether *stream* is attached to an interactive terminal.

    Objects without ``isatty`` and streams that cannot be queried (closed, detached) are treated
    as non-terminals.
    """
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError) as exc:
        logger.debug("cannot query terminal status of %r: %s", stream, exc)
        return False


def should_colorize(
    stream: IO[str] | None = None,
    user_preference: ColorChoice | None = None,
    default: ColorChoice = ColorChoice.AUTO,
    *,
    config: ResolverConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Resolve the color choice and materialize it for *stream* (``sys.stdout`` by default)."""
    target = sys.stdout if stream is None else stream
    choice = resolve(user_preference, default, config=config, environ=environ)
    return for_stream(choice, stream_is_terminal(target))


__all__ = ["for_stream", "should_colorize", "stream_is_terminal"]
