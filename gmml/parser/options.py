"""Parser configuration options."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling line handling.

    `allow_crlf` lexes `\\r\\n` as a single newline. Without it a carriage
    return is an unexpected character.

    `require_trailing_newline` makes the newline ending the last statement (or
    a final block header) mandatory instead of accepting end of input there.
    """

    allow_crlf: bool = False
    require_trailing_newline: bool = False
