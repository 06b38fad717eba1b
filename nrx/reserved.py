"""
Reserved character escaping for NRX message text.

Characters that are structurally significant on the wire (delimiters,
framing, line endings) must not appear raw in a sentence. They are replaced
by a three character token: a caret followed by the two uppercase hex digits
of the character code. CR LF in a NAVTEX message is transmitted as ^0D^0A.

The caret is itself reserved (^5E), so every caret in escaped text starts a
token and never stands for itself.
"""

import string
from types import MappingProxyType

from .errors import MalformedEscape

ESCAPE_CHAR = "^"
TOKEN_LENGTH = 3

_HEX_DIGITS = frozenset(string.hexdigits)

RESERVED_CHARACTERS = MappingProxyType({
    chr(code): f"{ESCAPE_CHAR}{code:02X}"
    for code in (0x0D, 0x0A, 0x24, 0x2A, 0x2C, 0x21, 0x5C, 0x5E, 0x7E, 0x7F)
})


def is_reserved(char: str) -> bool:
    """Check if a character must be escaped before transmission."""
    return char in RESERVED_CHARACTERS


def encode(text: str) -> str:
    """
    Replace reserved characters by their escape tokens.

    Args:
        text: Text that may include reserved characters

    Returns:
        Text safe to place in a sentence field, e.g. "A,B" -> "A^2CB"
    """
    return "".join(RESERVED_CHARACTERS.get(char, char) for char in text)


def decode(text: str) -> str:
    """
    Replace escape tokens by the characters they stand for.

    Args:
        text: Escaped text, e.g. "A^2CB"

    Returns:
        Original text, e.g. "A,B"

    Raises:
        MalformedEscape: If a token is truncated or not hexadecimal
    """
    decoded = []
    i = 0
    length = len(text)

    while i < length:
        char = text[i]
        if char != ESCAPE_CHAR:
            decoded.append(char)
            i += 1
            continue

        if i + TOKEN_LENGTH > length:
            raise MalformedEscape(f"truncated escape at position {i}: {text[i:]!r}")

        digits = text[i + 1:i + TOKEN_LENGTH]
        if not all(d in _HEX_DIGITS for d in digits):
            raise MalformedEscape(f"invalid escape at position {i}: {text[i:i + TOKEN_LENGTH]!r}")

        decoded.append(chr(int(digits, 16)))
        i += TOKEN_LENGTH

    return "".join(decoded)


def token_boundary(text: str, index: int) -> int:
    """
    Move a cut position back so it does not fall inside an escape token.

    Args:
        text: Escaped text
        index: Proposed cut position (text[:index] | text[index:])

    Returns:
        index, or the start of the token the cut would have split
    """
    for back in range(1, TOKEN_LENGTH):
        start = index - back
        if start < 0:
            break
        if text[start] == ESCAPE_CHAR:
            return start
    return index
