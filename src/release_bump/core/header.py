"""Conventional commit header parsing.

The header is the first line of a commit message and must look like::

    <type>[(<scope>)][!]: <subject>

``type`` is a run of letters, digits, ``-`` or ``_``. The colon must be
followed by whitespace. Anything else is not a conventional header and the
commit is left out of classification.

The grammar is read by a small hand-written scanner rather than a regular
expression so each failure point is explicit.
"""

from __future__ import annotations

from dataclasses import dataclass

BREAKING_CHANGE_TOKEN = "BREAKING CHANGE:"


@dataclass(frozen=True)
class ParsedHeader:
    """Result of parsing a commit header.

    Attributes:
        type: Lowercased commit type without scope
        scope: Scope text, ``None`` when absent (``""`` for ``type()``)
        breaking: ``!`` in the header or ``BREAKING CHANGE:`` in the body
        subject: Text after ``": "``
    """

    type: str
    scope: str | None
    breaking: bool
    subject: str


def split_message(message: str) -> tuple[str, str]:
    """Split a commit message into its first line and the rest.

    Args:
        message: Raw commit message

    Returns:
        ``(head, body)``; ``body`` is empty for single-line messages
    """
    head, _, body = message.partition("\n")
    return head.rstrip("\r"), body


def _is_type_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in "-_")


def parse_header(message: str) -> ParsedHeader | None:
    """Parse the conventional header of a commit message.

    Args:
        message: Full commit message (header plus optional body)

    Returns:
        The parsed header, or ``None`` when the first line does not follow
        the ``type(scope)!: subject`` grammar
    """
    text, body = split_message(message)
    length = len(text)
    pos = 0

    while pos < length and _is_type_char(text[pos]):
        pos += 1
    if pos == 0:
        return None
    commit_type = text[:pos]

    scope = None
    if pos < length and text[pos] == "(":
        close = text.find(")", pos + 1)
        if close == -1:
            return None
        scope = text[pos + 1 : close]
        if "(" in scope:
            return None
        pos = close + 1

    bang = pos < length and text[pos] == "!"
    if bang:
        pos += 1

    if pos >= length or text[pos] != ":":
        return None
    pos += 1

    # ": " ends the prefix; "feat:x" and a bare "feat:" are not headers.
    if pos >= length or not text[pos].isspace():
        return None

    return ParsedHeader(
        type=commit_type.lower(),
        scope=scope.strip() if scope is not None else None,
        breaking=bang or BREAKING_CHANGE_TOKEN in body,
        subject=text[pos:].strip(),
    )
