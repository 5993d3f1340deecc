# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

r"""
Backslash escapes and code spans must be shielded from all other Markdown
elements. To do this, the parser runs two escaping elements first: they replace
protected text with placeholders, which no other element can match.
After all other elements had their turn, two unescaping elements turn
placeholders back into text.

Placeholders are built from ASCII control characters:

- a literal character is encoded as ``STX``, its hexadecimal code point,
  and ``ETX``; for example, ``\*`` becomes ``"\x022a\x03"``;
- a code span is encoded as ``SO``, followed by its literal characters,
  followed by ``SI``.

These four control characters carry no meaning in Markdown. If the input
contains them, :class:`CodeEscapingElement` replaces them with ``U+FFFD``,
so that every such character in the document belongs to a placeholder::

    >>> escape_text("a*")
    '\x0261\x03\x022a\x03'
    >>> unescape_text(escape_text("a*"))
    'a*'

.. autoclass:: CodeEscapingElement

.. autoclass:: EscapingElement

.. autoclass:: CodeElement

.. autoclass:: UnescapingElement

.. autofunction:: escape_text

.. autofunction:: unescape_text

.. autofunction:: plain_text

"""

from __future__ import annotations

import re

from markstyle.color import ColorValue
from markstyle.document import Attr, StyledDocument
from markstyle.element import RegexElement, StyledElement
from markstyle.font import Font

__all__ = [
    "CODE_END",
    "CODE_START",
    "ETX",
    "PLACEHOLDER_CHARS",
    "STX",
    "CodeElement",
    "CodeEscapingElement",
    "EscapingElement",
    "UnescapingElement",
    "escape_text",
    "plain_text",
    "unescape_text",
]

STX = "\x02"
"""
Start of a literal character placeholder.

"""

ETX = "\x03"
"""
End of a literal character placeholder.

"""

CODE_START = "\x0e"
"""
Start of a code placeholder.

"""

CODE_END = "\x0f"
"""
End of a code placeholder.

"""

PLACEHOLDER_CHARS = frozenset(STX + ETX + CODE_START + CODE_END)
"""
All characters that are reserved for placeholders.

"""

_REPLACEMENT_CHAR = "\ufffd"

_CHAR_PLACEHOLDER_RE = re.compile(STX + r"([0-9a-f]{1,6})" + ETX)
_CODE_PLACEHOLDER_RE = re.compile(CODE_START + r"([^" + CODE_END + r"]*)" + CODE_END)


def escape_text(s: str, /) -> str:
    """
    Replace every character of a string with its literal character placeholder.

    """

    return "".join(f"{STX}{ord(c):x}{ETX}" for c in s)


def unescape_text(s: str, /) -> str:
    """
    Replace literal character placeholders with the characters they encode.

    """

    return _CHAR_PLACEHOLDER_RE.sub(lambda m: chr(int(m.group(1), 16)), s)


def plain_text(s: str, /) -> str:
    """
    Convert a string that may contain any placeholders to plain text.

    Used when text leaves the document, i.e. when a link's target
    is stored as an attribute.

    """

    return unescape_text(s.replace(CODE_START, "").replace(CODE_END, ""))


class CodeEscapingElement(RegexElement):
    """
    Replaces code spans with code placeholders.

    Code spans are delimited by backtick strings of equal length.
    Fenced blocks, i.e. spans delimited by three or more backticks
    that contain a newline, lose their info string line and the trailing newline.
    A backslash-escaped backtick never opens a code span.

    This element also replaces any reserved placeholder characters
    in the input with ``U+FFFD``.

    """

    pattern = re.compile(
        r"""
          \\[^\x02\x03\x0e\x0f]         # - Escaped character, left for the escaping
                                        #   element. Matching it here prevents
                                        #   escaped backticks from opening a span.
        | (?<!`)(?P<fence>`+)(?!`)      # - Opening backtick string.
          (?P<code>.+?)                 # - Code, can't start or end with a backtick.
          (?<!`)(?P=fence)(?!`)         # - Closing backtick string of the same length.
        | (?P<reserved>[\x02\x03\x0e\x0f])  # - Reserved character.
        """,
        re.VERBOSE | re.DOTALL,
    )

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        if m.group("reserved") is not None:
            doc.replace(m.start(), m.end(), _REPLACEMENT_CHAR)
            return
        if m.group("fence") is None:
            return

        fence, code = m.group("fence"), m.group("code")
        code = "".join(
            _REPLACEMENT_CHAR if c in PLACEHOLDER_CHARS else c for c in code
        )
        if len(fence) >= 3 and "\n" in code:
            _, code = code.split("\n", 1)
            code = code.removesuffix("\n")
        else:
            code = code.replace("\n", " ")
            if code.startswith(" ") and code.endswith(" ") and not code.isspace():
                code = code[1:-1]

        doc.replace(m.start(), m.end(), CODE_START + escape_text(code) + CODE_END)


class EscapingElement(RegexElement):
    """
    Replaces backslash-escaped ASCII punctuation with literal character
    placeholders.

    """

    pattern = re.compile(r"\\([!-/:-@\[-`{-~])")

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        doc.replace(m.start(), m.end(), escape_text(m.group(1)))


class CodeElement(StyledElement):
    """
    Renders code placeholders as code.

    :param font:
        default font.
    :param color:
        default text color.
    :param code_font:
        font traits that are added to code.
    :param code_color:
        text color for code. Default is to keep the text color.
    :param code_background:
        background color for code.

    """

    pattern = _CODE_PLACEHOLDER_RE

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        code_font: Font = Font.MONOSPACE,
        code_color: ColorValue | None = None,
        code_background: ColorValue | None = ColorValue.LIGHT_GRAY,
    ):
        super().__init__(font, color)

        self.code_font: Font = code_font
        self.code_color: ColorValue | None = code_color
        self.code_background: ColorValue | None = code_background

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        code = unescape_text(m.group(1))
        start = m.start()
        doc.replace(start, m.end(), code)
        end = start + len(code)

        doc.merge_attribute(Attr.FONT, self.code_font, start, end)
        if self.code_color is not None:
            doc.set_attribute(Attr.COLOR, self.code_color, start, end)
        if self.code_background is not None:
            doc.set_attribute(Attr.BACKGROUND, self.code_background, start, end)


class UnescapingElement(RegexElement):
    """
    Replaces literal character placeholders with the characters they encode.

    """

    pattern = _CHAR_PLACEHOLDER_RE

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        doc.replace(m.start(), m.end(), chr(int(m.group(1), 16)))
