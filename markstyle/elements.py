# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Built-in Markdown elements.

:class:`~markstyle.parser.MarkdownParser` runs them in the following order:
headers, lists, quotes, links, automatic links, bold, italic. Each of them
sees the document after all previous elements were applied.

Block-level elements
--------------------

- headers:

  .. code-block:: markdown

     # Heading 1
     ## Heading 2

  Up to six levels are recognized. Headings are bold, and their font
  grows by ``font_increase`` points with every level above the last one.

- lists and numbered lists:

  .. code-block:: markdown

     - List item 1,
       - nested list item.

     1. Numbered list item 1,
     2. numbered list item 2.

  Bullets are replaced with ``•``, every two spaces of leading
  indentation add a nesting level.

- quotes:

  .. code-block:: markdown

     > Quoted text.

Inline elements
---------------

``[links](https://example.com)``, bare URLs such as ``https://example.com``
and ``www.example.com``, e-mail addresses, ``**bold**``, ``__bold__``,
``*italic*``, and ``_italic_``.

:class:`StrikethroughElement` handles ``~~strikethrough~~``; it is not enabled
by default, register it as a custom element if you need it.

.. autoclass:: HeaderElement

.. autoclass:: ListElement

.. autoclass:: QuoteElement

.. autoclass:: LinkElement

.. autoclass:: AutomaticLinkElement

.. autoclass:: BoldElement

.. autoclass:: ItalicElement

.. autoclass:: StrikethroughElement

"""

from __future__ import annotations

import re

from markstyle import _typing as _t
from markstyle.color import ColorValue
from markstyle.document import Attr, Key, StyledDocument
from markstyle.element import RegexElement, StyledElement
from markstyle.escaping import escape_text, plain_text
from markstyle.font import Font

__all__ = [
    "AutomaticLinkElement",
    "BoldElement",
    "HeaderElement",
    "ItalicElement",
    "LinkElement",
    "ListElement",
    "QuoteElement",
    "StrikethroughElement",
]


def _line_end(doc: StyledDocument, pos: int) -> int:
    end = doc.text.find("\n", pos)
    return len(doc) if end == -1 else end


class HeaderElement(StyledElement):
    """
    Renders ATX headings.

    :param font:
        default font.
    :param color:
        default text color.
    :param max_level:
        maximum recognized heading level, between ``1`` and ``6``.
    :param font_increase:
        how many points to add to font size per heading level.

    """

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        max_level: int = 6,
        font_increase: float = 2,
    ):
        super().__init__(font, color)

        if not 1 <= max_level <= 6:
            raise ValueError(f"max_level should be between 1 and 6, got {max_level}")

        self.max_level: int = max_level
        self.font_increase: float = font_increase
        self.pattern = re.compile(  # type: ignore
            rf"""
            ^
            [ ]{{0,3}}                  # - Initial indent.
            (?P<marker>\#{{1,{max_level}}})  # - Heading marker.
            [ \t]+                      # - Mandatory space after the marker.
            (?P<text>.*?)               # - Heading text.
            (?:[ \t]+\#+)?              # - Optional closing hashes.
            [ \t]*
            $
            """,
            re.VERBOSE | re.MULTILINE,
        )

    def font_for_level(self, level: int, /) -> Font:
        """
        Return font traits for a heading of the given level.

        """

        scaled = self.font.scaled(self.font_increase * (self.max_level - level))
        return Font(size=scaled.size, bold=True)

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        level = len(m.group("marker"))
        start, end = self.unwrap(doc, m, "text")
        doc.merge_attribute(Attr.FONT, self.font_for_level(level), start, end)


class ListElement(StyledElement):
    """
    Renders bulleted and numbered list markers.

    :param font:
        default font.
    :param color:
        default text color.
    :param indent:
        indentation that's added for every nesting level.
    :param bullet:
        string that replaces bullet markers.

    """

    pattern = re.compile(
        r"""
        ^
        (?P<indent>[ \t]*)              # - Leading indent, defines nesting level.
        (?P<marker>
            [*+-]                       # - Bullet.
          | (?P<number>\d{1,9})[.)]     # - Number.
        )
        [ \t]+                          # - Mandatory space after the marker.
        (?=\S)
        """,
        re.VERBOSE | re.MULTILINE,
    )

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        indent: str = "  ",
        bullet: str = "•",
    ):
        super().__init__(font, color)

        self.indent: str = indent
        self.bullet: str = bullet

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        level = len(m.group("indent").expandtabs(4)) // 2
        marker = m.group("marker") if m.group("number") else self.bullet
        prefix = self.indent * level + marker + " "
        doc.replace(
            m.start(),
            m.end(),
            prefix,
            {Attr.FONT: self.font, Attr.COLOR: self.color},
        )


class QuoteElement(StyledElement):
    """
    Renders quotes.

    :param font:
        default font.
    :param color:
        default text color.
    :param indent:
        indentation that replaces every quote marker.
    :param quote_color:
        text color for quoted lines. Default is a lighter version of ``color``.

    """

    pattern = re.compile(
        r"""
        ^
        [ ]{0,3}                        # - Initial indent.
        (?P<marker>(?:>[ ]?)+)          # - One or more quote markers.
        """,
        re.VERBOSE | re.MULTILINE,
    )

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        indent: str = "  ",
        quote_color: ColorValue | None = None,
    ):
        super().__init__(font, color)

        self.indent: str = indent
        self.quote_color: ColorValue = (
            quote_color if quote_color is not None else color.lighten(0.5)
        )

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        level = m.group("marker").count(">")
        prefix = self.indent * level
        doc.replace(m.start(), m.end(), prefix)
        start = m.start() + len(prefix)
        end = _line_end(doc, start)
        doc.set_attribute(Attr.COLOR, self.quote_color, m.start(), end)
        doc.merge_attribute(Attr.FONT, Font.ITALIC, start, end)


class LinkElement(StyledElement):
    """
    Renders inline links. Images are rendered as their alt text.

    :param font:
        default font.
    :param color:
        default text color.
    :param link_color:
        text color for links.
    :param underline:
        whether links should be underlined.

    """

    pattern = re.compile(
        r"""
        (?P<image>!?)
        \[(?P<text>[^\[\]\n]+)\]        # - Link text.
        \(
            [ \t]*
            (?P<url>
                [^\s()]*
                (?:\([^\s()]*\)[^\s()]*)*   # - Balanced parenthesis are allowed.
            )
            (?:[ \t]+"[^"\n]*")?        # - Optional title, ignored.
            [ \t]*
        \)
        """,
        re.VERBOSE,
    )

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        link_color: ColorValue = ColorValue.BLUE,
        underline: bool = True,
    ):
        super().__init__(font, color)

        self.link_color: ColorValue = link_color
        self.underline: bool = underline

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        start, end = self.unwrap(doc, m, "text")
        if m.group("image"):
            return
        doc.set_attribute(Attr.LINK, plain_text(m.group("url")), start, end)
        doc.set_attribute(Attr.COLOR, self.link_color, start, end)
        if self.underline:
            doc.set_attribute(Attr.UNDERLINE, True, start, end)


class AutomaticLinkElement(StyledElement):
    """
    Detects bare URLs and e-mail addresses and turns them into links.

    Trailing punctuation and unbalanced closing parenthesis are not considered
    a part of a URL. Text that is already a link is left untouched.

    Detected links are replaced with literal character placeholders, so that
    emphasis markers inside a URL stay as they are.

    :param font:
        default font.
    :param color:
        default text color.
    :param link_color:
        text color for links.
    :param underline:
        whether links should be underlined.

    """

    pattern = re.compile(
        r"""
        (?<![\w@/.:+-])                 # - Not in the middle of a word.
        (?:
            (?P<url>
                (?:https?|ftp)://       # - URL with a scheme,
              | www\.                   #   or a URL that starts with www.
            )
            (?:
                [^\s<>\x00-\x1f\x7f]
              | \x02[0-9a-f]{1,6}\x03    # - Escaped character.
            )+
          | (?P<email>
                [\w.+-]+@[\w-]+(?:\.[\w-]+)+
            )
        )
        """,
        re.VERBOSE,
    )

    _TRAILING_PUNCT = ".,:;!?'\"*_~"

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        link_color: ColorValue = ColorValue.BLUE,
        underline: bool = True,
    ):
        super().__init__(font, color)

        self.link_color: ColorValue = link_color
        self.underline: bool = underline

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        text = m.group()
        if m.group("url") is not None:
            text = self._trim(text)
        start, end = m.start(), m.start() + len(text)
        if start == end or doc.has_attribute(Attr.LINK, start, end):
            return

        text = plain_text(text)
        if m.group("email") is not None:
            target = "mailto:" + text
        elif text.startswith("www."):
            target = "http://" + text
        else:
            target = text

        attributes: dict[Key, _t.Any] = {
            Attr.LINK: target,
            Attr.COLOR: self.link_color,
        }
        if self.underline:
            attributes[Attr.UNDERLINE] = True
        doc.replace(start, end, escape_text(text), attributes)

    def _trim(self, url: str) -> str:
        while url:
            if url[-1] in self._TRAILING_PUNCT:
                url = url[:-1]
            elif url[-1] == ")" and url.count(")") > url.count("("):
                url = url[:-1]
            else:
                break
        return url


class BoldElement(StyledElement):
    """
    Renders ``**bold**`` and ``__bold__`` text.

    """

    pattern = re.compile(
        r"""
            \*\*(?=\S)(?P<star>.+?)(?<=\S)\*\*
          | (?<!\w)__(?=\S)(?P<underscore>.+?)(?<=\S)__(?!\w)
        """,
        re.VERBOSE,
    )

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        group = "star" if m.group("star") is not None else "underscore"
        start, end = self.unwrap(doc, m, group)
        doc.merge_attribute(Attr.FONT, Font.BOLD, start, end)


class ItalicElement(StyledElement):
    """
    Renders ``*italic*`` and ``_italic_`` text.

    """

    pattern = re.compile(
        r"""
            (?<!\*)\*(?![\s*])(?P<star>[^*\n]+?)(?<=\S)\*(?!\*)
          | (?<!\w)_(?![\s_])(?P<underscore>[^_\n]+?)(?<=\S)_(?!\w)
        """,
        re.VERBOSE,
    )

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        group = "star" if m.group("star") is not None else "underscore"
        start, end = self.unwrap(doc, m, group)
        doc.merge_attribute(Attr.FONT, Font.ITALIC, start, end)


class StrikethroughElement(RegexElement):
    """
    Renders ``~~strikethrough~~`` text.

    This element is not a part of the default pipeline. Register it with
    :meth:`~markstyle.parser.MarkdownParser.add_custom_element`.

    """

    pattern = re.compile(r"~~(?=\S)(.+?)(?<=\S)~~")

    def match(self, m: re.Match[str], doc: StyledDocument, /):
        start, end = self.unwrap(doc, m, 1)
        doc.set_attribute(Attr.STRIKETHROUGH, True, start, end)
