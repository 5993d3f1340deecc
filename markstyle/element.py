# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

r"""
Every Markdown syntax rule is implemented as a :class:`MarkdownElement`.
An element receives a :class:`~markstyle.document.StyledDocument`, finds
its syntax in it, and rewrites matched ranges in place, replacing markup
with styled plain text.

Most elements are regular expressions paired with a rewrite action;
:class:`RegexElement` implements the scanning loop for them. To add your own
syntax, subclass it and register an instance with
:meth:`MarkdownParser.add_custom_element <markstyle.parser.MarkdownParser.add_custom_element>`::

    >>> import re
    >>> from markstyle.document import Attr, StyledDocument
    >>> class Mention(RegexElement):
    ...     pattern = re.compile(r"@(\w+)")
    ...
    ...     def match(self, m, doc, /):
    ...         start, end = self.unwrap(doc, m, 1)
    ...         doc.set_attribute(Attr.LINK, f"https://example.com/{m.group(1)}", start, end)

    >>> doc = StyledDocument("ping @alice")
    >>> Mention().apply(doc)
    >>> doc.text
    'ping alice'
    >>> doc.attribute_at(Attr.LINK, 5)
    'https://example.com/alice'

Elements are compared by identity: two elements that look the same
are still two different registrations.

.. autoclass:: MarkdownElement
   :members:

.. autoclass:: RegexElement
   :members:

.. autoclass:: StyledElement
   :members:

"""

from __future__ import annotations

import abc
import re
import typing

from markstyle.color import ColorValue
from markstyle.document import StyledDocument
from markstyle.font import Font

__all__ = [
    "MarkdownElement",
    "RegexElement",
    "StyledElement",
]


class MarkdownElement(abc.ABC):
    """
    Base class for a single Markdown syntax rule.

    """

    @abc.abstractmethod
    def apply(self, doc: StyledDocument, /):
        """
        Find all occurrences of this element's syntax in the document
        and rewrite them in place.

        Implementations should scan the document once, left to right,
        and never re-process text they have just inserted.

        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class RegexElement(MarkdownElement):
    """
    Base class for elements that are described by a regular expression.

    :param pattern:
        regular expression that finds this element's syntax. Subclasses can
        set it as a class attribute instead.

    """

    pattern: typing.ClassVar[re.Pattern[str]]
    """
    Regular expression that finds this element's syntax.

    """

    def __init__(self, pattern: re.Pattern[str] | str | None = None):
        if pattern is not None:
            if isinstance(pattern, str):
                pattern = re.compile(pattern)
            self.pattern = pattern  # type: ignore

    def apply(self, doc: StyledDocument, /):
        """
        Search for the first match starting at the current position, let
        :meth:`~RegexElement.match` rewrite it, then continue right after
        the rewritten range.

        Positions are recomputed after every rewrite, so :meth:`~RegexElement.match`
        is free to change length of the document.

        """

        pos = 0
        while (m := self.pattern.search(doc.text, pos)) is not None:
            old_len = len(doc)
            self.match(m, doc)
            pos = m.end() + len(doc) - old_len
            if m.start() == m.end():
                # Empty matches would be found again at the same place.
                pos += 1
            if pos > len(doc):
                break

    @abc.abstractmethod
    def match(self, m: re.Match[str], doc: StyledDocument, /):
        """
        Rewrite a single match.

        :param m:
            match object, its positions refer to the current document text.
        :param doc:
            document that should be changed.

        """

    @staticmethod
    def unwrap(
        doc: StyledDocument, m: re.Match[str], group: int | str, /
    ) -> tuple[int, int]:
        """
        Remove markup around a match group, keeping the group's text
        and its attributes intact.

        :param doc:
            document that contains the match.
        :param m:
            match object.
        :param group:
            group that contains the text that should be kept.
        :returns:
            new range of the group's text.

        """

        start, end = m.span(group)
        doc.replace(end, m.end(), "")
        doc.replace(m.start(), start, "")
        return m.start(), m.start() + end - start


class StyledElement(RegexElement):
    """
    Base class for built-in elements that render with the parser's
    default font and color.

    :param font:
        default font, built-in elements derive their fonts from it.
    :param color:
        default text color.

    """

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
    ):
        super().__init__()

        self.font: Font = font
        self.color: ColorValue = color
