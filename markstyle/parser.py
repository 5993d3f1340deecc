# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
The parser converts Markdown into a :class:`~markstyle.document.StyledDocument`.

Parsing
-------

.. autoclass:: MarkdownParser
   :members:

.. autoclass:: ParserConfig
   :members:


How parsing works
-----------------

The parser owns a list of Markdown elements and applies them one by one
to the document. Elements are grouped into four segments which always run
in the same order:

1. escaping: code spans and backslash escapes are hidden behind placeholders
   (see :mod:`markstyle.escaping`);
2. default: headers, lists, quotes, links, automatic links, bold, italic
   (see :mod:`markstyle.elements`);
3. custom: elements added by the user, in order of registration;
4. unescaping: code placeholders are rendered as code, other placeholders
   become literal characters again.

Because escaping runs first, custom elements never see escaped characters or
code contents, and because unescaping runs last, no placeholders leave
the parser::

    >>> parser = MarkdownParser()
    >>> parser.parse(r"\\*not italic\\* and `**not bold**`").text
    '*not italic* and **not bold**'

Parsing never fails: Markdown that doesn't match any element is left as is.


Thread safety
-------------

:meth:`~MarkdownParser.parse` doesn't modify the parser, so one parser can be
used from multiple threads. :meth:`~MarkdownParser.add_custom_element`
and :meth:`~MarkdownParser.remove_custom_element` do modify it; register
custom elements before sharing the parser, or guard them with a lock.

"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass

import markstyle
from markstyle import _typing as _t
from markstyle.color import ColorValue
from markstyle.document import Attr, StyledDocument
from markstyle.element import MarkdownElement
from markstyle.elements import (
    AutomaticLinkElement,
    BoldElement,
    HeaderElement,
    ItalicElement,
    LinkElement,
    ListElement,
    QuoteElement,
)
from markstyle.escaping import (
    CodeElement,
    CodeEscapingElement,
    EscapingElement,
    UnescapingElement,
)
from markstyle.font import Font

__all__ = [
    "MarkdownParser",
    "ParserConfig",
]


@dataclass(frozen=True, **markstyle._with_slots())
class ParserConfig:
    """
    Settings of a :class:`MarkdownParser`.

    """

    font: Font = Font.DEFAULT
    """
    Default font, applied to the whole document before any Markdown element.

    """

    color: ColorValue = ColorValue.BLACK
    """
    Default text color, applied to the whole document before any Markdown element.

    """

    automatic_link_detection_enabled: bool = True
    """
    Enables detection of URLs and e-mail addresses that aren't marked up as links.

    """


@_t.final
class MarkdownParser:
    """
    Converts Markdown to styled text.

    :param font:
        default font. Built-in elements derive their fonts from it.
    :param color:
        default text color.
    :param automatic_link_detection_enabled:
        if set to :data:`False`, bare URLs are not turned into links.
    :param custom_elements:
        elements that will run after built-in ones.
    :example:
        ::

            >>> parser = MarkdownParser(font=Font(family="Georgia", size=14))
            >>> doc = parser.parse("# Title")
            >>> doc.text
            'Title'
            >>> doc.attribute_at(Attr.FONT, 0)
            Font(family='Georgia', size=24, bold=True, italic=None, monospace=None)

    """

    def __init__(
        self,
        font: Font = Font.DEFAULT,
        color: ColorValue = ColorValue.BLACK,
        *,
        automatic_link_detection_enabled: bool = True,
        custom_elements: _t.Iterable[MarkdownElement] = (),
    ):
        self.__config = ParserConfig(font, color, automatic_link_detection_enabled)

        self.header: HeaderElement = HeaderElement(font, color)
        self.list: ListElement = ListElement(font, color)
        self.quote: QuoteElement = QuoteElement(font, color)
        self.link: LinkElement = LinkElement(font, color)
        self.automatic_link: AutomaticLinkElement = AutomaticLinkElement(font, color)
        self.bold: BoldElement = BoldElement(font, color)
        self.italic: ItalicElement = ItalicElement(font, color)
        self.code: CodeElement = CodeElement(font, color)

        self.__escaping_elements: tuple[MarkdownElement, ...] = (
            CodeEscapingElement(),
            EscapingElement(),
        )
        self.__default_elements: tuple[MarkdownElement, ...] = (
            self.header,
            self.list,
            self.quote,
            self.link,
            self.automatic_link,
            self.bold,
            self.italic,
        )
        self.__unescaping_elements: tuple[MarkdownElement, ...] = (
            self.code,
            UnescapingElement(),
        )

        self.__custom_elements: list[MarkdownElement] = []
        for element in custom_elements:
            self.add_custom_element(element)

    @classmethod
    def from_config(
        cls,
        config: ParserConfig,
        /,
        *,
        custom_elements: _t.Iterable[MarkdownElement] = (),
    ) -> MarkdownParser:
        """
        Create a parser from a :class:`ParserConfig`.

        """

        return cls(
            config.font,
            config.color,
            automatic_link_detection_enabled=config.automatic_link_detection_enabled,
            custom_elements=custom_elements,
        )

    @property
    def config(self) -> ParserConfig:
        """
        Settings this parser was created with.

        """

        return self.__config

    @property
    def font(self) -> Font:
        """
        Default font.

        """

        return self.__config.font

    @property
    def color(self) -> ColorValue:
        """
        Default text color.

        """

        return self.__config.color

    @property
    def automatic_link_detection_enabled(self) -> bool:
        """
        Whether bare URLs are turned into links.

        """

        return self.__config.automatic_link_detection_enabled

    @property
    def custom_elements(self) -> tuple[MarkdownElement, ...]:
        """
        Currently registered custom elements, in order of registration.

        """

        return tuple(self.__custom_elements)

    def add_custom_element(self, element: MarkdownElement, /):
        """
        Register a custom element. It will run after all built-in elements,
        and after all previously registered custom elements.

        :param element:
            element to register.
        :raises:
            :class:`TypeError` if ``element`` is not a :class:`MarkdownElement`.

        """

        if not isinstance(element, MarkdownElement):
            raise TypeError(
                f"expected a MarkdownElement, got {element.__class__.__name__}"
            )
        if any(registered is element for registered in self.__custom_elements):
            warnings.warn(
                f"custom element {element!r} is already registered, "
                "it will run more than once",
                markstyle.MarkstyleWarning,
                stacklevel=2,
            )

        self.__custom_elements.append(element)
        markstyle._logger.debug("registered custom element %r", element)

    def remove_custom_element(self, element: MarkdownElement, /):
        """
        Unregister a custom element.

        Elements are compared by identity. If the element was registered
        more than once, only its first registration is removed. If it wasn't
        registered, this method does nothing.

        :param element:
            element to unregister.

        """

        for i, registered in enumerate(self.__custom_elements):
            if registered is element:
                del self.__custom_elements[i]
                markstyle._logger.debug("removed custom element %r", element)
                return

        markstyle._logger.debug("custom element %r is not registered", element)

    def pipeline(self) -> list[MarkdownElement]:
        """
        Return all elements in the order they will run.

        Automatic link detection is included even if it is disabled;
        :meth:`~MarkdownParser.parse` skips it in this case.

        """

        return [
            *self.__escaping_elements,
            *self.__default_elements,
            *self.__custom_elements,
            *self.__unescaping_elements,
        ]

    @_t.overload
    def parse(self, markdown: str, /) -> StyledDocument: ...
    @_t.overload
    def parse(self, markdown: StyledDocument, /) -> StyledDocument: ...
    def parse(self, markdown: str | StyledDocument, /) -> StyledDocument:
        """
        Parse Markdown and return styled text.

        :param markdown:
            Markdown text. If given a :class:`~markstyle.document.StyledDocument`,
            its attributes are kept as a base layer under the ones added by
            Markdown elements. Font and color are the exception: parser's base
            font and color replace them across the whole text. The given document
            itself is not modified.
        :returns:
            a new styled document.

        """

        if isinstance(markdown, StyledDocument):
            doc = markdown.copy()
        else:
            doc = StyledDocument(markdown)

        doc.set_attribute(Attr.FONT, self.font)
        doc.set_attribute(Attr.COLOR, self.color)

        default_elements = self.__default_elements
        if not self.automatic_link_detection_enabled:
            # Custom elements always run, even if they detect links.
            default_elements = tuple(
                element
                for element in default_elements
                if element is not self.automatic_link
            )

        debug = markstyle._logger.isEnabledFor(logging.DEBUG)
        for element in [
            *self.__escaping_elements,
            *default_elements,
            *self.__custom_elements,
            *self.__unescaping_elements,
        ]:
            element.apply(doc)
            if debug:
                markstyle._logger.debug("after %r: %r", element, doc.text)

        return doc
