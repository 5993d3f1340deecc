# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Markdown is rendered into a :class:`StyledDocument`: a mutable string with
attributes attached to character ranges. This is the only rich text type
the parser works with; converting it to a UI toolkit's representation is done
by iterating over :meth:`StyledDocument.spans`.

Ranges are half-open and expressed in characters, same as Python slices.

.. autoclass:: StyledDocument
   :members:

.. autoclass:: Attr
   :members:

.. autoclass:: Run
   :members:

.. autoclass:: Span
   :members:

"""

from __future__ import annotations

import bisect
import enum
from dataclasses import dataclass

import markstyle
from markstyle import _typing as _t

__all__ = [
    "Attr",
    "Key",
    "Run",
    "Span",
    "StyledDocument",
]


class Attr(enum.Enum):
    """
    Attribute keys used by built-in Markdown elements.

    Custom elements are free to use their own keys; any hashable value will do.

    """

    #: :class:`~markstyle.font.Font` of the text.
    FONT = "font"

    #: Foreground :class:`~markstyle.color.ColorValue`.
    COLOR = "color"

    #: Background :class:`~markstyle.color.ColorValue`.
    BACKGROUND = "background"

    #: Link target, a string.
    LINK = "link"

    #: :data:`True` if text is underlined.
    UNDERLINE = "underline"

    #: :data:`True` if text is struck through.
    STRIKETHROUGH = "strikethrough"

    def __repr__(self) -> str:
        return f"Attr.{self.name}"


Key: _t.TypeAlias = _t.Hashable
"""
Type of attribute keys.

"""


@dataclass(frozen=True, **markstyle._with_slots())
class Run:
    """
    A range of characters that has some attribute set to the same value.

    """

    start: int
    """
    Index of the first character in the run.

    """

    end: int
    """
    Index past the last character in the run.

    """

    value: _t.Any
    """
    Attribute value.

    """


@dataclass(frozen=True, **markstyle._with_slots())
class Span:
    """
    A piece of text with all of its attributes.

    """

    text: str
    """
    Text of the span.

    """

    attributes: dict[Key, _t.Any]
    """
    Attributes that apply to the entire span.

    """


def _clip(runs: _t.Iterable[Run], lo: int, hi: int) -> list[Run]:
    res = []
    for run in runs:
        start, end = max(run.start, lo), min(run.end, hi)
        if start < end:
            if (start, end) != (run.start, run.end):
                run = Run(start, end, run.value)
            res.append(run)
    return res


def _shift(runs: _t.Iterable[Run], delta: int) -> list[Run]:
    if not delta:
        return list(runs)
    return [Run(run.start + delta, run.end + delta, run.value) for run in runs]


@_t.final
class StyledDocument:
    """StyledDocument(text: str = '', /, attributes: ~typing.Mapping[Key, ~typing.Any] | None = None)

    A mutable string with styled ranges.

    For every attribute key, the document stores a sorted list of
    non-overlapping :class:`Run`\\ s. Setting an attribute on a range
    overrides whatever value this key had there before; other keys
    are not affected.

    :param text:
        initial text.
    :param attributes:
        attributes that will be applied to the entire initial text.
    :example:
        ::

            >>> doc = StyledDocument("Hello, world!")
            >>> doc.set_attribute(Attr.UNDERLINE, True, 7, 12)
            >>> doc.replace(0, 5, "Goodbye")
            >>> doc.text
            'Goodbye, world!'
            >>> doc.runs(Attr.UNDERLINE)
            (Run(start=9, end=14, value=True),)

    """

    # Invariants:
    #
    # - runs in `_runs[key]` are sorted, non-empty, and don't overlap.
    # - adjacent runs in `_runs[key]` have different values.
    # - there are no empty lists in `_runs`.
    # - every run lies within `[0, len(_text))`.

    def __init__(
        self,
        text: str = "",
        /,
        attributes: _t.Mapping[Key, _t.Any] | None = None,
    ):
        self._text: str = text
        self._runs: dict[Key, list[Run]] = {}

        if attributes:
            for key, value in attributes.items():
                self.set_attribute(key, value)

    @property
    def text(self) -> str:
        """
        Plain text of the document, without any styling.

        """

        return self._text

    def keys(self) -> list[Key]:
        """
        Return all attribute keys that are set somewhere in the document.

        """

        return list(self._runs)

    def runs(self, key: Key, /) -> tuple[Run, ...]:
        """
        Return all runs for the given attribute key, sorted by position.

        """

        return tuple(self._runs.get(key, ()))

    def attribute_at(self, key: Key, index: int, /, default: _t.Any = None) -> _t.Any:
        """
        Return value of an attribute at the given character index,
        or ``default`` if the attribute is not set there.

        """

        runs = self._runs.get(key)
        if not runs:
            return default
        i = bisect.bisect_right(runs, index, key=lambda run: run.start) - 1
        if i >= 0 and runs[i].start <= index < runs[i].end:
            return runs[i].value
        return default

    def attributes_at(self, index: int, /) -> dict[Key, _t.Any]:
        """
        Return all attributes that are set at the given character index.

        """

        res = {}
        for key in self._runs:
            value = self.attribute_at(key, index, _MISSING)
            if value is not _MISSING:
                res[key] = value
        return res

    def has_attribute(
        self, key: Key, start: int = 0, end: int | None = None, /
    ) -> bool:
        """
        Check if an attribute is set anywhere within the given range.

        """

        start, end = self._check_range(start, end)
        return bool(_clip(self._runs.get(key, ()), start, end))

    def set_attribute(
        self, key: Key, value: _t.Any, start: int = 0, end: int | None = None, /
    ):
        """
        Set attribute on a range, replacing any previous value of this attribute.

        If ``value`` is :data:`None`, the attribute is removed from the range.

        :param key:
            attribute key.
        :param value:
            new attribute value.
        :param start:
            start of the range, defaults to the start of the document.
        :param end:
            end of the range, defaults to the end of the document.
        :raises:
            :class:`IndexError` if the range is out of bounds.

        """

        if value is None:
            self.remove_attribute(key, start, end)
            return

        start, end = self._check_range(start, end)
        if start == end:
            return

        runs = self._runs.get(key, [])
        self._store(
            key,
            _clip(runs, 0, start)
            + [Run(start, end, value)]
            + _clip(runs, end, len(self)),
        )

    def merge_attribute(
        self,
        key: Key,
        value: _t.Any,
        start: int = 0,
        end: int | None = None,
        /,
        *,
        under: bool = False,
    ):
        """
        Combine attribute values on a range using the ``|`` operator.

        Every existing value ``old`` is replaced with ``old | value``, or with
        ``value | old`` if ``under`` is :data:`True`. Parts of the range where
        the attribute is not set receive ``value`` as is.

        This is used for fonts, where each Markdown element adds its own
        traits without erasing those added by other elements::

            >>> from markstyle.font import Font
            >>> doc = StyledDocument("bold italic", {Attr.FONT: Font.BOLD})
            >>> doc.merge_attribute(Attr.FONT, Font.ITALIC, 5, 11)
            >>> doc.attribute_at(Attr.FONT, 7)
            Font(family=None, size=None, bold=True, italic=True, monospace=None)

        """

        start, end = self._check_range(start, end)
        if start == end:
            return

        runs = self._runs.get(key, [])
        merged = []
        pos = start
        for run in _clip(runs, start, end):
            if pos < run.start:
                merged.append(Run(pos, run.start, value))
            combined = (value | run.value) if under else (run.value | value)
            merged.append(Run(run.start, run.end, combined))
            pos = run.end
        if pos < end:
            merged.append(Run(pos, end, value))

        self._store(key, _clip(runs, 0, start) + merged + _clip(runs, end, len(self)))

    def fill_attribute(
        self, key: Key, value: _t.Any, start: int = 0, end: int | None = None, /
    ):
        """
        Set attribute on those parts of a range where it is not set yet.

        """

        start, end = self._check_range(start, end)
        if start == end:
            return

        runs = self._runs.get(key, [])
        filled = []
        pos = start
        for run in _clip(runs, start, end):
            if pos < run.start:
                filled.append(Run(pos, run.start, value))
            filled.append(run)
            pos = run.end
        if pos < end:
            filled.append(Run(pos, end, value))

        self._store(key, _clip(runs, 0, start) + filled + _clip(runs, end, len(self)))

    def remove_attribute(self, key: Key, start: int = 0, end: int | None = None, /):
        """
        Remove attribute from a range.

        """

        start, end = self._check_range(start, end)
        runs = self._runs.get(key, [])
        self._store(key, _clip(runs, 0, start) + _clip(runs, end, len(self)))

    def replace(
        self,
        start: int,
        end: int,
        text: str,
        /,
        attributes: _t.Mapping[Key, _t.Any] | None = None,
    ):
        """
        Replace a range of characters with new text.

        Inserted text takes attributes of the first replaced character. If the range
        is empty, it takes attributes of the character before the range, or,
        if there isn't one, of the character after the range. Then ``attributes``
        are set on top.

        Runs after the replaced range are shifted to account
        for the changed length.

        :param start:
            start of the replaced range.
        :param end:
            end of the replaced range.
        :param text:
            new text.
        :param attributes:
            attributes that will be set on the inserted text.
        :raises:
            :class:`IndexError` if the range is out of bounds.

        """

        start, end = self._check_range(start, end)
        old_len = len(self)
        delta = len(text) - (end - start)

        if start < end:
            inherited = self.attributes_at(start)
        elif start > 0:
            inherited = self.attributes_at(start - 1)
        elif old_len > 0:
            inherited = self.attributes_at(0)
        else:
            inherited = {}

        for key, runs in list(self._runs.items()):
            middle = []
            if text and key in inherited:
                middle.append(Run(start, start + len(text), inherited[key]))
            self._store(
                key,
                _clip(runs, 0, start)
                + middle
                + _shift(_clip(runs, end, old_len), delta),
            )

        self._text = self._text[:start] + text + self._text[end:]

        if attributes:
            for key, value in attributes.items():
                self.set_attribute(key, value, start, start + len(text))

    def substring(self, start: int = 0, end: int | None = None, /) -> StyledDocument:
        """
        Return a new document that contains the given range of this document,
        together with its attributes.

        """

        start, end = self._check_range(start, end)
        res = StyledDocument(self._text[start:end])
        for key, runs in self._runs.items():
            res._store(key, _shift(_clip(runs, start, end), -start))
        return res

    def spans(self) -> list[Span]:
        """
        Split document into spans of uniformly styled text.

        :example:
            ::

                >>> doc = StyledDocument("plain link", {Attr.UNDERLINE: False})
                >>> doc.set_attribute(Attr.LINK, "https://example.com", 6, 10)
                >>> for span in doc.spans():
                ...     print(repr(span.text), span.attributes)
                'plain ' {Attr.UNDERLINE: False}
                'link' {Attr.UNDERLINE: False, Attr.LINK: 'https://example.com'}

        """

        bounds = {0, len(self)}
        for runs in self._runs.values():
            for run in runs:
                bounds.add(run.start)
                bounds.add(run.end)
        points = sorted(bounds)

        return [
            Span(self._text[a:b], self.attributes_at(a))
            for a, b in zip(points, points[1:])
            if a < b
        ]

    def copy(self) -> StyledDocument:
        """
        Copy this document.

        """

        res = StyledDocument(self._text)
        res._runs = {key: runs.copy() for key, runs in self._runs.items()}
        return res

    def _check_range(self, start: int, end: int | None) -> tuple[int, int]:
        if end is None:
            end = len(self)
        if not 0 <= start <= end <= len(self):
            raise IndexError(
                f"range [{start}, {end}) is out of bounds "
                f"for a document of length {len(self)}"
            )
        return start, end

    def _store(self, key: Key, runs: list[Run]):
        coalesced: list[Run] = []
        for run in runs:
            last = coalesced[-1] if coalesced else None
            if last is not None and last.end == run.start and last.value == run.value:
                coalesced[-1] = Run(last.start, run.end, run.value)
            else:
                coalesced.append(run)
        if coalesced:
            self._runs[key] = coalesced
        else:
            self._runs.pop(key, None)

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __str__(self) -> str:
        return self._text

    def __add__(self, rhs: str | StyledDocument) -> StyledDocument:
        copy = self.copy()
        copy += rhs
        return copy

    def __iadd__(self, rhs: str | StyledDocument) -> StyledDocument:
        if isinstance(rhs, StyledDocument):
            offset = len(self)
            self._text += rhs._text
            for key, runs in rhs._runs.items():
                self._store(key, self._runs.get(key, []) + _shift(runs, offset))
        else:
            self.replace(len(self), len(self), rhs)
        return self

    def __eq__(self, value: object) -> bool:
        if isinstance(value, StyledDocument):
            return self._text == value._text and self._runs == value._runs
        else:
            return NotImplemented

    def __ne__(self, value: object) -> bool:
        return not (self == value)

    def __repr__(self) -> str:
        return f"StyledDocument({self._text!r})"


_MISSING = object()
