# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Font of a piece of text is described by the :class:`Font` class. Like colors,
fonts are plain immutable data; the host application maps them
to whatever its UI toolkit uses.

.. autoclass:: markstyle.font.Font
   :members:

"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass

import markstyle

__all__ = [
    "Font",
]


@dataclass(frozen=True, **markstyle._with_slots())
class Font:
    """
    Data about a font: its family, size, and style traits.

    Every field can be :data:`None`, which means "not specified". Fonts can be
    combined with the ``|`` operator: non-empty fields of the right operand
    override the left operand. This is how Markdown elements add traits
    to whatever font the text already has::

        >>> Font(family="Georgia", size=14) | Font.BOLD
        Font(family='Georgia', size=14, bold=True, italic=None, monospace=None)

    """

    family: str | None = None
    """
    Font family name.

    """

    size: float | None = None
    """
    Point size.

    """

    bold: bool | None = None
    """
    If true, render text with a bold weight.

    """

    italic: bool | None = None
    """
    If true, render text in italic.

    """

    monospace: bool | None = None
    """
    If true, render text with a fixed-pitch font.

    """

    def __post_init__(self):
        if self.size is not None and self.size <= 0:
            raise ValueError(f"font size should be positive, got {self.size!r}")

    def __or__(self, other: Font, /):
        return Font(
            other.family if other.family is not None else self.family,
            other.size if other.size is not None else self.size,
            other.bold if other.bold is not None else self.bold,
            other.italic if other.italic is not None else self.italic,
            other.monospace if other.monospace is not None else self.monospace,
        )

    def __ior__(self, other: Font, /):
        return self | other

    def with_size(self, size: float, /) -> Font:
        """
        Return a copy of this font with a different size.

        """

        return dataclasses.replace(self, size=size)

    def scaled(self, delta: float, /) -> Font:
        """
        Return a copy of this font that is ``delta`` points larger.

        If this font doesn't specify a size, the size of :attr:`Font.DEFAULT`
        is used as a starting point.

        :example:
            ::

                >>> Font(size=12).scaled(4).size
                16

        """

        if self.size is not None:
            size = self.size
        else:
            size = typing.cast(float, Font.DEFAULT.size)
        return self.with_size(size + delta)

    DEFAULT: typing.ClassVar[Font] = dict(  # type: ignore
        family="system-ui", size=12, bold=False, italic=False, monospace=False
    )
    """
    Default font: 12pt system font without any traits.

    """

    BOLD: typing.ClassVar[Font] = dict(bold=True)  # type: ignore
    """
    Bold trait.

    """

    ITALIC: typing.ClassVar[Font] = dict(italic=True)  # type: ignore
    """
    Italic trait.

    """

    MONOSPACE: typing.ClassVar[Font] = dict(family="monospace", monospace=True)  # type: ignore
    """
    Fixed-pitch font used for code.

    """


for _n, _v in vars(Font).copy().items():
    if _n == _n.upper() and isinstance(_v, dict):
        setattr(Font, _n, Font(**_v))
del _n, _v  # type: ignore
