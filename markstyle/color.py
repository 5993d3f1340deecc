# Markstyle project, MIT license.
#
# https://github.com/markstyle/markstyle/
#
# You're free to copy this file to your project and edit it for your needs,
# just keep this copyright line please :3

"""
Text color is defined by the :class:`ColorValue` class. It stores RGB components
and knows nothing about how a particular UI toolkit displays them; converting
it to a toolkit color is up to the host application.

.. autoclass:: markstyle.color.ColorValue
   :members:

"""

from __future__ import annotations

import colorsys
import re
import typing
from dataclasses import dataclass

import markstyle

__all__ = [
    "ColorValue",
]


@dataclass(frozen=True, **markstyle._with_slots())
class ColorValue:
    """
    Data about a single color.

    Colors are immutable and compare by value, so they can be shared freely
    between parsers, elements and documents.

    """

    rgb: tuple[int, int, int]
    """
    Red, green and blue components, each between ``0`` and ``255``.

    """

    def __post_init__(self):
        if len(self.rgb) != 3 or not all(0 <= c <= 0xFF for c in self.rgb):
            raise ValueError(f"invalid rgb components {self.rgb!r}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, /) -> ColorValue:
        """
        Create a color value from rgb components.

        Each component should be between 0 and 255.

        :example:
            ::

                >>> ColorValue.from_rgb(0xA0, 0x1E, 0x9C)
                <ColorValue #A01E9C>

        """

        return cls((r, g, b))

    @classmethod
    def from_hex(cls, h: str, /) -> ColorValue:
        """
        Create a color value from a hex string.

        :example:
            ::

                >>> ColorValue.from_hex('#A01E9C')
                <ColorValue #A01E9C>

        """

        return cls(_parse_hex(h))

    def to_hex(self) -> str:
        """
        Return color in hex format with leading ``#``.

        :example:
            ::

                >>> a = ColorValue.from_hex('#A01E9C')
                >>> a.to_hex()
                '#A01E9C'

        """

        r, g, b = self.rgb
        return f"#{r:02X}{g:02X}{b:02X}"

    def to_rgb(self) -> tuple[int, int, int]:
        """
        Return RGB components of the color.

        :example:
            ::

                >>> a = ColorValue.from_hex('#A01E9C')
                >>> a.to_rgb()
                (160, 30, 156)

        """

        return self.rgb

    def lighten(self, amount: float, /) -> ColorValue:
        """
        Make this color lighter by the given percentage.

        Amount should be between 0 and 1.

        :example:
            ::

                >>> # Lighten by 30%.
                ... ColorValue.from_hex('#A01E9C').lighten(0.30)
                <ColorValue #BC23B7>

        """

        amount = max(min(amount, 1), 0)
        r, g, b = self.rgb
        h, s, v = colorsys.rgb_to_hsv(r / 0xFF, g / 0xFF, b / 0xFF)
        v = 1 - v
        v = 1 - (v - v * amount)
        r, g, b = colorsys.hsv_to_rgb(h, s, v)
        return ColorValue.from_rgb(int(r * 0xFF), int(g * 0xFF), int(b * 0xFF))

    def __repr__(self) -> str:
        return f"<ColorValue {self.to_hex()}>"

    BLACK: typing.ClassVar[ColorValue] = (0x00, 0x00, 0x00)  # type: ignore
    """
    Black, the default text color.

    """

    WHITE: typing.ClassVar[ColorValue] = (0xFF, 0xFF, 0xFF)  # type: ignore
    """
    White.

    """

    RED: typing.ClassVar[ColorValue] = (0xD7, 0x3A, 0x49)  # type: ignore
    """
    Red.

    """

    BLUE: typing.ClassVar[ColorValue] = (0x00, 0x66, 0xCC)  # type: ignore
    """
    Blue, the default link color.

    """

    GRAY: typing.ClassVar[ColorValue] = (0x80, 0x80, 0x80)  # type: ignore
    """
    Medium gray.

    """

    LIGHT_GRAY: typing.ClassVar[ColorValue] = (0xF0, 0xF0, 0xF0)  # type: ignore
    """
    Light gray, the default background for code.

    """


for _n, _v in vars(ColorValue).copy().items():
    if _n == _n.upper() and isinstance(_v, tuple):
        setattr(ColorValue, _n, ColorValue(_v))
del _n, _v  # type: ignore


def _parse_hex(h: str) -> tuple[int, int, int]:
    if not re.match(r"^#[0-9a-fA-F]{6}$", h):
        raise ValueError(f"invalid hex string {h!r}")
    return tuple(int(h[i : i + 2], 16) for i in (1, 3, 5))  # type: ignore
