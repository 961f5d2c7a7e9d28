# -*- coding: utf-8 -*-
"""
Created on 3 Oct 2026

Conversions between the RGB, HSV and CSS representations of a colour.

Naming convention: "rgb" is a 3-tuple of ints in the range [0..255], "frgb" is
a 3-tuple of floats in the range [0..1], and "hsv" is a 3-tuple of floats in
the range [0..1] (the hue being a fraction of the full circle, not degrees).

Copyright © 2026 Wavecolor developers

This file is part of Wavecolor.

Wavecolor is free software: you can redistribute it and/or modify it under the terms
of the GNU General Public License version 2 as published by the Free Software
Foundation.

Wavecolor is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY;
without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR
PURPOSE. See the GNU General Public License for more details.

You should have received a copy of the GNU General Public License along with
Wavecolor. If not, see http://www.gnu.org/licenses/.
"""

import math
import re
from typing import Sequence, Tuple

# Slightly more than 255, so that 1.0 maps to 255 even after floating point
# rounding, while every byte value still gets the same share of [0..1].
BYTE_SCALE = 255.9


def byte_to_hex(x):
    """
    Convert a byte into its hexadecimal representation
    x (0 <= int <= 255): the value. A float is truncated to an int. Not
      checked, values outside of the range produce more (or a negative) digits.
    return (str of len 2): lower case hexadecimal, padded with "0"
    """
    return "%02x" % int(x)


def rgb_to_css(rgb: Sequence[int]) -> str:
    """ Convert an integer RGB value into a CSS colour string

    :param rgb: (int, int, int) RGB values in the range [0..255]
    :return: str of the form "#rrggbb"

    """

    if len(rgb) != 3:
        raise ValueError("Illegal RGB colour %s" % (rgb,))
    return "#" + "".join(byte_to_hex(c) for c in rgb)


def rgb_values_to_css(r: int, g: int, b: int) -> str:
    """ Same as rgb_to_css(), with each component passed separately """
    return rgb_to_css((r, g, b))


def hex_to_rgb(hex_str: str) -> Tuple[int, int, int]:
    """  Convert a Hexadecimal colour representation into a 3-tuple of RGB integers

    :param hex_str: str  Colour value of the form '#FFFFFF'
    :rtype : (int, int int)

    """

    if len(hex_str) != 7 or not re.match(r"#[0-9a-fA-F]{6}$", hex_str):
        raise ValueError("Invalid HEX colour %s" % hex_str)
    hex_str = hex_str[-6:]
    return tuple(int(hex_str[i:i + 2], 16) for i in [0, 2, 4])


def hex_to_frgb(hex_str: str) -> Tuple[float, float, float]:
    """ Convert a Hexadecimal colour representation into a 3-tuple of floats
    :rtype : (float, float, float)
    """
    return rgb_to_frgb(hex_to_rgb(hex_str))


def rgb_to_frgb(rgb: Sequence[int]) -> Tuple[float, float, float]:
    """ Convert an integer RGB value into a float RGB value

    :param rgb: (int, int, int) RGB values in the range [0..255]
    :return: (float, float, float)

    """

    if len(rgb) != 3:
        raise ValueError("Illegal RGB colour %s" % (rgb,))
    return tuple(v / 255.0 for v in rgb)


def frgb_to_rgb(frgb: Sequence[float]) -> Tuple[int, int, int]:
    """ Convert a float RGB value into an integer RGB value

    Each component is scaled by BYTE_SCALE and rounded down. Values outside of
    [0..1] are not clipped, and so give values outside of [0..255].

    :param frgb: (float, float, float) RGB values in the range [0..1]
    :return: (int, int, int)

    """

    if len(frgb) != 3:
        raise ValueError("Illegal RGB colour %s" % (frgb,))
    return tuple(math.floor(v * BYTE_SCALE) for v in frgb)


def frgb_values_to_rgb(r: float, g: float, b: float) -> Tuple[int, int, int]:
    """ Same as frgb_to_rgb(), with each component passed separately """
    return frgb_to_rgb((r, g, b))


def hsv_to_frgb(hsv: Sequence[float]) -> Tuple[float, float, float]:
    """
    Convert a HSV colour into a float RGB colour
    hsv (3 floats in 0..1): hue, saturation, value. The hue is a fraction of
      the colour circle (ie, 1/3 is green). A hue outside of [0..1[ wraps
      around the circle. Saturation and value are not checked.
    return (3 floats in 0..1): red, green, blue
    """
    if len(hsv) != 3:
        raise ValueError("Illegal HSV colour %s" % (hsv,))
    h, s, v = hsv

    h6 = math.floor(h * 6)
    f = h * 6 - h6  # position inside the sector
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)

    # Python modulo is always positive, so every hue picks one of the sectors
    sector = int(h6) % 6
    if sector == 0:
        return v, t, p
    elif sector == 1:
        return q, v, p
    elif sector == 2:
        return p, v, t
    elif sector == 3:
        return p, q, v
    elif sector == 4:
        return t, p, v
    else:
        return v, p, q


def hsv_values_to_frgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    return hsv_to_frgb((h, s, v))


def hsv_to_rgb(hsv: Sequence[float]) -> Tuple[int, int, int]:
    """
    Convert a HSV colour into an integer RGB colour
    hsv (3 floats in 0..1): see hsv_to_frgb()
    return (3 ints in 0..255): red, green, blue
    """
    return frgb_to_rgb(hsv_to_frgb(hsv))


def hsv_values_to_rgb(h: float, s: float, v: float) -> Tuple[int, int, int]:
    return hsv_to_rgb((h, s, v))
