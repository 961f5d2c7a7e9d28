# -*- coding: utf-8 -*-
"""
Created on 3 Oct 2026

Conversion of light wavelengths into displayable colours, by going through the
CIE 1931 XYZ colour space.

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

import logging
import math
import numpy
from typing import Sequence, Tuple

from wavecolor.conversion import frgb_to_rgb

# Range (in nm) where the CIE 1931 standard observer is tabulated. Outside of
# it, the fit still returns a value, but it has no physical meaning.
VISIBLE_RANGE = (360, 830)

# Lobes of the multi-lobe, piecewise Gaussian fit of the CIE 1931 colour
# matching functions, from:
# Chris Wyman, Peter-Pike Sloan, and Peter Shirley, Simple Analytic
# Approximations to the CIE XYZ Color Matching Functions, Journal of Computer
# Graphics Techniques (JCGT), vol. 2, no. 2, 1-11, 2013.
# For each of X, Y, Z: list of (amplitude, center (nm), left factor, right factor)
CIE1931_LOBES = (
    ((0.362, 442.0, 0.0624, 0.0374),
     (1.056, 599.8, 0.0264, 0.0323),
     (-0.065, 501.1, 0.0490, 0.0382)),
    ((0.821, 568.8, 0.0213, 0.0247),
     (0.286, 530.9, 0.0613, 0.0322)),
    ((1.217, 437.0, 0.0845, 0.0278),
     (0.681, 459.0, 0.0385, 0.0725)),
)

# XYZ -> linear sRGB (D65), from IEC 61966-2-1, see http://www.color.org/srgb.pdf
XYZ_TO_SRGB = numpy.array([[3.2406255, -1.5372080, -0.4986286],
                           [-0.9689307, 1.8757561, 0.0415175],
                           [0.0557101, -0.2040211, 1.0569959]])

# Below this value, the sRGB transfer function is linear
SRGB_LINEAR_LIMIT = 0.0031308


def _gaussian_lobe(wavelength, amplitude, center, left, right):
    """
    Gaussian with a different width on each side of the center
    """
    t = (wavelength - center) * (left if wavelength < center else right)
    return amplitude * math.exp(-0.5 * t * t)


def cie1931_wavelength_to_xyz(wavelength: float) -> Tuple[float, float, float]:
    """
    Compute the response of the CIE 1931 standard observer to a monochromatic
    light, using an analytic fit of the colour matching functions.
    wavelength (float): wavelength in nm. It is not checked, but only values
      roughly within 380-700 nm give meaningful results.
    return (3 floats): X, Y, Z. Typically within 0..1 for visible wavelengths,
      but not clipped. X can be slightly negative.
    """
    if not VISIBLE_RANGE[0] <= wavelength <= VISIBLE_RANGE[1]:
        logging.debug("Wavelength %g nm is outside of the visible spectrum", wavelength)

    return tuple(sum(_gaussian_lobe(wavelength, *lobe) for lobe in lobes)
                 for lobes in CIE1931_LOBES)


def srgb_transfer(c: float) -> float:
    """
    Apply the sRGB colour component transfer function (aka "gamma") on a linear
    component.
    c (float): linear intensity. Clipped to 0..1.
    return (0<=float<=1): the encoded component
    """
    c = min(max(c, 0.0), 1.0)
    if c <= SRGB_LINEAR_LIMIT:
        return c * 12.92
    else:
        return 1.055 * c ** (1 / 2.4) - 0.055


def xyz_to_frgb(xyz: Sequence[float]) -> Tuple[float, float, float]:
    """
    Convert a colour in the XYZ colour space into the sRGB colour space.
    Colours out of the sRGB gamut are clipped (per component).
    xyz (3 floats): X, Y, Z, each typically in the range 0..1
    return (3 floats in 0..1): R, G, B, ready to be displayed
    """
    if len(xyz) != 3:
        raise ValueError("Illegal XYZ colour %s" % (xyz,))

    linear = XYZ_TO_SRGB @ numpy.asarray(xyz, dtype=float)
    return tuple(srgb_transfer(float(c)) for c in linear)


def xyz_values_to_frgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """ Same as xyz_to_frgb(), with each component passed separately """
    return xyz_to_frgb((x, y, z))


def wavelength_to_frgb(wavelength: float) -> Tuple[float, float, float]:
    """
    Convert a wavelength of the visible spectrum into a colour suitable to be
    displayed on a monitor.
    wavelength (float): wavelength in nm
    return (3 floats in 0..1): R, G, B
    """
    return xyz_to_frgb(cie1931_wavelength_to_xyz(wavelength))


def wavelength2rgb(wavelength: float) -> Tuple[int, int, int]:
    """
    Convert a wavelength into a (r, g, b) value
    wavelength (0 < float): wavelength in m
    return (3-tuple int in 0..255): RGB value
    """
    return frgb_to_rgb(wavelength_to_frgb(wavelength * 1e9))
