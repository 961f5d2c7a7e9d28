#!/usr/bin/env python3
# -*- coding: utf-8 -*-
'''
Created on 3 Oct 2026

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
'''
import logging
import math
import numpy
from wavecolor import spectrum
from wavecolor.conversion import frgb_to_rgb
from wavecolor.spectrum import cie1931_wavelength_to_xyz, srgb_transfer, \
    xyz_to_frgb, xyz_values_to_frgb, wavelength_to_frgb, wavelength2rgb
import unittest


logging.getLogger().setLevel(logging.DEBUG)


class TestCIE1931Fit(unittest.TestCase):

    def test_peaks(self):
        # Values of the fit close to the peaks of the tabulated CIE 1931 functions
        x, y, z = cie1931_wavelength_to_xyz(555)
        self.assertAlmostEqual(y, 1.0, delta=0.02)
        x, y, z = cie1931_wavelength_to_xyz(599.8)
        self.assertAlmostEqual(x, 1.06, delta=0.02)
        x, y, z = cie1931_wavelength_to_xyz(445)
        self.assertAlmostEqual(z, 1.78, delta=0.03)

    def test_reference_values(self):
        # Values of the fit from Wyman et al. (2013), Listing 1, on both sides
        # of every lobe center
        #         (input) (expected output)
        values = [(380, (0.000203535149, 0.000252721616, 0.006685041077)),
                  (420, (0.141073161237, 0.005407831375, 0.654301999274)),
                  (440, (0.358600659011, 0.019054328813, 1.733913570073)),
                  (445, (0.358491941521, 0.025376094478, 1.776198384698)),
                  (460, (0.281209830978, 0.056017438532, 1.671217363932)),
                  (480, (0.100876648937, 0.139442211457, 0.809347171129)),
                  (500, (0.002355259747, 0.328116755363, 0.270763133042)),
                  (520, (0.069841362788, 0.707113377657, 0.084991431047)),
                  (540, (0.282596864652, 0.954169439077, 0.020178454144)),
                  (560, (0.602887646700, 0.991081639477, 0.003518363312)),
                  (580, (0.920460516032, 0.872133790505, 0.000450337270)),
                  (600, (1.055926269294, 0.634135927975, 0.000042313509)),
                  (620, (0.853537019365, 0.373691814316, 0.000002918530)),
                  (650, (0.283631873381, 0.110045343269, 0.000000029612)),
                  (700, (0.005611997958, 0.004304554025, 0.000000000003)),
                  ]
        for (i, eo) in values:
            o = cie1931_wavelength_to_xyz(i)
            for c, ec in zip(o, eo):
                self.assertAlmostEqual(c, ec, delta=1e-9,
                                       msg="%d nm -> %s should be %s" % (i, o, eo))

    def test_lobe_formula(self):
        # At the center of a lobe, it contributes exactly its amplitude
        w = 568.8
        y = cie1931_wavelength_to_xyz(w)[1]
        t2 = (w - 530.9) * 0.0322
        self.assertAlmostEqual(y, 0.821 + 0.286 * math.exp(-0.5 * t2 * t2))

    def test_asymmetric(self):
        # Y decays faster on the red side than on the blue side
        below = cie1931_wavelength_to_xyz(568.8 - 50)[1]
        above = cie1931_wavelength_to_xyz(568.8 + 50)[1]
        self.assertNotAlmostEqual(below, above, places=3)

    def test_no_clipping(self):
        # The third X lobe is negative, and cancels the two others around 501 nm
        x, y, z = cie1931_wavelength_to_xyz(501.1)
        self.assertLess(x, 0.01)

        # Far outside the visible range, everything fades out
        for w in (100, 2000):
            xyz = cie1931_wavelength_to_xyz(w)
            numpy.testing.assert_almost_equal(xyz, (0, 0, 0))


class TestSRGB(unittest.TestCase):

    def test_transfer(self):
        #         (input) (expected output)
        values = [(0, 0),
                  (1, 1),
                  (-0.5, 0),  # clipped
                  (1.5, 1),
                  (0.001, 0.01292),
                  (0.5, 0.735356983),
                  ]
        for (i, eo) in values:
            o = srgb_transfer(i)
            self.assertAlmostEqual(o, eo, delta=1e-6, msg="%g -> %g should be %g" % (i, o, eo))

    def test_transfer_continuity(self):
        limit = spectrum.SRGB_LINEAR_LIMIT
        linear = limit * 12.92
        power = 1.055 * limit ** (1 / 2.4) - 0.055
        self.assertAlmostEqual(linear, power, delta=1e-6)
        self.assertAlmostEqual(srgb_transfer(limit), srgb_transfer(limit + 1e-12), delta=1e-6)

    def test_transfer_monotonic(self):
        values = [srgb_transfer(c) for c in numpy.linspace(0, 1, 2001)]
        for a, b in zip(values[:-1], values[1:]):
            self.assertLessEqual(a, b)

    def test_xyz_to_frgb(self):
        # D65 white point
        numpy.testing.assert_almost_equal(xyz_to_frgb((0.9505, 1.0, 1.089)), (1, 1, 1), decimal=3)
        numpy.testing.assert_almost_equal(xyz_to_frgb((0, 0, 0)), (0, 0, 0))

        # Pure sRGB red primary
        numpy.testing.assert_almost_equal(xyz_to_frgb((0.4124, 0.2126, 0.0193)), (1, 0, 0), decimal=3)

    def test_xyz_to_frgb_in_gamut(self):
        # No component is clipped, so every matrix coefficient counts.
        # Linear RGB is (0.06230555, 0.379320065, 0.214184665).
        numpy.testing.assert_almost_equal(xyz_to_frgb((0.2, 0.3, 0.25)),
                                          (0.276873119353, 0.649430554989, 0.500155395333),
                                          decimal=7)

    def test_xyz_calling_conventions(self):
        xyz = (0.3, 0.4, 0.2)
        exp = xyz_to_frgb(xyz)
        self.assertEqual(xyz_values_to_frgb(*xyz), exp)
        self.assertEqual(xyz_to_frgb(list(xyz)), exp)
        self.assertEqual(xyz_to_frgb(numpy.array(xyz)), exp)
        self.assertTrue(all(isinstance(c, float) for c in exp))

    def test_xyz_bad(self):
        with self.assertRaises(ValueError):
            xyz_to_frgb((0.3, 0.4))


class TestWavelength(unittest.TestCase):

    def test_dominant_component(self):
        r, g, b = wavelength_to_frgb(650)
        self.assertGreater(r, g)
        self.assertGreater(r, b)

        r, g, b = wavelength_to_frgb(530)
        self.assertGreater(g, r)
        self.assertGreater(g, b)

        r, g, b = wavelength_to_frgb(450)
        self.assertGreater(b, r)
        self.assertGreater(b, g)

    def test_range(self):
        for w in range(300, 900, 5):
            rgb = wavelength_to_frgb(w)
            for c in rgb:
                self.assertTrue(0 <= c <= 1, "%d nm -> %s" % (w, rgb))

    def test_composition(self):
        for w in (400, 480.5, 575, 700):
            self.assertEqual(wavelength_to_frgb(w),
                             xyz_to_frgb(cie1931_wavelength_to_xyz(w)))

    def test_wave2rgb(self):
        # Saturated green: the other components are clipped
        self.assertEqual(wavelength2rgb(530e-9), (0, 255, 0))

        r, g, b = wavelength2rgb(650e-9)
        self.assertGreater(r, 200)
        self.assertEqual((g, b), (0, 0))

        for wl in (450e-9, 575e-9, 650e-9):
            self.assertEqual(wavelength2rgb(wl), frgb_to_rgb(wavelength_to_frgb(wl * 1e9)))


if __name__ == "__main__":
    unittest.main()


# vim:tabstop=4:shiftwidth=4:expandtab:spelllang=en_gb:spell:
