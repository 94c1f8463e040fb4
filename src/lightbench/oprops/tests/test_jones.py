#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Mar 10 09:37:51 2026

@author: lightbench developers
"""


import unittest
from pytest import approx
import numpy as np
import numpy.testing as npt

from lightbench.oprops import jones as jns


class MalusTestCase(unittest.TestCase):
    def setUp(self):
        self.horiz = jns.linear(0.)

    def test_parallel_axis(self):
        j = jns.polarize(self.horiz, 0.)
        assert jns.intensity(j) == approx(1.0)

    def test_crossed_axis(self):
        j = jns.polarize(self.horiz, 90.)
        assert jns.intensity(j) == approx(0.0, abs=1e-12)

    def test_45_degrees(self):
        j = jns.polarize(self.horiz, 45.)
        assert jns.intensity(j) == approx(0.5)

    def test_arbitrary_angle(self):
        j = jns.polarize(jns.linear(20.), 50.)
        assert jns.intensity(j) == approx(np.cos(np.radians(30.))**2)


class RetarderTestCase(unittest.TestCase):

    def test_half_wave_rotates_linear(self):
        # fast axis at 22.5 deg turns horizontal into 45 deg linear
        j = jns.half_wave(jns.linear(0.), 22.5)
        s0, s1, s2, s3 = jns.stokes(j)
        assert jns.orientation_deg(s1, s2) == approx(45.)
        assert s3 == approx(0., abs=1e-12)
        assert jns.intensity(j) == approx(1.)

    def test_half_wave_on_axis_keeps_state(self):
        j = jns.half_wave(jns.linear(0.), 0.)
        s0, s1, s2, s3 = jns.stokes(j)
        assert jns.orientation_deg(s1, s2) == approx(0.)

    def test_quarter_wave_makes_circular(self):
        j = jns.quarter_wave(jns.linear(0.), 45.)
        s0, s1, s2, s3 = jns.stokes(j)
        assert s0 == approx(1.)
        assert abs(jns.ellipticity_deg(s0, s3)) == approx(45.)

    def test_quarter_wave_on_axis_stays_linear(self):
        j = jns.quarter_wave(jns.linear(0.), 0.)
        s0, s1, s2, s3 = jns.stokes(j)
        assert jns.ellipticity_deg(s0, s3) == approx(0., abs=1e-9)


def test_linear_states():
    npt.assert_allclose(jns.linear(0.), [1., 0.])
    npt.assert_allclose(jns.linear(90.), [0., 1.], atol=1e-15)
    j = jns.linear(30.)
    s0, s1, s2, s3 = jns.stokes(j)
    assert jns.orientation_deg(s1, s2) == approx(30.)


def test_orientation_range():
    j = jns.linear(-30.)
    s0, s1, s2, s3 = jns.stokes(j)
    assert jns.orientation_deg(s1, s2) == approx(150.)
    assert jns.orientation_deg(1., -1e-18) < 180.


def test_normalized():
    j, mag = jns.normalized(np.array([0.6+0j, 0.]))
    assert mag == approx(0.36)
    assert jns.intensity(j) == approx(1.)

    zero = np.array([0j, 0j])
    j, mag = jns.normalized(zero)
    assert mag == 0.
    npt.assert_array_equal(j, zero)


def test_ellipticity_of_empty_detector():
    assert jns.ellipticity_deg(0., 0.) == 0.
