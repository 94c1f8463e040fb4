#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar  9 09:05:12 2026

@author: lightbench developers
"""

import numpy as np
import numpy.testing as npt
from pytest import approx

from lightbench.util import misc_math as mm


def test_normalize():
    npt.assert_array_equal(mm.normalize(np.array([0., 0.])), [0., 0.])
    npt.assert_allclose(mm.normalize(np.array([3., 4.])), [0.6, 0.8])


def test_dir_from_angle():
    npt.assert_array_equal(mm.dir_from_angle(450.), [0., 1.])
    npt.assert_array_equal(mm.dir_from_angle(-180.), [-1., 0.])
    npt.assert_allclose(mm.dir_from_angle(60.), [0.5, np.sqrt(3)/2])


def test_rotate():
    npt.assert_allclose(mm.rotate_vec(np.array([1., 0.]), 90.), [0., 1.],
                        atol=1e-15)
    pt = mm.rotate_point(np.array([2., 1.]), np.array([1., 1.]), 90.)
    npt.assert_allclose(pt, [1., 2.])


def test_reflect():
    d = mm.reflect(np.array([1., -1.]), np.array([0., 1.]))
    npt.assert_allclose(d, [1., 1.])


def test_misc():
    npt.assert_array_equal(mm.perp(np.array([1., 0.])), [0., 1.])
    assert mm.clamp(1.5, -1., 1.) == 1.
    assert mm.is_finite_vec(np.array([1., 2.]))
    assert not mm.is_finite_vec(np.array([np.inf, 2.]))
    assert mm.distance_sqr_2d((0., 0.), (3., 4.)) == approx(25.)
