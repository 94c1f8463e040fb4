#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Jones vector calculus for fully polarized light

    A polarization state is a complex 2-vector (Ex, Ey) in the horizontal,
    vertical basis of the scene. The operations here rotate, retard and
    project that vector, and reduce it to Stokes parameters for read-out.

    The engine keeps Jones vectors at unit magnitude and carries power in
    the scalar ray intensity; :func:`normalized` is the bridge between the
    two, returning the unit vector and the power fraction it lost.

.. Created on Tue Mar  3 14:20:08 2026

.. codeauthor: lightbench developers
"""
import numpy as np
from math import atan2, asin, degrees, pi, sqrt

from lightbench.coord_geometry_types import Jones2d
from lightbench.util.misc_math import clamp, rot2d

HALF_WAVE = pi
QUARTER_WAVE = pi/2


def linear(angle_deg: float) -> Jones2d:
    """ Linear polarization at angle_deg from horizontal. """
    return rotate(np.array([1.+0j, 0.+0j]), angle_deg)


def rotate(j: Jones2d, angle_deg: float) -> Jones2d:
    """ Rotate the polarization state by angle_deg. """
    return rot2d(angle_deg).astype(complex).dot(j)


def retarder(j: Jones2d, fast_axis: float, phase: float) -> Jones2d:
    """ Apply a wave retarder with the given fast axis and retardance.

    The state is rotated into the fast axis frame, the slow (vertical)
    component is delayed by `phase` radians, then rotated back.
    """
    jf = rotate(j, -fast_axis)
    jf = np.array([jf[0], jf[1]*np.exp(1j*phase)])
    return rotate(jf, fast_axis)


def half_wave(j: Jones2d, fast_axis: float) -> Jones2d:
    return retarder(j, fast_axis, HALF_WAVE)


def quarter_wave(j: Jones2d, fast_axis: float) -> Jones2d:
    return retarder(j, fast_axis, QUARTER_WAVE)


def polarize(j: Jones2d, axis: float) -> Jones2d:
    """ Project onto an ideal polarizer transmission axis.

    Malus's law follows from the squared magnitude of the result.
    """
    ja = rotate(j, -axis)
    ja = np.array([ja[0], 0j])
    return rotate(ja, axis)


def intensity(j: Jones2d) -> float:
    """ Sum of the squared magnitudes of both components. """
    return float(abs(j[0])**2 + abs(j[1])**2)


def normalized(j: Jones2d) -> tuple[Jones2d, float]:
    """ Return the unit Jones vector and the squared magnitude of `j`.

    A zero vector is returned unchanged with magnitude 0.
    """
    mag_sqr = intensity(j)
    if mag_sqr == 0.0:
        return j, 0.0
    return j/sqrt(mag_sqr), mag_sqr


def stokes(j: Jones2d) -> tuple[float, float, float, float]:
    """ Return the Stokes parameters (S0, S1, S2, S3) of `j`. """
    ex, ey = j
    ix = abs(ex)**2
    iy = abs(ey)**2
    cross = np.conj(ex)*ey
    return (float(ix + iy), float(ix - iy),
            float(2*cross.real), float(2*cross.imag))


def orientation_deg(s1: float, s2: float) -> float:
    """ Orientation of the polarization ellipse, in [0, 180) degrees. """
    psi = degrees(0.5*atan2(s2, s1)) % 180.0
    # atan2 of a tiny negative s2 can round to exactly 180
    return 0.0 if psi >= 180.0 else psi


def ellipticity_deg(s0: float, s3: float) -> float:
    """ Ellipticity angle in [-45, 45] degrees; 45 is circular. """
    if s0 == 0.0:
        return 0.0
    return degrees(0.5*asin(clamp(s3/s0, -1.0, 1.0)))
