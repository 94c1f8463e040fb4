#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" miscellaneous functions for working with 2d numpy vectors and floats

.. Created on Mon Mar  2 09:12:40 2026

.. codeauthor: lightbench developers
"""
import numpy as np
from numpy.linalg import norm
from math import sin, cos, radians


def normalize(v):
    """ return normalized version of input vector v """
    length = norm(v)
    if length == 0.0:
        return v
    else:
        return v/length


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def is_finite_vec(v) -> bool:
    """ False if any component of v is NaN or +/-inf """
    return bool(np.all(np.isfinite(v)))


def perp(v):
    """ return the left-hand perpendicular of 2d vector v, i.e. (-vy, vx) """
    return np.array([-v[1], v[0]])


def rot2d(angle_deg: float):
    """ return the 2x2 rotation matrix for a counter-clockwise angle in
    degrees.
    """
    a = radians(angle_deg)
    c, s = cos(a), sin(a)
    return np.array([[c, -s], [s, c]])


def rotate_vec(v, angle_deg: float):
    """ rotate direction v by angle_deg """
    return rot2d(angle_deg).dot(v)


def rotate_point(pt, center, angle_deg: float):
    """ rotate pt about center by angle_deg """
    return center + rot2d(angle_deg).dot(np.asarray(pt) - center)


_cardinal_dirs = {
    0: np.array([1., 0.]),
    90: np.array([0., 1.]),
    180: np.array([-1., 0.]),
    270: np.array([0., -1.]),
    }


def dir_from_angle(angle_deg: float):
    """ return the unit direction (cos, sin) for angle_deg.

    The cardinal angles return exact unit vectors, free of the round-off
    that cos/sin produce for multiples of 90 degrees.
    """
    a = angle_deg % 360.0
    if a in _cardinal_dirs:
        return _cardinal_dirs[a].copy()
    rad = radians(angle_deg)
    return np.array([cos(rad), sin(rad)])


def reflect(d_in, normal):
    """ reflect incoming direction, d_in, about normal """
    normal_len = norm(normal)
    cosI = np.dot(d_in, normal)/normal_len
    d_out = d_in - 2.0*cosI*normal/normal_len
    return d_out


def distance_sqr_2d(pt0, pt1):
    """ return distance squared between 2d points pt0 and pt1 """
    return (pt0[0] - pt1[0])**2 + (pt0[1] - pt1[1])**2
