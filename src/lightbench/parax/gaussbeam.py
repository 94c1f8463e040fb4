#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" module for tracking a Gaussian beam along traced rays

    The beam is described by the complex beam parameter q = z + i*zR, where
    z is the axial distance from the waist and zR the Rayleigh range. A
    :class:`GaussParams` snapshot is stored for every segment of a traced
    ray, so that the beam width can be reconstructed anywhere along it.

.. Created on Tue Mar  3 16:05:51 2026

.. codeauthor: lightbench developers
"""

import numpy as np
from math import pi, sqrt
from collections import namedtuple

from lightbench.util.misc_math import normalize, perp


gauss_keys = ['w0', 'z', 'zR', 'wvl']
GaussParams = namedtuple('GaussParams', gauss_keys)
GaussParams.__doc__ = "Gaussian beam state at the start of a ray segment"
GaussParams.w0.__doc__ = "beam waist radius"
GaussParams.z.__doc__ = "axial position relative to the waist"
GaussParams.zR.__doc__ = "Rayleigh range"
GaussParams.wvl.__doc__ = "wavelength, in scene units"


def rayleigh_range(w0: float, wvl: float) -> float:
    return pi*w0*w0/wvl


def from_waist(w0: float, wvl: float, z: float = 0.0) -> GaussParams:
    """ Create a beam with waist radius w0 located at -z. """
    return GaussParams(w0, z, rayleigh_range(w0, wvl), wvl)


def q_param(g: GaussParams) -> complex:
    """ Return the complex beam parameter q = z + i*zR. """
    return complex(g.z, g.zR)


def from_q(q: complex, wvl: float) -> GaussParams:
    """ Recover the beam state from a complex beam parameter. """
    zR = q.imag
    w0 = sqrt(zR*wvl/pi) if zR > 0. else 0.
    return GaussParams(w0, q.real, zR, wvl)


def propagate(g: GaussParams, d: float) -> GaussParams:
    """ Free space transfer over distance d. """
    return g._replace(z=g.z + d)


def thin_lens(g: GaussParams, f: float) -> GaussParams:
    """ Apply a thin lens of focal length f (negative if diverging).

    1/q' = 1/q - 1/f
    """
    if f == 0.:
        return g
    q = q_param(g)
    if q == 0:
        return g
    q_out = 1/(1/q - 1/f)
    return from_q(q_out, g.wvl)


def beam_radius(z: float, w0: float, zR: float) -> float:
    """ Return w(z) = w0*sqrt(1 + (z/zR)**2). """
    if zR == 0.:
        return w0
    return w0*sqrt(1 + (z/zR)**2)


def beam_envelope(ray, steps=10):
    """ Reconstruct the edge polylines of the beam around a traced ray.

    Each segment of `ray.path` is sampled `steps` times and offset to both
    sides by the beam radius at that point.

    Args:
        ray: a TracedRay
        steps: number of samples per segment

    Returns:
        (left, right) (N, 2) arrays of points
    """
    left = []
    right = []
    path = ray.path
    for i, g in enumerate(ray.gauss_list):
        p_start, p_end = path[i], path[i+1]
        seg = p_end - p_start
        seg_len = np.linalg.norm(seg)
        if seg_len < 1e-3:
            continue
        side = perp(normalize(seg))
        for j in range(steps + 1):
            s = j/steps
            pt = p_start + s*seg
            w = beam_radius(g.z + s*seg_len, g.w0, g.zR)
            left.append(pt + w*side)
            right.append(pt - w*side)
    return np.array(left).reshape(-1, 2), np.array(right).reshape(-1, 2)
