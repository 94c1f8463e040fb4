#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Useful transforms for placing element templates in the scene

    Element geometry is defined in a local frame whose origin is the element
    position and whose +x axis is the element front normal. Rotations are
    absolute; there is no chain of transforms between elements.

.. Created on Mon Mar  2 10:31:55 2026

.. codeauthor: lightbench developers
"""

import numpy as np

from lightbench.coord_geometry_types import Tfm2d
from lightbench.util.misc_math import rot2d


def forward_transform(position, rotation: float) -> Tfm2d:
    """ Return the local to world transform (rot, t) for an element. """
    return rot2d(rotation), np.asarray(position, dtype=float)


def transform_point(tfrm: Tfm2d, pt):
    """ Apply (rot, t) to a local point. """
    rot, t = tfrm
    return rot.dot(pt) + t


def transform_dir(tfrm: Tfm2d, d):
    """ Apply the rotation part of (rot, t) to a local direction. """
    rot, t = tfrm
    return rot.dot(d)


def inverse_transform(tfrm: Tfm2d, pt):
    """ Map a world point into the local frame of `tfrm`. """
    rot, t = tfrm
    return rot.T.dot(np.asarray(pt) - t)
