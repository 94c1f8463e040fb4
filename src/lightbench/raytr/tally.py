#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Accumulation of power delivered to elements

    Each traced branch produces its own :class:`HitTally`; the scene trace
    folds them together with :meth:`HitTally.merge` and reduces the total
    once, with :meth:`HitTally.reduce`, into the flat hits mapping.

.. Created on Fri Mar  6 09:48:30 2026

.. codeauthor: lightbench developers
"""

import numpy as np

from lightbench.oprops import jones as jns

POL_SUFFIX = '_pol'
ELLIPTICITY_SUFFIX = '_ellipticity'


class HitTally:
    """ Power, Stokes sums and color tags, keyed by element id.

    Attributes:
        power: accumulated scalar power
        stokes: intensity weighted sums of (S1, S2, S3), for polarization
                detectors
        colors: last color tag coupled into an element
    """

    def __init__(self):
        self.power = {}
        self.stokes = {}
        self.colors = {}

    def __repr__(self):
        return "{!s}(power={!r}, stokes={!r}, colors={!r})".format(
            type(self).__name__, self.power,
            {k: v.tolist() for k, v in self.stokes.items()}, self.colors)

    def __bool__(self):
        return bool(self.power or self.stokes or self.colors)

    def add_power(self, ele_id, p):
        self.power[ele_id] = self.power.get(ele_id, 0.0) + p

    def add_stokes(self, ele_id, intensity, jones):
        """ Add the Stokes vector of the unit `jones` weighted by intensity.
        """
        s0, s1, s2, s3 = jns.stokes(jones)
        s = intensity*np.array([s1, s2, s3])
        if ele_id in self.stokes:
            self.stokes[ele_id] = self.stokes[ele_id] + s
        else:
            self.stokes[ele_id] = s

    def set_color(self, ele_id, color):
        self.colors[ele_id] = color

    def merge(self, other):
        """ Fold `other` into this tally and return it. """
        for ele_id, p in other.power.items():
            self.add_power(ele_id, p)
        for ele_id, s in other.stokes.items():
            if ele_id in self.stokes:
                self.stokes[ele_id] = self.stokes[ele_id] + s
            else:
                self.stokes[ele_id] = s.copy()
        self.colors.update(other.colors)
        return self

    def reduce(self):
        """ Return the flat hits mapping.

        Power is keyed by element id. Each polarization detector also gets
        '<id>_pol', the orientation in [0, 180) degrees, and
        '<id>_ellipticity', in [-45, 45] degrees.
        """
        hits = dict(self.power)
        for ele_id, (s1, s2, s3) in self.stokes.items():
            s0 = self.power.get(ele_id, 0.0)
            hits[ele_id + POL_SUFFIX] = jns.orientation_deg(s1, s2)
            hits[ele_id + ELLIPTICITY_SUFFIX] = jns.ellipticity_deg(s0, s3)
        return hits
