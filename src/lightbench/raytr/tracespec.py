#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Configuration of a scene trace

    A :class:`TraceSpec` gathers the numerical tolerances and the three
    resource bounds that keep a trace finite:

        - `max_bounces`: traversal steps allowed to one branch, counted
          down on every step and handed on to child branches
        - `max_rays`: completed branches for the whole scene; the rest of
          the queue is discarded when it is reached
        - `min_intensity`: child branches at or below this intensity are
          never queued

.. Created on Thu Mar  5 11:26:09 2026

.. codeauthor: lightbench developers
"""

import attr


@attr.s(frozen=True)
class TraceSpec:
    """ Resource bounds and constants for :func:`~.trace.compute`.

    Attributes:
        max_bounces: per-branch step budget
        max_rays: global cap on completed branches
        min_intensity: intensity floor applied when queueing children
        max_ray_length: length drawn for a ray that escapes the scene
        eps: minimum hit distance, and the scale of the offset applied to
             the start of child rays
        n_air: refractive index outside lenses
        n_glass: refractive index of lens glass
    """
    max_bounces = attr.ib(converter=int, default=20)
    max_rays = attr.ib(converter=int, default=1000)
    min_intensity = attr.ib(converter=float, default=0.01)
    max_ray_length = attr.ib(converter=float, default=2000.0)
    eps = attr.ib(converter=float, default=1e-3)
    n_air = attr.ib(converter=float, default=1.0)
    n_glass = attr.ib(converter=float, default=1.5)

    @max_bounces.validator
    @max_rays.validator
    def _check_positive(self, attribute, value):
        if value < 1:
            raise ValueError(f"{attribute.name} must be at least 1")

    def evolve(self, **changes):
        """ Return a copy with `changes` applied. """
        return attr.evolve(self, **changes)

    def listobj_str(self):
        o_str = ""
        for a in attr.fields(type(self)):
            o_str += f"{a.name}: {getattr(self, a.name)}\n"
        return o_str
