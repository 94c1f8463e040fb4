#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Module for the boundary primitives that light can strike

    The profiles module captures the geometric shape of an element boundary
    in world coordinates. Two primitives cover every element kind: the
    :class:`~.Segment`, a straight boundary with a fixed normal, and the
    :class:`~.Arc`, a cap of a circle used for the curved faces of lenses.
    Both implement :meth:`intersect`, which returns the distance along the
    ray, the point of incidence and the boundary normal, or None when the
    ray misses.

.. Created on Mon Mar  2 11:02:13 2026

.. codeauthor: lightbench developers
"""
import numpy as np
from math import sqrt

from lightbench.util.misc_math import normalize, perp


def intersect_ray_segment(p0, d, p1, p2, eps):
    """ Intersect a ray with the line segment p1-p2.

    Args:
        p0: start point of the ray
        d: direction of the ray
        p1, p2: end points of the segment
        eps: minimum distance along the ray, avoids self intersection at p0

    Returns:
        tuple: distance to intersection *t*, intersection point *p*, or None
        if the ray is parallel to the segment or misses it
    """
    den = -d[0]*(p1[1] - p2[1]) + d[1]*(p1[0] - p2[0])
    if den == 0:
        return None

    t = ((p0[0] - p1[0])*(p1[1] - p2[1])
         - (p0[1] - p1[1])*(p1[0] - p2[0]))/den
    u = -(-d[0]*(p0[1] - p1[1]) + d[1]*(p0[0] - p1[0]))/den

    if t > eps and 0 <= u <= 1:
        return t, p0 + t*d
    return None


def circle_roots(p0, d, center, radius):
    """ Return the two ray parameters where the ray meets the circle.

    The roots are returned in ascending order, or None if the ray misses.
    """
    oc = p0 - center
    a = np.dot(d, d)
    b = 2*np.dot(oc, d)
    c = np.dot(oc, oc) - radius*radius
    disc = b*b - 4*a*c

    if disc < 0:
        return None

    sqrt_d = sqrt(disc)
    return (-b - sqrt_d)/(2*a), (-b + sqrt_d)/(2*a)


def intersect_ray_circle(p0, d, center, radius, eps):
    """ Intersect a ray with a full circle.

    Returns:
        tuple: distance *t* to the nearest root beyond eps, intersection
        point *p* and unit normal (p - center), or None
    """
    roots = circle_roots(p0, d, center, radius)
    if roots is None:
        return None
    for t in roots:
        if t > eps:
            pt = p0 + t*d
            return t, pt, normalize(pt - center)
    return None


class Segment:
    """ A straight boundary between p1 and p2 with a fixed normal.

    If no normal is given, the left-hand perpendicular of p2 - p1 is used.
    """

    def __init__(self, p1, p2, normal=None):
        self.p1 = np.asarray(p1, dtype=float)
        self.p2 = np.asarray(p2, dtype=float)
        if normal is None:
            normal = normalize(perp(self.p2 - self.p1))
        self.normal = np.asarray(normal, dtype=float)

    def __repr__(self):
        return "{!s}(p1={!r}, p2={!r}, normal={!r})".format(
            type(self).__name__, self.p1.tolist(), self.p2.tolist(),
            self.normal.tolist())

    @property
    def midpoint(self):
        return (self.p1 + self.p2)/2

    def intersect(self, p0, d, eps):
        hit = intersect_ray_segment(p0, d, self.p1, self.p2, eps)
        if hit is None:
            return None
        t, pt = hit
        return t, pt, self.normal


class Arc:
    """ A circular cap, the part of a circle facing `vertex_dir`.

    Attributes:
        center: center of curvature
        radius: radius of curvature
        vertex_dir: unit vector from the center toward the arc vertex
        half_height: half chord of the cap, measured across vertex_dir
        normal_flip: +1 if the outward normal is (p - center), -1 if it
                     points toward the center
    """

    def __init__(self, center, radius, vertex_dir, half_height,
                 normal_flip=1):
        self.center = np.asarray(center, dtype=float)
        self.radius = radius
        self.vertex_dir = normalize(np.asarray(vertex_dir, dtype=float))
        self.half_height = half_height
        self.normal_flip = normal_flip

    def __repr__(self):
        return ("{!s}(center={!r}, radius={!r}, vertex_dir={!r}, "
                "half_height={!r}, normal_flip={!r})").format(
                    type(self).__name__, self.center.tolist(), self.radius,
                    self.vertex_dir.tolist(), self.half_height,
                    self.normal_flip)

    def on_arc(self, pt, fuzz=1e-9) -> bool:
        q = pt - self.center
        if np.dot(q, self.vertex_dir) <= 0:
            return False
        return abs(np.dot(q, perp(self.vertex_dir))) <= self.half_height + fuzz

    def end_points(self):
        """ Return the two end points of the cap. """
        h = self.half_height
        x = sqrt(max(self.radius*self.radius - h*h, 0.))
        along = x*self.vertex_dir
        across = h*perp(self.vertex_dir)
        return self.center + along - across, self.center + along + across

    def intersect(self, p0, d, eps):
        roots = circle_roots(p0, d, self.center, self.radius)
        if roots is None:
            return None
        for t in roots:
            if t > eps:
                pt = p0 + t*d
                if self.on_arc(pt):
                    normal = self.normal_flip*normalize(pt - self.center)
                    return t, pt, normal
        return None
