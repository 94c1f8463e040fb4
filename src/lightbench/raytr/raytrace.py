#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Functions to support ray tracing a single branch through a scene

    :func:`trace_branch` follows one pending ray from element to element
    until it escapes, is absorbed or blocked, splits into children, or
    runs out of its bounce budget. It touches no shared state: the caller
    receives the finished :class:`~.TracedRay`, the child branches to
    queue and the power the branch delivered, as a :class:`~.HitTally`.

    The interaction with each kind of element is a handler function,
    registered in :data:`interactions` under the hit kind it serves.

.. Created on Fri Mar  6 10:12:55 2026

.. codeauthor: lightbench developers
"""

import logging
from math import sqrt, acos, degrees, exp

import numpy as np

from lightbench.oprops import jones as jns
from lightbench.parax import gaussbeam as gb
from lightbench.util.misc_math import (normalize, clamp, is_finite_vec,
                                       rotate_vec, reflect, distance_sqr_2d)
from . import PendingRay, HitRecord, TracedRay
from .tally import HitTally
from .traceerror import (TraceMissedSurfaceError, TraceTIRError,
                         TraceRayBlockedError, TraceInvalidRayError)

logger = logging.getLogger(__name__)

# fiber coupling profile: sigma = acceptance/FWHM_SIGMA
FWHM_SIGMA = 2.355

# child ray start offsets, in units of eps
CHILD_NUDGE = 2.0
AOM_NUDGE = 5.0


def bend(d_in, normal, n_in, n_out):
    """ refract incoming direction, d_in, about normal

    The normal must face the incoming ray.

    Raises:
        TraceTIRError: if the ray is totally internally reflected
    """
    r = n_in/n_out
    cosI = -np.dot(d_in, normal)
    disc = 1.0 - r*r*(1.0 - cosI*cosI)
    if disc < 0:
        raise TraceTIRError(d_in, normal, n_in, n_out)
    return r*d_in + (r*cosI - sqrt(disc))*normal


def coupling_efficiency(theta, acceptance_angle):
    """ Gaussian coupling efficiency for incidence angle theta (degrees).

    Zero beyond the acceptance half angle.
    """
    if theta > acceptance_angle:
        return 0.0
    sigma = acceptance_angle/FWHM_SIGMA
    if sigma == 0.:
        return 1.0
    return exp(-theta*theta/(2*sigma*sigma))


def resolve_scene(elements, spec):
    """ Place the boundaries of every element that light can strike.

    Returns:
        tuple of (element, boundaries) pairs, in element order
    """
    scene = []
    for e in elements:
        bnds = e.boundaries(n_glass=spec.n_glass)
        if bnds:
            scene.append((e, bnds))
    return tuple(scene)


def classify_hit(ele, bnd, hit, d):
    """ Build the HitRecord for a boundary hit, or None if light passes.

    The returned normal faces the incoming ray.
    """
    t, pt, normal = hit
    cosI = np.dot(d, normal)
    facing = -normal if cosI > 0 else normal
    kind = ele.kind

    if kind == 'lens':
        return HitRecord(t, pt, facing, kind, ele, entering=bool(cosI < 0))

    if kind == 'aperture':
        r_sqr = distance_sqr_2d(pt, ele.position)
        if ele.clear_radius <= 0. or r_sqr > ele.clear_radius**2:
            return HitRecord(t, pt, facing, 'blocker', ele)
        return None

    if kind == 'fiber':
        half_core = ele.core_size/2
        if cosI >= 0 or distance_sqr_2d(pt, bnd.midpoint) > half_core**2:
            return HitRecord(t, pt, facing, 'blocker', ele)
        return HitRecord(t, pt, facing, kind, ele)

    return HitRecord(t, pt, facing, kind, ele)


def find_nearest_hit(p0, d, scene, eps):
    """ Return the nearest HitRecord along the ray, or None.

    Apertures that are passed are ignored; ties go to the earlier element.
    """
    best = None
    best_t = float('inf')
    for ele, bnds in scene:
        for bnd in bnds:
            hit = bnd.intersect(p0, d, eps)
            if hit is None or hit[0] >= best_t:
                continue
            rec = classify_hit(ele, bnd, hit, d)
            if rec is not None:
                best_t = rec.t
                best = rec
    return best


class _Branch:
    """ Mutable state of the branch being traced. """

    def __init__(self, pending, spec):
        self.origin = np.asarray(pending.origin, dtype=float)
        self.direction = np.asarray(pending.direction, dtype=float)
        self.intensity = pending.intensity
        self.jones = pending.jones
        self.gauss = pending.gauss
        self.color = pending.color
        self.bounces_left = pending.bounces_left
        self.spec = spec
        self.children = []
        self.tally = HitTally()

    def spawn(self, pt, direction, intensity, jones=None, nudge=CHILD_NUDGE,
              floor=True):
        """ Queue a child branch.

        With `floor` set, a child carrying no more than the intensity floor
        is dropped.
        """
        if floor and intensity <= self.spec.min_intensity:
            return
        jones = self.jones if jones is None else jones
        origin = pt + nudge*self.spec.eps*direction
        self.children.append(PendingRay(origin, direction, intensity, jones,
                                        self.gauss, self.color,
                                        self.bounces_left))

    def redirect(self, pt, direction):
        """ Continue this branch from pt along direction. """
        self.direction = direction
        self.origin = pt + CHILD_NUDGE*self.spec.eps*direction


# --- interaction handlers
# each returns the fate of the branch, or None if the branch continues
def _mirror(br, hit):
    br.redirect(hit.pt, reflect(br.direction, hit.normal))
    R = hit.element.reflectivity
    if R < 1.0:
        br.intensity *= R
        if br.intensity <= br.spec.min_intensity:
            return 'attenuated'
    return None


def _detector(br, hit):
    br.tally.add_power(hit.element.id, br.intensity)
    return 'absorbed'


def _poldetector(br, hit):
    br.tally.add_power(hit.element.id, br.intensity)
    br.tally.add_stokes(hit.element.id, br.intensity, br.jones)
    return 'absorbed'


def _lens(br, hit):
    spec = br.spec
    if hit.entering:
        n_in, n_out = spec.n_air, spec.n_glass
    else:
        n_in, n_out = spec.n_glass, spec.n_air
    try:
        d_out = bend(br.direction, hit.normal, n_in, n_out)
    except TraceTIRError:
        d_out = reflect(br.direction, hit.normal)
    else:
        if not hit.entering:
            f = hit.element.signed_focal_length()
            br.gauss = gb.thin_lens(br.gauss, f)
    br.redirect(hit.pt, normalize(d_out))
    return None


def _beamsplitter(br, hit):
    T = hit.element.transmission
    br.spawn(hit.pt, reflect(br.direction, hit.normal), br.intensity*(1 - T))
    br.spawn(hit.pt, br.direction, br.intensity*T)
    return 'split'


def _pbs(br, hit):
    ele = hit.element
    br.tally.add_power(ele.id, br.intensity)
    j_t, frac_t = jns.normalized(jns.polarize(br.jones, ele.axis))
    j_r, frac_r = jns.normalized(jns.polarize(br.jones, ele.axis + 90))
    br.spawn(hit.pt, br.direction, br.intensity*frac_t, jones=j_t)
    br.spawn(hit.pt, reflect(br.direction, hit.normal), br.intensity*frac_r,
             jones=j_r)
    return 'split'


def _aom(br, hit):
    ele = hit.element
    e = ele.efficiency
    br.spawn(hit.pt, br.direction, br.intensity*(1 - e), nudge=AOM_NUDGE)
    br.spawn(hit.pt, rotate_vec(br.direction, ele.deviation),
             br.intensity*e, nudge=AOM_NUDGE)
    return 'split'


def _blocker(br, hit):
    raise TraceRayBlockedError(hit.element, hit.pt)


def _fiber(br, hit):
    ele = hit.element
    cosI = clamp(-np.dot(br.direction, hit.normal), -1.0, 1.0)
    theta = degrees(acos(cosI))
    if theta > ele.acceptance_angle:
        raise TraceRayBlockedError(ele, hit.pt)
    coupled = br.intensity*coupling_efficiency(theta, ele.acceptance_angle)
    br.tally.add_power(ele.id, coupled)
    if coupled > br.spec.min_intensity:
        br.tally.set_color(ele.id, br.color)
    return 'coupled'


def _cavity(br, hit):
    R = hit.element.reflectivity
    br.spawn(hit.pt, reflect(br.direction, hit.normal), br.intensity*R)
    br.spawn(hit.pt, br.direction, br.intensity*(1 - R))
    return 'split'


def _retard(br, hit, jones_out, floor=False):
    j, frac = jns.normalized(jones_out)
    br.spawn(hit.pt, br.direction, br.intensity*frac, jones=j, floor=floor)
    return 'split'


def _hwp(br, hit):
    return _retard(br, hit, jns.half_wave(br.jones, hit.element.fast_axis))


def _qwp(br, hit):
    return _retard(br, hit, jns.quarter_wave(br.jones, hit.element.fast_axis))


def _polarizer(br, hit):
    return _retard(br, hit, jns.polarize(br.jones, hit.element.axis),
                   floor=True)


interactions = {
    'mirror': _mirror,
    'detector': _detector,
    'poldetector': _poldetector,
    'lens': _lens,
    'beamsplitter': _beamsplitter,
    'pbs': _pbs,
    'aom': _aom,
    'blocker': _blocker,
    'fiber': _fiber,
    'cavity': _cavity,
    'hwp': _hwp,
    'qwp': _qwp,
    'polarizer': _polarizer,
    }


def trace_branch(pending, scene, spec):
    """ fundamental per-branch raytrace function

    Args:
        pending: the PendingRay to trace
        scene: resolved scene, see :func:`resolve_scene`
        spec: the TraceSpec in effect

    Returns:
        (**traced_ray**, **children**, **tally**)

        - **traced_ray** is the finished TracedRay
        - **children** is a list of PendingRays spawned by the branch
        - **tally** is the HitTally of power delivered by the branch
    """
    br = _Branch(pending, spec)
    path = [br.origin] if is_finite_vec(br.origin) else []
    gauss_list = []
    fate = 'exhausted'

    try:
        while br.bounces_left > 0:
            br.bounces_left -= 1
            if (not is_finite_vec(br.origin) or
                    not is_finite_vec(br.direction) or
                    not np.any(br.direction)):
                raise TraceInvalidRayError(br.origin, br.direction)

            hit = find_nearest_hit(br.origin, br.direction, scene, spec.eps)
            if hit is None:
                raise TraceMissedSurfaceError(br.origin, br.direction)

            path.append(hit.pt)
            gauss_list.append(br.gauss)
            br.gauss = gb.propagate(br.gauss, hit.t)

            result = interactions[hit.kind](br, hit)
            if result is not None:
                fate = result
                break

    except TraceMissedSurfaceError as ray_miss:
        end_pt = ray_miss.pt + spec.max_ray_length*ray_miss.direction
        path.append(end_pt)
        gauss_list.append(br.gauss)
        fate = 'escaped'

    except TraceRayBlockedError as ray_blocked:
        logger.debug("ray blocked by %s at %s", ray_blocked.ele.id,
                     ray_blocked.int_pt)
        fate = 'blocked'

    except TraceInvalidRayError as bad_ray:
        logger.debug("invalid ray: pt=%s, dir=%s", bad_ray.pt,
                     bad_ray.direction)
        fate = 'invalid'

    if fate == 'exhausted':
        logger.debug("bounce budget exhausted after %d points", len(path))

    traced = TracedRay(np.array(path).reshape(-1, 2), pending.intensity,
                       pending.color, pending.jones, gauss_list, fate)
    return traced, br.children, br.tally
