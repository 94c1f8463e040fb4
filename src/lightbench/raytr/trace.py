#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Supports ray tracing a whole scene from its sources.

    :func:`compute` seeds rays from every source, traces the pending
    branches breadth first, and folds the power each branch delivers into a
    single :class:`~.HitTally`. The result views at the end of the module
    present traced rays and hits as pandas tables.

.. Created on Fri Mar  6 14:31:07 2026

.. codeauthor: lightbench developers
"""

import logging
from collections import deque

import numpy as np
import pandas as pd

from lightbench.oprops import jones as jns
from lightbench.parax import gaussbeam as gb
from lightbench.util.misc_math import dir_from_angle, perp
from . import raytrace as rt
from . import PendingRay, TraceResult
from .tally import HitTally
from .tracespec import TraceSpec

logger = logging.getLogger(__name__)


def seed_rays(source, spec):
    """ Return the PendingRays launched by `source`.

    The core ray carries the source power; glow rays, when glow is
    positive, are offset to either side of the core.
    """
    d = dir_from_angle(source.rotation)
    pos = np.array(source.position)
    jones = jns.linear(source.polarization)
    gauss = gb.from_waist(source.waist_diameter/2, source.wavelength)

    def pending(origin, intensity):
        return PendingRay(origin, d, intensity, jones, gauss, source.color,
                          spec.max_bounces)

    rays = [pending(pos, source.power)]
    if source.glow > 0:
        side = source.GLOW_OFFSET*perp(d)
        rays.append(pending(pos + side, source.glow))
        rays.append(pending(pos - side, source.glow))
    return rays


def compute(elements, spec=None):
    """ Trace every ray launched by the sources in `elements`.

    Args:
        elements: sequence of element records; the order breaks ties
                  between equidistant hits
        spec: the TraceSpec to use; the defaults if None

    Returns:
        TraceResult: traced rays, hits mapping and fiber color tags
    """
    if spec is None:
        spec = TraceSpec()

    scene = rt.resolve_scene(elements, spec)
    queue = deque()
    for e in elements:
        if e.kind == 'source':
            queue.extend(seed_rays(e, spec))

    rays = []
    tally = HitTally()
    while queue:
        if len(rays) >= spec.max_rays:
            logger.info("ray limit of %d reached, %d pending rays discarded",
                        spec.max_rays, len(queue))
            queue.clear()
            break

        pending = queue.popleft()
        traced, children, partial = rt.trace_branch(pending, scene, spec)
        rays.append(traced)
        tally = tally.merge(partial)
        queue.extend(c for c in children if c.bounces_left > 0)

    logger.debug("traced %d rays", len(rays))
    return TraceResult(rays, tally.reduce(), dict(tally.colors))


# --- result views
def ray_df(ray):
    """ return a |DataFrame| with one row per segment of a TracedRay """
    path = ray.path
    rows = []
    for i, g in enumerate(ray.gauss_list):
        p0, p1 = path[i], path[i+1]
        rows.append([p0[0], p0[1], p1[0], p1[1], np.linalg.norm(p1 - p0),
                     g.w0, g.z, g.zR])
    r = pd.DataFrame(rows, columns=['x0', 'y0', 'x1', 'y1', 'len',
                                    'w0', 'z', 'zR'])
    r.index.names = ['seg']
    return r


def hits_series(result):
    """ return a |Series| of the hits mapping of a TraceResult """
    return pd.Series(result.hits, dtype=float)


def list_ray(ray):
    """ pretty print the path of a TracedRay """
    colHeader = "            X            Y           Len"
    print(colHeader)

    colFormats = "{:3d}: {:12.5f} {:12.5f} {:12.5g}"

    path = ray.path
    for i, p in enumerate(path):
        dst = np.linalg.norm(path[i+1] - p) if i+1 < len(path) else 0.
        print(colFormats.format(i, p[0], p[1], dst))
    print(f"fate: {ray.fate}, intensity: {ray.intensity:.4g}")
