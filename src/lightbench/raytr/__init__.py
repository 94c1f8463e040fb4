""" Package for optical ray tracing and calculations

    The :mod:`~.raytr` subpackage provides core classes and functions
    for non-sequential ray tracing of a flat optical scene. These include:

        - Trace configuration: bounce budget, ray cap and intensity floor,
          :mod:`~.tracespec`
        - The per-branch interaction state machine, :mod:`~.raytrace`
        - Seeding, scheduling and accumulation of a whole scene, plus
          tabular views of the results, :mod:`~.trace`
        - Exception classes signalling the end of a ray branch,
          :mod:`~.traceerror`

    The entry point is :func:`~.trace.compute`.
"""

from collections import namedtuple

from lightbench.parax.gaussbeam import GaussParams  # noqa: F401

PendingRay = namedtuple('PendingRay', ['origin', 'direction', 'intensity',
                                       'jones', 'gauss', 'color',
                                       'bounces_left'])
PendingRay.__doc__ = "A ray branch waiting to be traced"
PendingRay.origin.__doc__ = "start point of the branch"
PendingRay.direction.__doc__ = "unit direction of the branch"
PendingRay.intensity.__doc__ = "scalar intensity, >= 0"
PendingRay.jones.__doc__ = "unit Jones vector of the polarization state"
PendingRay.gauss.__doc__ = "GaussParams at the start point"
PendingRay.color.__doc__ = "color tag inherited from the source"
PendingRay.bounces_left.__doc__ = "remaining traversal steps for the branch"

HitRecord = namedtuple('HitRecord', ['t', 'pt', 'normal', 'kind', 'element',
                                     'entering'], defaults=(None,))
HitRecord.__doc__ = "The nearest interaction found for one trace step"
HitRecord.t.__doc__ = "distance along the ray to the point of incidence"
HitRecord.pt.__doc__ = "the point of incidence"
HitRecord.normal.__doc__ = "boundary normal, facing the incoming ray"
HitRecord.kind.__doc__ = "interaction tag, see lightbench.typing.HitKind"
HitRecord.element.__doc__ = "the element that was struck"
HitRecord.entering.__doc__ = "for lens surfaces, True if entering the glass"

TracedRay = namedtuple('TracedRay', ['path', 'intensity', 'color', 'jones',
                                     'gauss_list', 'fate'])
TracedRay.__doc__ = "The finished record of one ray branch"
TracedRay.path.__doc__ = "(N, 2) array of points along the branch"
TracedRay.intensity.__doc__ = "intensity the branch started with"
TracedRay.color.__doc__ = "color tag of the branch"
TracedRay.jones.__doc__ = "Jones vector the branch started with"
TracedRay.gauss_list.__doc__ = "GaussParams at the start of each segment"
TracedRay.fate.__doc__ = "how the branch ended, see lightbench.typing.RayFate"

TraceResult = namedtuple('TraceResult', ['rays', 'hits', 'hit_colors'])
TraceResult.__doc__ = "Everything computed for one scene"
TraceResult.rays.__doc__ = "list of TracedRays, in trace order"
TraceResult.hits.__doc__ = ("accumulated power by element id, plus "
                            "'<id>_pol' and '<id>_ellipticity' read-outs")
TraceResult.hit_colors.__doc__ = "color tag by element id, for fibers"
