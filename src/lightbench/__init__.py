# -*- coding: utf-8 -*-
""" The **lightbench** 2d optical table ray tracing package

    A scene is a flat list of optical elements placed on a table. Light is
    traced from every source, through mirrors, lenses, splitters and
    polarization optics, until it escapes, is absorbed or runs out of its
    budget. The scene trace is supported by the following subpackages:

        - :mod:`~.elem`: element records, factories and boundary geometry
        - :mod:`~.oprops`: Jones calculus for polarization
        - :mod:`~.parax`: Gaussian beam propagation along traced rays
        - :mod:`~.raytr`: the interaction state machine and scene trace

    The :mod:`~.util` subpackage provides 2d vector math.

    Typical use::

        from lightbench.elem.elements import elements_from_dicts
        from lightbench.raytr.trace import compute

        result = compute(elements_from_dicts(components))
"""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    __version__ = 'unknown'


def listobj(obj):
    """ Print wrapper function for listobj_str() method of `obj`.

    Classes may implement the `listobj_str` method that returns a string
    containing a formatted description of the object, e.g.
    :meth:`.TraceSpec.listobj_str`.
    """
    try:
        print(obj.listobj_str())
    except AttributeError:
        print(repr(obj))
