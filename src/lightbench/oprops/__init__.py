""" Package for optical properties applied at element interactions

    The :mod:`~.oprops` subpackage provides the Jones vector polarization
    calculus, :mod:`~.jones`, used by wave plates, polarizers, polarizing
    beam splitters and polarization detectors.
"""
