""" Package for optical element modeling and element geometry

    The :mod:`~.elem` subpackage provides:

        - the closed set of optical element records, with their defaults
          and boundary templates, :mod:`~.elements`
        - boundary primitives and ray intersection solvers,
          :mod:`~.profiles`
        - local to world transforms for element templates,
          :mod:`~.transform`
"""
