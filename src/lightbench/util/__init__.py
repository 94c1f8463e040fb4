""" package supplying utility functions for math and numpy support

    The :mod:`~lightbench.util` subpackage provides the 2d vector kernel
    used throughout the engine: normalization, rotations, reflection and
    finiteness checks, in :mod:`~.misc_math`. Complex arithmetic for
    polarization states is done directly with numpy's complex128 type.
"""
