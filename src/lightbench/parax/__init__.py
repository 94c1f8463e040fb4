""" Package for paraxial optical calculations

    The :mod:`~.parax` subpackage tracks the Gaussian beam parameter along
    traced rays, :mod:`~.gaussbeam`: free space transfer, the thin lens
    transform of the complex beam parameter and beam radius read-out.
"""
