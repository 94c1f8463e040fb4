#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for vectors and matrices

These type hints give a consistent naming convention for the numpy arrays
passed around the engine.

The engine works in the plane, so only the 2D cases are provided, plus the
complex 2-vector used for Jones polarization states.

Vec2d is used for coordinates
Dir2d is used for vector directions, unit length
Mat2d is a 2 x 2 matrix
Tfm2d is used to package together a rotation matrix and translation vector
Jones2d is a complex 2-vector (Ex, Ey)

Created on Mon Mar  2 09:40:17 2026

.. codeauthor: lightbench developers
"""
import numpy.typing as npt

Vec2d = npt.NDArray
Dir2d = npt.NDArray
Mat2d = npt.NDArray
Tfm2d = tuple[Mat2d, Vec2d]
Jones2d = npt.NDArray

