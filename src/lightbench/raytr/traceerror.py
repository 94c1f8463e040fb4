#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Support for ray trace exception handling

    These exceptions end a single ray branch. They are raised and caught
    inside the interaction state machine; a scene trace never lets them
    escape to the caller.

.. Created on Thu Mar  5 10:02:47 2026

.. codeauthor: lightbench developers
"""


class TraceError(Exception):
    """ Exception raised when ray tracing a scene """


class TraceMissedSurfaceError(TraceError):
    """ Exception raised when ray misses every element """
    def __init__(self, pt=None, direction=None):
        self.pt = pt
        self.direction = direction


class TraceTIRError(TraceError):
    """ Exception raised when ray TIRs at an interface """
    def __init__(self, inc_dir, normal, n_in, n_out):
        self.inc_dir = inc_dir
        self.normal = normal
        self.n_in = n_in
        self.n_out = n_out


class TraceRayBlockedError(TraceError):
    """ Exception raised when ray is blocked by an element """
    def __init__(self, ele, int_pt):
        self.ele = ele
        self.int_pt = int_pt


class TraceInvalidRayError(TraceError):
    """ Exception raised when the ray origin or direction isn't finite """
    def __init__(self, pt, direction):
        self.pt = pt
        self.direction = direction
