#!/usr/bin/env python3
# -*- coding: utf-8 -*-
""" type hints for lightbench

Created on Mon Mar  2 09:44:02 2026

.. codeauthor: lightbench developers
"""
from typing import Literal

ElementKind = Literal['source', 'mirror', 'lens', 'beamsplitter', 'pbs',
                      'aperture', 'detector', 'poldetector', 'aom', 'fiber',
                      'cavity', 'hwp', 'qwp', 'polarizer']

LensShape = Literal['convex', 'concave', 'plano-convex', 'plano-concave']

# interaction tags carried by a HitRecord; 'blocker' is produced by aperture
# stops and by fiber couplers hit off-core or from behind
HitKind = Literal['mirror', 'detector', 'lens', 'beamsplitter', 'pbs',
                  'blocker', 'poldetector', 'aom', 'fiber', 'cavity',
                  'hwp', 'qwp', 'polarizer']

RayFate = Literal['escaped', 'absorbed', 'coupled', 'blocked', 'split',
                  'attenuated', 'invalid', 'exhausted']
