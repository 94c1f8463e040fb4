#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Mar  9 14:02:18 2026

@author: lightbench developers
"""


import unittest
import pytest
from pytest import approx
import numpy as np
import numpy.testing as npt

import lightbench.elem.elements as ele
from lightbench.elem.profiles import Arc, Segment
from lightbench.typing import ElementKind
from typing import get_args


class ElementGeometryTestCase(unittest.TestCase):

    def test_mirror_template(self):
        m = ele.Mirror('m1', (100., 0.))
        bnds = m.boundaries()
        assert len(bnds) == 1
        npt.assert_allclose(bnds[0].p1, [100., -50.])
        npt.assert_allclose(bnds[0].p2, [100., 50.])
        npt.assert_allclose(bnds[0].normal, [1., 0.])

    def test_rotated_mirror(self):
        m = ele.Mirror('m1', (100., 0.), 90.)
        s = m.boundaries()[0]
        npt.assert_allclose(s.p1, [150., 0.], atol=1e-12)
        npt.assert_allclose(s.p2, [50., 0.], atol=1e-12)
        npt.assert_allclose(s.normal, [0., 1.], atol=1e-12)

    def test_fiber_face(self):
        f = ele.FiberCoupler('f1', (100., 0.))
        s = f.boundaries()[0]
        npt.assert_allclose(s.midpoint, [84., 0.])
        npt.assert_allclose(s.normal, [-1., 0.])

    def test_cavity_normals_point_inward(self):
        c = ele.CavityMirrorPair('c1', (0., 0.))
        left, right = c.boundaries()
        npt.assert_allclose(left.midpoint, [-50., 0.])
        npt.assert_allclose(left.normal, [1., 0.])
        npt.assert_allclose(right.midpoint, [50., 0.])
        npt.assert_allclose(right.normal, [-1., 0.])

    def test_splitter_diagonal(self):
        bs = ele.BeamSplitter('bs1', (0., 0.))
        s = bs.boundaries()[0]
        npt.assert_allclose(s.p1, [-30., 30.])
        npt.assert_allclose(s.p2, [30., -30.])

    def test_source_has_no_boundaries(self):
        assert ele.Source('s1').boundaries() == ()

    def test_aperture_clear_radius(self):
        assert ele.ApertureStop('a1').clear_radius == approx(20.)
        assert ele.ApertureStop('a1', aperture=100.).clear_radius == \
            approx(32.)
        assert ele.create_blocker('b1').clear_radius == 0.


def vertex(arc):
    return arc.center + arc.radius*arc.vertex_dir


class LensGeometryTestCase(unittest.TestCase):

    def test_radius_of_curvature(self):
        assert ele.Lens('l1').radius_of_curvature() == approx(100.)
        pc = ele.Lens('l1', shape='plano-convex')
        assert pc.radius_of_curvature() == approx(50.)
        assert pc.radius_of_curvature(n_glass=2.0) == approx(100.)

    def test_convex_faces_meet(self):
        bnds = ele.Lens('l1', focal_length=100.).boundaries()
        assert len(bnds) == 2
        assert all(isinstance(b, Arc) for b in bnds)
        npt.assert_allclose(vertex(bnds[0]), [-7.5, 0.])
        npt.assert_allclose(vertex(bnds[1]), [7.5, 0.])
        assert bnds[0].half_height == approx(np.sqrt(100.**2 - 92.5**2))

    def test_concave_has_rims(self):
        bnds = ele.Lens('l1', shape='concave').boundaries()
        assert len(bnds) == 4
        arcs = [b for b in bnds if isinstance(b, Arc)]
        rims = [b for b in bnds if isinstance(b, Segment)]
        assert len(arcs) == 2 and len(rims) == 2
        npt.assert_allclose(vertex(arcs[0]), [-7.5, 0.])
        npt.assert_allclose(vertex(arcs[1]), [7.5, 0.])
        assert arcs[0].normal_flip == -1

    def test_rims_close_rotated_body(self):
        bnds = ele.Lens('l1', (50., 20.), 90., shape='concave').boundaries()
        arcs = [b for b in bnds if isinstance(b, Arc)]
        rims = [b for b in bnds if isinstance(b, Segment)]
        ends = np.array([p for a in arcs for p in a.end_points()])
        for rim in rims:
            for p in (rim.p1, rim.p2):
                gap = np.min(np.linalg.norm(ends - p, axis=1))
                assert gap == approx(0., abs=1e-9)
        npt.assert_allclose(vertex(arcs[0]), [50., 12.5], atol=1e-9)

    def test_plano_concave(self):
        bnds = ele.Lens('l1', shape='plano-concave').boundaries()
        flat = bnds[0]
        assert isinstance(flat, Segment)
        npt.assert_allclose(flat.midpoint, [-7.5, 0.])
        npt.assert_allclose(flat.normal, [-1., 0.])
        assert len(bnds) == 4

    def test_plano_convex(self):
        bnds = ele.Lens('l1', shape='plano-convex').boundaries()
        assert isinstance(bnds[0], Segment)
        assert isinstance(bnds[1], Arc)
        npt.assert_allclose(vertex(bnds[1]), [7.5, 0.])

    def test_signed_focal_length(self):
        assert ele.Lens('l1', focal_length=-80.).focal_length == 80.
        assert ele.Lens('l1').signed_focal_length() == 100.
        assert ele.Lens('l1', shape='concave').signed_focal_length() == -100.

    def test_bad_lens_parameters(self):
        with pytest.raises(ValueError):
            ele.Lens('l1', focal_length=0.)
        with pytest.raises(ValueError):
            ele.Lens('l1', shape='meniscus')


def test_defaults():
    s = ele.Source('s1')
    assert (s.power, s.glow, s.polarization) == (1.0, 0.4, 0.0)
    assert ele.Mirror('m1').reflectivity == 1.0
    assert ele.BeamSplitter('b1').transmission == 0.5
    assert ele.AcoustoOpticModulator('a1').efficiency == 0.5
    assert ele.AcoustoOpticModulator('a1').deviation == 5.0
    assert ele.FiberCoupler('f1').acceptance_angle == 15.0
    assert ele.FiberCoupler('f1').core_size == 12.0
    assert ele.CavityMirrorPair('c1').reflectivity == 0.95
    assert ele.HalfWavePlate('h1').fast_axis == 0.0
    assert ele.QuarterWavePlate('q1').fast_axis == 45.0


def test_ratios_are_clipped():
    assert ele.Mirror('m1', reflectivity=1.5).reflectivity == 1.0
    assert ele.BeamSplitter('b1', transmission=-0.2).transmission == 0.0


def test_source_wavelength_must_be_positive():
    with pytest.raises(ValueError):
        ele.Source('s1', wavelength=0.)


def test_element_classes_cover_all_kinds():
    assert set(ele.element_classes) == set(get_args(ElementKind))


def test_create_element():
    m = ele.create_element('mirror', 'm1', (10., 20.), 45., reflectivity=0.9)
    assert isinstance(m, ele.Mirror)
    assert m.position == (10., 20.)
    assert m.reflectivity == 0.9
    with pytest.raises(ValueError):
        ele.create_element('prism', 'p1')


class ElementFromDictTestCase(unittest.TestCase):

    def test_laser(self):
        src = ele.element_from_dict({
            'id': 'laser1', 'type': 'laser',
            'position': {'x': 10, 'y': -5}, 'rotation': 90,
            'params': {'brightness': 0.8, 'polarization': 30,
                       'color': '#00ff00'}})
        assert isinstance(src, ele.Source)
        assert src.position == (10., -5.)
        assert src.rotation == 90.
        assert src.power == 0.8
        assert src.polarization == 30.
        assert src.color == '#00ff00'
        assert src.glow == 0.4

    def test_iris_and_blocker(self):
        iris = ele.element_from_dict({'id': 'i1', 'type': 'iris',
                                      'params': {'aperture': 20}})
        assert isinstance(iris, ele.ApertureStop)
        assert iris.aperture == 20.
        blk = ele.element_from_dict({'id': 'b1', 'type': 'blocker'})
        assert isinstance(blk, ele.ApertureStop)
        assert blk.aperture == 0.

    def test_lens_zero_focal_length_uses_default(self):
        lens = ele.element_from_dict({'id': 'l1', 'type': 'lens',
                                      'params': {'focalLength': 0,
                                                 'lensShape': 'concave'}})
        assert lens.focal_length == 100.
        assert lens.shape == 'concave'

    def test_missing_params(self):
        wp = ele.element_from_dict({'id': 'q1', 'type': 'qwp',
                                    'params': {'fastAxis': None}})
        assert wp.fast_axis == 45.

    def test_decorative_and_unknown(self):
        assert ele.element_from_dict({'id': 't1', 'type': 'text'}) is None
        with pytest.raises(ValueError):
            ele.element_from_dict({'id': 'w1', 'type': 'widget'})

    def test_elements_from_dicts(self):
        items = [{'id': 'bb', 'type': 'breadboard'},
                 {'id': 'src', 'type': 'laser'},
                 {'id': 'det', 'type': 'detector',
                  'position': {'x': 100, 'y': 0}}]
        elements = ele.elements_from_dicts(items)
        assert [e.id for e in elements] == ['src', 'det']

    def test_palette_instruments_are_skipped(self):
        items = [{'id': 'src', 'type': 'laser'},
                 {'id': 'vc1', 'type': 'vaporcell',
                  'position': {'x': 100, 'y': 0}, 'params': {}},
                 {'id': 'cam1', 'type': 'camera',
                  'position': {'x': 200, 'y': 0}},
                 {'id': 'em1', 'type': 'emccd',
                  'position': {'x': 300, 'y': 0}}]
        elements = ele.elements_from_dicts(items)
        assert [e.id for e in elements] == ['src']


if __name__ == '__main__':
    unittest.main(verbosity=2)
