#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Copyright © 2026 lightbench developers
""" Module for optical element modeling

    Each element kind is an immutable record holding its position, its
    rotation (degrees) and the kind specific parameters, with defaults
    resolved when the record is built. Every element knows how to place
    its boundary primitives in the scene, via :meth:`boundaries`.

    The set of kinds is closed: :data:`element_classes` maps each kind name
    to its class and is used by the factory functions and by the ray
    tracer's interaction table.

.. Created on Wed Mar  4 09:17:36 2026

.. codeauthor: lightbench developers
"""

import logging
from math import sqrt
from typing import ClassVar

import attr

from lightbench.elem import transform as trns
from lightbench.elem.profiles import Segment, Arc

logger = logging.getLogger(__name__)

N_GLASS = 1.5
LENS_THICKNESS = 15.0
LENS_HALF_APERTURE = 40.0
LENS_SHAPES = ('convex', 'concave', 'plano-convex', 'plano-concave')

# largest iris opening, the length of the blade segment
MAX_APERTURE = 64.0


def _to_pos(pos):
    return float(pos[0]), float(pos[1])


def _to_ratio(x):
    return min(max(float(x), 0.0), 1.0)


def _segment(tfrm, p1, p2, normal=None):
    """ Build a world Segment from a local template. """
    n = None if normal is None else trns.transform_dir(tfrm, normal)
    return Segment(trns.transform_point(tfrm, p1),
                   trns.transform_point(tfrm, p2), n)


def _vertical_segment(tfrm, x, half_width, normal=(1., 0.)):
    return _segment(tfrm, (x, -half_width), (x, half_width), normal)


@attr.s(frozen=True)
class Element:
    """ Base class for optical elements.

    Attributes:
        id: identity of the element, used as the key for accumulated power
        position: (x, y) of the element center
        rotation: orientation in degrees; at 0 the element front faces +x
    """
    kind: ClassVar[str] = ''

    id = attr.ib(converter=str)
    position = attr.ib(converter=_to_pos, default=(0., 0.))
    rotation = attr.ib(converter=float, default=0.0)

    def tfrm(self):
        """ Return the local to world transform (rot, t). """
        return trns.forward_transform(self.position, self.rotation)

    def boundaries(self, n_glass=N_GLASS):
        """ Return the tuple of boundary primitives in world coordinates. """
        return ()


@attr.s(frozen=True)
class Source(Element):
    """ A laser source.

    The core ray carries `power`; when `glow` is positive, two side rays
    offset 2.5 across the beam carry `glow` each. `polarization` is the
    linear polarization angle in table coordinates; turning the source
    does not turn its polarization.
    """
    kind: ClassVar[str] = 'source'
    GLOW_OFFSET: ClassVar[float] = 2.5

    power = attr.ib(converter=float, default=1.0)
    glow = attr.ib(converter=float, default=0.4)
    polarization = attr.ib(converter=float, default=0.0)
    color = attr.ib(converter=str, default='#ff0000')
    waist_diameter = attr.ib(converter=float, default=2.0)
    wavelength = attr.ib(converter=float, default=633e-6)

    @wavelength.validator
    def _check_wavelength(self, attribute, value):
        if not value > 0.0:
            raise ValueError("source wavelength must be positive")


@attr.s(frozen=True)
class Mirror(Element):
    kind: ClassVar[str] = 'mirror'
    HALF_WIDTH: ClassVar[float] = 50.0

    reflectivity = attr.ib(converter=_to_ratio, default=1.0)

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., self.HALF_WIDTH),)


@attr.s(frozen=True)
class Lens(Element):
    """ A singlet lens modeled as a glass body with two faces.

    The radius of curvature follows from the lensmaker's equation for a
    thin lens: R = 2(n-1)f for symmetric shapes and R = (n-1)f for plano
    shapes. Faces are circular arcs (flat for the plano side) and flat rims
    close the body where the faces don't meet.
    """
    kind: ClassVar[str] = 'lens'

    focal_length = attr.ib(converter=lambda f: abs(float(f)), default=100.0)
    shape = attr.ib(default='convex',
                    validator=attr.validators.in_(LENS_SHAPES))

    @focal_length.validator
    def _check_focal_length(self, attribute, value):
        if value == 0.0:
            raise ValueError("lens focal length must be non-zero")

    @property
    def is_diverging(self):
        return self.shape in ('concave', 'plano-concave')

    def signed_focal_length(self):
        """ Focal length, negative for diverging shapes. """
        return -self.focal_length if self.is_diverging else self.focal_length

    def radius_of_curvature(self, n_glass=N_GLASS):
        if self.shape.startswith('plano'):
            return (n_glass - 1)*self.focal_length
        return 2*(n_glass - 1)*self.focal_length

    def boundaries(self, n_glass=N_GLASS):
        tfrm = self.tfrm()
        R = self.radius_of_curvature(n_glass)
        T = LENS_THICKNESS
        h = min(LENS_HALF_APERTURE, R)
        faces = []

        if self.shape == 'convex':
            cx = R - T/2
            if cx > 0:
                h = min(h, sqrt(R*R - cx*cx))
            faces.append(((cx, 0.), (-1., 0.), 1))
            faces.append(((-cx, 0.), (1., 0.), 1))
        elif self.shape == 'concave':
            faces.append(((-R - T/2, 0.), (1., 0.), -1))
            faces.append(((R + T/2, 0.), (-1., 0.), -1))
        elif self.shape == 'plano-convex':
            cx = -R + T/2
            if R > T:
                h = min(h, sqrt(R*R - (R - T)**2))
            faces.append(None)
            faces.append(((cx, 0.), (1., 0.), 1))
        else:  # plano-concave
            faces.append(None)
            faces.append(((R + T/2, 0.), (-1., 0.), -1))

        bnds = []
        edges = []
        for face in faces:
            if face is None:
                bnds.append(_vertical_segment(tfrm, -T/2, h, normal=(-1., 0.)))
                edges.append(-T/2)
            else:
                center, vertex_dir, flip = face
                arc = Arc(trns.transform_point(tfrm, center), R,
                          trns.transform_dir(tfrm, vertex_dir), h, flip)
                bnds.append(arc)
                end = trns.inverse_transform(tfrm, arc.end_points()[0])
                edges.append(end[0])

        # rims at +/-h between the ends of the two faces
        x_left, x_right = edges
        if x_right - x_left > 1e-9:
            bnds.append(_segment(tfrm, (x_left, h), (x_right, h), (0., 1.)))
            bnds.append(_segment(tfrm, (x_left, -h), (x_right, -h),
                                 (0., -1.)))
        return tuple(bnds)


@attr.s(frozen=True)
class BeamSplitter(Element):
    kind: ClassVar[str] = 'beamsplitter'
    HALF_SIZE: ClassVar[float] = 30.0

    transmission = attr.ib(converter=_to_ratio, default=0.5)

    def boundaries(self, n_glass=N_GLASS):
        hs = self.HALF_SIZE
        return (_segment(self.tfrm(), (-hs, hs), (hs, -hs)),)


@attr.s(frozen=True)
class PolarizingBeamSplitter(Element):
    """ A polarizing cube; `axis` is the transmitted polarization. """
    kind: ClassVar[str] = 'pbs'
    HALF_SIZE: ClassVar[float] = 30.0

    axis = attr.ib(converter=float, default=0.0)

    def boundaries(self, n_glass=N_GLASS):
        hs = self.HALF_SIZE
        return (_segment(self.tfrm(), (-hs, hs), (hs, -hs)),)


@attr.s(frozen=True)
class ApertureStop(Element):
    """ An iris; `aperture` is the diameter of the clear opening. """
    kind: ClassVar[str] = 'aperture'

    aperture = attr.ib(converter=float, default=40.0)

    @property
    def clear_radius(self):
        return min(self.aperture, MAX_APERTURE)/2

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., MAX_APERTURE/2),)


@attr.s(frozen=True)
class Detector(Element):
    kind: ClassVar[str] = 'detector'
    HALF_WIDTH: ClassVar[float] = 40.0

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., self.HALF_WIDTH),)


@attr.s(frozen=True)
class PolarizationDetector(Detector):
    kind: ClassVar[str] = 'poldetector'


@attr.s(frozen=True)
class AcoustoOpticModulator(Element):
    """ An AOM; `deviation` is the 1st order deflection in degrees. """
    kind: ClassVar[str] = 'aom'
    HALF_WIDTH: ClassVar[float] = 40.0

    efficiency = attr.ib(converter=_to_ratio, default=0.5)
    deviation = attr.ib(converter=float, default=5.0)

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., self.HALF_WIDTH),)


@attr.s(frozen=True)
class FiberCoupler(Element):
    """ A fiber coupler whose coupling face sits in front of its center.

    The face normal points back toward the incoming light, i.e. local -x.
    `acceptance_angle` is the half angle in degrees, `core_size` the core
    diameter.
    """
    kind: ClassVar[str] = 'fiber'
    FACE_X: ClassVar[float] = -16.0
    HALF_WIDTH: ClassVar[float] = 30.0

    acceptance_angle = attr.ib(converter=float, default=15.0)
    core_size = attr.ib(converter=float, default=12.0)

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), self.FACE_X, self.HALF_WIDTH,
                                  normal=(-1., 0.)),)


@attr.s(frozen=True)
class CavityMirrorPair(Element):
    """ Two parallel partial mirrors `cavity_length` apart. """
    kind: ClassVar[str] = 'cavity'
    HALF_HEIGHT: ClassVar[float] = 40.0

    reflectivity = attr.ib(converter=_to_ratio, default=0.95)
    cavity_length = attr.ib(converter=float, default=100.0)

    def boundaries(self, n_glass=N_GLASS):
        tfrm = self.tfrm()
        half_len = self.cavity_length/2
        # normals point into the cavity
        return (_vertical_segment(tfrm, -half_len, self.HALF_HEIGHT,
                                  normal=(1., 0.)),
                _vertical_segment(tfrm, half_len, self.HALF_HEIGHT,
                                  normal=(-1., 0.)))


@attr.s(frozen=True)
class HalfWavePlate(Element):
    kind: ClassVar[str] = 'hwp'
    HALF_WIDTH: ClassVar[float] = 30.0

    fast_axis = attr.ib(converter=float, default=0.0)

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., self.HALF_WIDTH),)


@attr.s(frozen=True)
class QuarterWavePlate(HalfWavePlate):
    kind: ClassVar[str] = 'qwp'

    fast_axis = attr.ib(converter=float, default=45.0)


@attr.s(frozen=True)
class Polarizer(Element):
    kind: ClassVar[str] = 'polarizer'
    HALF_WIDTH: ClassVar[float] = 30.0

    axis = attr.ib(converter=float, default=0.0)

    def boundaries(self, n_glass=N_GLASS):
        return (_vertical_segment(self.tfrm(), 0., self.HALF_WIDTH),)


element_classes = {cls.kind: cls for cls in (
    Source, Mirror, Lens, BeamSplitter, PolarizingBeamSplitter,
    ApertureStop, Detector, PolarizationDetector, AcoustoOpticModulator,
    FiberCoupler, CavityMirrorPair, HalfWavePlate, QuarterWavePlate,
    Polarizer)}


# --- Factory functions
def create_element(kind, id, position=(0., 0.), rotation=0.0, **params):
    """ Create an element of the given kind.

    Raises:
        ValueError: if `kind` is not a known element kind
    """
    try:
        cls = element_classes[kind]
    except KeyError:
        raise ValueError(f"unknown element kind: '{kind}'") from None
    return cls(id, position, rotation, **params)


def create_blocker(id, position=(0., 0.), rotation=0.0):
    """ An aperture stop with no opening. """
    return ApertureStop(id, position, rotation, aperture=0.0)


# editor component types that map onto another element kind
type_aliases = {
    'laser': 'source',
    'iris': 'aperture',
    'blocker': 'aperture',
    }

# editor components the tracer passes over
passive_types = {'text', 'breadboard', 'vaporcell', 'camera', 'emccd'}

# editor parameter names, per element kind
param_keys = {
    'source': {'brightness': 'power', 'power': 'power', 'glow': 'glow',
               'polarization': 'polarization', 'color': 'color',
               'waistDiameter': 'waist_diameter',
               'wavelength': 'wavelength'},
    'mirror': {'reflectivity': 'reflectivity'},
    'lens': {'focalLength': 'focal_length', 'lensShape': 'shape'},
    'beamsplitter': {'transmission': 'transmission'},
    'pbs': {'pbsAxis': 'axis'},
    'aperture': {'aperture': 'aperture'},
    'detector': {},
    'poldetector': {},
    'aom': {'efficiency': 'efficiency', 'deviation': 'deviation'},
    'fiber': {'acceptanceAngle': 'acceptance_angle', 'coreSize': 'core_size'},
    'cavity': {'reflectivity': 'reflectivity',
               'cavityLength': 'cavity_length'},
    'hwp': {'fastAxis': 'fast_axis'},
    'qwp': {'fastAxis': 'fast_axis'},
    'polarizer': {'polarizerAxis': 'axis'},
    }


def element_from_dict(item):
    """ Convert an editor component dict into an element record.

    Returns None for passive components.

    Raises:
        ValueError: if the component type is unknown
    """
    comp_type = item['type']
    if comp_type in passive_types:
        logger.info("skipping passive component %s (%s)",
                    item.get('id'), comp_type)
        return None

    kind = type_aliases.get(comp_type, comp_type)
    if kind not in element_classes:
        raise ValueError(f"unknown component type: '{comp_type}'")

    pos = item.get('position', {})
    position = pos.get('x', 0.), pos.get('y', 0.)
    rotation = item.get('rotation', 0.) or 0.

    params = {}
    src_params = item.get('params') or {}
    for key, attr_name in param_keys[kind].items():
        value = src_params.get(key)
        if value is not None and attr_name not in params:
            params[attr_name] = value

    if kind == 'lens' and not params.get('focal_length'):
        params.pop('focal_length', None)
    if comp_type == 'blocker':
        params.setdefault('aperture', 0.0)

    return create_element(kind, item['id'], position, rotation, **params)


def elements_from_dicts(items):
    """ Convert a list of editor component dicts into element records. """
    elements = []
    for item in items:
        ele = element_from_dict(item)
        if ele is not None:
            elements.append(ele)
    return elements
