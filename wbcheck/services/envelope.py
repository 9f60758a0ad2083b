"""Point-in-envelope test for W&B centers of gravity.

Winding-number test via the complex logarithm: with the lever on the real
axis and the weight on the imaginary axis, summing
``log((v_i - p) / (v_{i-1} - p))`` over the closed polygon yields ``2*pi*i``
times the winding number of the boundary around ``p``. The real parts
telescope to zero, so the magnitude of the sum is ``2*pi`` for a point
inside the envelope and ``0`` for a point outside.

Points on the boundary are decided before any logarithm is taken: a point on
a vertex would otherwise need ``log(0)``, and a point on an edge sits exactly
on the branch cut of the principal logarithm.

Ref: https://www.linkedin.com/pulse/short-formula-check-given-point-lies-inside-outside-polygon-ziemecki/
"""

from __future__ import annotations

import cmath
import logging
import math

from wbcheck.contracts.aircraft import EnvelopePolygon
from wbcheck.contracts.enums import FailReason
from wbcheck.contracts.loading import WeightLeverPoint

logger = logging.getLogger(__name__)

# |sum| is 0 outside and 2*pi inside; any threshold in between classifies
# identically. 1.0 matches the values historically used by the checker.
WINDING_THRESHOLD = 1.0

# Relative tolerance on the cross product for the collinearity test
_COLLINEAR_REL_TOL = 1e-9


def _to_complex(point: WeightLeverPoint) -> complex:
    return complex(point.lever, point.weight)


def is_point_on_segment(
    point: WeightLeverPoint,
    start: WeightLeverPoint,
    end: WeightLeverPoint,
) -> bool:
    """True if *point* coincides with a vertex or lies strictly between them.

    Collinearity is tested on the cross product of the two vertex-relative
    vectors, scaled by their lengths, so that CG points obtained by floating
    point division still register on an oblique edge.
    """
    a_lever, a_weight = start.lever - point.lever, start.weight - point.weight
    b_lever, b_weight = end.lever - point.lever, end.weight - point.weight

    if (a_lever == 0 and a_weight == 0) or (b_lever == 0 and b_weight == 0):
        return True

    cross = a_lever * b_weight - b_lever * a_weight
    dot = a_lever * b_lever + a_weight * b_weight
    scale = math.hypot(a_lever, a_weight) * math.hypot(b_lever, b_weight)
    return abs(cross) <= _COLLINEAR_REL_TOL * scale and dot < 0


def is_on_boundary(point: WeightLeverPoint, polygon: EnvelopePolygon) -> bool:
    """True if *point* lies on any edge of *polygon*, closing edge included."""
    return any(is_point_on_segment(point, start, end) for start, end in polygon.edges())


def winding_sum(point: WeightLeverPoint, polygon: EnvelopePolygon) -> complex:
    """Accumulated complex logarithm of the edge ratios around *point*.

    The caller must make sure *point* is not on the boundary.
    """
    p = _to_complex(point)
    total = complex(0.0, 0.0)
    for start, end in polygon.edges():
        total += cmath.log((_to_complex(end) - p) / (_to_complex(start) - p))
    return total


def check_envelope(
    point: WeightLeverPoint,
    polygon: EnvelopePolygon,
    accept_boundary: bool,
    reason: FailReason = FailReason.TORQUE_OUT_OF_BOUNDS,
) -> FailReason | None:
    """Decide whether *point* lies inside *polygon*.

    Returns ``None`` when the point is inside (or on the boundary and
    *accept_boundary* is set), otherwise *reason*.
    """
    if is_on_boundary(point, polygon):
        logger.debug(
            "Point (%.2f, %.2f) on envelope edge, accept_boundary=%s",
            point.lever, point.weight, accept_boundary,
        )
        return None if accept_boundary else reason

    total = winding_sum(point, polygon)
    # NaN sums fall through to outside
    if not abs(total) > WINDING_THRESHOLD:
        logger.debug(
            "Point (%.2f, %.2f) outside envelope, |sum|=%.3f",
            point.lever, point.weight, abs(total),
        )
        return reason
    return None
