"""Axis constraint engine: apply geometric clamps to sampled float controls

Physical sticks often report a square range while the plastic gate only lets
them reach a circle. Constraints let a definition keep the full range and
optionally clamp samples down to what the real hardware could produce.
"""
import logging
import math
from typing import Iterable, MutableMapping

from core.state import AxisConstraint, CircularConstraint

LOG = logging.getLogger("padschema.constraints")


def _apply_circular(constraint: CircularConstraint, values: MutableMapping[str, float]):
    x_axis, y_axis = constraint.x_axis, constraint.y_axis
    if x_axis not in values or y_axis not in values:
        LOG.debug("skipping circular constraint %s/%s: axis not sampled", x_axis, y_axis)
        return

    x = float(values[x_axis])
    y = float(values[y_axis])
    radius = float(constraint.radius)
    length = math.sqrt(x * x + y * y)
    if length > radius:
        ratio = radius / length
        x *= ratio
        y *= ratio
        LOG.debug("clamped %s/%s from length %.4f to %.4f", x_axis, y_axis, length, radius)

    values[x_axis] = x
    values[y_axis] = y


def apply_axis_constraints(constraints: Iterable[AxisConstraint], constraint_class: str,
                           values: MutableMapping[str, float]) -> MutableMapping[str, float]:
    """Apply every constraint of ``constraint_class`` to ``values`` in place.

    Constraints run in declaration order, so a later constraint sees the
    output of an earlier one on the same axes. Keys are never added or removed.
    ``values`` is returned for convenience.
    """
    for constraint in constraints:
        if constraint.constraint_class != constraint_class:
            continue
        if isinstance(constraint, CircularConstraint):
            _apply_circular(constraint, values)
        else:
            LOG.warning("unsupported axis constraint %r", constraint)
    return values
