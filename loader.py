"""Definition loader: build a ControllerDefinition from a YAML declaration

Example document::

    name: N64 Controller
    bool_buttons: [P1 A, P1 B, P1 Start]
    float_controls:
      - {name: P1 X Axis, range: [-128, 0, 127]}
      - {name: P1 Y Axis, range: [127, 0, -128]}
    axis_constraints:
      - {class: Natural Circle, type: circular, x_axis: P1 X Axis, y_axis: P1 Y Axis, radius: 127}
    category_labels:
      P1 A: Face Buttons
"""
import logging

import yaml

from core.definition import ControllerDefinition
from core.state import AxisConstraintType, CircularConstraint

LOG = logging.getLogger("padschema.loader")


class DefinitionError(ValueError):
    """Raised when a definition document is malformed."""


def _list_entry(data: dict, key: str) -> list:
    value = data.get(key) or []
    if not isinstance(value, list):
        raise DefinitionError("%s must be a list, got %r" % (key, value))
    return value


def _constraint_from_dict(entry: dict):
    if not isinstance(entry, dict):
        raise DefinitionError("axis constraint must be a mapping, got %r" % (entry,))
    kind = str(entry.get("type", "")).lower()
    try:
        kind = AxisConstraintType(kind)
    except ValueError:
        raise DefinitionError("unknown axis constraint type %r in %r" % (entry.get("type"), entry)) from None

    if kind is AxisConstraintType.CIRCULAR:
        missing = [k for k in ("class", "x_axis", "y_axis", "radius") if k not in entry]
        if missing:
            raise DefinitionError("circular constraint %r missing %s" % (entry, ", ".join(missing)))
        try:
            radius = float(entry["radius"])
        except (TypeError, ValueError):
            raise DefinitionError("circular constraint radius must be a number: %r" % (entry,)) from None
        return CircularConstraint(str(entry["class"]), str(entry["x_axis"]), str(entry["y_axis"]), radius)

    raise DefinitionError("unsupported axis constraint type %r" % kind)


def definition_from_dict(data: dict) -> ControllerDefinition:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DefinitionError("definition document must be a mapping, got %s" % type(data).__name__)

    definition = ControllerDefinition(data.get("name"))

    for button in _list_entry(data, "bool_buttons"):
        definition.add_bool_button(str(button))

    for entry in _list_entry(data, "float_controls"):
        if not isinstance(entry, dict) or "name" not in entry or "range" not in entry:
            raise DefinitionError("float control needs 'name' and 'range': %r" % (entry,))
        if not isinstance(entry["range"], (list, tuple)):
            raise DefinitionError("range for float control %r must be a list [min, mid, max]: %r"
                                  % (entry["name"], entry["range"]))
        try:
            definition.add_float_control(str(entry["name"]), entry["range"])
        except (TypeError, ValueError) as e:
            raise DefinitionError("bad range for float control %r: %s" % (entry["name"], e)) from e

    for entry in _list_entry(data, "axis_constraints"):
        definition.add_axis_constraint(_constraint_from_dict(entry))

    labels = data.get("category_labels") or {}
    if not isinstance(labels, dict):
        raise DefinitionError("category_labels must be a mapping")
    for control, label in labels.items():
        definition.set_category_label(str(control), str(label))

    LOG.debug("loaded definition %r", definition)
    return definition


def load_definition(path: str) -> ControllerDefinition:
    LOG.info("loading controller definition from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise DefinitionError("could not parse %s: %s" % (path, e)) from e
    return definition_from_dict(data)
