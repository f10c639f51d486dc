"""Controller definition: the schema of every control an emulated device exposes"""
import logging
from types import MappingProxyType
from typing import List, Mapping, MutableMapping, Optional, Sequence, Tuple, Union

from core.constraints import apply_axis_constraints
from core.players import player_number
from core.state import AxisConstraint, CircularConstraint, FloatRange

LOG = logging.getLogger("padschema.definition")


class ControllerDefinition:
    """Boolean buttons, float controls with their ranges, axis constraints and
    category labels for one controller layout.

    ``float_controls`` and ``float_ranges`` are index aligned; keep them that
    way by adding both through ``add_float_control``.
    """

    def __init__(self, name: Optional[str] = None):
        self.name = name
        self._bool_buttons: List[str] = []
        self._float_controls: List[str] = []
        self._float_ranges: List[FloatRange] = []
        self._axis_constraints: List[AxisConstraint] = []
        self._category_labels = {}

    @classmethod
    def copy_of(cls, source: "ControllerDefinition") -> "ControllerDefinition":
        """New definition holding all of ``source``'s controls, without sharing storage."""
        definition = cls(source.name)
        definition._bool_buttons.extend(source._bool_buttons)
        definition._float_controls.extend(source._float_controls)
        definition._float_ranges.extend(source._float_ranges)
        definition._axis_constraints.extend(source._axis_constraints)
        definition._category_labels.update(source._category_labels)
        return definition

    def copy(self) -> "ControllerDefinition":
        return type(self).copy_of(self)

    def __repr__(self):
        return "<%s %r: %d buttons, %d float controls>" % (
            type(self).__name__, self.name, len(self._bool_buttons), len(self._float_controls))

    @property
    def bool_buttons(self) -> Tuple[str, ...]:
        return tuple(self._bool_buttons)

    @property
    def float_controls(self) -> Tuple[str, ...]:
        return tuple(self._float_controls)

    @property
    def float_ranges(self) -> Tuple[FloatRange, ...]:
        return tuple(self._float_ranges)

    @property
    def axis_constraints(self) -> Tuple[AxisConstraint, ...]:
        return tuple(self._axis_constraints)

    @property
    def category_labels(self) -> Mapping[str, str]:
        return MappingProxyType(self._category_labels)

    # -- setup --

    def add_bool_button(self, name: str):
        self._bool_buttons.append(name)

    def add_float_control(self, name: str, float_range: Union[FloatRange, Sequence[float]]):
        if not isinstance(float_range, FloatRange):
            float_range = FloatRange.from_values(float_range)
        self._float_controls.append(name)
        self._float_ranges.append(float_range)

    def add_axis_constraint(self, constraint: AxisConstraint):
        self._axis_constraints.append(constraint)

    def add_circular_constraint(self, constraint_class: str, x_axis: str, y_axis: str, radius: float):
        self.add_axis_constraint(CircularConstraint(constraint_class, x_axis, y_axis, radius))

    def set_category_label(self, control: str, label: str):
        self._category_labels[control] = label

    # -- queries --

    def has_any_controls(self) -> bool:
        return bool(self._bool_buttons) or bool(self._float_controls)

    def float_range(self, control: str) -> Optional[FloatRange]:
        try:
            return self._float_ranges[self._float_controls.index(control)]
        except (ValueError, IndexError):
            return None

    def category_label(self, control: str, default: Optional[str] = None) -> Optional[str]:
        return self._category_labels.get(control, default)

    def apply_axis_constraints(self, constraint_class: str,
                               values: MutableMapping[str, float]) -> MutableMapping[str, float]:
        return apply_axis_constraints(self._axis_constraints, constraint_class, values)

    # -- player grouping --

    @staticmethod
    def player_number(control_name: str) -> int:
        return player_number(control_name)

    @property
    def player_count(self) -> int:
        all_names = self._float_controls + self._bool_buttons
        player = max((player_number(name) for name in all_names), default=0)
        if player > 0:
            return player

        # single-controller systems (handhelds, calculators) name their
        # buttons without a "P1 " prefix
        if any(name.startswith("Up") for name in all_names):
            return 1
        return 0

    def controls_ordered(self) -> List[List[str]]:
        """Controls grouped by owner: system controls first, then each player.

        Within a group float controls come before buttons, both in declared
        order. Subclasses may override this with their own layout as long as
        the result has ``player_count + 1`` groups covering every control once.
        """
        groups = [[] for _ in range(self.player_count + 1)]
        for name in self._float_controls + self._bool_buttons:
            groups[player_number(name)].append(name)
        LOG.debug("ordered %s into %d groups", self.name, len(groups))
        return groups

    def controls_for_player(self, player: int) -> List[str]:
        groups = self.controls_ordered()
        if 0 <= player < len(groups):
            return groups[player]
        return []
