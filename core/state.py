"""Value types for controller definitions: float ranges and axis constraints"""
import enum
from dataclasses import dataclass
from typing import Sequence, Tuple, Union


@dataclass(frozen=True)
class FloatRange:
    min: float
    mid: float  # neutral / default position
    max: float

    @classmethod
    def from_values(cls, values: Sequence[float]) -> "FloatRange":
        """Build a range from a terse ``(min, mid, max)`` literal."""
        values = list(values)
        if len(values) != 3:
            raise ValueError(
                "float range needs exactly 3 values (min, mid, max), got %d" % len(values)
            )
        return cls(float(values[0]), float(values[1]), float(values[2]))

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.min, self.mid, self.max)

    def max_digits(self) -> int:
        """Widest decimal representation of either bound.

        Sign and fractional part are dropped, analog devices report integers anyway.
        """
        return max(len(str(abs(int(self.min)))), len(str(abs(int(self.max)))))


class AxisConstraintType(enum.Enum):
    CIRCULAR = "circular"


@dataclass(frozen=True)
class CircularConstraint:
    """Clamp the (x_axis, y_axis) vector to a circle of ``radius``."""
    constraint_class: str
    x_axis: str
    y_axis: str
    radius: float

    @property
    def kind(self) -> AxisConstraintType:
        return AxisConstraintType.CIRCULAR


AxisConstraint = Union[CircularConstraint]
