"""Define the exceptions raised when motion data violates its invariants."""


class MotionDataError(Exception):
    """Base class for all errors raised by robotics_motion."""


class InvariantViolationError(MotionDataError, ValueError):
    """An error raised when a value cannot be constructed without breaking an invariant."""


class JointNotFoundError(MotionDataError, KeyError):
    """An error raised when a joint name is absent from a joint set."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class NumericDegeneracyError(MotionDataError, ArithmeticError):
    """An error raised when a numeric operation has no well-defined result."""


class FrameMismatchError(NumericDegeneracyError):
    """An error raised when poses in different reference frames are combined."""


class RangeViolationError(MotionDataError, IndexError):
    """An error raised when an index range or scaling factor is out of bounds."""
