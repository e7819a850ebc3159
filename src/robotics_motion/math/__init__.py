"""Import definitions relating to general mathematical operations."""

from .intervals import ClosedInterval as ClosedInterval
from .hermite import MIN_INTERVAL_S as MIN_INTERVAL_S
from .hermite import cubic_hermite as cubic_hermite
