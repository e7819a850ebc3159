"""Import definitions used for input/output, configuration, and logging."""

from .logging import console as console
from .logging import log_debug as log_debug
from .logging import log_info as log_info
