# Helpers shared by the core and the command line.
from . import columns, io, width
from . import logging as ULOG

__all__ = ["columns", "io", "width", "ULOG"]
