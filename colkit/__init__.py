"""colkit: shape irregular text into aligned columns, CSV, JSON, HTML or YAML."""
from .config import Configuration, OutputFormat
from .errors import (ColkitError, ConfigurationError, InvalidColumnSelector,
                     InvalidPattern, MissingHeaderForTitleColumn)
from .pipeline import format_lines

__version__ = "0.3.0"

__all__ = [
    "Configuration", "OutputFormat", "format_lines",
    "ColkitError", "ConfigurationError", "InvalidColumnSelector",
    "InvalidPattern", "MissingHeaderForTitleColumn",
]
