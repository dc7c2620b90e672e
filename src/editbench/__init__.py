"""editbench package."""
from importlib.metadata import version, PackageNotFoundError

from .distance import full_table_edit_distance, rolling_row_edit_distance

try:
    __version__ = version("editbench")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "full_table_edit_distance", "rolling_row_edit_distance"]
