"""Type classification for props crossing the client boundary."""

from .builtins import is_allowlisted
from .core import classify, classify_shape
from .naming import is_action_name, is_error_boundary_path, is_excepted_function

__all__ = [
    "classify",
    "classify_shape",
    "is_action_name",
    "is_allowlisted",
    "is_error_boundary_path",
    "is_excepted_function",
]
