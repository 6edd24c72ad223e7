"""Type manifest loading: modules, entities and resolved field shapes."""

from .loader import load_manifest, parse_manifest
from .shapes import build_shape

__all__ = ["build_shape", "load_manifest", "parse_manifest"]
