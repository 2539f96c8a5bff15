"""Archive export utilities."""

from .export import combinations_to_frame, export_csv

__all__ = ["combinations_to_frame", "export_csv"]
