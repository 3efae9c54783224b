"""Utility modules for the Content Consistency Grader."""

from .data_prep import export_to_json, load_content_set, parse_platform_args, prepare_export

__all__ = [
    "export_to_json",
    "load_content_set",
    "parse_platform_args",
    "prepare_export",
]
