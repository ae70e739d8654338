"""Start-up case data."""

from .loader import CaseWorld, build_case_world, load_case_file, load_case_world
from .mansion import MANSION_CASE

__all__ = [
    "CaseWorld",
    "MANSION_CASE",
    "build_case_world",
    "load_case_file",
    "load_case_world",
]
