"""Static lookup tables consumed by the ranker and the preference store."""

from stylematch.scoring.constants.project_types import (
    PROJECT_TYPES,
    ProjectType,
    clean_project_types,
    project_type_label,
)
from stylematch.scoring.constants.style_keywords import STYLE_KEYWORDS, get_style_keywords

__all__ = [
    "PROJECT_TYPES",
    "ProjectType",
    "clean_project_types",
    "project_type_label",
    "STYLE_KEYWORDS",
    "get_style_keywords",
]
