"""
Project-type vocabulary.

The ranker treats project types as opaque strings and never validates them
against this table; an unknown type simply never matches. The table exists
for UI pickers and for normalising user input.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Set


@dataclass(frozen=True)
class ProjectType:
    id: str
    label: str
    description: str


# fmt: off
PROJECT_TYPES: Dict[str, ProjectType] = {
    p.id: p for p in (
        ProjectType("kitchen",     "Kitchen",          "Countertops, cabinets, appliances"),
        ProjectType("bathroom",    "Bathroom",         "Vanities, showers, tubs, tile"),
        ProjectType("outdoor",     "Outdoor",          "Patios, outdoor kitchens, BBQ"),
        ProjectType("flooring",    "Flooring",         "Tile, hardwood, stone flooring"),
        ProjectType("countertops", "Countertops Only", "Just the countertop surface"),
        ProjectType("plumbing",    "Plumbing",         "Pipes, fixtures, water systems"),
        ProjectType("electrical",  "Electrical",       "Wiring, outlets, lighting"),
        ProjectType("landscaping", "Landscaping",      "Gardens, lawns, hardscape"),
    )
}
# fmt: on


def clean_project_types(project_types: Iterable[str]) -> Set[str]:
    """Strip whitespace from user-supplied project types and drop blanks.

    Case is preserved: matching against content is exact.
    """
    return {p.strip() for p in project_types if p and p.strip()}


def project_type_label(project_type: str) -> str:
    """Display label, falling back to a capitalised id for unknown types."""
    known = PROJECT_TYPES.get(project_type)
    if known:
        return known.label
    return project_type[:1].upper() + project_type[1:]
