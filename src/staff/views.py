"""
Read side of the staff directory: search/filter over the member list and
the option lists offered by the add-member form.
"""
from typing import Any, Dict, List

from staff.domain.domain import DESIGNATIONS, LOCATION_TYPES, StaffMember

ALL = "All"


def filter_staff(members: List[StaffMember], query: str = "", location_type: str = ALL) -> List[StaffMember]:
    """
    Keep members matching the search text and location filter, in input order.

    The search text matches name, role or location name, case-insensitively.
    """
    query = (query or "").lower()

    def matches(member: StaffMember) -> bool:
        matches_search = (
            query in member.name.lower()
            or query in member.role.lower()
            or query in member.location_name.lower()
        )
        matches_filter = location_type == ALL or member.location_type == location_type
        return matches_search and matches_filter

    return [member for member in members if matches(member)]


def get_staff_options() -> Dict[str, Any]:
    return {
        "designations": list(DESIGNATIONS),
        "location_types": list(LOCATION_TYPES),
        "location_filters": [ALL] + LOCATION_TYPES,
    }
