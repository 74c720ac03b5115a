"""DCDirectory Record Mutation Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from dcdirectory_core.mutation.paths import normalize_path, get_path, set_path
from dcdirectory_core.mutation.setters import (
    set_name,
    set_location,
    set_city,
    set_country,
    set_description,
    set_tier,
    set_total_space,
    set_power,
    set_cooling,
    set_capacity_used,
    set_capacity_status,
    set_available_racks,
    set_uptime,
    FormField,
    FORM_FIELDS,
    form_field,
    apply_form_edit,
)

__all__ = [
    "normalize_path",
    "get_path",
    "set_path",
    "set_name",
    "set_location",
    "set_city",
    "set_country",
    "set_description",
    "set_tier",
    "set_total_space",
    "set_power",
    "set_cooling",
    "set_capacity_used",
    "set_capacity_status",
    "set_available_racks",
    "set_uptime",
    "FormField",
    "FORM_FIELDS",
    "form_field",
    "apply_form_edit",
]
