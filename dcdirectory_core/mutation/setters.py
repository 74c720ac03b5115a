"""DCDirectory Field Setters - Typed Edits for the Admin Form.

One setter per editable leaf field. Each takes the whole record and an
already typed value and returns a new record with only that leaf changed.
``FORM_FIELDS`` is the closed set of form keys the admin surface accepts;
each entry parses the raw form value before calling its setter.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Tuple, Union

from dcdirectory_core.errors import PathError, RecordValidationError
from dcdirectory_core.mutation.paths import get_path, normalize_path
from dcdirectory_core.records.model import CapacityStatus, FacilityRecord, Quantity, Tier

logger = logging.getLogger(__name__)

Number = Union[int, float]


def _with_specifications(record: FacilityRecord, **changes: Any) -> FacilityRecord:
    return replace(record, specifications=replace(record.specifications, **changes))


def _with_capacity(record: FacilityRecord, **changes: Any) -> FacilityRecord:
    return replace(record, capacity=replace(record.capacity, **changes))


def _with_real_time_data(record: FacilityRecord, **changes: Any) -> FacilityRecord:
    return replace(record, real_time_data=replace(record.real_time_data, **changes))


def set_name(record: FacilityRecord, name: str) -> FacilityRecord:
    return replace(record, name=name)


def set_location(record: FacilityRecord, location: str) -> FacilityRecord:
    return replace(record, location=location)


def set_city(record: FacilityRecord, city: str) -> FacilityRecord:
    return replace(record, city=city)


def set_country(record: FacilityRecord, country: str) -> FacilityRecord:
    return replace(record, country=country)


def set_description(record: FacilityRecord, description: str) -> FacilityRecord:
    return replace(record, description=description)


def set_tier(record: FacilityRecord, tier: Tier) -> FacilityRecord:
    return replace(record, tier=tier)


def set_total_space(record: FacilityRecord, total_space: Quantity) -> FacilityRecord:
    return _with_specifications(record, total_space=total_space)


def set_power(record: FacilityRecord, power: Quantity) -> FacilityRecord:
    return _with_specifications(record, power=power)


def set_cooling(record: FacilityRecord, cooling: str) -> FacilityRecord:
    return _with_specifications(record, cooling=cooling)


def set_capacity_used(record: FacilityRecord, used: Number) -> FacilityRecord:
    return _with_capacity(record, used=used)


def set_capacity_status(record: FacilityRecord, status: CapacityStatus) -> FacilityRecord:
    return _with_capacity(record, status=status)


def set_available_racks(record: FacilityRecord, available_racks: int) -> FacilityRecord:
    return _with_capacity(record, available_racks=available_racks)


def set_uptime(record: FacilityRecord, uptime: Number) -> FacilityRecord:
    return _with_real_time_data(record, uptime=uptime)


def parse_text(raw: Any) -> str:
    return "" if raw is None else str(raw)


def parse_number(raw: Any) -> Number:
    """Parse a numeric form value; integral values come back as ``int``."""
    if isinstance(raw, bool):
        raise ValueError(f"Not a number: {raw!r}")
    if isinstance(raw, (int, float)):
        value = raw
    else:
        value = float(str(raw).strip())
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError(f"Not a finite number: {raw!r}")
    return int(value) if float(value).is_integer() else value


def parse_integer(raw: Any) -> int:
    value = parse_number(raw)
    if not isinstance(value, int):
        raise ValueError(f"Not a whole number: {raw!r}")
    return value


def parse_quantity(raw: Any) -> Quantity:
    return raw if isinstance(raw, Quantity) else Quantity.parse(raw)


@dataclass(frozen=True)
class FormField:
    """An editable form field bound to one typed setter.

    Attributes:
        key: Dotted form key, e.g. ``capacity.used``
        label: Form label
        parser: Converts the raw form value to the setter's type
        setter: Typed setter for the leaf
    """

    key: str
    label: str
    parser: Callable[[Any], Any]
    setter: Callable[[FacilityRecord, Any], FacilityRecord]

    def current(self, record: FacilityRecord) -> Any:
        """Current leaf value, for pre-filling the form."""
        return get_path(record, self.key)

    def apply(self, record: FacilityRecord, raw: Any) -> FacilityRecord:
        """Parse ``raw`` and return the updated record.

        Raises:
            RecordValidationError: If the raw value cannot be parsed
        """
        try:
            value = self.parser(raw)
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(f"Rejected form value for {self.key}: {e}")
            raise RecordValidationError(record.id, self.key, raw, "cannot be parsed") from e
        return self.setter(record, value)


_FIELDS: Tuple[FormField, ...] = (
    FormField("name", "Name", parse_text, set_name),
    FormField("location", "Location", parse_text, set_location),
    FormField("city", "City", parse_text, set_city),
    FormField("country", "Country", parse_text, set_country),
    FormField("tier", "Tier", Tier, set_tier),
    FormField("description", "Description", parse_text, set_description),
    FormField("specifications.totalSpace", "Total Space", parse_quantity, set_total_space),
    FormField("specifications.power", "Power", parse_quantity, set_power),
    FormField("specifications.cooling", "Cooling", parse_text, set_cooling),
    FormField("capacity.used", "Capacity Used (%)", parse_number, set_capacity_used),
    FormField("capacity.status", "Status", CapacityStatus, set_capacity_status),
    FormField("capacity.availableRacks", "Available Racks", parse_integer, set_available_racks),
    FormField("realTimeData.uptime", "Uptime (%)", parse_number, set_uptime),
)

FORM_FIELDS: Dict[str, FormField] = {f.key: f for f in _FIELDS}


def form_field(key: str) -> FormField:
    """Look up an editable field.

    Raises:
        PathError: If ``key`` is not an editable field
    """
    try:
        return FORM_FIELDS[key]
    except KeyError:
        raise PathError(normalize_path(key), key, "not an editable field") from None


def apply_form_edit(record: FacilityRecord, key: str, raw: Any) -> FacilityRecord:
    """Apply one raw form value to a record."""
    return form_field(key).apply(record, raw)


__all__ = [
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
    "parse_text",
    "parse_number",
    "parse_integer",
    "parse_quantity",
    "FormField",
    "FORM_FIELDS",
    "form_field",
    "apply_form_edit",
]
