"""Data access helpers for loading pending deliveries."""

from __future__ import annotations

import csv
import functools
import logging
from pathlib import Path
from typing import Iterator, Optional

from ..config import settings
from ..models.domain import Stop, TimeWindow

logger = logging.getLogger(__name__)

_PRIORITIES = {"high", "normal", "low"}
_STOP_TYPES = {"pickup", "delivery"}


def _coerce_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    try:
        return float(value.replace(",", ""))
    except ValueError as exc:
        raise ValueError(f"Unable to parse float from value '{value}'") from exc


def _coerce_coordinate(value: Optional[str]) -> Optional[float]:
    # "5,36" would otherwise read as 536.0
    if value is not None and "," in value:
        raise ValueError(f"Coordinate '{value}' must use a decimal point")
    return _coerce_float(value)


def _field(row: dict, *names: str) -> str:
    for name in names:
        value = row.get(name)
        if value:
            return value.strip()
    return ""


def _row_to_stop(row: dict) -> Optional[Stop]:
    lat = _coerce_coordinate(row.get("Latitude") or row.get("latitude"))
    lng = _coerce_coordinate(row.get("Longitude") or row.get("longitude"))
    if lat is None or lng is None:
        return None

    priority = _field(row, "Priority", "priority").lower()
    stop_type = _field(row, "Type", "type").lower()
    window_start = _field(row, "WindowStart", "window_start")
    window_end = _field(row, "WindowEnd", "window_end")
    return Stop(
        id=_field(row, "DeliveryId", "delivery_id", "id"),
        name=_field(row, "Name", "name"),
        address=_field(row, "Address", "address"),
        lat=lat,
        lng=lng,
        type=stop_type if stop_type in _STOP_TYPES else "delivery",
        priority=priority if priority in _PRIORITIES else None,
        time_window=TimeWindow(start=window_start, end=window_end) if window_start and window_end else None,
        estimated_duration=_coerce_float(row.get("EstimatedDuration") or row.get("estimated_duration")),
    )


@functools.lru_cache(maxsize=1)
def load_deliveries(source: Optional[Path] = None) -> tuple[tuple[str, Stop], ...]:
    """Load ``(driver_id, stop)`` pairs from the configured CSV file."""

    csv_path = source or settings.deliveries_file
    if not csv_path.exists():
        raise FileNotFoundError(f"Deliveries file not found: {csv_path}")

    deliveries: list[tuple[str, Stop]] = []
    with csv_path.open(mode="r", encoding="utf-8-sig", newline="") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            raise ValueError(f"Deliveries file '{csv_path}' is missing a header row.")
        for line_number, row in enumerate(reader, start=2):
            stop = _row_to_stop(row)
            if stop is None:
                logger.warning("Skipping delivery without coordinates at %s:%d", csv_path.name, line_number)
                continue
            deliveries.append((_field(row, "DriverId", "driver_id"), stop))
    return tuple(deliveries)


def iter_pending_deliveries(driver_id: str, source: Optional[Path] = None) -> Iterator[Stop]:
    normalized = driver_id.strip()
    for owner, stop in load_deliveries(source):
        if owner == normalized:
            yield stop


def get_pending_deliveries(driver_id: str, source: Optional[Path] = None) -> tuple[Stop, ...]:
    return tuple(iter_pending_deliveries(driver_id, source))
