# utils/validation.py

import logging
from datetime import datetime, timezone
from typing import Optional

import dateparser

from mantis_version.core.errors import ValidationError
from mantis_version.models.schemas import InputRecord, VersionRequest

logger = logging.getLogger(__name__)

DATEPARSER_SETTINGS = {
    "TIMEZONE": "UTC",
    "TO_TIMEZONE": "UTC",
    "RETURN_AS_TIMEZONE_AWARE": True,
    # Absolute dates only: "yesterday" or "in 2 days" depend on the clock
    "PARSERS": ["custom-formats", "absolute-time"],
    "REQUIRE_PARTS": ["day", "month", "year"],
}


def require_inputs(record: InputRecord) -> None:
    if not (record.url and record.api_key and record.project and record.name):
        raise ValidationError("Project name, url, api-key and name inputs are required.")


def parse_bool(raw) -> Optional[bool]:
    # Anything but "true"/"false" is dropped, not rejected
    if isinstance(raw, str) and raw.lower() in ("true", "false"):
        return raw.lower() == "true"
    return None


def parse_timestamp(raw) -> Optional[str]:
    """Normalize a date-time string to ISO-8601 UTC (``2024-01-02T03:04:05.000Z``).

    Naive values are taken as UTC. Returns None for anything that does not parse.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None
    try:
        parsed = datetime.fromisoformat(raw.strip())
    except ValueError:
        parsed = dateparser.parse(raw, languages=["en"], settings=DATEPARSER_SETTINGS)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        parsed = parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        # e.g. 0001-01-01T00:00:00+01:00 falls before datetime.min in UTC
        return None
    return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_input(record: InputRecord) -> VersionRequest:
    name = record.name
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("The 'name' parameter is required and must be a non-empty string.")

    fields = {"name": name.strip()}

    if isinstance(record.description, str) and record.description.strip():
        fields["description"] = record.description.strip()

    for key in ("released", "obsolete"):
        value = parse_bool(getattr(record, key))
        if value is not None:
            fields[key] = value
        elif getattr(record, key):
            logger.warning("Ignoring %s=%r, expected 'true' or 'false'", key, getattr(record, key))

    timestamp = parse_timestamp(record.timestamp)
    if timestamp is not None:
        fields["timestamp"] = timestamp
    elif record.timestamp:
        logger.warning("Ignoring timestamp=%r, not a valid date-time", record.timestamp)

    return VersionRequest(**fields)
