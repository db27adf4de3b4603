from __future__ import annotations

import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from meetzone.core.constants import DEFAULT_TARGET_TIMEZONE
from meetzone.parsers.errors import UnknownTimezone

logger = logging.getLogger("meetzone.zones")


def resolve_timezone(name: str) -> ZoneInfo:
    normalized = name.strip()
    if not normalized:
        raise UnknownTimezone(name)

    try:
        return ZoneInfo(normalized)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise UnknownTimezone(name) from exc


def resolve_timezone_or_default(
    name: str | None,
    default: str = DEFAULT_TARGET_TIMEZONE,
) -> ZoneInfo:
    if name is None:
        return resolve_timezone(default)

    try:
        return resolve_timezone(name)
    except UnknownTimezone:
        logger.warning("Unknown timezone %r, falling back to %s", name, default)
        return resolve_timezone(default)
