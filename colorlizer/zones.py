"""Short display names for the host timezone.

The label is resolved once at startup and passed to the formatter; nothing
here is consulted per line.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Well-known three-letter aliases and the zone each one stands for.
SHORT_IDS: dict[str, str] = {
    "ACT": "Australia/Darwin",
    "AET": "Australia/Sydney",
    "AGT": "America/Argentina/Buenos_Aires",
    "ART": "Africa/Cairo",
    "AST": "America/Anchorage",
    "BET": "America/Sao_Paulo",
    "BST": "Asia/Dhaka",
    "CAT": "Africa/Harare",
    "CNT": "America/St_Johns",
    "CST": "America/Chicago",
    "CTT": "Asia/Shanghai",
    "EAT": "Africa/Addis_Ababa",
    "ECT": "Europe/Paris",
    "IET": "America/Indiana/Indianapolis",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "MIT": "Pacific/Apia",
    "NET": "Asia/Yerevan",
    "NST": "Pacific/Auckland",
    "PLT": "Asia/Karachi",
    "PNT": "America/Phoenix",
    "PRT": "America/Puerto_Rico",
    "PST": "America/Los_Angeles",
    "SST": "Pacific/Guadalcanal",
    "VST": "Asia/Ho_Chi_Minh",
    "EST": "-05:00",
    "MST": "-07:00",
    "HST": "-10:00",
}

# Zone ids that are a fixed zero offset from UTC.
UTC_ALIASES: frozenset[str] = frozenset({
    "UTC", "UTC0", "UCT", "GMT", "GMT0", "GMT+0", "GMT-0", "Z", "Zulu", "Universal", "Greenwich",
    "Etc/UTC", "Etc/UCT", "Etc/GMT", "Etc/GMT0", "Etc/GMT+0", "Etc/GMT-0",
    "Etc/Zulu", "Etc/Universal", "Etc/Greenwich",
    "+00:00", "-00:00", "+0", "-0",
})

LOCALTIME = Path("/etc/localtime")
TIMEZONE_FILE = Path("/etc/timezone")


def is_utc(zone_id: str) -> bool:
    return zone_id in UTC_ALIASES


def _zone_from_path(path: str | Path) -> str | None:
    """Zone id from a tz file path such as /usr/share/zoneinfo/Asia/Tokyo."""
    target = os.path.realpath(path)
    marker = "zoneinfo" + os.sep
    idx = target.rfind(marker)
    if idx < 0:
        return None
    return target[idx + len(marker):] or None


def _zone_from_localtime(path: Path) -> str | None:
    if not path.is_symlink():
        return None
    return _zone_from_path(path)


def local_zone_id() -> str:
    """Best guess of the host's IANA zone id, falling back to UTC."""
    tz = os.environ.get("TZ", "").lstrip(":").strip()
    if tz.startswith("/"):
        # absolute path to a tz file, e.g. TZ=/usr/share/zoneinfo/Asia/Tokyo
        zone = _zone_from_path(tz)
        if zone:
            return zone
    elif tz:
        return tz
    zone = _zone_from_localtime(LOCALTIME)
    if zone:
        return zone
    if TIMEZONE_FILE.is_file():
        zone = TIMEZONE_FILE.read_text(encoding="utf-8").strip()
        if zone:
            return zone
    logger.debug("Could not determine local timezone, assuming UTC")
    return "UTC"


def display_timezone_name(zone_id: str | None = None) -> str:
    """Return the shortest known label for 'zone_id' (default: the host zone).

    UTC-equivalent ids become "UTC"; otherwise the shortest alias in SHORT_IDS
    pointing at the id wins, and the full id is kept when none is shorter.
    """
    zone = zone_id if zone_id is not None else local_zone_id()
    if is_utc(zone):
        return "UTC"
    name = zone
    for short, target in SHORT_IDS.items():
        if target == zone and len(short) < len(name):
            name = short
    return name
