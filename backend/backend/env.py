import os
import re
from datetime import timedelta

UNSET_SENTINELS = {
    "",
    "none",
    "null",
    "undefined",
    "n/a",
}

_DURATION_RE = re.compile(r'^\s*(\d+)\s*([smhd]?)\s*$', re.IGNORECASE)
_DURATION_UNITS = {
    '': 'seconds',
    's': 'seconds',
    'm': 'minutes',
    'h': 'hours',
    'd': 'days',
}


def env_value(name, default=None):
    """Read an environment variable, treating blank/placeholder values as unset"""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip()
    if value.lower() in UNSET_SENTINELS:
        return default
    return value


def env_bool(name, default=False):
    value = env_value(name)
    if value is None:
        return default
    return value.lower() in ('1', 'true', 'yes', 'on')


def env_int(name, default):
    value = env_value(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


def env_list(name, default=None):
    value = env_value(name)
    if value is None:
        return list(default or [])
    return [item.strip() for item in value.split(',') if item.strip()]


def parse_duration(value):
    """Parse expirations like '1h', '30m', '45s', '2d' or plain seconds"""
    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})
