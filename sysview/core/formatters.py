"""Human-readable rendering of byte counts and durations."""

from __future__ import annotations

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")
_KILO = 1024


def format_bytes(num_bytes: int | float, decimals: int = 2) -> str:
    """Format ``num_bytes`` with the largest binary unit that keeps it >= 1.

    >>> format_bytes(1536, 1)
    '1.5 KB'
    """

    if num_bytes < 0:
        raise ValueError(f"byte count must be non-negative, got {num_bytes}")
    if num_bytes == 0:
        return "0 Bytes"
    value = float(num_bytes)
    for unit in _BYTE_UNITS[:-1]:
        if value < _KILO:
            return f"{value:.{decimals}f} {unit}"
        value /= _KILO
    return f"{value:.{decimals}f} {_BYTE_UNITS[-1]}"


def format_duration(total_seconds: int | float) -> str:
    """Format seconds as ``"<d>d <h>h <m>m <s>s"``."""

    seconds = max(0, int(total_seconds))
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{days}d {hours}h {minutes}m {seconds}s"


def format_percentage(ratio: float) -> str:
    return f"{ratio * 100:.2f}%"
