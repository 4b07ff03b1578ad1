"""MM:SS timecode helpers."""

import re

_TIMECODE_RE = re.compile(r"^(\d{1,3}):([0-5]\d)$")


def format_timecode(seconds: int) -> str:
    """Format whole seconds -> MM:SS."""
    if seconds < 0:
        raise ValueError("seconds must be >= 0")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def parse_timecode(value: str) -> int:
    """Parse MM:SS -> whole seconds."""
    match = _TIMECODE_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid timecode {value!r}, expected MM:SS")
    return int(match.group(1)) * 60 + int(match.group(2))
