"""Duration codec: integer seconds in storage, "mm:ss" text at the API boundary.

Minutes are zero-padded to two digits and may grow past 99 ("100:00").
Only the canonical form is accepted when parsing, so both directions
round-trip exactly.
"""

import re

DURATION_PATTERN = re.compile(r"^(\d{2}|[1-9]\d{2,}):([0-5]\d)$")


def seconds_to_duration(seconds: int | None) -> str | None:
    """125 -> "02:05". None stays None (absent is never zero)."""
    if seconds is None:
        return None
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative: {seconds}")
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def duration_to_seconds(text: str | None) -> int | None:
    """"02:05" -> 125. None or empty string -> None."""
    if text is None or text == "":
        return None
    match = DURATION_PATTERN.fullmatch(text)
    if not match:
        raise ValueError(f"Duration must be in mm:ss format, got {text!r}")
    return int(match.group(1)) * 60 + int(match.group(2))


def is_valid_duration(text: str) -> bool:
    return DURATION_PATTERN.fullmatch(text) is not None
