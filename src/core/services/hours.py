"""Hour token parsing.

The dataset publishes opening hours as informal tokens (`9AM`, `10PM`,
`12PM`). `parse_hour` maps them onto a 0-23 scale so they can be compared
with the local clock.
"""

from __future__ import annotations

from core.domain.errors import ParseHourError

_SUFFIXES = ("AM", "PM")


def parse_hour(token: str) -> int:
    """Convert an hour token such as `'9AM'` or `'10PM'` to an hour 0-23.

    Only the PM branch adjusts the value, so `'12PM'` is 12 and `'12AM'` is
    also 12 (not 0). Existing data depends on that mapping.

    Raises:
        ParseHourError: the token is not 1-2 digits followed by AM/PM, or the
            numeric part is greater than 12.
    """

    if not isinstance(token, str) or len(token) < 3:
        raise ParseHourError(token)

    digits, suffix = token[:-2], token[-2:]
    if suffix not in _SUFFIXES or len(digits) > 2 or not (digits.isascii() and digits.isdigit()):
        raise ParseHourError(token)

    hour = int(digits)
    if hour > 12:
        raise ParseHourError(token)

    if suffix == "PM" and hour != 12:
        hour += 12
    return hour
