"""Exception hierarchy for foodtruck-finder.

Every error is terminal for the run that raised it: the CLI catches
`FoodTruckError`, prints a plain message and exits without printing rows.
"""

from __future__ import annotations


class FoodTruckError(Exception):
    """Base class for all errors raised by the application."""


class FetchError(FoodTruckError):
    """The dataset could not be downloaded.

    `status_code` is the HTTP status when the server answered, `None` when
    the request never got a response (DNS, connection refused, timeout...).
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DatasetError(FoodTruckError):
    """The dataset was downloaded but its payload is not usable."""


class ParseHourError(FoodTruckError, ValueError):
    """An hour token such as `9AM` or `10PM` could not be parsed."""

    def __init__(self, token: object) -> None:
        super().__init__(f"Invalid hour token: {token!r}")
        self.token = token
