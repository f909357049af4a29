from typing import Optional


class SmhiError(Exception):
    """Base class for errors raised while talking to the SMHI API."""


class DirectoryUnavailable(SmhiError):
    """The station list could not be fetched, nothing to iterate over."""


class FetchError(SmhiError):
    def __init__(self, status: Optional[int], message: str):
        super().__init__(f"[{status}] {message}" if status is not None else message)
        self.status = status
        self.message = message


class StationNotFound(FetchError):
    """Upstream has no data for this station/parameter."""

    def __init__(self, message: str = "Not Found"):
        super().__init__(404, message)
