"""Error types raised by the ytdash core."""


class YtDashError(Exception):
    """Base class for ytdash errors."""


class FetchError(YtDashError):
    """A page request failed: transport error, non-2xx status, or malformed payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
