class ShortenerError(Exception):
    """Base class for URL shortener errors."""


class RandomSourceUnavailableError(ShortenerError):
    """Raised when the secure random source cannot supply entropy."""


class StoreWriteError(ShortenerError):
    """Raised when a mapping cannot be written to the store."""


class DuplicateIdError(StoreWriteError):
    """Raised when an insert hits an id that is already stored."""

    def __init__(self, url_id: str):
        super().__init__(f"Short id already exists: {url_id}")
        self.url_id = url_id


class URLNotFoundError(ShortenerError):
    """Raised when no mapping exists for a short id."""

    def __init__(self, url_id: str):
        super().__init__(f"Short URL not found: {url_id}")
        self.url_id = url_id


class StoreUnavailableError(ShortenerError):
    """Raised when the mapping store cannot be reached."""
