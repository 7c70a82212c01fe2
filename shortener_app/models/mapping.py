from dataclasses import dataclass


@dataclass(frozen=True)
class URLMapping:
    """A short identifier and the original URL it resolves to."""

    id: str
    url: str
