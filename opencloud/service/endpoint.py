"""
Module containing the endpoint selected for a service.
"""

from dataclasses import dataclass


def _strip(url):
    return url.rstrip("/") if url else None


@dataclass(frozen=True)
class Endpoint:
    """
    Represents the base URLs for a service in a region.
    """

    #: The base URL for the public interface
    public_url: str | None
    #: The base URL for the private interface
    private_url: str | None
    #: The region that the URLs are for, or ``None`` for a global endpoint
    region: str | None = None

    @classmethod
    def factory(cls, data, region = None):
        """
        Creates an endpoint from an endpoint entry in the service catalog.
        """
        return cls(
            _strip(data.get("publicURL")),
            _strip(data.get("internalURL")),
            data.get("region", region)
        )
