"""
Module containing the service catalog and the endpoint lookup that uses it.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import EndpointError
from .service.endpoint import Endpoint


logger = logging.getLogger(__name__)


#: Maps Identity v3 interface names to the v2 URL keys
_V3_INTERFACES = dict(
    public = "publicURL",
    internal = "internalURL",
    admin = "adminURL",
)


def _v3_endpoints(endpoints):
    # Identity v3 has one endpoint per interface, so group them by region
    grouped = {}
    for ep in endpoints:
        region = ep.get("region_id") or ep.get("region")
        url_key = _V3_INTERFACES.get(ep.get("interface"))
        if not url_key:
            continue
        entry = grouped.setdefault(region, {} if region is None else {"region": region})
        entry.setdefault(url_key, ep["url"])
    return list(grouped.values())


@dataclass(frozen=True)
class CatalogService:
    """
    Represents a single service entry in the service catalog.
    """

    #: The type of the service, e.g. ``compute``
    type: str
    #: The name of the service, e.g. ``cloudServersOpenStack``
    name: str
    #: The endpoint entries, each with an optional region and the URL keys
    endpoints: tuple = ()

    @classmethod
    def from_data(cls, data):
        endpoints = data.get("endpoints", [])
        # v3 entries have a url and interface instead of named URL keys
        if any("interface" in ep for ep in endpoints):
            endpoints = _v3_endpoints(endpoints)
        return cls(data.get("type"), data.get("name"), tuple(endpoints))

    def has_type(self, type):
        return self.type == type

    def has_name(self, name):
        # A service requested without a name matches on type alone
        return name is None or self.name == name

    def get_endpoint_from_region(self, region):
        """
        Returns the endpoint entry for the region, or ``None`` if there isn't one.

        Endpoints without a region are global and match any region.
        """
        return next(
            (
                ep
                for ep in self.endpoints
                if not ep.get("region") or ep["region"] == region
            ),
            None
        )


class Catalog:
    """
    The list of services available to an authenticated session.
    """

    def __init__(self, items = ()):
        self._items = tuple(items)

    @classmethod
    def from_data(cls, data):
        """
        Creates a catalog from decoded catalog data.

        The data can be a list of Identity v2 or v3 catalog entries, or a whole
        token response from either version.
        """
        if isinstance(data, Mapping):
            if "access" in data:
                data = data["access"].get("serviceCatalog", [])
            elif "token" in data:
                data = data["token"].get("catalog", [])
            else:
                data = data.get("serviceCatalog", data.get("catalog", []))
        return cls(CatalogService.from_data(entry) for entry in data)

    def get_items(self):
        return list(self._items)

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


def find_endpoint(catalog, type, name, region, url_type):
    """
    Returns the endpoint from the catalog for the given service type, name and region.

    Raises :py:class:`~.errors.EndpointError` naming all of the lookup parameters
    if there is no match.
    """
    for service in catalog:
        if not (service.has_type(type) and service.has_name(name)):
            continue
        data = service.get_endpoint_from_region(region)
        if data is not None:
            logger.info(
                f"found endpoint for service type '{type}', "
                f"name '{service.name}' in region '{region}'"
            )
            return Endpoint.factory(data, region)
    raise EndpointError(type, name, region, url_type)
