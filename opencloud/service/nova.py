"""
Module containing the base class for Nova-style services.
"""

from .base import Service
from ..resource import Resource


class Flavor(Resource):
    """
    Resource for accessing flavors.
    """
    class Meta:
        endpoint = "/flavors"
        aliases = dict(
            ephemeral_disk = "OS-FLV-EXT-DATA:ephemeral",
            is_disabled = "OS-FLV-DISABLED:disabled"
        )


class NovaService(Service):
    """
    Base class for services that follow the conventions of the Nova API, i.e. where
    lists can be fetched with or without detail and flavors are available.
    """

    def list_url(self, resource_cls, details = True, filters = None):
        """
        Returns the URL for a list of resources, with or without detail.
        """
        endpoint = resource_cls._opts.endpoint.strip("/")
        if details:
            endpoint = endpoint + "/detail"
        return self.get_url(endpoint, filters)

    def flavor(self, id = None):
        """
        Returns a flavor, fetched from the API if an id is given.
        """
        return Flavor(self, id)

    def flavor_list(self, details = True, **filters):
        """
        Returns a collection of flavors.
        """
        return self.collection(Flavor, self.list_url(Flavor, details, filters))
