"""
Module containing the service for the object storage API.
"""

from ..service.base import Service
from .resource import Container


class ObjectStoreService(Service):
    """
    Service class for the object storage service.

    The object store pages lists using the ``limit`` and ``marker`` query
    parameters rather than links.
    """
    catalog_type = "object-store"
    default_name = "cloudFiles"
    resource_names = ("Container", "DataObject")

    def container(self, name):
        return Container(self, name)

    def container_list(self, **query):
        """
        Returns a collection of containers.
        """
        return self.collection(Container, self.get_url(query = {"format": "json", **query}))
