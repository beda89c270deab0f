"""
Module containing resource definitions for the object storage API.
"""

from ..resource import Resource
from ..utils import parse_timestamp


class DataObject(Resource):
    """
    Resource for an object stored in a container.

    Objects live directly below their container, so there is no endpoint.
    """
    class Meta:
        primary_key_field = "name"
        refresh_on_init = False

    @property
    def last_modified(self):
        return parse_timestamp(self.get("last_modified"))


class Container(Resource):
    """
    Resource for a container.

    The API responds with a plain list of containers, and fetching a container
    lists its objects, so containers are not fetched on construction.
    """
    class Meta:
        primary_key_field = "name"
        refresh_on_init = False

    def data_object(self, name):
        return DataObject(self, name)

    def object_list(self, **query):
        """
        Returns the objects in this container.
        """
        return self.service.collection(
            DataObject,
            self.get_url(query = {"format": "json", **query}),
            self
        )
