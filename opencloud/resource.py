"""
Module containing the base class for API resources.
"""

import logging
from urllib.parse import quote

import rackit

from .utils import decode_body


logger = logging.getLogger(__name__)


class ResourceOptions(rackit.resource.Options):
    """
    Custom options class that derives the response keys for resources from the
    endpoint and adds the options used for paging and unwrapping responses.
    """

    def __init__(self, options = None):
        options = dict(options or {})
        endpoint = options.get("endpoint")
        if endpoint:
            # Derive default values for response keys, if not given
            if "resource_list_key" not in options:
                options.update(resource_list_key = endpoint.strip("/"))
            if "resource_key" not in options:
                # By default, assume the list key ends with an 's' that we trim
                options.update(resource_key = options["resource_list_key"][:-1])
        list_key = options.get("resource_list_key")
        if list_key and "resource_links_key" not in options:
            options.update(resource_links_key = f"{list_key}_links")
        options.setdefault("primary_key_field", "id")
        options.setdefault("aliases", {})
        options.setdefault("refresh_on_init", True)
        super().__init__(options)
        # Options that are not given still need to be readable
        self.endpoint = endpoint
        self.resource_list_key = list_key
        self.resource_key = options.get("resource_key")
        self.resource_element_key = options.get("resource_element_key")
        self.resource_links_key = options.get("resource_links_key")
        self.primary_key_field = options["primary_key_field"]
        self.aliases = dict(options["aliases"])
        self.refresh_on_init = options["refresh_on_init"]


class Resource(rackit.UnmanagedResource):
    """
    Base class for API resources.

    A resource is a key-value record decoded from JSON. Values are available as
    attributes and items, with any aliases declared in ``Meta`` applied. An alias
    only applies when the aliased key is present, so a record that carries the
    plain key is still readable.
    """

    class Meta:
        options_cls = ResourceOptions

    def __init__(self, parent, data = None):
        self._owner = parent
        self._values = {}
        if isinstance(data, dict):
            self._values.update(data)
        elif data is not None:
            self._values[self._opts.primary_key_field] = data
            if self._opts.refresh_on_init:
                self.refresh()

    @property
    def parent(self):
        return self._owner

    @property
    def service(self):
        """
        The service that this resource belongs to.
        """
        return self._owner.service

    @property
    def id(self):
        return self._values.get(self._opts.primary_key_field)

    def _resolve_key(self, name):
        key = self._opts.aliases.get(name, name)
        if key not in self._values and name in self._values:
            return name
        return key

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[self._resolve_key(name)]
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' resource has no attribute '{name}'"
            )

    def __getitem__(self, key):
        return self._values[self._resolve_key(key)]

    def __contains__(self, key):
        return self._resolve_key(key) in self._values

    def get(self, key, default = None):
        return self._values.get(self._resolve_key(key), default)

    def __eq__(self, other):
        if not isinstance(other, Resource):
            return NotImplemented
        return type(self) is type(other) and self.id is not None and self.id == other.id

    def __hash__(self):
        return hash((type(self), self.id))

    def __repr__(self):
        return f"{type(self).__name__}({self._values!r})"

    def to_dict(self):
        return dict(self._values)

    def _update(self, data):
        self._values.update(data)

    def _unwrap(self, data):
        # The data may be under a key, which we need to extract
        key = self._opts.resource_key
        if key and isinstance(data, dict) and key in data:
            return data[key]
        return data

    def get_collection_url(self, query = None):
        """
        Returns the URL of the collection that this resource belongs to.
        """
        return self._owner.get_url(self._opts.endpoint, query)

    def get_url(self, path = None, query = None):
        """
        Returns the URL for this resource, with an optional sub-path and query.
        """
        if self.id is None:
            raise ValueError(f"{type(self).__name__} resource has no id")
        segments = [
            s.strip("/")
            for s in (self._opts.endpoint, quote(str(self.id)), path)
            if s
        ]
        return self._owner.get_url("/".join(segments), query)

    def refresh(self):
        """
        Fetches the current data for this resource from the API.
        """
        response = self.service.api_get(self.get_url())
        data = decode_body(response)
        if data:
            self._update(self._unwrap(data))
        return self

    def create(self, **params):
        """
        Creates this resource using the given parameters.
        """
        key = self._opts.resource_key
        body = {key: params} if key else params
        response = self.service.api_post(self.get_collection_url(), json = body)
        data = decode_body(response)
        if data:
            self._update(self._unwrap(data))
        logger.info(f"created {type(self).__name__.lower()} '{self.id}'")
        return self

    def delete(self):
        """
        Deletes this resource.
        """
        self.service.api_delete(self.get_url())
        logger.info(f"deleted {type(self).__name__.lower()} '{self.id}'")

    def action(self, params):
        """
        Performs an action on this resource and returns the decoded response, if any.
        """
        response = self.service.api_post(self.get_url("action"), json = params)
        return decode_body(response)
