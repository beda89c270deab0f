"""
Module containing the base class for cloud services.
"""

import importlib
import logging

import rackit

from ..catalog import find_endpoint
from ..collection import Collection
from ..config import DEFAULT_REGION, DEFAULT_URL_TYPE
from ..errors import ServiceError, UnrecognizedServiceError
from ..resource import Resource
from ..utils import build_url, decode_body


logger = logging.getLogger(__name__)


class Service(rackit.Connection):
    """
    Base class for a cloud service, i.e. the relationship between a connection and
    a service that is represented by an endpoint in the service catalog.

    The endpoint is located in the connection's service catalog using the type,
    name and region of the service, and the base URL is taken from it using the
    URL type. Requests made by the service share the session of the connection,
    and so are authenticated in the same way.
    """

    #: The catalog type of the service, e.g. ``compute``
    catalog_type = None
    #: The catalog name to use when none is given
    default_name = None
    #: The names of the resources that the service provides
    resource_names = ()
    #: The namespaces supported by the service
    service_namespaces = ()
    #: The module containing the resource classes, if not the package default
    resource_module = None

    def __init__(self, connection, type = None, name = None, region = None, url_type = None):
        self._connection = connection
        self._type = type or self.catalog_type
        self._name = name or self.default_name
        self._region = region or connection.region or DEFAULT_REGION
        self._url_type = url_type or connection.url_type or DEFAULT_URL_TYPE
        self._endpoint = self._find_endpoint()
        base_url = self.get_base_url()
        logger.info(f"using '{base_url}' for service '{self._type}'")
        super().__init__(base_url, connection.session)

    @property
    def connection(self):
        return self._connection

    @property
    def type(self):
        return self._type

    @property
    def name(self):
        return self._name

    @property
    def region(self):
        return self._region

    @property
    def url_type(self):
        return self._url_type

    @property
    def endpoint(self):
        return self._endpoint

    @property
    def service(self):
        return self

    def _find_endpoint(self):
        # Make sure that the connection has a catalog to search
        if self._connection.catalog is None:
            self._connection.authenticate()
        return find_endpoint(
            self._connection.catalog,
            self._type,
            self._name,
            self._region,
            self._url_type
        )

    def get_base_url(self):
        """
        Returns the base URL for this service, based on the URL type.
        """
        if self._url_type == "publicURL":
            url = self._endpoint.public_url
        else:
            url = self._endpoint.private_url
        if url is None:
            raise ServiceError(self._url_type)
        return url

    def get_url(self, path = None, query = None):
        """
        Returns the URL formed from the base URL, a path segment and query pairs.
        """
        return build_url(self.get_base_url(), path, query)

    def _get_meta_url(self, resource):
        # Fetch a resource that describes the service itself
        # Failures are treated as the service having no data
        try:
            response = self.api_get(self.get_url(resource))
        except (rackit.ApiError, rackit.ConnectionError) as exc:
            logger.warning(f"unable to fetch {resource} for '{self._type}': {exc}")
            return {}
        try:
            return decode_body(response) or {}
        except ValueError as exc:
            logger.warning(f"invalid {resource} response for '{self._type}': {exc}")
            return {}

    def extensions(self):
        """
        Returns the extensions supported by the service.
        """
        data = self._get_meta_url("extensions")
        return data.get("extensions", []) if isinstance(data, dict) else []

    def limits(self):
        """
        Returns the limits for the service.
        """
        data = self._get_meta_url("limits")
        return data.get("limits", {}) if isinstance(data, dict) else {}

    def namespaces(self):
        return list(self.service_namespaces)

    def get_resources(self):
        return list(self.resource_names)

    def extract_next_url(self, data, resource_cls):
        """
        Given the response data, extract the URL of the next page from it.
        """
        if not isinstance(data, dict):
            return None
        links_key = resource_cls._opts.resource_links_key
        if links_key and links_key in data:
            links = data[links_key]
        else:
            links = data.get("links")
        # Some services give the links as a mapping from rel to URL
        if isinstance(links, dict):
            return links.get("next")
        next_url = None
        for link in links or []:
            if isinstance(link, dict) and link.get("rel") == "next":
                if link.get("href"):
                    next_url = link["href"]
                else:
                    logger.warning("Unexpected [links] found with no [href]")
        return next_url

    def extract_list(self, data, resource_cls):
        """
        Given the response data, extract the list of item data from it.
        """
        # A plain list is used as is
        if isinstance(data, list):
            return data
        list_key = resource_cls._opts.resource_list_key
        if not list_key or list_key not in data:
            logger.debug(f"no '{list_key}' found in response")
            return []
        element_key = resource_cls._opts.resource_element_key
        if not element_key:
            return data[list_key] or []
        # Each item has its data under the element key, which we merge up
        items = []
        for item in data[list_key] or []:
            item = dict(item)
            sub_values = item.pop(element_key, None) or {}
            items.append({**item, **sub_values})
        return items

    def collection(self, resource_cls, url = None, parent = None):
        """
        Returns a collection of resources of the given class.

        If no URL is given, the collection URL of the resource class below the
        parent is used. The parent defaults to the service itself.
        """
        if parent is None:
            parent = self
        if not url:
            url = parent.get_url(resource_cls._opts.endpoint)
        logger.debug(f"fetching {resource_cls.__name__} list from '{url}'")
        data = decode_body(self.api_get(url))
        if not data:
            return Collection(parent, resource_cls)
        next_url = self.extract_next_url(data, resource_cls)
        collection = Collection(parent, resource_cls, self.extract_list(data, resource_cls))
        if next_url:
            collection.set_next_page_callback(self.collection, next_url)
        return collection

    def resolve_resource_class(self, resource_name):
        """
        Returns the resource class for the given name.

        The name can be a resource class, a dotted path to one or the name of a
        class in the resource module for the service.
        """
        if isinstance(resource_name, type) and issubclass(resource_name, Resource):
            return resource_name
        if "." in resource_name:
            module_name, class_name = resource_name.rsplit(".", 1)
        else:
            module_name = self.resource_module or (
                type(self).__module__.rsplit(".", 1)[0] + ".resource"
            )
            class_name = resource_name[:1].upper() + resource_name[1:]
        try:
            resource_cls = getattr(importlib.import_module(module_name), class_name)
        except (ImportError, AttributeError):
            resource_cls = None
        if not (isinstance(resource_cls, type) and issubclass(resource_cls, Resource)):
            raise UnrecognizedServiceError(resource_name, self.get_resources())
        return resource_cls

    def resource(self, resource_name, data = None):
        """
        Factory method for resource objects.
        """
        return self.resolve_resource_class(resource_name)(self, data)

    def resource_list(self, resource_name, url = None, parent = None):
        """
        Factory method for resource collections.
        """
        return self.collection(self.resolve_resource_class(resource_name), url, parent)

    def _fault_message(self, data):
        # Newer APIs give a list of errors, each with a title and detail
        errors = data.get("errors")
        if isinstance(errors, list):
            for error in errors:
                if isinstance(error, dict) and (error.get("detail") or error.get("title")):
                    return error.get("detail") or error.get("title")
            return None
        # Otherwise the fault is under a key naming it, e.g. itemNotFound
        for fault in data.values():
            if isinstance(fault, dict) and fault.get("message"):
                return fault["message"]
        return data.get("message")

    def extract_error_message(self, response):
        """
        Extract an error message from the given error response and return it.

        Faults are given as ``{"<faultName>": {"message": ..., "code": ...}}``,
        where the fault name depends on the error, e.g. ``badRequest`` or
        ``overLimit``. Responses that are not JSON, such as the plain text
        errors from object storage, give the response text.
        """
        try:
            data = response.json()
        except ValueError:
            return response.text
        message = self._fault_message(data) if isinstance(data, dict) else None
        return message or response.text
