"""
Module containing the connection to a cloud, which holds the token and service
catalog and creates the services.
"""

import logging

import rackit
import requests

from . import config
from .catalog import Catalog
from .compute import ComputeService
from .errors import AuthenticationError
from .object_store import ObjectStoreService
from .volume import VolumeService


logger = logging.getLogger(__name__)


class Connection(rackit.Connection):
    """
    Class for a connection to a cloud, which holds the token and the service catalog
    used to locate services.

    Obtaining a token and catalog is delegated to the ``authenticator``, a callable
    that receives the connection and returns either ``(token, catalog_data)`` or
    ``(token, catalog_data, tenant_id)``. It is only called when a service needs
    the catalog and the connection does not have one yet.

    Can be used as an auth object for a requests session.
    """

    def __init__(
        self,
        auth_url,
        token = None,
        catalog = None,
        tenant_id = None,
        region = None,
        url_type = None,
        verify = True,
        authenticator = None
    ):
        self.auth_url = auth_url
        self.token = token
        self.tenant_id = tenant_id
        self.region = region
        self.url_type = url_type
        self.verify = verify
        self.authenticator = authenticator
        self._catalog = self._make_catalog(catalog)
        # This object is the auth object for the session
        session = requests.Session()
        session.auth = self
        session.verify = self.verify
        super().__init__(auth_url, session)

    def __call__(self, request):
        # This is what allows the connection to be used as a requests auth
        if self.token:
            request.headers["X-Auth-Token"] = self.token
        return request

    def _make_catalog(self, catalog):
        if catalog is None or isinstance(catalog, Catalog):
            return catalog
        return Catalog.from_data(catalog)

    @property
    def catalog(self):
        return self._catalog

    def authenticate(self):
        """
        Obtains a token and service catalog using the authenticator.
        """
        if not self.authenticator:
            raise AuthenticationError(
                "No service catalog is available and no authenticator is configured"
            )
        logger.info(f"authenticating with '{self.auth_url}'")
        result = self.authenticator(self)
        self.token, catalog_data, *rest = result
        if rest:
            self.tenant_id = rest[0]
        self._catalog = self._make_catalog(catalog_data)
        if self._catalog is None:
            raise AuthenticationError("Authenticator did not return a service catalog")
        return self._catalog

    @classmethod
    def from_clouds(cls, data, cloud = None, authenticator = None):
        """
        Initialise a connection using data from a clouds.yaml file.
        """
        cloud_config = config.cloud_config(data, cloud)
        return cls(
            cloud_config.auth_url,
            token = cloud_config.token,
            tenant_id = cloud_config.tenant_id,
            region = cloud_config.region,
            url_type = cloud_config.url_type,
            verify = cloud_config.verify,
            authenticator = authenticator
        )

    @classmethod
    def from_config_file(cls, path = None, cloud = None, authenticator = None):
        """
        Initialise a connection from a clouds.yaml file, searching the standard
        locations if no path is given.
        """
        return cls.from_clouds(config.load_clouds(path), cloud, authenticator)

    def compute_service(self, name = None, region = None, url_type = None):
        """
        Returns the compute service.
        """
        return ComputeService(self, name = name, region = region, url_type = url_type)

    def volume_service(self, name = None, region = None, url_type = None):
        """
        Returns the block storage service.
        """
        return VolumeService(self, name = name, region = region, url_type = url_type)

    def object_store_service(self, name = None, region = None, url_type = None):
        """
        Returns the object storage service.
        """
        return ObjectStoreService(
            self,
            name = name,
            region = region,
            url_type = url_type
        )
