"""
Module containing the service for the compute API.
"""

from ..service.nova import NovaService
from .resource import Image, Keypair, Server


class ComputeService(NovaService):
    """
    Service class for the compute service.
    """
    catalog_type = "compute"
    default_name = "cloudServersOpenStack"
    resource_names = ("Server", "Flavor", "Image", "Keypair", "VolumeAttachment")
    service_namespaces = ("rax-bandwidth", "os-flavor-access", "os-keypairs")

    def server(self, id = None):
        """
        Returns a server, fetched from the API if an id is given.
        """
        return Server(self, id)

    def server_list(self, details = True, **filters):
        """
        Returns a collection of servers, with full details unless ``details`` is false.
        """
        return self.collection(Server, self.list_url(Server, details, filters))

    def image(self, id = None):
        return Image(self, id)

    def image_list(self, details = True, **filters):
        return self.collection(Image, self.list_url(Image, details, filters))

    def keypair(self, name = None):
        return Keypair(self, name)

    def keypair_list(self):
        return self.collection(Keypair)
