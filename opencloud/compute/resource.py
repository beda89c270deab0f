"""
Module containing resource definitions for the compute API.
"""

from ..resource import Resource
from ..service.nova import Flavor  # noqa: F401
from ..utils import parse_timestamp


class Image(Resource):
    """
    Resource for accessing images.
    """
    class Meta:
        endpoint = "/images"


class Keypair(Resource):
    """
    Resource for a keypair.
    """
    class Meta:
        endpoint = "/os-keypairs"
        resource_list_key = "keypairs"
        resource_key = "keypair"
        # Each item in a list response has the data under a "keypair" key
        resource_element_key = "keypair"
        primary_key_field = "name"


class VolumeAttachment(Resource):
    """
    Resource for a volume attached to a server.
    """
    class Meta:
        endpoint = "/os-volume_attachments"
        resource_list_key = "volumeAttachments"
        resource_key = "volumeAttachment"
        aliases = dict(
            server_id = "serverId",
            volume_id = "volumeId"
        )


class Server(Resource):
    """
    Resource for a server.
    """
    class Meta:
        endpoint = "/servers"
        aliases = dict(
            task_state = "OS-EXT-STS:task_state",
            power_state = "OS-EXT-STS:power_state",
            vm_state = "OS-EXT-STS:vm_state",
            disk_config = "OS-DCF:diskConfig",
            access_ipv4 = "accessIPv4",
            access_ipv6 = "accessIPv6"
        )

    @property
    def created(self):
        return parse_timestamp(self.get("created"))

    def start(self):
        self.action({"os-start": None})

    def stop(self):
        self.action({"os-stop": None})

    def reboot(self, reboot_type = "SOFT"):
        self.action({"reboot": {"type": reboot_type}})

    def volume_attachment_list(self):
        """
        Returns the volumes attached to this server.
        """
        return self.service.collection(VolumeAttachment, parent = self)
