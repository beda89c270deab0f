"""
Module containing the service for the block storage API.
"""

from ..service.nova import NovaService
from .resource import Snapshot, Volume, VolumeType


class VolumeService(NovaService):
    """
    Service class for the block storage service.
    """
    catalog_type = "volume"
    default_name = "cloudBlockStorage"
    resource_names = ("Volume", "VolumeType", "Snapshot")

    def volume(self, id = None):
        """
        Returns a volume, fetched from the API if an id is given.
        """
        return Volume(self, id)

    def volume_list(self, details = True, **filters):
        """
        Returns a collection of volumes, with full details unless ``details`` is false.
        """
        return self.collection(Volume, self.list_url(Volume, details, filters))

    def volume_type(self, id = None):
        """
        Returns a volume type, fetched from the API if an id is given.
        """
        return VolumeType(self, id)

    def volume_type_list(self, **filters):
        return self.collection(VolumeType, self.get_url("types", filters))

    def snapshot(self, id = None):
        """
        Returns a snapshot, fetched from the API if an id is given.
        """
        return Snapshot(self, id)

    def snapshot_list(self, **filters):
        return self.collection(Snapshot, self.get_url("snapshots", filters))
