"""
Module containing resource definitions for the block storage API.
"""

from ..resource import Resource
from ..utils import parse_timestamp


class Volume(Resource):
    """
    Resource for accessing volumes.
    """
    class Meta:
        endpoint = "/volumes"
        aliases = dict(
            name = "display_name",
            description = "display_description",
            type = "volume_type"
        )

    @property
    def created(self):
        return parse_timestamp(self.get("created_at"))

    def snapshot_list(self):
        """
        Returns the snapshots taken from this volume.
        """
        return self.service.snapshot_list(volume_id = self.id)


class VolumeType(Resource):
    """
    Resource for accessing volume types.
    """
    class Meta:
        endpoint = "/types"
        resource_list_key = "volume_types"
        resource_key = "volume_type"


class Snapshot(Resource):
    """
    Resource for accessing snapshots of volumes.
    """
    class Meta:
        endpoint = "/snapshots"
        aliases = dict(
            name = "display_name",
            description = "display_description"
        )

    @property
    def created(self):
        return parse_timestamp(self.get("created_at"))
