from .service import VolumeService  # noqa: F401
