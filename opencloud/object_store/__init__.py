from .service import ObjectStoreService  # noqa: F401
