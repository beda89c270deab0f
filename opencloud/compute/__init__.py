from .service import ComputeService  # noqa: F401
