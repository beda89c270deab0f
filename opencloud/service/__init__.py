"""
Package containing the base service and its endpoint.
"""

from .endpoint import Endpoint  # noqa: F401
