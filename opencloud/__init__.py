"""
Client library for OpenStack and Rackspace compatible cloud services.
"""

from .collection import Collection  # noqa: F401
from .connection import Connection  # noqa: F401
from .errors import (  # noqa: F401
    AuthenticationError,
    ConfigurationError,
    EndpointError,
    Error,
    ServiceError,
    UnrecognizedServiceError,
)
from .resource import Resource  # noqa: F401
