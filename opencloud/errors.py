"""
Module containing the errors raised by the client library.

Errors from HTTP calls are not wrapped, and are raised as the
:py:class:`rackit.ApiError` subclasses produced by the connection.
"""


class Error(Exception):
    """
    Base class for all other errors in this module.
    """


class EndpointError(Error):
    """
    Raised when no catalog entry matches the requested service.
    """

    def __init__(self, type, name, region, url_type, *args, **kwargs):
        self.type = type
        self.name = name
        self.region = region
        self.url_type = url_type
        super().__init__(
            f"No endpoints for service type [{type}], name [{name}], "
            f"region [{region}] and urlType [{url_type}]",
            *args,
            **kwargs
        )


class ServiceError(Error):
    """
    Raised when the endpoint for a service does not have the requested URL type.
    """

    def __init__(self, url_type, *args, **kwargs):
        self.url_type = url_type
        super().__init__(
            f"The base {url_type} could not be found. Perhaps the service "
            "you are using requires a different URL type, or does not "
            "support this region.",
            *args,
            **kwargs
        )


class UnrecognizedServiceError(Error):
    """
    Raised when a service is asked for a resource that it does not provide.
    """

    def __init__(self, resource_name, resources, *args, **kwargs):
        super().__init__(
            f"{resource_name} resource does not exist, please try one of "
            f"the following: {', '.join(resources)}",
            *args,
            **kwargs
        )


class AuthenticationError(Error):
    """
    Raised when a connection has no service catalog and cannot obtain one.
    """


class ConfigurationError(Error):
    """
    Raised when the cloud configuration cannot be located or is incomplete.
    """
