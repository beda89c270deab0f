"""
Module containing the configuration defaults and the loading of ``clouds.yaml`` files.
"""

import logging
import os
from dataclasses import dataclass

import yaml

from .errors import ConfigurationError


logger = logging.getLogger(__name__)


#: The region used when none is configured
DEFAULT_REGION = "DFW"
#: The URL type used when none is configured
DEFAULT_URL_TYPE = "publicURL"

#: Maps interface names from clouds.yaml to catalog URL types
INTERFACE_URL_TYPES = {
    "public": "publicURL",
    "internal": "internalURL",
    "private": "internalURL",
    "admin": "adminURL",
    "publicURL": "publicURL",
    "internalURL": "internalURL",
    "privateURL": "internalURL",
    "adminURL": "adminURL",
}

#: Environment variable giving an explicit config file
CONFIG_FILE_ENV_VAR = "OS_CLIENT_CONFIG_FILE"
#: Environment variable giving the cloud to use
CLOUD_ENV_VAR = "OS_CLOUD"

#: The locations searched for a config file, in order
CONFIG_SEARCH_PATHS = [
    "clouds.yaml",
    "~/.config/openstack/clouds.yaml",
    "/etc/openstack/clouds.yaml",
]


@dataclass(frozen=True)
class CloudConfig:
    """
    Represents the settings for a single cloud.
    """

    #: The URL of the identity service
    auth_url: str
    #: An existing token, if one was given
    token: str | None = None
    #: The tenant (project) id, if one was given
    tenant_id: str | None = None
    #: The region to use for services
    region: str = DEFAULT_REGION
    #: The URL type to use for services
    url_type: str = DEFAULT_URL_TYPE
    #: Whether to verify TLS certificates, or the path to a CA bundle
    verify: bool | str = True


def find_config_file(path = None):
    """
    Returns the path of the config file to use.
    """
    candidates = [path] if path else []
    if not candidates and os.environ.get(CONFIG_FILE_ENV_VAR):
        candidates = [os.environ[CONFIG_FILE_ENV_VAR]]
    if not candidates:
        candidates = CONFIG_SEARCH_PATHS
    for candidate in candidates:
        candidate = os.path.expanduser(candidate)
        if os.path.isfile(candidate):
            logger.debug(f"using config file '{candidate}'")
            return candidate
    raise ConfigurationError(
        f"Unable to find a clouds.yaml file (tried {', '.join(candidates)})"
    )


def load_clouds(path = None):
    """
    Loads and returns the data from a clouds.yaml file.
    """
    with open(find_config_file(path)) as fh:
        return yaml.safe_load(fh) or {}


def cloud_config(data, cloud = None):
    """
    Returns the :py:class:`CloudConfig` for a cloud in the given clouds.yaml data.

    If no cloud is given, the cloud named by ``OS_CLOUD`` is used, falling back
    to the first cloud in the data.
    """
    clouds = data.get("clouds") or {}
    cloud = cloud or os.environ.get(CLOUD_ENV_VAR)
    if cloud:
        try:
            cloud_data = clouds[cloud]
        except KeyError:
            raise ConfigurationError(f"Cloud not found in configuration: {cloud}")
    else:
        try:
            cloud_data = next(iter(clouds.values()))
        except StopIteration:
            raise ConfigurationError("No clouds found in configuration")
    auth = cloud_data.get("auth") or {}
    if not auth.get("auth_url"):
        raise ConfigurationError("Cloud configuration is missing auth.auth_url")
    interface = cloud_data.get("interface", "public")
    try:
        url_type = INTERFACE_URL_TYPES[interface]
    except KeyError:
        raise ConfigurationError(f"Unrecognised interface: {interface}")
    return CloudConfig(
        auth["auth_url"].rstrip("/"),
        auth.get("token"),
        auth.get("project_id") or auth.get("tenant_id"),
        cloud_data.get("region_name") or DEFAULT_REGION,
        url_type,
        cloud_data.get("cacert") or cloud_data.get("verify", True)
    )
