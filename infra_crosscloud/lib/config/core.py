from functools import cache
from typing import Optional

from pulumi import Config, get_stack, get_project

from .crosscloud_env import crosscloud_env

crosscloud_config = Config("crosscloud")

tag_namespace = crosscloud_env.get("tag_namespace", "crosscloud")
"""Resources tagged through the crosscloud tagging library use this to prefix the standard tags.
   This differs from the Pulumi config namespace, as this is used for the actual resources, not the Pulumi config.
"""

tag_prefix = f"{tag_namespace}{crosscloud_env.get('tag_separator', ':')}"

team = crosscloud_env.get("team", "infrastructure")


@cache
def get_environment() -> str:
    """
    Returns the environment name for this program

    Defaults to `{project}-{stack}`, for example `crosscloud-vpn-bridge`.
    Can be overridden by setting `environment` in your Crosscloud.common.yaml

    Computed once per process: later changes to the stack or project do not change the result.

    :return: Environment name
    """
    return crosscloud_env.get("environment") or f"{get_project()}-{get_stack()}"


def get_provider_override() -> Optional[str]:
    """
    Retrieve the provider override for the current module (`crosscloud:provider: myprovider`)

    :return: Provider name, if overridden
    """
    return crosscloud_config.get("provider")
