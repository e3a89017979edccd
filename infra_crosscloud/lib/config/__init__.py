from .core import (
    get_environment,
    get_stack,
    get_project,
    tag_namespace,
    tag_prefix,
    team,
    get_provider_override,
)
from .crosscloud_env import crosscloud_env
from .exceptions import CrossCloudConfigException
from .mapper import get_stack_config, get_stack_file_config, config_from_dict
