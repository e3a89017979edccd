import logging
import sys
from collections import UserDict
from pathlib import Path

import hiyapyco

from .exceptions import CrossCloudConfigException

logger = logging.getLogger(__name__)


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that automatically loads configuration from a tiered set of config files.

    This class walks the filesystem upwards from the entrypoint that calls it, a configurable number of times,
    collecting every `Crosscloud.common.yaml` it finds.

    The discovered files are merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax, with files
    closer to the entrypoint taking precedence.

    Example usage:
        from infra_crosscloud.lib.config import crosscloud_env

        crosscloud_env.get("team", "infrastructure")
        crosscloud_env.require("environment")

    """

    def __init__(self, limit=5, filename="Crosscloud.common.yaml"):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit)))
        logger.debug("Found configs in %s", configs)

        if configs:
            # expose the data from the loader as our UserDict backing store
            self.data = hiyapyco.load([str(path) for path in configs])

    def require(self, key: str) -> any:
        """
        Require a key from the configuration and return it. If not found, throw a `CrossCloudConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise CrossCloudConfigException(key)

    def _discover_configs(self, limit) -> list[Path]:
        """
        Find the path of the __main__ module that called this class, and walk upwards to find other files

        :param limit: Max parent directories to walk
        :return: Config paths, nearest first
        """
        config_paths = []

        main_module = sys.modules["__main__"]
        if not getattr(main_module, "__file__", None):
            logger.debug("No __file__ for __main__, skipping %s discovery", self.filename)
            return config_paths

        entrypoint = Path(main_module.__file__).absolute()
        logger.debug("Entrypoint: %s", entrypoint)

        # walk up the directory tree and find any files matching the name
        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root; a config may live there, but not above it
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


# Create our singleton object to avoid loading and merging configuration multiple times on import
crosscloud_env = HierarchicalConfig()
