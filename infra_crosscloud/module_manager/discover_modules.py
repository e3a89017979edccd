import pkgutil
from importlib import import_module

from pulumi import log

from infra_crosscloud.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

MODULES_PACKAGE = "infra_crosscloud.modules"


def _subpackages(package_name: str) -> list[str]:
    """Public subpackages of ``package_name``, sorted. Only the package itself is imported, not its children."""
    package = import_module(package_name)
    return sorted(
        info.name for info in pkgutil.iter_modules(package.__path__) if info.ispkg and not info.name.startswith("_")
    )


def discover_modules(package_name: str = MODULES_PACKAGE) -> dict[str, dict[str, LazyModule]]:
    """Find every module under ``infra_crosscloud/modules/{provider}/{module}``

    Module packages are keyed by their stack name, the package name in kebab case::

        {
            "multicloud": {
                "vpn-bridge": LazyModule(provider='multicloud', name='vpn_bridge'),
            },
        }

    :param package_name: Package holding one subpackage per provider
    :return: A mapping of providers to mappings of stack names to lazy modules
    """
    modules = {
        provider: {
            kebab_from_snake(name): LazyModule(provider, name) for name in _subpackages(f"{package_name}.{provider}")
        }
        for provider in _subpackages(package_name)
    }

    log.debug(f"discovered modules under `{package_name}`: {modules}")

    return modules
