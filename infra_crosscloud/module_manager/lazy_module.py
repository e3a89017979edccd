import inspect
from dataclasses import dataclass
from functools import cached_property
from importlib import import_module
from typing import Type, Optional

from pulumi import log, ResourceOptions

from infra_crosscloud.lib.base import BaseModule, ExportsType
from infra_crosscloud.lib.config import get_stack_config


@dataclass(frozen=True)
class LazyModule:
    """
    A module package that has been discovered but not imported.

    The package is imported the first time ``Module`` is read, so a stack only imports the provider SDKs
    of the module it runs.
    """

    provider: str
    """Provider directory the package lives in"""

    name: str
    """Name of the python package"""

    @property
    def path(self) -> str:
        return f".modules.{self.provider}.{self.name}"

    @cached_property
    def Module(self) -> Type[BaseModule]:
        package = import_module(self.path, "infra_crosscloud")

        candidates = [
            value
            for key, value in vars(package).items()
            if not key.startswith("_")
            and isinstance(value, type)
            and issubclass(value, BaseModule)
            and not inspect.isabstract(value)
        ]

        if not candidates:
            raise ModuleNotFoundError(f"`{self.path}` does not expose a `{BaseModule.__name__}` subclass")
        if len(candidates) > 1:
            raise ImportError(f"`{self.path}` exposes more than one module: {[c.__name__ for c in candidates]}")

        module_cls = candidates[0]
        if module_cls.provider != self.provider:
            raise ImportError(
                f"`{module_cls.__name__}` declares provider `{module_cls.provider}` but lives under `{self.provider}`"
            )

        log.debug(f"imported `{module_cls.__name__}` from `{self.path}`")

        return module_cls

    def run(self, stack_name: str, opts: Optional[ResourceOptions] = None) -> ExportsType:
        """Map the stack configuration onto the module's config dataclass and build the module

        :param stack_name: Stack name, also the name of the module's component resource
        :param opts: Forwarded to the module's ``pulumi.ComponentResource``
        :return: The module's exports
        """
        config = get_stack_config(stack_name, self.Module.get_config_type())

        return self.Module(stack_name, config, opts).run()
