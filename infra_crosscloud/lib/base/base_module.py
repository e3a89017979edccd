from abc import ABC, abstractmethod
from functools import cache
from typing import Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_crosscloud.lib.base.types import ConfigType, ExportsType
from infra_crosscloud.lib.utils import outputs_from_exports


class BaseModule(ComponentResource, ABC):
    """
    A crosscloud module: one Pulumi component per stack.

    Subclasses implement ``build``. The type hint of its ``config`` parameter is the dataclass the stack
    configuration is mapped onto, and its return value is exported as the stack outputs.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Provider directory the module is discovered under"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(self.type_token(), name, None, opts)

        self.config = config

    @classmethod
    def type_token(cls) -> str:
        return f"pkg:crosscloud:{cls.provider}:{cls.__name__.lower()}"

    @classmethod
    @cache
    def get_config_type(cls) -> Type[ConfigType]:
        config_type = get_type_hints(cls.build).get("config")
        if config_type is None:
            raise TypeError(f"`{cls.__name__}.build` has no type hint for its `config` parameter")
        return config_type

    def run(self) -> ExportsType:
        """Build the module and register its exports as the component's outputs

        :return: The exports dataclass
        """
        log.debug(f"building `{self.type_token()}`")

        exports = self.build(self.config)

        self.register_outputs(outputs_from_exports(exports))

        return exports

    @abstractmethod
    def build(self, config) -> ExportsType:
        """Declare the module's resources

        :return: An exports dataclass
        """
