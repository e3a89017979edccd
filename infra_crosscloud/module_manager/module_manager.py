from typing import Optional

from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Hands out crosscloud modules by provider and stack name"""

    def __init__(self, modules: Optional[dict[str, dict[str, LazyModule]]] = None):
        self.modules = discover_modules() if modules is None else modules

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Look up a module without importing it

        :param provider: Provider name (``multicloud``)
        :param module_name: Module name in kebab case, usually the stack name (``vpn-bridge``)
        :return: A LazyModule
        """
        if provider not in self.modules:
            raise ModuleNotFoundError(f"unknown provider `{provider}`, known providers are {sorted(self.modules)}")

        try:
            return self.modules[provider][module_name]
        except KeyError:
            raise ModuleNotFoundError(
                f"module `{module_name}` was not found under provider `{provider}`, "
                f"available modules are {sorted(self.modules[provider])}"
            ) from None


module_manager = _ModuleManager()
