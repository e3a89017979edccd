import logging
import os

from pulumi import get_stack, log, export

from infra_crosscloud.lib.config import get_provider_override
from infra_crosscloud.lib.utils import outputs_from_exports
from infra_crosscloud.module_manager import module_manager


def run_stack(provider: str, stack_name: str) -> None:
    """Build the module named after the stack and export its outputs

    :param provider: Provider to look the module up under, unless ``crosscloud:provider`` overrides it
    :param stack_name: The stack name, which is also the module name
    """
    override = get_provider_override()
    if override:
        log.debug(f"provider overridden from `{provider}` to `{override}`")
        provider = override

    exports = module_manager.get_module(provider, stack_name).run(stack_name)

    for name, value in outputs_from_exports(exports).items():
        export(name, value)


def run_active_stack(provider: str) -> None:
    """Build the module of the stack Pulumi is running

    :param provider: A provider
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(provider, stack)


# stdlib loggers: config loader, planner, topology diff
if os.getenv("CROSSCLOUD_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    logging.debug("crosscloud debug logging enabled")
