import json
from enum import Enum
from pathlib import Path
from typing import Type, Any, Iterable, Optional

import yaml
from dacite import from_dict, Config, MissingValueError, WrongTypeError, UnexpectedDataError
from pulumi import log, runtime

from infra_crosscloud.lib.base import ConfigType
from infra_crosscloud.lib.utils import snake_from_camel
from .exceptions import CrossCloudConfigException


def _parse_args_value(value: Any) -> Any:
    """Pulumi stores structured config values (lists, numbers) as JSON strings, plain strings stay as they are"""
    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def _stack_settings(items: Iterable[tuple[str, Any]], stack: str) -> dict:
    stack_prefix = stack + ":"

    return {k.removeprefix(stack_prefix): _parse_args_value(v) for k, v in items if k.startswith(stack_prefix)}


def get_raw_stack_config(stack: str) -> dict:
    """Read the running program's settings under the ``<stack>:`` namespace

    Reads Pulumi's runtime settings directly, so that keys can be discovered without knowing them upfront:
    the ``PULUMI_CONFIG`` environment the engine launched the program with, overlaid by ``set_all_config``.

    :param stack: Name of the stack, which is also the config namespace
    :return: Raw settings, keys without the namespace
    """
    settings = {**runtime.config.get_config_env(), **runtime.config.CONFIG.get()}
    config = _stack_settings(settings.items(), stack)

    log.debug(f"config dict for stack `{stack}` is {config}")

    return config


def get_stack_file_config(path: Path, stack: Optional[str] = None) -> tuple[str, dict]:
    """Read stack config from a ``Pulumi.<stack>.yaml`` file, outside of a Pulumi program

    :param path: Path to the stack settings file
    :param stack: Name of the stack, defaults to the one in the file name
    :return: The stack name and its raw config
    """
    stack = stack or path.name.removeprefix("Pulumi.").removesuffix(".yaml").removesuffix(".yml")

    with path.open() as f:
        settings = yaml.safe_load(f) or {}

    return stack, _stack_settings((settings.get("config") or {}).items(), stack)


def config_from_dict(data: dict, config_cls: Type[ConfigType]) -> ConfigType:
    """Map a raw config dict onto a config dataclass

    Keys are converted from camel case (Pulumi convention) to snake case (dataclass fields).
    Uses `dacite <https://github.com/konradhalas/dacite>`_ in strict mode, so unknown keys are rejected.

    :param data: Raw config, as read from the stack
    :param config_cls: The dataclass for the config
    :return: The config expressed as ``config_cls``
    """
    try:
        return from_dict(
            data_class=config_cls,
            data={snake_from_camel(k): v for k, v in data.items()},
            config=Config(
                cast=[Enum],
                strict=True,
            ),
        )
    except MissingValueError as e:
        raise CrossCloudConfigException(e.field_path) from e
    except WrongTypeError as e:
        raise CrossCloudConfigException(e.field_path, f"expected {e.field_type}, got `{e.value}`") from e
    except UnexpectedDataError as e:
        raise CrossCloudConfigException(", ".join(sorted(e.keys)), "unknown configuration variable") from e


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Map the running stack's settings onto a module config dataclass

    :param stack: Name of the stack
    :param config_cls: The module's config dataclass
    :return: Validated config
    """
    config = config_from_dict(get_raw_stack_config(stack), config_cls)

    log.debug(f"config for stack `{stack}` is {config}")

    return config
