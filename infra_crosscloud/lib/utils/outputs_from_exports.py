from dataclasses import fields, is_dataclass
from functools import singledispatch
from typing import Any

from pulumi import get_stack


@singledispatch
def _to_output(value: Any) -> Any:
    if isinstance(value, type):
        raise TypeError(f"Unexpected value '{value}' of type '{type(value)}'")
    if is_dataclass(value):
        return {f.name: _to_output(getattr(value, f.name)) for f in fields(value)}
    # scalars and pulumi Outputs
    return value


@_to_output.register(list)
@_to_output.register(tuple)
def _(value) -> list:
    return [_to_output(v) for v in value]


@_to_output.register(dict)
def _(value: dict) -> dict:
    return {k: _to_output(v) for k, v in value.items()}


def outputs_from_exports(exports: Any) -> dict:
    """Turn a module's exports dataclass into stack outputs

    Nested dataclasses become dicts, tuples become lists, ``Output``s are passed through untouched.

    :param exports: A module exports dataclass instance
    :return: The outputs, under the stack name
    """
    return {get_stack(): _to_output(exports)}
