import re
from typing import Optional, Union

from ..config import CrossCloudConfigException

MAX_NAME_LENGTH = 63
"""GCE resource names are limited to 63 characters"""

_name_pattern = re.compile(r"^[a-z]([-a-z0-9]*[a-z0-9])?$")


def resource_name(base_name: str, role: str, index: Optional[int] = None, suffix: Optional[str] = None) -> str:
    """
    Derive a resource name from the base name

    The name doubles as the reconciliation identity of the resource. Changing the base name
    renames every resource, which the engine treats as a replacement of the whole topology.

    Example::

        resource_name("test", "subnet", 0)                 # test-subnet-0
        resource_name("test", "router", 1, "interface")    # test-router-1-interface

    :param base_name: The bridge base name
    :param role: Role of the resource (vpc, subnet, vgw, router,...)
    :param index: Index of the resource within its role, if there is more than one
    :param suffix: Sub-role of an indexed resource
    :return: Resource name
    """
    parts: list[Union[str, int]] = [base_name, role]
    if index is not None:
        parts.append(index)
    if suffix:
        parts.append(suffix)
    return "-".join(str(part) for part in parts)


def validate_base_name(base_name: Optional[str], longest_suffix: str = "") -> str:
    """
    Ensure the base name produces valid resource names in both clouds

    :param base_name: The bridge base name
    :param longest_suffix: The longest role suffix that will be appended to the base name
    :return: The base name
    """
    if not base_name:
        raise CrossCloudConfigException("base_name")

    if not _name_pattern.match(base_name):
        raise CrossCloudConfigException(
            "base_name",
            f"`{base_name}` must start with a lowercase letter and contain only lowercase letters, digits and hyphens",
        )

    if len(base_name) + len(longest_suffix) > MAX_NAME_LENGTH:
        raise CrossCloudConfigException(
            "base_name",
            f"`{base_name}` is too long, `{base_name}{longest_suffix}` exceeds {MAX_NAME_LENGTH} characters",
        )

    return base_name
