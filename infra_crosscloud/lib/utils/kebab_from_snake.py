import re

_camel_boundary = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def kebab_from_snake(v: str) -> str:
    """Convert string from snake to kebab case

    :param v: String in snake case
    :return: String in kebab case
    """
    return "-".join(v.split("_"))


def snake_from_camel(v: str) -> str:
    """Convert a Pulumi config key from camel to snake case

    ``baseName`` becomes ``base_name``, ``awsSubnetCidrs`` becomes ``aws_subnet_cidrs``.
    Keys that are already snake case pass through unchanged.

    :param v: String in camel case
    :return: String in snake case
    """
    return _camel_boundary.sub("_", v).lower()
