from typing import Optional

from ..config import (
    tag_prefix,
    team,
    get_environment,
    get_stack,
    get_project,
)


def get_tags(service: str, role: str, group: Optional[str] = None, name: Optional[str] = None) -> dict:
    """
    Generate tag dict for AWS resources

    example tags:
      subnet-0 of the `test` bridge:
        Name = test-subnet-0
        crosscloud:environment = crosscloud-vpn-bridge
        crosscloud:service = subnet
        crosscloud:role = aws
        crosscloud:group = 0
        crosscloud:createdby = pulumi
        crosscloud:team = infrastructure
        crosscloud:project = crosscloud
        crosscloud:stack = vpn-bridge

      vpn connection of the `test` bridge:
        Name = test-vpn-conn
        crosscloud:service = vpn
        crosscloud:role = connection
        crosscloud:group = main
        ...

    :param service: This resource's "namespace" (vpc, subnet, vpn, firewall,...)
    :param role: The role this resource performs within the namespace (gateway, connection, perimeter,...)
    :param group: The group this resource belongs to (tunnel or subnet index). Leave unset to use "main".
    :param name: Value of the `Name` tag. Defaults to `{service}-{role}[-{group}]`.
    :return: Dict of tags
    """

    group_name = "main" if group is None else str(group)
    group_suffix = f"-{group}" if group is not None else ""

    return {
        "Name": name or f"{service}-{role}{group_suffix}",
        f"{tag_prefix}environment": get_environment(),
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group_name,
        f"{tag_prefix}team": team,
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
    }
