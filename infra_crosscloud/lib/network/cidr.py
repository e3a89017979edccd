import ipaddress
from typing import Union

from ..config import CrossCloudConfigException

IPv4Or6Network = Union[ipaddress.IPv4Network, ipaddress.IPv6Network]

INSIDE_TUNNEL_PREFIX = 30
"""AWS allocates a /30 link network per tunnel for the BGP session"""


def parse_cidr(key: str, cidr: str) -> IPv4Or6Network:
    """
    Parse a CIDR block, rejecting host bits and malformed values

    :param key: Config key the value came from, used in the error
    :param cidr: CIDR block (10.0.0.0/22)
    :return: The parsed network
    """
    try:
        return ipaddress.ip_network(cidr, strict=True)
    except (TypeError, ValueError) as e:
        raise CrossCloudConfigException(key, f"`{cidr}` is not a valid CIDR block: {e}") from e


def validate_subnets(key: str, network: IPv4Or6Network, subnet_cidrs: list[str]) -> list[IPv4Or6Network]:
    """
    Ensure every subnet sits inside the network and that no two subnets overlap

    :param key: Config key of the subnet list, used in errors
    :param network: The parent network
    :param subnet_cidrs: Subnet CIDR blocks
    :return: The parsed subnets, in order
    """
    if not subnet_cidrs:
        raise CrossCloudConfigException(key, "at least one subnet is required")

    subnets = [parse_cidr(f"{key}[{i}]", cidr) for i, cidr in enumerate(subnet_cidrs)]

    for i, subnet in enumerate(subnets):
        if subnet.version != network.version or not subnet.subnet_of(network):
            raise CrossCloudConfigException(f"{key}[{i}]", f"`{subnet}` is not inside `{network}`")

        for j, other in enumerate(subnets[:i]):
            if subnet.overlaps(other):
                raise CrossCloudConfigException(f"{key}[{i}]", f"`{subnet}` overlaps `{other}` ({key}[{j}])")

    return subnets


def ensure_disjoint(key: str, network: IPv4Or6Network, other_key: str, other: IPv4Or6Network) -> None:
    """
    Ensure two networks bridged by the VPN do not overlap

    BGP happily accepts overlapping prefixes and routing silently misbehaves, so this has to be caught here.

    :param key: Config key of ``network``
    :param network: First network
    :param other_key: Config key of ``other``
    :param other: Second network
    """
    if network.version == other.version and network.overlaps(other):
        raise CrossCloudConfigException(key, f"`{network}` overlaps `{other}` ({other_key})")


def inside_tunnel_cidr(address: str) -> str:
    """
    Turn a generated inside-tunnel address into the link network the router interface expects

    :param address: Inside-tunnel address (169.254.10.2)
    :return: Address with the tunnel prefix length (169.254.10.2/30)
    """
    return f"{address}/{INSIDE_TUNNEL_PREFIX}"
