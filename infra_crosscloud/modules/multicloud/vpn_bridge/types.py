from dataclasses import dataclass

from infra_crosscloud.lib.graph import ResourceKey, TopologyGraph


@dataclass(frozen=True)
class AwsTunnel:
    """
    One of the two tunnel definitions AWS generates for a VPN connection.

    AWS numbers them 1 and 2 and exposes each one as a group of `tunnel{number}_*` attributes on the connection.
    """

    number: int

    @property
    def index(self) -> int:
        """Zero-based index used in resource names"""
        return self.number - 1

    @property
    def address(self) -> str:
        return f"tunnel{self.number}_address"

    @property
    def preshared_key(self) -> str:
        return f"tunnel{self.number}_preshared_key"

    @property
    def cgw_inside_address(self) -> str:
        return f"tunnel{self.number}_cgw_inside_address"

    @property
    def vgw_inside_address(self) -> str:
        return f"tunnel{self.number}_vgw_inside_address"


TUNNELS = (AwsTunnel(1), AwsTunnel(2))


@dataclass
class NetworkKeys:
    network: ResourceKey
    subnets: list[ResourceKey]


@dataclass
class AwsEdgeKeys:
    internet_gateway: ResourceKey
    vpn_gateway: ResourceKey


@dataclass
class GcpEdgeKeys:
    address: ResourceKey
    """Reserved public address, shared by both ends of the handshake"""

    vpn_gateway: ResourceKey


@dataclass
class HandshakeKeys:
    customer_gateway: ResourceKey
    vpn_connection: ResourceKey
    forwarding_rules: list[ResourceKey]


@dataclass
class TunnelSetKeys:
    tunnel: AwsTunnel
    router: ResourceKey
    vpn_tunnel: ResourceKey
    interface: ResourceKey
    peer: ResourceKey

    @property
    def keys(self) -> list[ResourceKey]:
        return [self.router, self.vpn_tunnel, self.interface, self.peer]


@dataclass
class PerimeterKeys:
    internet: ResourceKey
    """Internet-facing rule set"""

    vpn: ResourceKey
    """Rule set trusting the peer cloud"""


@dataclass
class TopologyPlan:
    graph: TopologyGraph
    aws_network: NetworkKeys
    gcp_network: NetworkKeys
    aws_edge: AwsEdgeKeys
    gcp_edge: GcpEdgeKeys
    handshake: HandshakeKeys
    tunnel_sets: list[TunnelSetKeys]
    default_route_table: ResourceKey
    aws_perimeter: PerimeterKeys
    gcp_perimeter: PerimeterKeys
