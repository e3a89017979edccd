from pulumi_aws import ec2

from infra_crosscloud.lib.graph import TopologyGraph, ResourceKey
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.security_groups import ANYWHERE
from infra_crosscloud.lib.tags import get_tags
from .constants import AWS
from .types import AwsEdgeKeys, NetworkKeys


def setup_default_routes(
    graph: TopologyGraph, base_name: str, vpc: NetworkKeys, aws_edge: AwsEdgeKeys, gcp_cidr: str
) -> ResourceKey:
    """
    Take over the default route table of the VPC

    Internet traffic leaves through the internet gateway, traffic for the GCP network through the VPN gateway.
    Routes learned over BGP are propagated from the VPN gateway as well.

    :param graph: Topology to declare into
    :param base_name: Bridge base name
    :param vpc: AWS VPC
    :param aws_edge: AWS gateways
    :param gcp_cidr: Address space of the GCP network
    :return: Key of the default route table
    """
    name = resource_name(base_name, "rtb-default")
    return graph.add(
        AWS,
        name,
        ec2.DefaultRouteTable,
        parent=vpc.network,
        default_route_table_id=vpc.network.ref("default_route_table_id"),
        routes=[
            {
                "cidr_block": ANYWHERE,
                "gateway_id": aws_edge.internet_gateway.ref("id"),
            },
            {
                "cidr_block": gcp_cidr,
                "gateway_id": aws_edge.vpn_gateway.ref("id"),
            },
        ],
        propagating_vgws=[aws_edge.vpn_gateway.ref("id")],
        tags=get_tags("routetable", "default", name=name),
    )
