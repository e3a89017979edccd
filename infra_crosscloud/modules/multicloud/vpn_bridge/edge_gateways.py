from pulumi_aws import ec2
from pulumi_gcp import compute

from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.tags import get_tags
from .constants import AWS, GCP, AMAZON_SIDE_ASN
from .types import NetworkKeys, AwsEdgeKeys, GcpEdgeKeys


def setup_aws_gateways(graph: TopologyGraph, base_name: str, vpc: NetworkKeys) -> AwsEdgeKeys:
    """
    Declare the internet gateway and the virtual private gateway of the AWS VPC
    """
    igw_name = resource_name(base_name, "igw")
    igw = graph.add(
        AWS,
        igw_name,
        ec2.InternetGateway,
        parent=vpc.network,
        vpc_id=vpc.network.ref("id"),
        tags=get_tags("gateway", "internet", name=igw_name),
    )

    vgw_name = resource_name(base_name, "vgw")
    vgw = graph.add(
        AWS,
        vgw_name,
        ec2.VpnGateway,
        parent=vpc.network,
        vpc_id=vpc.network.ref("id"),
        # pinned, the GCP BGP peers are configured with it
        amazon_side_asn=str(AMAZON_SIDE_ASN),
        tags=get_tags("gateway", "vpn", name=vgw_name),
    )

    return AwsEdgeKeys(internet_gateway=igw, vpn_gateway=vgw)


def setup_gcp_gateways(graph: TopologyGraph, base_name: str, network: NetworkKeys) -> GcpEdgeKeys:
    """
    Reserve the public address of the GCP end of the VPN and declare the classic VPN gateway
    """
    address_name = resource_name(base_name, "eip-aws-cgw")
    address = graph.add(
        GCP,
        address_name,
        compute.Address,
        name=address_name,
    )

    vgw_name = resource_name(base_name, "vgw")
    vgw = graph.add(
        GCP,
        vgw_name,
        compute.VPNGateway,
        parent=network.network,
        name=vgw_name,
        network=network.network.ref("id"),
    )

    return GcpEdgeKeys(address=address, vpn_gateway=vgw)
