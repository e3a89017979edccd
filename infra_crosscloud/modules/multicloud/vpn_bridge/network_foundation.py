from pulumi_aws import ec2
from pulumi_gcp import compute

from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.tags import get_tags
from .constants import AWS, GCP
from .types import NetworkKeys


def setup_aws_network(graph: TopologyGraph, base_name: str, cidr: str, subnet_cidrs: list[str]) -> NetworkKeys:
    """
    Declare the AWS VPC and its subnets
    :param graph: Topology to declare into
    :param base_name: Bridge base name
    :param cidr: VPC CIDR block
    :param subnet_cidrs: Subnet CIDR blocks, in order
    :return: Keys of the VPC and subnets
    """
    vpc = graph.add(
        AWS,
        resource_name(base_name, "vpc"),
        ec2.Vpc,
        cidr_block=cidr,
        enable_dns_support=True,
        enable_dns_hostnames=True,
        tags=get_tags("vpc", AWS, name=base_name),
    )

    subnets = []
    for index, subnet_cidr in enumerate(subnet_cidrs):
        name = resource_name(base_name, "subnet", index)
        subnets.append(
            graph.add(
                AWS,
                name,
                ec2.Subnet,
                parent=vpc,
                vpc_id=vpc.ref("id"),
                cidr_block=subnet_cidr,
                map_public_ip_on_launch=True,
                tags=get_tags("subnet", AWS, index, name=name),
            )
        )

    return NetworkKeys(network=vpc, subnets=subnets)


def setup_gcp_network(graph: TopologyGraph, base_name: str, subnet_cidrs: list[str]) -> NetworkKeys:
    """
    Declare the GCP network and its subnetworks

    GCE networks have no address space of their own, the subnetworks carve it out.
    """
    network_name = resource_name(base_name, "vpc")
    network = graph.add(
        GCP,
        network_name,
        compute.Network,
        name=network_name,
        auto_create_subnetworks=False,
    )

    subnets = []
    for index, subnet_cidr in enumerate(subnet_cidrs):
        name = resource_name(base_name, "subnet", index)
        subnets.append(
            graph.add(
                GCP,
                name,
                compute.Subnetwork,
                parent=network,
                name=name,
                network=network.ref("id"),
                ip_cidr_range=subnet_cidr,
            )
        )

    return NetworkKeys(network=network, subnets=subnets)
