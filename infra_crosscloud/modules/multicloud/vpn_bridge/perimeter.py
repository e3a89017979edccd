from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.security_groups import (
    SecurityGroupRule,
    FirewallAllowRule,
    ALL_PROTOCOLS,
    ANYWHERE,
    generate_security_group,
    generate_firewall,
)
from .constants import ICMP_ECHO_REQUEST
from .types import NetworkKeys, PerimeterKeys


def setup_aws_perimeter(
    graph: TopologyGraph, base_name: str, vpc: NetworkKeys, gcp_cidr: str, tcp_ports: list[int]
) -> PerimeterKeys:
    """
    Declare the AWS security groups

    - `fwl`: ping and the configured TCP ports from anywhere, egress to anywhere
    - `fwl-vpn`: everything from the GCP network
    """
    internet = generate_security_group(
        graph,
        resource_name(base_name, "fwl"),
        vpc.network,
        ingress_rules=[
            SecurityGroupRule(
                from_port=ICMP_ECHO_REQUEST,
                to_port=0,
                protocol="icmp",
                cidr_blocks=[ANYWHERE],
            ),
            *[
                SecurityGroupRule(from_port=port, to_port=port, protocol="tcp", cidr_blocks=[ANYWHERE])
                for port in tcp_ports
            ],
        ],
        egress_rules=[
            SecurityGroupRule(from_port=0, to_port=0, protocol=ALL_PROTOCOLS, cidr_blocks=[ANYWHERE]),
        ],
        role="perimeter",
    )

    vpn = generate_security_group(
        graph,
        resource_name(base_name, "fwl-vpn"),
        vpc.network,
        ingress_rules=[
            SecurityGroupRule(from_port=0, to_port=0, protocol=ALL_PROTOCOLS, cidr_blocks=[gcp_cidr]),
        ],
        role="vpn",
    )

    return PerimeterKeys(internet=internet, vpn=vpn)


def setup_gcp_perimeter(
    graph: TopologyGraph, base_name: str, network: NetworkKeys, aws_cidr: str, tcp_ports: list[int]
) -> PerimeterKeys:
    """
    Declare the GCP firewalls

    - `fwl-internet`: ping and the configured TCP ports from anywhere
    - `fwl-vpn`: ICMP, TCP and UDP from the AWS VPC
    """
    internet_allows = [FirewallAllowRule(protocol="icmp")]
    if tcp_ports:
        internet_allows.append(FirewallAllowRule(protocol="tcp", ports=[str(port) for port in tcp_ports]))

    internet = generate_firewall(
        graph,
        resource_name(base_name, "fwl-internet"),
        network.network,
        allows=internet_allows,
        source_ranges=[ANYWHERE],
    )

    vpn = generate_firewall(
        graph,
        resource_name(base_name, "fwl-vpn"),
        network.network,
        allows=[
            FirewallAllowRule(protocol="icmp"),
            FirewallAllowRule(protocol="tcp", ports=["0-65535"]),
            FirewallAllowRule(protocol="udp", ports=["0-65535"]),
        ],
        source_ranges=[aws_cidr],
    )

    return PerimeterKeys(internet=internet, vpn=vpn)
