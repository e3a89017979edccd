from pulumi_aws import ec2
from pulumi_gcp import compute

from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.tags import get_tags
from .constants import AWS, GCP, CUSTOMER_GATEWAY_ASN, VPN_TYPE, IPSEC_FORWARDING_RULES
from .types import AwsEdgeKeys, GcpEdgeKeys, HandshakeKeys


def setup_handshake(
    graph: TopologyGraph,
    base_name: str,
    aws_edge: AwsEdgeKeys,
    gcp_edge: GcpEdgeKeys,
) -> HandshakeKeys:
    """
    Declare both ends of the IPsec handshake

    The reserved GCP address is read twice: AWS registers it as the customer gateway, and GCP forwards IPsec traffic
    arriving on it to its VPN gateway. The VPN connection generates the tunnel definitions the GCP routing layer
    consumes.

    :param graph: Topology to declare into
    :param base_name: Bridge base name
    :param aws_edge: AWS gateways
    :param gcp_edge: GCP reserved address and gateway
    :return: Keys of the customer gateway, the VPN connection and the forwarding rules
    """
    cgw_name = resource_name(base_name, "cgw")
    cgw = graph.add(
        AWS,
        cgw_name,
        ec2.CustomerGateway,
        bgp_asn=str(CUSTOMER_GATEWAY_ASN),
        ip_address=gcp_edge.address.ref("address"),
        type=VPN_TYPE,
        tags=get_tags("gateway", "customer", name=cgw_name),
    )

    connection_name = resource_name(base_name, "vpn-conn")
    connection = graph.add(
        AWS,
        connection_name,
        ec2.VpnConnection,
        parent=aws_edge.vpn_gateway,
        customer_gateway_id=cgw.ref("id"),
        vpn_gateway_id=aws_edge.vpn_gateway.ref("id"),
        type=VPN_TYPE,
        static_routes_only=False,
        tags=get_tags("vpn", "connection", name=connection_name),
    )

    forwarding_rules = []
    for suffix, protocol, port_range in IPSEC_FORWARDING_RULES:
        rule_name = resource_name(base_name, "fr", suffix=suffix)
        props = {"port_range": port_range} if port_range else {}
        forwarding_rules.append(
            graph.add(
                GCP,
                rule_name,
                compute.ForwardingRule,
                parent=gcp_edge.vpn_gateway,
                name=rule_name,
                ip_address=gcp_edge.address.ref("address"),
                ip_protocol=protocol,
                target=gcp_edge.vpn_gateway.ref("self_link"),
                **props,
            )
        )

    return HandshakeKeys(customer_gateway=cgw, vpn_connection=connection, forwarding_rules=forwarding_rules)
