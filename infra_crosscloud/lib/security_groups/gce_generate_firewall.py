from pulumi_gcp import compute

from .types import FirewallAllowRule
from ..graph import TopologyGraph, ResourceKey


def generate_firewall(
    graph: TopologyGraph,
    name: str,
    network: ResourceKey,
    allows: list[FirewallAllowRule],
    source_ranges: list[str],
) -> ResourceKey:
    """
    Declare an ingress firewall on a GCE network

    :param graph: Topology to declare into
    :param name: Firewall name
    :param network: Network the firewall applies to
    :param allows: Allowed protocols and ports
    :param source_ranges: Source CIDR blocks
    :return: Key of the firewall
    """
    return graph.add(
        network.cloud,
        name,
        compute.Firewall,
        parent=network,
        name=name,
        network=network.ref("self_link"),
        allows=[
            {"protocol": allow.protocol, "ports": list(allow.ports)} if allow.ports else {"protocol": allow.protocol}
            for allow in allows
        ],
        source_ranges=list(source_ranges),
    )
