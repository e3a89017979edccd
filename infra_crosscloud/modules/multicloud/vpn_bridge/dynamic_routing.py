from pulumi_gcp import compute

from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import resource_name
from infra_crosscloud.lib.network import inside_tunnel_cidr
from .constants import GCP, AMAZON_SIDE_ASN, IKE_VERSION, BGP_ADVERTISE_MODE
from .types import AwsTunnel, GcpEdgeKeys, HandshakeKeys, NetworkKeys, TunnelSetKeys, TUNNELS


def setup_dynamic_routing(
    graph: TopologyGraph,
    base_name: str,
    network: NetworkKeys,
    gcp_edge: GcpEdgeKeys,
    handshake: HandshakeKeys,
    tunnels: tuple[AwsTunnel, ...] = TUNNELS,
) -> list[TunnelSetKeys]:
    """
    Declare one router, tunnel, interface and BGP peer per AWS tunnel

    Every set has its own router, so a failing BGP session only takes down its own tunnel.
    """
    return [_setup_tunnel_set(graph, base_name, network, gcp_edge, handshake, tunnel) for tunnel in tunnels]


def _setup_tunnel_set(
    graph: TopologyGraph,
    base_name: str,
    network: NetworkKeys,
    gcp_edge: GcpEdgeKeys,
    handshake: HandshakeKeys,
    tunnel: AwsTunnel,
) -> TunnelSetKeys:
    connection = handshake.vpn_connection

    router_name = resource_name(base_name, "router", tunnel.index)
    router = graph.add(
        GCP,
        router_name,
        compute.Router,
        parent=network.network,
        name=router_name,
        network=network.network.ref("name"),
        bgp={
            # mirrors the ASN AWS knows this side by
            "asn": handshake.customer_gateway.ref("bgp_asn", int),
            "advertise_mode": BGP_ADVERTISE_MODE,
        },
    )

    tunnel_name = resource_name(base_name, "vpn-tunnel", tunnel.index)
    vpn_tunnel = graph.add(
        GCP,
        tunnel_name,
        compute.VPNTunnel,
        parent=router,
        name=tunnel_name,
        ike_version=IKE_VERSION,
        peer_ip=connection.ref(tunnel.address),
        shared_secret=connection.ref(tunnel.preshared_key),
        target_vpn_gateway=gcp_edge.vpn_gateway.ref("self_link"),
        router=router.ref("id"),
        # the gateway only receives IPsec traffic once these exist
        depends_on=handshake.forwarding_rules,
    )

    interface_name = resource_name(base_name, "router", tunnel.index, "interface")
    interface = graph.add(
        GCP,
        interface_name,
        compute.RouterInterface,
        parent=router,
        name=interface_name,
        router=router.ref("name"),
        ip_range=connection.ref(tunnel.cgw_inside_address, inside_tunnel_cidr),
        vpn_tunnel=vpn_tunnel.ref("name"),
    )

    peer_name = resource_name(base_name, "router", tunnel.index, "peer")
    peer = graph.add(
        GCP,
        peer_name,
        compute.RouterPeer,
        parent=router,
        name=peer_name,
        router=router.ref("name"),
        peer_ip_address=connection.ref(tunnel.vgw_inside_address),
        peer_asn=AMAZON_SIDE_ASN,
        interface=interface.ref("name"),
    )

    return TunnelSetKeys(tunnel=tunnel, router=router, vpn_tunnel=vpn_tunnel, interface=interface, peer=peer)
