import logging

from infra_crosscloud.lib.config import CrossCloudConfigException
from infra_crosscloud.lib.graph import TopologyGraph
from infra_crosscloud.lib.naming import validate_base_name
from infra_crosscloud.lib.network import parse_cidr, validate_subnets, ensure_disjoint
from .config import VpnBridgeConfig
from .constants import LONGEST_ROLE_SUFFIX
from .dynamic_routing import setup_dynamic_routing
from .edge_gateways import setup_aws_gateways, setup_gcp_gateways
from .handshake import setup_handshake
from .network_foundation import setup_aws_network, setup_gcp_network
from .perimeter import setup_aws_perimeter, setup_gcp_perimeter
from .route_propagation import setup_default_routes
from .types import AwsTunnel, TopologyPlan, TUNNELS

logger = logging.getLogger(__name__)


def validate_config(config: VpnBridgeConfig) -> None:
    """
    Reject configuration that would produce a broken topology

    :param config: Bridge configuration
    """
    validate_base_name(config.base_name, LONGEST_ROLE_SUFFIX)

    aws_network = parse_cidr("aws_cidr", config.aws_cidr)
    gcp_network = parse_cidr("gcp_cidr", config.gcp_cidr)

    validate_subnets("aws_subnet_cidrs", aws_network, config.aws_subnet_cidrs)
    validate_subnets("gcp_subnet_cidrs", gcp_network, config.gcp_subnet_cidrs)

    ensure_disjoint("gcp_cidr", gcp_network, "aws_cidr", aws_network)

    for key in ("aws_perimeter_ports", "gcp_perimeter_ports"):
        for i, port in enumerate(getattr(config, key)):
            if not 0 < port < 65536:
                raise CrossCloudConfigException(f"{key}[{i}]", f"`{port}` is not a TCP port")


def plan_topology(config: VpnBridgeConfig, tunnels: tuple[AwsTunnel, ...] = TUNNELS) -> TopologyPlan:
    """
    Plan every resource of the bridge and validate the resulting graph

    Planning touches no provider. The same configuration always yields the same plan.

    :param config: Bridge configuration
    :param tunnels: AWS tunnels to build a GCP routing set for
    :return: The validated plan
    """
    validate_config(config)

    base_name = config.base_name
    graph = TopologyGraph()

    # network foundation
    aws_network = setup_aws_network(graph, base_name, config.aws_cidr, config.aws_subnet_cidrs)
    gcp_network = setup_gcp_network(graph, base_name, config.gcp_subnet_cidrs)

    # edge and gateway layer
    aws_edge = setup_aws_gateways(graph, base_name, aws_network)
    gcp_edge = setup_gcp_gateways(graph, base_name, gcp_network)

    # cross-cloud handshake and the BGP routing layer on top of it
    handshake = setup_handshake(graph, base_name, aws_edge, gcp_edge)
    tunnel_sets = setup_dynamic_routing(graph, base_name, gcp_network, gcp_edge, handshake, tunnels)

    default_route_table = setup_default_routes(graph, base_name, aws_network, aws_edge, config.gcp_cidr)

    aws_perimeter = setup_aws_perimeter(graph, base_name, aws_network, config.gcp_cidr, config.aws_perimeter_ports)
    gcp_perimeter = setup_gcp_perimeter(graph, base_name, gcp_network, config.aws_cidr, config.gcp_perimeter_ports)

    graph.validate()

    logger.debug("planned %d resources for `%s`", len(graph), base_name)

    return TopologyPlan(
        graph=graph,
        aws_network=aws_network,
        gcp_network=gcp_network,
        aws_edge=aws_edge,
        gcp_edge=gcp_edge,
        handshake=handshake,
        tunnel_sets=tunnel_sets,
        default_route_table=default_route_table,
        aws_perimeter=aws_perimeter,
        gcp_perimeter=gcp_perimeter,
    )
