from pulumi import log

from infra_crosscloud.lib.multicloud.base import MultiCloudModule
from .config import VpnBridgeConfig, VpnBridgeExports
from .plan import plan_topology


class VpnBridge(MultiCloudModule):
    """
    An AWS VPC and a GCP network joined by two IPsec tunnels with BGP routing.

    Every resource name derives from `base_name`. Changing it replaces the whole bridge.
    """

    def build(self, config: VpnBridgeConfig) -> VpnBridgeExports:
        # plan and validate everything before the first resource is registered
        plan = plan_topology(config)

        log.info(f"bridging aws `{config.aws_cidr}` and gcp `{config.gcp_cidr}` as `{config.base_name}`")

        resources = self.materialize(plan.graph)

        return VpnBridgeExports(
            aws_vpc_id=resources[plan.aws_network.network].id,
            aws_subnet_ids=[resources[key].id for key in plan.aws_network.subnets],
            gcp_vpc_id=resources[plan.gcp_network.network].name,
            gcp_subnet_ids=[resources[key].name for key in plan.gcp_network.subnets],
        )
