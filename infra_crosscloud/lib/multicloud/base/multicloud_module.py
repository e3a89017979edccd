from abc import ABC

from pulumi import ResourceOptions, Config, log

from infra_crosscloud.lib.base import BaseModule, ConfigType
from infra_crosscloud.lib.graph import TopologyGraph, MaterializedGraph, materialize


class MultiCloudModule(BaseModule, ABC):
    """
    Base class for crosscloud modules that declare resources in more than one provider

    Modules plan their resources into a ``TopologyGraph`` first and materialize it afterwards, so that the whole
    topology is validated before the first resource is registered with any provider.
    """

    provider: str = "multicloud"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        # both are optional, the providers fall back to their own defaults
        self.aws_region = Config("aws").get("region")
        self.gcp_region = Config("gcp").get("region")
        self.gcp_project = Config("gcp").get("project")

        log.debug(
            f"module `{name}` targets aws region `{self.aws_region}`, "
            f"gcp project `{self.gcp_project}` region `{self.gcp_region}`"
        )

    def materialize(self, graph: TopologyGraph) -> MaterializedGraph:
        """
        Declare a planned topology under this module

        :param graph: Planned topology
        :return: The created resources
        """
        log.info(f"declaring {len(graph)} resources")

        return materialize(graph, self)
