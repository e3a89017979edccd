from dataclasses import dataclass, field
from typing import Any

from pulumi import Output, Resource, ResourceOptions, log

from .topology_graph import TopologyGraph
from .types import Ref, ResourceKey


@dataclass
class MaterializedGraph:
    """Pulumi resources created from a ``TopologyGraph``, by key"""

    resources: dict[ResourceKey, Resource] = field(default_factory=dict)

    def __getitem__(self, key: ResourceKey) -> Resource:
        return self.resources[key]

    def resolve(self, value: Any) -> Any:
        """Replace every ``Ref`` nested in ``value`` with the referenced ``Output``

        Transforms are chained with ``apply`` so they only run once the upstream value is known.

        :param value: A property value
        :return: The value as a Pulumi input
        """
        if isinstance(value, Ref):
            output: Output = getattr(self.resources[value.key], value.attribute)
            return output.apply(value.transform) if value.transform else output
        elif isinstance(value, dict):
            return {k: self.resolve(v) for k, v in value.items()}
        elif isinstance(value, (list, tuple)):
            return [self.resolve(v) for v in value]
        else:
            return value


def materialize(graph: TopologyGraph, parent: Resource) -> MaterializedGraph:
    """
    Declare every resource of ``graph`` with Pulumi, in dependency order

    The graph is validated first, so a cycle or dangling reference fails before anything is registered.
    Pulumi then owns creation, parallelism and retries.

    :param graph: Validated topology
    :param parent: Resource to parent resources without an owner to (usually the module)
    :return: The created resources
    """
    graph.validate()

    materialized = MaterializedGraph()

    for key in graph.order():
        record = graph[key]

        log.debug(f"declaring `{key}` as `{record.kind.__name__}`")

        materialized.resources[key] = record.kind(
            key.name,
            **materialized.resolve(record.props),
            opts=ResourceOptions(
                parent=materialized[record.parent] if record.parent else parent,
                depends_on=[materialized[k] for k in record.depends_on] or None,
            ),
        )

    return materialized
