import logging
from graphlib import TopologicalSorter, CycleError
from typing import Iterable, Iterator, Optional

from .exceptions import DependencyCycleException, DuplicateResourceException, UnknownReferenceException
from .types import ResourceKey, ResourceRecord, TopologyDiff

logger = logging.getLogger(__name__)


class TopologyGraph:
    """
    Declared resources and the dependency edges between them.

    Resources may be declared in any order. Edges come from attribute references (``Ref``), from explicit
    ``depends_on`` ordering hints and from ownership (``parent``). ``order`` sorts the graph topologically and is
    the only order in which resources are materialized.

    Example::

        graph = TopologyGraph()
        vpc = graph.add("aws", "test-vpc", ec2.Vpc, cidr_block="10.0.0.0/22")
        graph.add("aws", "test-subnet-0", ec2.Subnet, parent=vpc, vpc_id=vpc.ref("id"), cidr_block="10.0.0.0/24")
        graph.order()  # [aws:test-vpc, aws:test-subnet-0]
    """

    def __init__(self):
        self._records: dict[ResourceKey, ResourceRecord] = {}

    def add(
        self,
        cloud: str,
        resource_name: str,
        kind: type,
        *,
        parent: Optional[ResourceKey] = None,
        depends_on: Iterable[ResourceKey] = (),
        **props,
    ) -> ResourceKey:
        """Declare a resource

        :param cloud: Cloud the resource lives in
        :param resource_name: Name of the resource, unique within ``cloud``
        :param kind: Pulumi resource class
        :param parent: Owning resource
        :param depends_on: Resources that must exist first, without an attribute reference to them
        :param props: Desired state of the resource
        :return: Key of the declared resource
        """
        key = ResourceKey(cloud, resource_name)
        if key in self._records:
            raise DuplicateResourceException(key)

        self._records[key] = ResourceRecord(
            key=key,
            kind=kind,
            props=props,
            parent=parent,
            depends_on=tuple(depends_on),
        )
        return key

    def __getitem__(self, key: ResourceKey) -> ResourceRecord:
        return self._records[key]

    def __contains__(self, key: ResourceKey) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[ResourceRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def keys(self) -> list[ResourceKey]:
        return list(self._records)

    def in_cloud(self, cloud: str) -> list[ResourceRecord]:
        return [record for record in self if record.key.cloud == cloud]

    def validate(self) -> None:
        """Fail on dangling references and dependency cycles

        Run before anything is submitted to a provider.
        """
        for record in self:
            for upstream in sorted(record.upstream, key=str):
                if upstream not in self._records:
                    raise UnknownReferenceException(record.key, upstream)

        self.order()

    def order(self) -> list[ResourceKey]:
        """Sort resources so that every resource comes after everything it depends on

        :return: Resource keys in apply order
        """
        sorter = TopologicalSorter()
        for key, record in self._records.items():
            sorter.add(key, *sorted(record.upstream, key=str))

        try:
            order = list(sorter.static_order())
        except CycleError as e:
            raise DependencyCycleException(e.args[1]) from e

        for key in order:
            if key not in self._records:
                raise UnknownReferenceException(self._first_referrer(key), key)

        return order

    def dependents(self, key: ResourceKey) -> set[ResourceKey]:
        """Every resource downstream of ``key``, directly or transitively

        :param key: Resource key
        :return: Downstream resource keys
        """
        downstream: dict[ResourceKey, set[ResourceKey]] = {k: set() for k in self._records}
        for record in self:
            for upstream in record.upstream:
                downstream.setdefault(upstream, set()).add(record.key)

        found: set[ResourceKey] = set()
        pending = [key]
        while pending:
            for dependent in downstream.get(pending.pop(), ()):
                if dependent not in found:
                    found.add(dependent)
                    pending.append(dependent)
        return found

    def diff(self, new: "TopologyGraph") -> TopologyDiff:
        """Compare this graph (current) with ``new`` (desired)

        :param new: The desired graph
        :return: Which resources would be added, removed, changed, and what is downstream of the changes
        """
        diff = TopologyDiff(
            added={k for k in new.keys() if k not in self},
            removed={k for k in self.keys() if k not in new},
            changed={k for k in self.keys() if k in new and self[k] != new[k]},
        )

        diff.affected = diff.changed | diff.added
        for key in diff.changed | diff.added:
            diff.affected |= new.dependents(key)

        logger.debug("topology diff: %s", diff)

        return diff

    def _first_referrer(self, key: ResourceKey) -> Optional[ResourceKey]:
        return next((record.key for record in self if key in record.upstream), None)
