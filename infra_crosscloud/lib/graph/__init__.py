from .types import ResourceKey, Ref, ResourceRecord, TopologyDiff
from .exceptions import DependencyCycleException, UnknownReferenceException, DuplicateResourceException
from .topology_graph import TopologyGraph
from .materialize import MaterializedGraph, materialize
