from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional


@dataclass(frozen=True)
class ResourceKey:
    """Stable identity of a resource: its cloud and its name"""

    cloud: str
    """Cloud the resource lives in (aws, gcp)"""

    name: str
    """Resource name, unique within the cloud"""

    def ref(self, attribute: str, transform: Optional[Callable[[Any], Any]] = None) -> "Ref":
        """Reference an attribute of this resource

        :param attribute: Attribute of the materialized resource (``id``, ``self_link``, ``tunnel1_address``,...)
        :param transform: Function applied to the value once it is known
        :return: A lazy reference
        """
        return Ref(self, attribute, transform)

    def __str__(self):
        return f"{self.cloud}:{self.name}"


@dataclass(frozen=True)
class Ref:
    """
    Placeholder for an attribute of another resource.

    The value may only exist after the referenced resource is created (a generated address, a pre-shared key).
    The materializer resolves it to a Pulumi ``Output`` and applies ``transform`` lazily, once the value is known.
    """

    key: ResourceKey
    attribute: str
    transform: Optional[Callable[[Any], Any]] = None


def iter_refs(value: Any) -> Iterator[Ref]:
    """Find every ``Ref`` nested in a property value

    :param value: A property value (scalars, lists, dicts, refs)
    :return: Generator of refs
    """
    if isinstance(value, Ref):
        yield value
    elif isinstance(value, dict):
        for v in value.values():
            yield from iter_refs(v)
    elif isinstance(value, (list, tuple)):
        for v in value:
            yield from iter_refs(v)


@dataclass
class ResourceRecord:
    key: ResourceKey
    """Identity of the resource"""

    kind: type
    """Pulumi resource class to materialize (``ec2.Vpc``, ``compute.VPNTunnel``,...)"""

    props: dict
    """Desired state, keyword arguments of ``kind``. Values may contain ``Ref``s."""

    parent: Optional[ResourceKey] = None
    """Owning resource, if any"""

    depends_on: tuple[ResourceKey, ...] = ()
    """Ordering requirements that are not visible as attribute references"""

    @property
    def references(self) -> set[ResourceKey]:
        """Resources whose attributes this record reads"""
        return {ref.key for ref in iter_refs(self.props)}

    @property
    def upstream(self) -> set[ResourceKey]:
        """Every resource that must exist before this one"""
        upstream = self.references | set(self.depends_on)
        if self.parent:
            upstream.add(self.parent)
        return upstream


@dataclass
class TopologyDiff:
    added: set[ResourceKey] = field(default_factory=set)
    """Declared only in the new graph"""

    removed: set[ResourceKey] = field(default_factory=set)
    """Declared only in the old graph"""

    changed: set[ResourceKey] = field(default_factory=set)
    """Declared in both, with a different desired state"""

    affected: set[ResourceKey] = field(default_factory=set)
    """Changed or added resources plus everything downstream of them in the new graph"""

    @property
    def empty(self) -> bool:
        return not (self.added or self.removed or self.changed)
