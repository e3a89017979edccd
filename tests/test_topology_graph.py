import pytest

from infra_crosscloud.lib.graph import (
    ResourceKey,
    TopologyGraph,
    DependencyCycleException,
    DuplicateResourceException,
    UnknownReferenceException,
)


class Network:
    pass


class Subnet:
    pass


class Tunnel:
    pass


def _graph(subnet_cidr="10.0.0.0/24") -> TopologyGraph:
    graph = TopologyGraph()
    # declared out of order on purpose
    subnet = ResourceKey("aws", "test-subnet-0")
    graph.add("aws", "test-tunnel", Tunnel, depends_on=[subnet], peer=ResourceKey("gcp", "test-vpc").ref("name"))
    vpc = graph.add("aws", "test-vpc", Network, cidr_block="10.0.0.0/22")
    graph.add("aws", "test-subnet-0", Subnet, parent=vpc, vpc_id=vpc.ref("id"), cidr_block=subnet_cidr)
    graph.add("gcp", "test-vpc", Network)
    return graph


def test_order_puts_upstream_first():
    graph = _graph()

    order = graph.order()

    assert len(order) == 4
    assert order.index(ResourceKey("aws", "test-vpc")) < order.index(ResourceKey("aws", "test-subnet-0"))
    assert order.index(ResourceKey("aws", "test-subnet-0")) < order.index(ResourceKey("aws", "test-tunnel"))
    assert order.index(ResourceKey("gcp", "test-vpc")) < order.index(ResourceKey("aws", "test-tunnel"))


def test_same_name_in_two_clouds():
    graph = _graph()

    assert ResourceKey("aws", "test-vpc") in graph
    assert ResourceKey("gcp", "test-vpc") in graph
    assert [record.key.name for record in graph.in_cloud("gcp")] == ["test-vpc"]


def test_duplicate_name():
    graph = _graph()

    with pytest.raises(DuplicateResourceException) as e:
        graph.add("aws", "test-vpc", Network)

    assert e.value.key == ResourceKey("aws", "test-vpc")


def test_upstream_combines_refs_parent_and_hints():
    graph = _graph()

    assert graph[ResourceKey("aws", "test-tunnel")].upstream == {
        ResourceKey("aws", "test-subnet-0"),
        ResourceKey("gcp", "test-vpc"),
    }
    assert graph[ResourceKey("aws", "test-subnet-0")].references == {ResourceKey("aws", "test-vpc")}


def test_unknown_reference():
    graph = TopologyGraph()
    graph.add("gcp", "test-tunnel", Tunnel, peer_ip=ResourceKey("aws", "test-vpn-conn").ref("tunnel1_address"))

    with pytest.raises(UnknownReferenceException) as e:
        graph.validate()

    assert e.value.key == ResourceKey("gcp", "test-tunnel")
    assert e.value.reference == ResourceKey("aws", "test-vpn-conn")


def test_cycle():
    graph = TopologyGraph()
    a = ResourceKey("aws", "a")
    b = ResourceKey("aws", "b")
    graph.add("aws", "a", Network, peer=b.ref("id"))
    graph.add("aws", "b", Network, peer=a.ref("id"))

    with pytest.raises(DependencyCycleException) as e:
        graph.validate()

    assert set(e.value.cycle) == {a, b}


def test_dependents_are_transitive():
    graph = _graph()

    assert graph.dependents(ResourceKey("aws", "test-vpc")) == {
        ResourceKey("aws", "test-subnet-0"),
        ResourceKey("aws", "test-tunnel"),
    }
    assert graph.dependents(ResourceKey("aws", "test-tunnel")) == set()


def test_diff_of_identical_graphs_is_empty():
    diff = _graph().diff(_graph())

    assert diff.empty
    assert diff.affected == set()


def test_diff_reports_change_and_downstream():
    diff = _graph().diff(_graph(subnet_cidr="10.0.1.0/24"))

    assert diff.changed == {ResourceKey("aws", "test-subnet-0")}
    assert diff.affected == {ResourceKey("aws", "test-subnet-0"), ResourceKey("aws", "test-tunnel")}
    assert not diff.added and not diff.removed


def test_diff_added_and_removed():
    current = _graph()
    desired = _graph()
    desired.add("gcp", "test-subnet-0", Subnet, network=ResourceKey("gcp", "test-vpc").ref("id"))

    diff = current.diff(desired)

    assert diff.added == {ResourceKey("gcp", "test-subnet-0")}
    assert desired.diff(current).removed == {ResourceKey("gcp", "test-subnet-0")}
