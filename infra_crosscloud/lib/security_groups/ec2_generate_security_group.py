from typing import Optional

from pulumi_aws import ec2

from .types import SecurityGroupRule
from ..graph import TopologyGraph, ResourceKey
from ..tags import get_tags


def _rule_args(rule: SecurityGroupRule) -> dict:
    args = {
        "from_port": rule.from_port,
        "to_port": rule.to_port,
        "protocol": rule.protocol,
        "cidr_blocks": list(rule.cidr_blocks),
    }
    if rule.description:
        args["description"] = rule.description
    return args


def generate_security_group(
    graph: TopologyGraph,
    name: str,
    vpc: ResourceKey,
    ingress_rules: list[SecurityGroupRule],
    egress_rules: Optional[list[SecurityGroupRule]] = None,
    *,
    role: str,
) -> ResourceKey:
    """
    Declare a security group with inline rules

    Rules are inline so that a change to one rule set is a change to exactly one resource.

    :param graph: Topology to declare into
    :param name: Security group name
    :param vpc: VPC the security group belongs to
    :param ingress_rules: Ingress rules
    :param egress_rules: Egress rules. Leave unset to keep the EC2 default egress.
    :param role: Role of the security group for tagging (perimeter, vpn)
    :return: Key of the security group
    """
    props = {}
    if egress_rules is not None:
        props["egress"] = [_rule_args(rule) for rule in egress_rules]

    return graph.add(
        vpc.cloud,
        name,
        ec2.SecurityGroup,
        parent=vpc,
        name=name,
        vpc_id=vpc.ref("id"),
        ingress=[_rule_args(rule) for rule in ingress_rules],
        tags=get_tags("firewall", role, name=name),
        **props,
    )
