from dataclasses import dataclass, field

from pulumi import Output

from .constants import (
    AWS_VPC_CIDR,
    AWS_SUBNET_CIDRS,
    GCP_VPC_CIDR,
    GCP_SUBNET_CIDRS,
    PERIMETER_TCP_PORTS,
)


@dataclass
class VpnBridgeConfig:
    base_name: str
    """
    Prefix of every resource name (`{base_name}-vpc`, `{base_name}-vpn-tunnel-0`,...)
    Names are the identity of the resources: changing this replaces the whole topology, it is not an in-place rename.
    """

    aws_cidr: str = AWS_VPC_CIDR
    """CIDR block of the AWS VPC, must not overlap `gcp_cidr`"""

    aws_subnet_cidrs: list[str] = field(default_factory=lambda: list(AWS_SUBNET_CIDRS))
    """AWS subnets, inside `aws_cidr`"""

    gcp_cidr: str = GCP_VPC_CIDR
    """Address space of the GCP network, must not overlap `aws_cidr`"""

    gcp_subnet_cidrs: list[str] = field(default_factory=lambda: list(GCP_SUBNET_CIDRS))
    """GCP subnetworks, inside `gcp_cidr`"""

    aws_perimeter_ports: list[int] = field(default_factory=lambda: list(PERIMETER_TCP_PORTS))
    """TCP ports the AWS security group accepts from the internet"""

    gcp_perimeter_ports: list[int] = field(default_factory=lambda: list(PERIMETER_TCP_PORTS))
    """TCP ports the GCP firewall accepts from the internet"""


@dataclass
class VpnBridgeExports:
    aws_vpc_id: Output[str]
    aws_subnet_ids: list[Output[str]]
    gcp_vpc_id: Output[str]
    gcp_subnet_ids: list[Output[str]]
