"""Fixed values of the bridge topology. These are contracts with the provider APIs, keep them stable."""

AWS = "aws"
GCP = "gcp"

AWS_VPC_CIDR = "10.0.0.0/22"
AWS_SUBNET_CIDRS = ["10.0.0.0/24", "10.0.1.0/24", "10.0.2.0/24"]

GCP_VPC_CIDR = "10.0.4.0/22"
GCP_SUBNET_CIDRS = ["10.0.4.0/24", "10.0.5.0/24", "10.0.6.0/24"]

CUSTOMER_GATEWAY_ASN = 65000
"""ASN of the GCP side, registered on the AWS customer gateway and mirrored by the GCP routers"""

AMAZON_SIDE_ASN = 64512
"""ASN of the AWS virtual private gateway, used by the GCP BGP peers"""

VPN_TYPE = "ipsec.1"
IKE_VERSION = 1
BGP_ADVERTISE_MODE = "DEFAULT"

PERIMETER_TCP_PORTS = [22]
"""TCP ports reachable from the internet"""

ICMP_ECHO_REQUEST = 8

IPSEC_FORWARDING_RULES = [
    # (role suffix, protocol, port range)
    ("esp", "ESP", None),
    ("udp500", "UDP", "500"),
    ("udp4500", "UDP", "4500"),
]
"""Traffic the GCP classic VPN gateway must receive on the reserved address: ESP, IKE and IKE NAT-T"""

LONGEST_ROLE_SUFFIX = "-router-0-interface"
