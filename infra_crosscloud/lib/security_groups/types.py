from dataclasses import dataclass
from typing import Optional

ALL_PROTOCOLS = "-1"
"""EC2 protocol value matching every protocol"""

ANYWHERE = "0.0.0.0/0"


@dataclass
class SecurityGroupRule:
    from_port: int
    """The start port (or ICMP type number if protocol is "icmp" or "icmpv6")"""

    to_port: int
    """The end port (or ICMP code if protocol is "icmp")"""

    protocol: str
    """
    The protocol. If not icmp, icmpv6, tcp, udp, or all ("-1") use the
    [protocol number](https://www.iana.org/assignments/protocol-numbers/protocol-numbers.xhtml)
    """

    cidr_blocks: list[str]
    """List of CIDR blocks"""

    description: Optional[str] = None
    """Description of the rule"""


@dataclass
class FirewallAllowRule:
    protocol: str
    """The IP protocol (tcp, udp, icmp, esp, ah, sctp, ipip, all) or an IP protocol number"""

    ports: Optional[list[str]] = None
    """Ports or port ranges ("22", "0-65535"), only for tcp, udp and sctp. Leave unset for all ports."""
