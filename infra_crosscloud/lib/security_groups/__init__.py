from .types import SecurityGroupRule, FirewallAllowRule, ALL_PROTOCOLS, ANYWHERE
from .ec2_generate_security_group import generate_security_group
from .gce_generate_firewall import generate_firewall
