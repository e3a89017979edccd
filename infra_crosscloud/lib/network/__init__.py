from .cidr import parse_cidr, validate_subnets, ensure_disjoint, inside_tunnel_cidr
