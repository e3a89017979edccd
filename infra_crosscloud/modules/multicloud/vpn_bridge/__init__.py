from .vpn_bridge import VpnBridge
