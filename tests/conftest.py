import asyncio

import pulumi
import pytest

GCP_ADDRESS = "198.51.100.7"

TUNNEL_OUTPUTS = {
    "tunnel1Address": "203.0.113.10",
    "tunnel1PresharedKey": "tunnel-one-key",
    "tunnel1CgwInsideAddress": "169.254.10.2",
    "tunnel1VgwInsideAddress": "169.254.10.1",
    "tunnel2Address": "203.0.113.20",
    "tunnel2PresharedKey": "tunnel-two-key",
    "tunnel2CgwInsideAddress": "169.254.20.2",
    "tunnel2VgwInsideAddress": "169.254.20.1",
}


class CrossCloudMocks(pulumi.runtime.Mocks):
    """Answers resource registrations the way the providers would, and records what was registered"""

    def __init__(self):
        self.registered: dict[tuple[str, str], dict] = {}

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        cloud = args.typ.split(":")[0]
        self.registered[cloud, args.name] = dict(args.inputs)

        outputs = dict(args.inputs)
        if args.typ == "aws:ec2/vpc:Vpc":
            outputs["defaultRouteTableId"] = f"{args.name}-rtb"
        elif args.typ == "aws:ec2/vpnConnection:VpnConnection":
            outputs.update(TUNNEL_OUTPUTS)
        elif args.typ == "gcp:compute/address:Address":
            outputs["address"] = GCP_ADDRESS

        if cloud == "gcp":
            outputs.setdefault("selfLink", f"https://www.googleapis.com/compute/v1/{args.name}")

        return [f"{args.name}-id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def inputs(self, cloud: str, name: str) -> dict:
        return self.registered[cloud, name]


_mocks = CrossCloudMocks()

# pulumi.log schedules its messages on the current loop, module discovery logs at import
asyncio.set_event_loop(asyncio.new_event_loop())

# must be in place before any resource or tag is declared
pulumi.runtime.set_mocks(_mocks, project="crosscloud", stack="vpn-bridge", preview=False)


@pytest.fixture(scope="session")
def mocks() -> CrossCloudMocks:
    return _mocks


@pytest.fixture
def stack_config():
    """Seed the program's stack settings the way the engine does, cleared after the test"""

    def seed(settings: dict):
        pulumi.runtime.set_all_config(settings)

    yield seed

    pulumi.runtime.set_all_config({})
