from pathlib import Path

import pytest

from infra_crosscloud.lib.config import CrossCloudConfigException, config_from_dict, get_stack_file_config
from infra_crosscloud.lib.config.mapper import get_raw_stack_config, get_stack_config
from infra_crosscloud.modules.multicloud.vpn_bridge.config import VpnBridgeConfig
from infra_crosscloud.modules.multicloud.vpn_bridge.constants import (
    AWS_VPC_CIDR,
    AWS_SUBNET_CIDRS,
    GCP_VPC_CIDR,
    GCP_SUBNET_CIDRS,
)


def test_defaults_fill_everything_but_the_base_name():
    config = config_from_dict({"baseName": "test"}, VpnBridgeConfig)

    assert config == VpnBridgeConfig(
        base_name="test",
        aws_cidr=AWS_VPC_CIDR,
        aws_subnet_cidrs=AWS_SUBNET_CIDRS,
        gcp_cidr=GCP_VPC_CIDR,
        gcp_subnet_cidrs=GCP_SUBNET_CIDRS,
        aws_perimeter_ports=[22],
        gcp_perimeter_ports=[22],
    )


def test_defaults_are_not_shared():
    first = config_from_dict({"baseName": "first"}, VpnBridgeConfig)
    first.aws_subnet_cidrs.append("10.0.3.0/24")

    second = config_from_dict({"baseName": "second"}, VpnBridgeConfig)

    assert second.aws_subnet_cidrs == AWS_SUBNET_CIDRS


def test_camel_case_overrides():
    config = config_from_dict(
        {
            "baseName": "test",
            "gcpCidr": "10.1.0.0/16",
            "gcpSubnetCidrs": ["10.1.0.0/24"],
            "gcpPerimeterPorts": [22, 443],
        },
        VpnBridgeConfig,
    )

    assert config.gcp_cidr == "10.1.0.0/16"
    assert config.gcp_subnet_cidrs == ["10.1.0.0/24"]
    assert config.gcp_perimeter_ports == [22, 443]
    assert config.aws_perimeter_ports == [22]


def test_missing_base_name():
    with pytest.raises(CrossCloudConfigException) as e:
        config_from_dict({}, VpnBridgeConfig)

    assert e.value.key == "base_name"
    assert e.value.reason == "missing required configuration variable"


def test_wrong_type():
    with pytest.raises(CrossCloudConfigException) as e:
        config_from_dict({"baseName": "test", "awsPerimeterPorts": ["ssh"]}, VpnBridgeConfig)

    assert e.value.key == "aws_perimeter_ports"


def test_unknown_key():
    with pytest.raises(CrossCloudConfigException, match="unknown configuration variable") as e:
        config_from_dict({"baseName": "test", "tunnelCount": 3}, VpnBridgeConfig)

    assert e.value.key == "tunnel_count"


def test_raw_stack_config(stack_config):
    stack_config(
        {
            "vpn-bridge:baseName": "test",
            "vpn-bridge:gcpPerimeterPorts": "[22, 443]",
            "aws:region": "us-west-2",
            "crosscloud:provider": "multicloud",
        },
    )

    assert get_raw_stack_config("vpn-bridge") == {"baseName": "test", "gcpPerimeterPorts": [22, 443]}


def test_stack_config_maps_runtime_settings(stack_config):
    stack_config({"vpn-bridge:baseName": "runtime", "vpn-bridge:awsPerimeterPorts": "[443]"})

    config = get_stack_config("vpn-bridge", VpnBridgeConfig)

    assert config.base_name == "runtime"
    assert config.aws_perimeter_ports == [443]
    assert config.gcp_perimeter_ports == [22]


def test_stack_file_config(tmp_path: Path):
    settings = tmp_path / "Pulumi.vpn-bridge.yaml"
    settings.write_text(
        "config:\n"
        "  aws:region: us-west-2\n"
        "  vpn-bridge:baseName: test\n"
        "  vpn-bridge:awsSubnetCidrs:\n"
        "    - 10.0.0.0/24\n"
    )

    stack, raw_config = get_stack_file_config(settings)

    assert stack == "vpn-bridge"
    assert raw_config == {"baseName": "test", "awsSubnetCidrs": ["10.0.0.0/24"]}


def test_stack_file_config_explicit_stack(tmp_path: Path):
    settings = tmp_path / "bridge.yaml"
    settings.write_text("config:\n  other:baseName: other\n")

    assert get_stack_file_config(settings, "other") == ("other", {"baseName": "other"})


def test_empty_stack_file(tmp_path: Path):
    settings = tmp_path / "Pulumi.vpn-bridge.yaml"
    settings.write_text("")

    assert get_stack_file_config(settings) == ("vpn-bridge", {})
