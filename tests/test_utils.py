from dataclasses import dataclass

import pytest

from infra_crosscloud.lib.utils import kebab_from_snake, snake_from_camel, outputs_from_exports


@pytest.mark.parametrize(
    "value, expected",
    [
        ("vpn_bridge", "vpn-bridge"),
        ("bridge", "bridge"),
    ],
)
def test_kebab_from_snake(value, expected):
    assert kebab_from_snake(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("baseName", "base_name"),
        ("awsSubnetCidrs", "aws_subnet_cidrs"),
        ("gcpCidr", "gcp_cidr"),
        ("base_name", "base_name"),
        ("aws2Cidr", "aws2_cidr"),
    ],
)
def test_snake_from_camel(value, expected):
    assert snake_from_camel(value) == expected


@dataclass
class _Exports:
    vpc_id: str
    subnet_ids: list


def test_outputs_from_exports_converts_dataclasses():
    outputs = outputs_from_exports(_Exports(vpc_id="vpc-1", subnet_ids=("a", "b")))

    assert outputs == {"vpn-bridge": {"vpc_id": "vpc-1", "subnet_ids": ["a", "b"]}}


def test_outputs_from_exports_rejects_types():
    with pytest.raises(TypeError):
        outputs_from_exports({"kind": _Exports})
