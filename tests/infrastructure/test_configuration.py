"""Tests for stack configuration, naming, and tags."""

import pytest

from openzfs_iac.configs.base import StackConfig
from openzfs_iac.configs.environment import ConfigValidationError, get_config
from openzfs_iac.utils.naming import ResourceNamer
from openzfs_iac.utils.tags import create_tags


class FakeConfig:
    """Stands in for pulumi.Config with a fixed set of values."""

    def __init__(self, values: dict[str, str]) -> None:
        self.values = values

    def get(self, key: str) -> str | None:
        return self.values.get(key)


class TestStackConfig:
    """StackConfig defaults and helpers."""

    def test_defaults(self):
        config = StackConfig()

        assert config.environment == "dev"
        assert config.vpc_cidr == "10.10.0.0/24"
        assert config.subnet_cidr_mask == 28
        assert config.max_azs == 2
        assert config.instance_type == "t3.micro"
        assert config.root_volume_size_gib == 8
        assert config.root_volume_type == "gp3"
        assert config.storage_capacity_gib == 64
        assert config.throughput_capacity == 64
        assert config.backup_retention_days == 31
        assert len(config.nfs_ports) == 6

    def test_is_production(self):
        assert StackConfig().is_production is False
        assert StackConfig(environment="prod").is_production is True


class TestGetConfig:
    """Loading StackConfig from Pulumi stack config."""

    def test_empty_config_uses_defaults(self):
        assert get_config(FakeConfig({})) == StackConfig()

    def test_overrides(self):
        config = get_config(FakeConfig({
            "environment": "prod",
            "instance_type": "t3.small",
            "root_volume_size_gib": "16",
            "throughput_capacity": "128",
        }))

        assert config.environment == "prod"
        assert config.instance_type == "t3.small"
        assert config.root_volume_size_gib == 16
        assert config.throughput_capacity == 128
        assert config.storage_capacity_gib == 64

    def test_non_integer_value_rejected(self):
        with pytest.raises(ConfigValidationError, match="max_azs"):
            get_config(FakeConfig({"max_azs": "two"}))


class TestNamingAndTags:
    """Resource naming and tag helpers."""

    def test_resource_naming(self):
        namer = ResourceNamer(project="openzfs", environment="dev")

        assert namer.name("vpc") == "openzfs-dev-vpc"
        assert namer.base_name == "openzfs-dev"

    def test_create_tags(self):
        tags = create_tags("dev", "test-resource", ExtraTag="extra-value")

        assert tags == {
            "Project": "openzfs",
            "ManagedBy": "pulumi",
            "Environment": "dev",
            "Name": "test-resource",
            "ExtraTag": "extra-value",
        }
