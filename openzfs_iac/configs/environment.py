"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from openzfs_iac.configs.base import StackConfig


class ConfigValidationError(ValueError):
    """Raised when a stack config value cannot be parsed."""


def _get_int(config: pulumi.Config, key: str, default: int) -> int:
    raw = config.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigValidationError(
            f"Config value '{key}' must be an integer, got {raw!r}"
        ) from e


def get_config(config: pulumi.Config | None = None) -> StackConfig:
    """
    Load stack configuration from Pulumi stack config.

    All keys are optional; missing keys fall back to StackConfig defaults.

    Args:
        config: Config to read from (defaults to the project namespace)

    Returns:
        StackConfig: Validated configuration object

    Raises:
        ConfigValidationError: If a numeric value is not an integer
    """
    if config is None:
        config = pulumi.Config()

    defaults = StackConfig()

    return StackConfig(
        environment=config.get("environment") or defaults.environment,
        vpc_cidr=config.get("vpc_cidr") or defaults.vpc_cidr,
        subnet_cidr_mask=_get_int(config, "subnet_cidr_mask", defaults.subnet_cidr_mask),
        max_azs=_get_int(config, "max_azs", defaults.max_azs),
        instance_type=config.get("instance_type") or defaults.instance_type,
        root_volume_size_gib=_get_int(
            config, "root_volume_size_gib", defaults.root_volume_size_gib
        ),
        storage_capacity_gib=_get_int(
            config, "storage_capacity_gib", defaults.storage_capacity_gib
        ),
        throughput_capacity=_get_int(
            config, "throughput_capacity", defaults.throughput_capacity
        ),
        backup_retention_days=_get_int(
            config, "backup_retention_days", defaults.backup_retention_days
        ),
    )
