"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from openzfs_iac.configs.base import StackConfig
from openzfs_iac.configs.environment import ConfigValidationError, get_config
from openzfs_iac.configs.constants import (
    VPC_CIDR,
    SUBNET_CIDR_MASK,
    DEFAULT_TAGS,
    NFS_PORTS,
)

__all__ = [
    "StackConfig",
    "ConfigValidationError",
    "get_config",
    "VPC_CIDR",
    "SUBNET_CIDR_MASK",
    "DEFAULT_TAGS",
    "NFS_PORTS",
]
