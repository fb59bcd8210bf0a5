"""
Base configuration dataclass for stack settings.

Provides the optional properties bag passed to OpenzfsStack. Every field
has a default, so a stack can be declared with no configuration at all.
"""

from dataclasses import dataclass

from openzfs_iac.configs.constants import (
    FSX_DEFAULTS,
    INSTANCE_DEFAULTS,
    MAX_AZS,
    NFS_PORTS,
    SUBNET_CIDR_MASK,
    VPC_CIDR,
)


@dataclass(frozen=True)
class StackConfig:
    """
    Configuration for the OpenZFS stack.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        vpc_cidr: Address block of the VPC
        subnet_cidr_mask: Prefix length of every subnet
        max_azs: Number of availability zones to spread subnets over
        instance_type: EC2 instance type for the consumer instance
        root_volume_size_gib: Root EBS volume size in GiB
        root_volume_type: Root EBS volume type
        storage_capacity_gib: FSx storage capacity in GiB
        throughput_capacity: FSx throughput capacity in MB/s
        backup_retention_days: Days to keep automatic FSx backups
        nfs_ports: (protocol, from_port, to_port, description) ingress specs
    """
    environment: str = "dev"
    vpc_cidr: str = VPC_CIDR
    subnet_cidr_mask: int = SUBNET_CIDR_MASK
    max_azs: int = MAX_AZS
    instance_type: str = str(INSTANCE_DEFAULTS["instance_type"])
    root_volume_size_gib: int = int(INSTANCE_DEFAULTS["root_volume_size_gib"])
    root_volume_type: str = str(INSTANCE_DEFAULTS["root_volume_type"])
    storage_capacity_gib: int = int(FSX_DEFAULTS["storage_capacity_gib"])
    throughput_capacity: int = int(FSX_DEFAULTS["throughput_capacity"])
    backup_retention_days: int = int(FSX_DEFAULTS["automatic_backup_retention_days"])
    nfs_ports: tuple[tuple[str, int, int, str], ...] = NFS_PORTS

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"
