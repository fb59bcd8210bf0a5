"""
Infrastructure constants for the OpenZFS stack.

Contains the network layout, NFS ports, and FSx for OpenZFS settings.
"""

from typing import Final

# Project identifier used in resource names and tags
PROJECT_NAME: Final[str] = "openzfs"

# VPC Configuration
VPC_CIDR: Final[str] = "10.10.0.0/24"
SUBNET_CIDR_MASK: Final[int] = 28
MAX_AZS: Final[int] = 2

# Subnet group names, allocated in this order
SUBNET_GROUPS: Final[dict[str, str]] = {
    "public": "Public",
    "isolated": "Isolated",
}

# EC2 consumer instance
INSTANCE_DEFAULTS: Final[dict[str, str | int]] = {
    "instance_type": "t3.micro",
    "root_volume_size_gib": 8,
    "root_volume_type": "gp3",
}

# Amazon Linux 2 AMI lookup
AMAZON_LINUX_2_AMI_FILTERS: Final[dict[str, str]] = {
    "name": "amzn2-ami-hvm-*-x86_64-gp2",
    "virtualization-type": "hvm",
}

# AWS managed policy granting Systems Manager access
SSM_MANAGED_POLICY_ARN: Final[str] = (
    "arn:aws:iam::aws:policy/AmazonSSMManagedInstanceCore"
)

# NFS ports as (protocol, from_port, to_port, description)
NFS_PORTS: Final[tuple[tuple[str, int, int, str], ...]] = (
    ("tcp", 111, 111, "Remote procedure call for NFS"),
    ("tcp", 2049, 2049, "NFS server daemon"),
    ("tcp", 20001, 20003, "NFS mount, status monitor, and lock daemon"),
    ("udp", 111, 111, "Remote procedure call for NFS"),
    ("udp", 2049, 2049, "NFS server daemon"),
    ("udp", 20001, 20003, "NFS mount, status monitor, and lock daemon"),
)

# FSx for OpenZFS configuration
FSX_DEFAULTS: Final[dict[str, str | int]] = {
    "deployment_type": "SINGLE_AZ_1",
    "automatic_backup_retention_days": 31,
    "daily_automatic_backup_start_time": "16:00",
    "disk_iops_mode": "AUTOMATIC",
    "data_compression_type": "ZSTD",
    "record_size_kib": 128,
    "throughput_capacity": 64,
    "weekly_maintenance_start_time": "6:17:00",
    "storage_capacity_gib": 64,
    "storage_type": "SSD",
}

FSX_DELETE_OPTIONS: Final[list[str]] = ["DELETE_CHILD_VOLUMES_AND_SNAPSHOTS"]

# Root volume NFS export: every client, read-write, crossing mount points
NFS_EXPORT_CLIENTS: Final[str] = "*"
NFS_EXPORT_OPTIONS: Final[list[str]] = ["rw", "crossmnt"]

# Per-principal quotas as (id, storage_capacity_quota_gib, type)
USER_AND_GROUP_QUOTAS: Final[tuple[tuple[int, int, str], ...]] = (
    (1, 2, "USER"),
)

FILE_SYSTEM_NAME_TAG: Final[str] = "fsx-for-openzfs"

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}
