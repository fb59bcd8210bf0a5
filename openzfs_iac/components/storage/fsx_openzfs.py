"""
FSx for OpenZFS Component for Network-Attached Storage.

Access Control - Who Can Mount:
1. Clients inside the VPC CIDR, on the NFS ports opened by the file system
   security group.
2. The root volume exports to every client ("*") read-write with crossmnt,
   so child volumes are reachable through the root mount.

Placement:
- A single isolated subnet (SINGLE_AZ_1). No route to or from the internet.

Data Protection:
- Daily automatic backups at 16:00 UTC, kept for 31 days.
- Tags copied to backups, volumes and snapshots.
- Deleting the file system also deletes child volumes and snapshots.
- A final backup is taken on deletion in prod only.

Root Volume:
- ZSTD compression, 128 KiB record size.
- One user quota: UID 1 limited to 2 GiB.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.configs.base import StackConfig
from openzfs_iac.configs.constants import (
    FILE_SYSTEM_NAME_TAG,
    FSX_DEFAULTS,
    FSX_DELETE_OPTIONS,
    NFS_EXPORT_CLIENTS,
    NFS_EXPORT_OPTIONS,
    USER_AND_GROUP_QUOTAS,
)
from openzfs_iac.utils.tags import create_tags


@dataclass
class FileSystemOutputs:
    """Output values from FSx for OpenZFS component."""
    file_system_id: pulumi.Output[str]
    dns_name: pulumi.Output[str]
    root_volume_id: pulumi.Output[str]


class OpenZfsFileSystemComponent(pulumi.ComponentResource):
    """
    FSx for OpenZFS file system in an isolated subnet.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_id: pulumi.Input[str],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("openzfs:storage:OpenZfsFileSystem", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        root_volume_configuration = aws.fsx.OpenZfsFileSystemRootVolumeConfigurationArgs(
            copy_tags_to_snapshots=True,
            data_compression_type=FSX_DEFAULTS["data_compression_type"],
            nfs_exports=aws.fsx.OpenZfsFileSystemRootVolumeConfigurationNfsExportsArgs(
                client_configurations=[
                    aws.fsx.OpenZfsFileSystemRootVolumeConfigurationNfsExportsClientConfigurationArgs(
                        clients=NFS_EXPORT_CLIENTS,
                        options=list(NFS_EXPORT_OPTIONS),
                    ),
                ],
            ),
            read_only=False,
            record_size_kib=FSX_DEFAULTS["record_size_kib"],
            user_and_group_quotas=[
                aws.fsx.OpenZfsFileSystemRootVolumeConfigurationUserAndGroupQuotaArgs(
                    id=quota_id,
                    storage_capacity_quota_gib=quota_gib,
                    type=quota_type,
                )
                for quota_id, quota_gib, quota_type in USER_AND_GROUP_QUOTAS
            ],
        )

        self.file_system = aws.fsx.OpenZfsFileSystem(
            f"{name}-fsx",
            deployment_type=FSX_DEFAULTS["deployment_type"],
            subnet_ids=[subnet_id],
            security_group_ids=[security_group_id],
            storage_capacity=config.storage_capacity_gib,
            storage_type=FSX_DEFAULTS["storage_type"],
            throughput_capacity=config.throughput_capacity,
            automatic_backup_retention_days=config.backup_retention_days,
            daily_automatic_backup_start_time=FSX_DEFAULTS["daily_automatic_backup_start_time"],
            copy_tags_to_backups=True,
            copy_tags_to_volumes=True,
            disk_iops_configuration=aws.fsx.OpenZfsFileSystemDiskIopsConfigurationArgs(
                mode=FSX_DEFAULTS["disk_iops_mode"],
            ),
            delete_options=list(FSX_DELETE_OPTIONS),
            skip_final_backup=not config.is_production,
            root_volume_configuration=root_volume_configuration,
            weekly_maintenance_start_time=FSX_DEFAULTS["weekly_maintenance_start_time"],
            tags=create_tags(environment, FILE_SYSTEM_NAME_TAG),
            opts=child_opts,
        )

        self.register_outputs({
            "file_system_id": self.file_system.id,
            "dns_name": self.file_system.dns_name,
            "root_volume_id": self.file_system.root_volume_id,
        })

    def get_outputs(self) -> FileSystemOutputs:
        """Get file system output values."""
        return FileSystemOutputs(
            file_system_id=self.file_system.id,
            dns_name=self.file_system.dns_name,
            root_volume_id=self.file_system.root_volume_id,
        )
