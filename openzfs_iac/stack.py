"""
OpenZFS stack: an FSx for OpenZFS file system and an EC2 instance that mounts it.

Declares, in dependency order:
1. IAM role (SSM-managed instance)
2. VPC: public + isolated subnets over two zones, no NAT
3. File system security group (NFS ports from the VPC CIDR)
4. EC2 instance in a public subnet
5. FSx for OpenZFS in an isolated subnet

Ports and the subnet layout are validated before anything is registered,
so a bad configuration leaves the resource graph empty.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.configs.base import StackConfig
from openzfs_iac.configs.constants import SUBNET_GROUPS

from openzfs_iac.components.networking.ports import IngressRule, build_ingress_rules
from openzfs_iac.components.networking.subnets import (
    SubnetConfiguration,
    SubnetLayoutError,
    SubnetPlan,
    SubnetType,
    assign_availability_zones,
    plan_subnets,
)
from openzfs_iac.components.networking.vpc import VpcComponent
from openzfs_iac.components.networking.security_groups import FileSystemSecurityGroupComponent
from openzfs_iac.components.security.iam_roles import IamRolesComponent
from openzfs_iac.components.compute.ec2_instance import Ec2InstanceComponent
from openzfs_iac.components.storage.fsx_openzfs import OpenZfsFileSystemComponent


@dataclass
class StackOutputs:
    """Output values exported by the stack."""
    vpc_id: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    isolated_subnet_ids: list[pulumi.Output[str]]
    file_system_security_group_id: pulumi.Output[str]
    instance_id: pulumi.Output[str]
    instance_private_ip: pulumi.Output[str]
    instance_public_ip: pulumi.Output[str]
    instance_role_arn: pulumi.Output[str]
    file_system_id: pulumi.Output[str]
    file_system_dns_name: pulumi.Output[str]
    file_system_root_volume_id: pulumi.Output[str]


def subnet_configurations(config: StackConfig) -> list[SubnetConfiguration]:
    """Public and isolated subnet groups, in allocation order."""
    return [
        SubnetConfiguration(
            name=SUBNET_GROUPS["public"],
            subnet_type=SubnetType.PUBLIC,
            cidr_mask=config.subnet_cidr_mask,
        ),
        SubnetConfiguration(
            name=SUBNET_GROUPS["isolated"],
            subnet_type=SubnetType.PRIVATE_ISOLATED,
            cidr_mask=config.subnet_cidr_mask,
        ),
    ]


def lookup_availability_zones(max_azs: int) -> list[str]:
    """
    Get up to max_azs available zones in the provider's region.

    Raises:
        SubnetLayoutError: If the region reports no available zones
    """
    zones = aws.get_availability_zones(state="available").names[:max_azs]
    if not zones:
        raise SubnetLayoutError("No availability zones are available in this region")
    return list(zones)


class OpenzfsStack(pulumi.ComponentResource):
    """
    FSx for OpenZFS with a consumer EC2 instance in a two-zone VPC.

    Every cross reference (subnets, security group, instance profile)
    points at a resource declared by this component.
    """

    def __init__(
        self,
        name: str,
        config: StackConfig | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        config = config or StackConfig()

        # Validate before registering anything, including this component
        ingress_rules: list[IngressRule] = build_ingress_rules(config.nfs_ports)
        planned = plan_subnets(
            config.vpc_cidr,
            subnet_configurations(config),
            config.max_azs,
        )
        subnet_plans: list[SubnetPlan] = assign_availability_zones(
            planned,
            lookup_availability_zones(config.max_azs),
        )

        super().__init__("openzfs:index:OpenzfsStack", name, None, opts)
        self.config = config

        child_opts = pulumi.ResourceOptions(parent=self)
        environment = config.environment

        # --- IAM ---
        self.iam_roles = IamRolesComponent(
            name=name,
            environment=environment,
            opts=child_opts,
        )
        iam_outputs = self.iam_roles.get_outputs()

        # --- Networking ---
        self.vpc = VpcComponent(
            name=name,
            environment=environment,
            cidr_block=config.vpc_cidr,
            subnet_plans=subnet_plans,
            opts=child_opts,
        )
        vpc_outputs = self.vpc.get_outputs()

        self.security_group = FileSystemSecurityGroupComponent(
            name=name,
            environment=environment,
            vpc_id=vpc_outputs.vpc_id,
            vpc_cidr_block=vpc_outputs.cidr_block,
            ingress_rules=ingress_rules,
            opts=child_opts,
        )
        sg_outputs = self.security_group.get_outputs()

        # --- Compute ---
        self.instance = Ec2InstanceComponent(
            name=f"{name}-consumer",
            environment=environment,
            config=config,
            subnet_id=vpc_outputs.public_subnet_ids[0],
            instance_profile_name=iam_outputs.instance_profile_name,
            opts=child_opts,
        )
        ec2_outputs = self.instance.get_outputs()

        # --- Storage ---
        self.file_system = OpenZfsFileSystemComponent(
            name=name,
            environment=environment,
            config=config,
            subnet_id=vpc_outputs.isolated_subnet_ids[0],
            security_group_id=sg_outputs.file_system_sg_id,
            opts=child_opts,
        )
        fs_outputs = self.file_system.get_outputs()

        self._outputs = StackOutputs(
            vpc_id=vpc_outputs.vpc_id,
            public_subnet_ids=vpc_outputs.public_subnet_ids,
            isolated_subnet_ids=vpc_outputs.isolated_subnet_ids,
            file_system_security_group_id=sg_outputs.file_system_sg_id,
            instance_id=ec2_outputs.instance_id,
            instance_private_ip=ec2_outputs.private_ip,
            instance_public_ip=ec2_outputs.public_ip,
            instance_role_arn=iam_outputs.instance_role_arn,
            file_system_id=fs_outputs.file_system_id,
            file_system_dns_name=fs_outputs.dns_name,
            file_system_root_volume_id=fs_outputs.root_volume_id,
        )

        self.register_outputs({
            "vpc_id": self._outputs.vpc_id,
            "instance_id": self._outputs.instance_id,
            "file_system_id": self._outputs.file_system_id,
        })

        pulumi.log.info(
            f"Declared {name}: {len(subnet_plans)} subnets, "
            f"{len(ingress_rules)} NFS ingress rules"
        )

    def get_outputs(self) -> StackOutputs:
        """Get stack output values."""
        return self._outputs
