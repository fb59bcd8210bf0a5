"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public and isolated subnets, IGW, route tables
- FileSystemSecurityGroupComponent: NFS security group for the file system

Planning helpers:
- plan_subnets / assign_availability_zones: subnet layout
- Port / IngressRule / build_ingress_rules: validated ingress rules
"""

from openzfs_iac.components.networking.ports import (
    IngressRule,
    InvalidPortError,
    Port,
    Protocol,
    build_ingress_rules,
)
from openzfs_iac.components.networking.subnets import (
    SubnetConfiguration,
    SubnetLayoutError,
    SubnetPlan,
    SubnetType,
    assign_availability_zones,
    plan_subnets,
)
from openzfs_iac.components.networking.vpc import VpcComponent, VpcOutputs
from openzfs_iac.components.networking.security_groups import (
    FileSystemSecurityGroupComponent,
    SecurityGroupOutputs,
)

__all__ = [
    "IngressRule",
    "InvalidPortError",
    "Port",
    "Protocol",
    "build_ingress_rules",
    "SubnetConfiguration",
    "SubnetLayoutError",
    "SubnetPlan",
    "SubnetType",
    "assign_availability_zones",
    "plan_subnets",
    "VpcComponent",
    "VpcOutputs",
    "FileSystemSecurityGroupComponent",
    "SecurityGroupOutputs",
]
