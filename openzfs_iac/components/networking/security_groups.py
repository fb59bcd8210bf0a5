"""
Security Group Component for the FSx for OpenZFS file system.

Access Control - What Can Reach the File System:
1. Anything inside the VPC CIDR on the NFS ports:
   - TCP/UDP 111: Remote procedure call for NFS (portmapper)
   - TCP/UDP 2049: NFS server daemon
   - TCP/UDP 20001-20003: NFS mount, status monitor, and lock daemon
2. Anything else -> DENIED

Rules are sourced from the VPC block rather than from the instance's
security group, so every client in the VPC can mount the file system.
Egress is open, matching the default outbound rule of a security group.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.components.networking.ports import IngressRule
from openzfs_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security group component."""
    file_system_sg_id: pulumi.Output[str]


class FileSystemSecurityGroupComponent(pulumi.ComponentResource):
    """
    Security group for the file system.

    Opens each ingress rule to the VPC address block only.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        vpc_cidr_block: pulumi.Input[str],
        ingress_rules: list[IngressRule],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("openzfs:networking:FileSystemSecurityGroup", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.file_system_sg = aws.ec2.SecurityGroup(
            f"{name}-fsx-sg",
            description="Security group for FSx for OpenZFS file system",
            vpc_id=vpc_id,
            tags=create_tags(environment, f"{name}-fsx-sg"),
            opts=child_opts,
        )

        self.ingress_rules: list[aws.vpc.SecurityGroupIngressRule] = []
        for rule in ingress_rules:
            port = rule.port
            self.ingress_rules.append(aws.vpc.SecurityGroupIngressRule(
                f"{name}-fsx-ingress-{port.label}",
                security_group_id=self.file_system_sg.id,
                ip_protocol=port.protocol.value,
                from_port=port.from_port,
                to_port=port.to_port,
                cidr_ipv4=vpc_cidr_block,
                description=rule.description,
                opts=child_opts,
            ))

        aws.vpc.SecurityGroupEgressRule(
            f"{name}-fsx-egress-all",
            security_group_id=self.file_system_sg.id,
            ip_protocol="-1",
            cidr_ipv4="0.0.0.0/0",
            description="All outbound traffic",
            opts=child_opts,
        )

        self.register_outputs({
            "file_system_sg_id": self.file_system_sg.id,
        })

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            file_system_sg_id=self.file_system_sg.id,
        )
