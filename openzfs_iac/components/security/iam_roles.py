"""
IAM role component for the consumer EC2 instance.

Creates:
- EC2 instance role assumable by ec2.amazonaws.com
- AmazonSSMManagedInstanceCore attachment (Session Manager access, no SSH)
- Instance profile linking the role to the instance
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.configs.constants import SSM_MANAGED_POLICY_ARN
from openzfs_iac.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    instance_role_arn: pulumi.Output[str]
    instance_profile_name: pulumi.Output[str]


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM role letting Systems Manager manage the EC2 instance.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("openzfs:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        # EC2 assume role policy
        ec2_assume_policy = json.dumps({
            "Version": "2012-10-17",
            "Statement": [{
                "Effect": "Allow",
                "Principal": {"Service": "ec2.amazonaws.com"},
                "Action": "sts:AssumeRole",
            }],
        })

        self.instance_role = aws.iam.Role(
            f"{name}-ssm-role",
            assume_role_policy=ec2_assume_policy,
            tags=create_tags(environment, f"{name}-ssm-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicyAttachment(
            f"{name}-ssm-managed-instance-core",
            role=self.instance_role.name,
            policy_arn=SSM_MANAGED_POLICY_ARN,
            opts=child_opts,
        )

        self.instance_profile = aws.iam.InstanceProfile(
            f"{name}-ssm-profile",
            role=self.instance_role.name,
            tags=create_tags(environment, f"{name}-ssm-profile"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_role_arn": self.instance_role.arn,
            "instance_profile_name": self.instance_profile.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            instance_role_arn=self.instance_role.arn,
            instance_profile_name=self.instance_profile.name,
        )
