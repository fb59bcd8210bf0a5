"""
EC2 Consumer Instance Component.

The instance mounts the OpenZFS file system over NFS from the public subnet.

Key Components:
1. AMI: latest Amazon Linux 2 (x86_64, HVM, gp2), looked up at preview time.
2. Instance Profile: links the SSM role, so the instance is reached through
   Session Manager rather than SSH.
3. Placement: PUBLIC subnet, public IP mapped on launch.
4. Storage (root_block_device): one gp3 volume on the AMI's root device
   (/dev/xvda on Amazon Linux 2). Instance tags are copied to it.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.configs.base import StackConfig
from openzfs_iac.configs.constants import AMAZON_LINUX_2_AMI_FILTERS
from openzfs_iac.utils.tags import create_tags


@dataclass
class Ec2Outputs:
    """Output values from EC2 component."""
    instance_id: pulumi.Output[str]
    private_ip: pulumi.Output[str]
    public_ip: pulumi.Output[str]


class Ec2InstanceComponent(pulumi.ComponentResource):
    """
    EC2 instance that consumes the file system.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: StackConfig,
        subnet_id: pulumi.Input[str],
        instance_profile_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("openzfs:compute:Ec2Instance", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=["amazon"],
            filters=[
                aws.ec2.GetAmiFilterArgs(name=key, values=[value])
                for key, value in AMAZON_LINUX_2_AMI_FILTERS.items()
            ],
        )

        tags = create_tags(environment, f"{name}-instance")

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=ami.id,
            instance_type=config.instance_type,
            subnet_id=subnet_id,
            iam_instance_profile=instance_profile_name,
            root_block_device=aws.ec2.InstanceRootBlockDeviceArgs(
                volume_size=config.root_volume_size_gib,
                volume_type=config.root_volume_type,
            ),
            volume_tags=tags,
            tags=tags,
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "private_ip": self.instance.private_ip,
            "public_ip": self.instance.public_ip,
        })

    def get_outputs(self) -> Ec2Outputs:
        """Get EC2 output values."""
        return Ec2Outputs(
            instance_id=self.instance.id,
            private_ip=self.instance.private_ip,
            public_ip=self.instance.public_ip,
        )
