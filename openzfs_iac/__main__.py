"""
Pulumi program entry point for the OpenZFS stack.

Loads stack configuration, declares OpenzfsStack, and exports its outputs.
"""

import pulumi

from openzfs_iac.configs.constants import PROJECT_NAME
from openzfs_iac.configs.environment import get_config
from openzfs_iac.stack import OpenzfsStack
from openzfs_iac.utils.naming import ResourceNamer


def main() -> None:
    """Deploy the OpenZFS stack."""
    config = get_config()
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)

    stack = OpenzfsStack(namer.base_name, config=config)
    stack_outputs = stack.get_outputs()

    # --- Exports ---
    outputs = {
        "vpc_id": stack_outputs.vpc_id,
        "public_subnet_ids": stack_outputs.public_subnet_ids,
        "isolated_subnet_ids": stack_outputs.isolated_subnet_ids,
        "file_system_security_group_id": stack_outputs.file_system_security_group_id,
        "instance_id": stack_outputs.instance_id,
        "instance_private_ip": stack_outputs.instance_private_ip,
        "instance_public_ip": stack_outputs.instance_public_ip,
        "instance_role_arn": stack_outputs.instance_role_arn,
        "file_system_id": stack_outputs.file_system_id,
        "file_system_dns_name": stack_outputs.file_system_dns_name,
        "file_system_root_volume_id": stack_outputs.file_system_root_volume_id,
    }

    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ OpenZFS stack declared for {config.environment}")


# Execute
main()
