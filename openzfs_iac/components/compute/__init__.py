"""
Compute components for EC2.

Components:
- Ec2InstanceComponent: EC2 instance that mounts the file system
"""

from openzfs_iac.components.compute.ec2_instance import Ec2InstanceComponent, Ec2Outputs

__all__ = [
    "Ec2InstanceComponent",
    "Ec2Outputs",
]
