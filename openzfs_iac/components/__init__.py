"""
Pulumi component resources for the OpenZFS stack.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, file system security group
- security: SSM instance role
- compute: consumer EC2 instance
- storage: FSx for OpenZFS file system
"""
