"""
Pulumi infrastructure-as-code for an Amazon FSx for OpenZFS file system.

This package defines AWS infrastructure including:
- VPC with public and isolated subnets across two zones, no NAT
- Security group opening the NFS ports to the VPC
- SSM-managed IAM role for the consumer instance
- EC2 consumer instance in a public subnet
- FSx for OpenZFS file system in an isolated subnet
"""
