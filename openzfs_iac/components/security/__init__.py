"""
Security components for IAM.

Components:
- IamRolesComponent: SSM-managed instance role and instance profile
"""

from openzfs_iac.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
