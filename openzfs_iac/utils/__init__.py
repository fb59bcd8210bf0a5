"""
Utility functions for Pulumi infrastructure.

Provides naming conventions and tag factories.
"""

from openzfs_iac.utils.naming import ResourceNamer
from openzfs_iac.utils.tags import create_tags

__all__ = [
    "ResourceNamer",
    "create_tags",
]
