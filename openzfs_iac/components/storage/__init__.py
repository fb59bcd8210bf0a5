"""
Storage components for FSx.

Components:
- OpenZfsFileSystemComponent: FSx for OpenZFS file system
"""

from openzfs_iac.components.storage.fsx_openzfs import (
    FileSystemOutputs,
    OpenZfsFileSystemComponent,
)

__all__ = [
    "OpenZfsFileSystemComponent",
    "FileSystemOutputs",
]
