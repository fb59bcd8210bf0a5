"""
Detailed tests for individual components.

Validates:
1. Each component class has required attributes
2. Components are properly organized in packages
3. Package __init__ files export their components
"""

from pathlib import Path

PACKAGE_DIR = Path(__file__).parent.parent.parent / "openzfs_iac"


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_vpc_component_attributes(self):
        """VpcComponent should have essential attributes."""
        from openzfs_iac.components.networking.vpc import VpcComponent

        assert hasattr(VpcComponent, "get_outputs")
        assert hasattr(VpcComponent, "_create_route_tables")

    def test_security_group_component_attributes(self):
        """FileSystemSecurityGroupComponent should expose its outputs."""
        from openzfs_iac.components.networking.security_groups import (
            FileSystemSecurityGroupComponent,
        )

        assert hasattr(FileSystemSecurityGroupComponent, "get_outputs")


class TestOtherComponents:
    """Tests for security, compute, and storage components."""

    def test_iam_roles_component_attributes(self):
        from openzfs_iac.components.security.iam_roles import IamRolesComponent

        assert hasattr(IamRolesComponent, "get_outputs")

    def test_ec2_component_attributes(self):
        from openzfs_iac.components.compute.ec2_instance import Ec2InstanceComponent

        assert hasattr(Ec2InstanceComponent, "get_outputs")

    def test_file_system_component_attributes(self):
        from openzfs_iac.components.storage.fsx_openzfs import OpenZfsFileSystemComponent

        assert hasattr(OpenZfsFileSystemComponent, "get_outputs")


class TestComponentPackageStructure:
    """Tests for component package organization."""

    def test_all_component_packages_have_init(self):
        """All component packages should have __init__.py."""
        component_dirs = [
            PACKAGE_DIR / "components" / "networking",
            PACKAGE_DIR / "components" / "security",
            PACKAGE_DIR / "components" / "compute",
            PACKAGE_DIR / "components" / "storage",
        ]

        for comp_dir in component_dirs:
            init_file = comp_dir / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {comp_dir.name}"

    def test_config_packages_have_init(self):
        """Config and utils packages should have __init__.py."""
        for pkg_dir in [PACKAGE_DIR / "configs", PACKAGE_DIR / "utils", PACKAGE_DIR / "components"]:
            init_file = pkg_dir / "__init__.py"
            assert init_file.exists(), f"Missing __init__.py in {pkg_dir.name}"


class TestComponentExports:
    """Tests for component __init__ files."""

    def test_networking_exports_components(self):
        from openzfs_iac.components.networking import (
            FileSystemSecurityGroupComponent,
            VpcComponent,
            plan_subnets,
        )

        assert VpcComponent is not None
        assert FileSystemSecurityGroupComponent is not None
        assert callable(plan_subnets)

    def test_security_exports_components(self):
        from openzfs_iac.components.security import IamRolesComponent

        assert IamRolesComponent is not None

    def test_compute_exports_components(self):
        from openzfs_iac.components.compute import Ec2InstanceComponent

        assert Ec2InstanceComponent is not None

    def test_storage_exports_components(self):
        from openzfs_iac.components.storage import OpenZfsFileSystemComponent

        assert OpenZfsFileSystemComponent is not None

    def test_utils_exports(self):
        from openzfs_iac.utils import ResourceNamer, create_tags

        assert ResourceNamer is not None
        assert callable(create_tags)
