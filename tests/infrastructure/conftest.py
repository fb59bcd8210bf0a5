"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pulumi
import pytest

AVAILABILITY_ZONES = ["ap-northeast-1a", "ap-northeast-1c", "ap-northeast-1d"]
AMI_ID = "ami-0123456789abcdef0"


class OpenzfsMocks(pulumi.runtime.Mocks):
    """Records every registered resource and fakes provider lookups."""

    def __init__(self) -> None:
        super().__init__()
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)

        if args.typ in ("aws:iam/role:Role", "aws:iam/instanceProfile:InstanceProfile"):
            outputs["name"] = args.name
            outputs["arn"] = f"arn:aws:iam::123456789012:role/{args.name}"
        elif args.typ == "aws:fsx/openZfsFileSystem:OpenZfsFileSystem":
            outputs["dnsName"] = f"{args.name}.fsx.ap-northeast-1.amazonaws.com"

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "aws:index/getAvailabilityZones:getAvailabilityZones":
            return {
                "id": "ap-northeast-1",
                "names": AVAILABILITY_ZONES,
                "zoneIds": ["apne1-az4", "apne1-az1", "apne1-az2"],
            }
        if args.token == "aws:ec2/getAmi:getAmi":
            return {"id": AMI_ID, "imageId": AMI_ID, "architecture": "x86_64"}
        return {}

    def of_type(self, typ: str) -> list[pulumi.runtime.MockResourceArgs]:
        """Registered resources with the given type token."""
        return [r for r in self.resources if r.typ == typ]


@pytest.fixture(scope="session", autouse=True)
def add_project_to_path():
    """Add project root to Python path for imports."""
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))
    yield
    # Cleanup
    sys.path.remove(str(project_root))


@pytest.fixture
def iac_project_root():
    """Return the package root directory."""
    return Path(__file__).parent.parent.parent / "openzfs_iac"


@pytest.fixture
def python_files_in_iac(iac_project_root):
    """Return all Python files in the package."""
    return [f for f in iac_project_root.rglob("*.py") if "__pycache__" not in str(f)]


@pytest.fixture
def install_mocks():
    """Return a callable that installs and returns fresh Pulumi mocks."""
    def _install() -> OpenzfsMocks:
        mocks = OpenzfsMocks()
        pulumi.runtime.set_mocks(mocks, project="openzfs", stack="test", preview=False)
        return mocks
    return _install


@pytest.fixture
def pulumi_mocks(install_mocks):
    """Install fresh Pulumi mocks for a single test."""
    return install_mocks()
