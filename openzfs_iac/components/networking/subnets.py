"""
Subnet layout planning for the VPC.

Subnets are carved out of the VPC block in a fixed order: for each subnet
group in turn, one block per availability zone. With the default layout
(10.10.0.0/24, /28 masks, two zones) this gives:

    Public   AZ 1  10.10.0.0/28
    Public   AZ 2  10.10.0.16/28
    Isolated AZ 1  10.10.0.32/28
    Isolated AZ 2  10.10.0.48/28

Planning is pure Python and runs before any resource is declared.
"""

import enum
import ipaddress
from dataclasses import dataclass, replace

# AWS accepts subnet prefixes between /16 and /28
MIN_SUBNET_MASK = 16
MAX_SUBNET_MASK = 28


class SubnetLayoutError(ValueError):
    """Raised when subnets cannot be laid out inside the VPC block."""


class SubnetType(str, enum.Enum):
    """Subnet routing types."""
    PUBLIC = "public"
    PRIVATE_ISOLATED = "isolated"


@dataclass(frozen=True)
class SubnetConfiguration:
    """A subnet group replicated across availability zones."""
    name: str
    subnet_type: SubnetType
    cidr_mask: int


@dataclass(frozen=True)
class SubnetPlan:
    """
    A single resolved subnet.

    Attributes:
        group: Name of the subnet group this subnet belongs to
        subnet_type: Routing type of the group
        az_index: Zero-based availability zone index
        cidr_block: Address block of the subnet
        availability_zone: Zone name, filled in once zones are known
    """
    group: str
    subnet_type: SubnetType
    az_index: int
    cidr_block: str
    availability_zone: str | None = None


def plan_subnets(
    vpc_cidr: str,
    configurations: list[SubnetConfiguration],
    az_count: int,
) -> list[SubnetPlan]:
    """
    Allocate subnet blocks for every group and availability zone.

    Args:
        vpc_cidr: VPC address block
        configurations: Subnet groups, in allocation order
        az_count: Number of availability zones

    Returns:
        One SubnetPlan per group and zone, in allocation order

    Raises:
        SubnetLayoutError: On an invalid VPC block, mask or zone count,
            duplicate group names, or when the VPC block is exhausted
    """
    try:
        network = ipaddress.IPv4Network(vpc_cidr)
    except ValueError as e:
        raise SubnetLayoutError(f"Invalid VPC CIDR {vpc_cidr!r}: {e}") from e

    if az_count < 1:
        raise SubnetLayoutError(f"At least one availability zone is required, got {az_count}")

    names = [c.name for c in configurations]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise SubnetLayoutError(f"Duplicate subnet group names: {', '.join(duplicates)}")

    plans: list[SubnetPlan] = []
    next_address = int(network.network_address)

    for configuration in configurations:
        mask = configuration.cidr_mask
        if not MIN_SUBNET_MASK <= mask <= MAX_SUBNET_MASK or mask < network.prefixlen:
            raise SubnetLayoutError(
                f"Subnet group '{configuration.name}' mask /{mask} is not valid "
                f"for VPC {vpc_cidr}"
            )

        block_size = 2 ** (32 - mask)
        for az_index in range(az_count):
            # Round up to the block boundary for this mask
            start = -(-next_address // block_size) * block_size
            if start + block_size - 1 > int(network.broadcast_address):
                raise SubnetLayoutError(
                    f"VPC {vpc_cidr} has no room for subnet group "
                    f"'{configuration.name}' in zone {az_index + 1}"
                )
            subnet = ipaddress.IPv4Network((start, mask))
            plans.append(SubnetPlan(
                group=configuration.name,
                subnet_type=configuration.subnet_type,
                az_index=az_index,
                cidr_block=str(subnet),
            ))
            next_address = start + block_size

    return plans


def assign_availability_zones(
    plans: list[SubnetPlan],
    availability_zones: list[str],
) -> list[SubnetPlan]:
    """
    Attach zone names to planned subnets by zone index.

    Raises:
        SubnetLayoutError: If a plan refers to a zone that does not exist
    """
    assigned = []
    for plan in plans:
        if plan.az_index >= len(availability_zones):
            raise SubnetLayoutError(
                f"Subnet group '{plan.group}' needs zone {plan.az_index + 1} but "
                f"only {len(availability_zones)} are available"
            )
        assigned.append(replace(plan, availability_zone=availability_zones[plan.az_index]))
    return assigned
