"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (10.10.0.0/24): DNS hostnames and DNS support enabled.
2. Internet Gateway (IGW): the only way in or out of the VPC.
3. Subnets (from a SubnetPlan list, two zones by default):
   - Public (/28 per zone): consumer EC2 instance. Public IPs on launch.
   - Isolated (/28 per zone): FSx for OpenZFS file system.
4. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Isolated RT: No routes. Only the implicit "local" route applies.
5. No NAT gateway: isolated subnets never reach the internet, in either direction.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from openzfs_iac.components.networking.subnets import SubnetPlan, SubnetType
from openzfs_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    cidr_block: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    isolated_subnet_ids: list[pulumi.Output[str]]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC with public and isolated subnets and no NAT gateway.

    Subnet blocks and zones are decided up front by plan_subnets and
    assign_availability_zones; this component only declares them.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        cidr_block: str,
        subnet_plans: list[SubnetPlan],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("openzfs:networking:Vpc", name, None, opts)
        self.environment = environment

        child_opts = pulumi.ResourceOptions(parent=self)

        # Create VPC
        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=cidr_block,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(environment, f"{name}-vpc"),
            opts=child_opts,
        )

        # Internet Gateway for the public subnets
        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(environment, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets: list[aws.ec2.Subnet] = []
        self.isolated_subnets: list[aws.ec2.Subnet] = []

        for plan in subnet_plans:
            subnet_name = f"{name}-{plan.group.lower()}-subnet-{plan.az_index + 1}"
            is_public = plan.subnet_type is SubnetType.PUBLIC

            subnet = aws.ec2.Subnet(
                subnet_name,
                vpc_id=self.vpc.id,
                cidr_block=plan.cidr_block,
                availability_zone=plan.availability_zone,
                map_public_ip_on_launch=is_public,
                tags=create_tags(
                    environment,
                    subnet_name,
                    SubnetType=plan.subnet_type.value,
                ),
                opts=child_opts,
            )

            if is_public:
                self.public_subnets.append(subnet)
            else:
                self.isolated_subnets.append(subnet)

            pulumi.log.debug(
                f"Declared {plan.subnet_type.value} subnet {subnet_name} "
                f"({plan.cidr_block}, {plan.availability_zone})"
            )

        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "cidr_block": self.vpc.cidr_block,
            "public_subnet_ids": [s.id for s in self.public_subnets],
            "isolated_subnet_ids": [s.id for s in self.isolated_subnets],
        })

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and isolated subnets."""
        # Public route table (Internet Gateway)
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.environment, f"{name}-public-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.public_subnets, start=1):
            aws.ec2.RouteTableAssociation(
                f"{name}-public-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=public_rt.id,
                opts=opts,
            )

        # Isolated route table (VPC-only routing)
        self.isolated_rt = aws.ec2.RouteTable(
            f"{name}-isolated-rt",
            vpc_id=self.vpc.id,
            routes=[],
            tags=create_tags(self.environment, f"{name}-isolated-rt"),
            opts=opts,
        )

        for index, subnet in enumerate(self.isolated_subnets, start=1):
            aws.ec2.RouteTableAssociation(
                f"{name}-isolated-rt-assoc-{index}",
                subnet_id=subnet.id,
                route_table_id=self.isolated_rt.id,
                opts=opts,
            )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            cidr_block=self.vpc.cidr_block,
            public_subnet_ids=[s.id for s in self.public_subnets],
            isolated_subnet_ids=[s.id for s in self.isolated_subnets],
        )
