"""
Port and ingress rule definitions for security group rules.

Ports are validated when they are built, so a malformed rule fails before
any resource is declared.
"""

import enum
from dataclasses import dataclass

MIN_PORT = 0
MAX_PORT = 65535


class InvalidPortError(ValueError):
    """Raised when a port or port range is outside 0-65535 or reversed."""


class Protocol(str, enum.Enum):
    """IP protocols accepted by security group rules."""
    TCP = "tcp"
    UDP = "udp"


@dataclass(frozen=True)
class Port:
    """
    A protocol and an inclusive port range.

    Attributes:
        protocol: IP protocol
        from_port: First port of the range
        to_port: Last port of the range
    """
    protocol: Protocol
    from_port: int
    to_port: int

    def __post_init__(self) -> None:
        for port in (self.from_port, self.to_port):
            if isinstance(port, bool) or not isinstance(port, int):
                raise InvalidPortError(f"Port must be an integer, got {port!r}")
            if not MIN_PORT <= port <= MAX_PORT:
                raise InvalidPortError(
                    f"Port {port} is outside {MIN_PORT}-{MAX_PORT}"
                )
        if self.from_port > self.to_port:
            raise InvalidPortError(
                f"Port range {self.from_port}-{self.to_port} is reversed"
            )

    @classmethod
    def tcp(cls, port: int) -> "Port":
        return cls(Protocol.TCP, port, port)

    @classmethod
    def udp(cls, port: int) -> "Port":
        return cls(Protocol.UDP, port, port)

    @classmethod
    def tcp_range(cls, from_port: int, to_port: int) -> "Port":
        return cls(Protocol.TCP, from_port, to_port)

    @classmethod
    def udp_range(cls, from_port: int, to_port: int) -> "Port":
        return cls(Protocol.UDP, from_port, to_port)

    @property
    def label(self) -> str:
        """Short label used in rule resource names, e.g. 'tcp-20001-20003'."""
        if self.from_port == self.to_port:
            return f"{self.protocol.value}-{self.from_port}"
        return f"{self.protocol.value}-{self.from_port}-{self.to_port}"


@dataclass(frozen=True)
class IngressRule:
    """An inbound rule: which port is opened and why."""
    port: Port
    description: str


def build_ingress_rules(
    port_specs: tuple[tuple[str, int, int, str], ...],
) -> list[IngressRule]:
    """
    Build validated ingress rules from (protocol, from, to, description) specs.

    Args:
        port_specs: Raw port specifications, e.g. constants.NFS_PORTS

    Returns:
        Ingress rules in the order given

    Raises:
        InvalidPortError: If a protocol is unknown, a port is out of range,
            or two specs open the same protocol and range
    """
    rules: list[IngressRule] = []
    seen: set[str] = set()

    for protocol, from_port, to_port, description in port_specs:
        try:
            proto = Protocol(protocol)
        except ValueError as e:
            raise InvalidPortError(f"Unknown protocol {protocol!r}") from e

        port = Port(proto, from_port, to_port)
        if port.label in seen:
            raise InvalidPortError(f"Duplicate ingress rule for {port.label}")
        seen.add(port.label)
        rules.append(IngressRule(port=port, description=description))

    return rules
