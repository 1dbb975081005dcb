"""Pydantic models for parsed IPv6 addresses."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Kinds of failure reported by the engine."""

    INVALID_PREFIX = "InvalidPrefix"
    MULTIPLE_COMPRESSION_MARKERS = "MultipleCompressionMarkers"
    INVALID_HEXTET = "InvalidHextet"
    INVALID_LENGTH = "InvalidLength"
    INVALID_IPV4_EMBED = "InvalidIPv4Embed"
    INVALID_TARGET = "InvalidTarget"


class Classification(str, Enum):
    """Address type, one per address."""

    GLOBAL_UNICAST = "GlobalUnicast"
    LINK_LOCAL = "LinkLocal"
    UNIQUE_LOCAL = "UniqueLocal"
    MULTICAST = "Multicast"
    LOOPBACK = "Loopback"
    UNSPECIFIED = "Unspecified"
    IPV4_MAPPED = "IPv4Mapped"
    IPV4_COMPATIBLE = "IPv4Compatible"
    DOCUMENTATION = "Documentation"
    TEREDO = "Teredo"
    SIX_TO_FOUR = "SixToFour"
    RESERVED = "Reserved"


class Scope(str, Enum):
    """Topological reach of an address."""

    INTERFACE_LOCAL = "InterfaceLocal"
    LINK_LOCAL = "LinkLocal"
    ADMIN_LOCAL = "AdminLocal"
    SITE_LOCAL = "SiteLocal"
    ORGANIZATION_LOCAL = "OrganizationLocal"
    GLOBAL = "Global"


class AddressFlags(BaseModel):
    """Independent property tests on an address."""

    model_config = ConfigDict(frozen=True)

    is_ipv4_mapped: bool = False
    is_ipv4_compatible: bool = False
    is_eui64: bool = False
    is_slaac_eligible: bool = False


class ComplianceNote(BaseModel):
    """An RFC the address was checked against."""

    model_config = ConfigDict(frozen=True)

    rfc: str
    title: str
    compliant: bool
    notes: str | None = None


class AddressRecord(BaseModel):
    """Result of parsing one textual IPv6 address or prefix.

    Invalid input produces ``valid=False`` with ``error``/``error_detail`` set
    and every derived field left at its empty default.
    """

    model_config = ConfigDict(frozen=True)

    raw_input: str
    valid: bool
    error: ErrorKind | None = None
    error_detail: str | None = None

    word128: tuple[int, ...] = ()
    prefix_length: int = 0

    expanded: str = ""
    compressed: str = ""
    binary: str = ""
    hex: str = ""
    integer: str = ""  # Exceeds JSON-safe integers
    base64: str = ""
    reverse_dns: str = ""

    network: str = ""
    first_address: str = ""
    last_address: str = ""
    host_count: str = ""
    total_subnets: str | None = None

    classification: Classification | None = None
    scope: Scope | None = None
    flags: AddressFlags = Field(default_factory=AddressFlags)
    compliance_notes: tuple[ComplianceNote, ...] = ()


class ParseRequest(BaseModel):
    """Request model for address parsing."""

    address: str = Field(..., description="IPv6 address, optionally with /prefix (e.g., 2001:db8::/32)")
