"""Pydantic models for subnet planning, summarization and batch requests."""

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .address import AddressRecord


class SubnetRecord(BaseModel):
    """One child subnet in a plan."""

    model_config = ConfigDict(frozen=True)

    network: str
    word128: tuple[int, ...]
    prefix_length: int
    first_address: str
    last_address: str
    broadcast_address: str  # Same as last_address; IPv6 has no broadcast
    host_count: str


class SubnetPlan(BaseModel):
    """Ordered enumeration of child subnets of one base network."""

    model_config = ConfigDict(frozen=True)

    original_prefix: str
    base_network: str
    base_prefix_length: int
    target_prefix_length: int
    subnet_bits: int
    subnets: tuple[SubnetRecord, ...]
    total_possible_subnets: int

    @field_serializer("total_possible_subnets", when_used="json")
    def serialize_total_possible_subnets(self, value: int) -> str:
        # Up to 2^128, too large for JSON clients
        return str(value)


class BatchResult(BaseModel):
    """Parse results for a batch of inputs with aggregate counts."""

    model_config = ConfigDict(frozen=True)

    results: tuple[AddressRecord, ...]
    valid_count: int
    invalid_count: int
    classification_counts: dict[str, int]


class PlanRequest(BaseModel):
    """Request model for subnet plan generation."""

    network: str = Field(..., description="IPv6 base network in CIDR notation (e.g., 2001:db8::/32)")
    target_prefix_length: int = Field(..., description="Prefix length of the child subnets (e.g., 48)")
    limit: int | None = Field(default=None, ge=0, description="Maximum number of subnets to generate")


class SummarizeRequest(BaseModel):
    """Request model for route summarization."""

    prefixes: list[str] = Field(..., description="IPv6 prefixes to summarize")


class SummarizeResponse(BaseModel):
    """Response model for route summarization."""

    prefixes: list[str]
    summarized: list[str]


class BatchRequest(BaseModel):
    """Request model for batch parsing.

    Either ``addresses`` or a newline-separated ``text`` block may be sent;
    entries from both are processed in that order.
    """

    addresses: list[str] = Field(default_factory=list, description="IPv6 addresses or prefixes")
    text: str | None = Field(default=None, description="Newline-separated addresses")
