"""Resource amount models shared by nodes, pods and cluster totals.

A ceiling is either ``BoundedCeiling(value)`` or ``UnboundedCeiling()``; the two
variants add with a small algebra instead of a numeric sentinel:

- ``UnboundedCeiling() + anything == UnboundedCeiling()``
- ``BoundedCeiling(a) + BoundedCeiling(b) == BoundedCeiling(a + b)``
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from kubecapacity.constants.enums import ResourceKind
from kubecapacity.exceptions import UnknownResourceKindError

# Kinds a pod declares requests/limits for; pod slots are counted, not declared.
WORKLOAD_RESOURCE_KINDS: tuple[ResourceKind, ...] = (ResourceKind.CPU, ResourceKind.MEMORY)


class BoundedCeiling(BaseModel):
    """Finite upper limit of a resource."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bounded"] = "bounded"
    value: float = Field(default=0.0, ge=0)

    @property
    def is_unbounded(self) -> bool:
        return False

    def resolve(self, allocatable: float) -> float:
        """Return the numeric ceiling."""
        return self.value

    def __add__(self, other: Ceiling) -> Ceiling:
        if isinstance(other, UnboundedCeiling):
            return other
        return BoundedCeiling(value=self.value + other.value)


class UnboundedCeiling(BaseModel):
    """No upper limit: at least one consumer declared none."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unbounded"] = "unbounded"

    @property
    def is_unbounded(self) -> bool:
        return True

    def resolve(self, allocatable: float) -> float:
        """An unlimited consumer may take everything allocatable."""
        return allocatable

    def __add__(self, other: Ceiling) -> Ceiling:
        return self


Ceiling = Annotated[Union[BoundedCeiling, UnboundedCeiling], Field(discriminator="kind")]

ZERO_CEILING = BoundedCeiling()
UNBOUNDED = UnboundedCeiling()


def sum_ceilings(ceilings: Iterable[Ceiling]) -> Ceiling:
    """Sum ceilings; an empty iterable sums to a zero bounded ceiling."""
    return reduce(lambda total, ceiling: total + ceiling, ceilings, ZERO_CEILING)


class ResourceAmount(BaseModel):
    """Capacity, reservation, requests and usage of one resource kind."""

    model_config = ConfigDict(frozen=True)

    capacity: float = Field(default=0.0, ge=0)
    allocatable: float = Field(default=0.0, ge=0)
    requested_floor: float = Field(default=0.0, ge=0)
    requested_ceiling: Ceiling = ZERO_CEILING
    used: float = Field(default=0.0, ge=0)

    @computed_field
    @property
    def reserved(self) -> float:
        """Capacity withheld from allocation."""
        return self.capacity - self.allocatable


class ResourceSet(BaseModel):
    """Resource amounts keyed by kind, for one node, NUMA cell or cluster."""

    model_config = ConfigDict(frozen=True)

    cpu: ResourceAmount = Field(default_factory=ResourceAmount)  # cores
    memory: ResourceAmount = Field(default_factory=ResourceAmount)  # bytes
    pods: ResourceAmount = Field(default_factory=ResourceAmount)  # pod slots

    def __getitem__(self, kind: ResourceKind | str) -> ResourceAmount:
        return getattr(self, ResourceKind.parse(kind).value)

    def items(self) -> list[tuple[ResourceKind, ResourceAmount]]:
        """Return (kind, amount) pairs in cpu, memory, pods order."""
        return [(kind, self[kind]) for kind in ResourceKind]


class ResourceRequest(BaseModel):
    """Floor (requests) and ceiling (limits) declared by one pod for one kind."""

    model_config = ConfigDict(frozen=True)

    floor: float = Field(default=0.0, ge=0)
    ceiling: Ceiling = ZERO_CEILING


class ResourceRequests(BaseModel):
    """Per-kind requests declared by one pod."""

    model_config = ConfigDict(frozen=True)

    cpu: ResourceRequest = Field(default_factory=ResourceRequest)  # cores
    memory: ResourceRequest = Field(default_factory=ResourceRequest)  # bytes

    def __getitem__(self, kind: ResourceKind | str) -> ResourceRequest:
        resource_kind = ResourceKind.parse(kind)
        if resource_kind not in WORKLOAD_RESOURCE_KINDS:
            raise UnknownResourceKindError(resource_kind.value)
        return getattr(self, resource_kind.value)
