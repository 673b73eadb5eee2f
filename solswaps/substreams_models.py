"""Package, module and block-reference records of a stream definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Any, Optional, Union


class UpdatePolicy(IntEnum):
    """How a store's values may be mutated and how two stores merge."""

    UNSET = 0
    # The latest key wins.
    SET = 1
    # The first key wins.
    SET_IF_NOT_EXISTS = 2
    # Two stores merge by summing their values.
    ADD = 3
    # Two stores merge by keeping the minimum value.
    MIN = 4
    # Two stores merge by keeping the maximum value.
    MAX = 5
    # Two stores merge by concatenating the bytes in order.
    APPEND = 6

    def as_str_name(self) -> str:
        """Return the name used in the schema definition."""
        return f"UPDATE_POLICY_{self.name}"

    @classmethod
    def from_str_name(cls, value: str) -> Optional["UpdatePolicy"]:
        """Look a member up by its schema name; None when unknown."""
        return next((member for member in cls if member.as_str_name() == value), None)


class StoreMode(IntEnum):
    """How a module reads a store it takes as input."""

    UNSET = 0
    GET = 1
    DELTAS = 2

    def as_str_name(self) -> str:
        """Return the name used in the schema definition."""
        return self.name

    @classmethod
    def from_str_name(cls, value: str) -> Optional["StoreMode"]:
        """Look a member up by its schema name; None when unknown."""
        return next((member for member in cls if member.as_str_name() == value), None)


@dataclass
class Binary:
    """Code compiled to its binary form."""

    type: str = ""
    content: bytes = b""


@dataclass
class KindMap:
    output_type: str = ""


@dataclass
class KindStore:
    update_policy: UpdatePolicy = UpdatePolicy.UNSET
    value_type: str = ""


@dataclass
class SourceInput:
    # e.g. "sf.solana.type.v1.Block"
    type: str = ""


@dataclass
class MapInput:
    module_name: str = ""


@dataclass
class StoreInput:
    module_name: str = ""
    mode: StoreMode = StoreMode.UNSET


@dataclass
class ParamsInput:
    value: str = ""


@dataclass
class Input:
    """One input of a module: a source, a map, a store or parameters."""

    input: Union[SourceInput, MapInput, StoreInput, ParamsInput, None] = None


@dataclass
class Output:
    type: str = ""


@dataclass
class Module:
    name: str = ""
    binary_index: int = 0
    binary_entrypoint: str = ""
    inputs: list[Input] = field(default_factory=list)
    output: Optional[Output] = None
    initial_block: int = 0
    kind: Union[KindMap, KindStore, None] = None


@dataclass
class Modules:
    modules: list[Module] = field(default_factory=list)
    binaries: list[Binary] = field(default_factory=list)


@dataclass
class PackageMetadata:
    version: str = ""
    url: str = ""
    name: str = ""
    doc: str = ""


@dataclass
class ModuleMetadata:
    # Index into Package.package_meta.
    package_index: int = 0
    doc: str = ""


@dataclass
class Package:
    """A packaged set of modules with their schema files and metadata."""

    proto_files: list[Any] = field(default_factory=list)
    version: int = 0
    modules: Optional[Modules] = None
    module_meta: list[ModuleMetadata] = field(default_factory=list)
    package_meta: list[PackageMetadata] = field(default_factory=list)
    # Source network the stream fetches its data from.
    network: str = ""
    sink_config: Optional[Any] = None
    sink_module: str = ""


@dataclass
class Clock:
    """A pointer to a block, with its timestamp."""

    id: str = ""
    number: int = 0
    timestamp: Optional[datetime] = None


@dataclass
class BlockRef:
    """A pointer to a block whose timestamp is not known."""

    id: str = ""
    number: int = 0