"""Small stream records: field options, index keys, transactions and instructions."""

from __future__ import annotations

from dataclasses import dataclass, field

from solswaps.solana_types import ConfirmedTransaction


@dataclass
class FieldOptions:
    """Packaging hints for a manifest field."""

    # Treat the manifest value as a file path and embed the file's content.
    load_from_file: bool = False
    # Treat the manifest value as a folder path and embed its zipped content.
    zip_from_folder: bool = False


@dataclass
class Keys:
    keys: list[str] = field(default_factory=list)


@dataclass
class Transactions:
    transactions: list[ConfirmedTransaction] = field(default_factory=list)


@dataclass
class Instruction:
    program_id: str = ""
    accounts: list[str] = field(default_factory=list)
    data: bytes = b""
    tx_hash: str = ""


@dataclass
class Instructions:
    instructions: list[Instruction] = field(default_factory=list)