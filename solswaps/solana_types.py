"""Solana block, transaction and instruction records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional


class RewardType(IntEnum):
    """Kind of a block reward."""

    UNSPECIFIED = 0
    FEE = 1
    RENT = 2
    STAKING = 3
    VOTING = 4

    def as_str_name(self) -> str:
        """Return the name used in the schema definition."""
        return self.name.capitalize()

    @classmethod
    def from_str_name(cls, value: str) -> Optional["RewardType"]:
        """Look a member up by its schema name; None when unknown."""
        return next((member for member in cls if member.as_str_name() == value), None)


@dataclass
class MessageHeader:
    num_required_signatures: int = 0
    num_readonly_signed_accounts: int = 0
    num_readonly_unsigned_accounts: int = 0


@dataclass
class MessageAddressTableLookup:
    account_key: bytes = b""
    writable_indexes: bytes = b""
    readonly_indexes: bytes = b""


@dataclass
class CompiledInstruction:
    program_id_index: int = 0
    accounts: bytes = b""
    data: bytes = b""


@dataclass
class InnerInstruction:
    program_id_index: int = 0
    accounts: bytes = b""
    data: bytes = b""
    stack_height: Optional[int] = None


@dataclass
class InnerInstructions:
    index: int = 0
    instructions: list[InnerInstruction] = field(default_factory=list)


@dataclass
class Message:
    header: Optional[MessageHeader] = None
    account_keys: list[bytes] = field(default_factory=list)
    recent_blockhash: bytes = b""
    instructions: list[CompiledInstruction] = field(default_factory=list)
    versioned: bool = False
    address_table_lookups: list[MessageAddressTableLookup] = field(default_factory=list)


@dataclass
class Transaction:
    signatures: list[bytes] = field(default_factory=list)
    message: Optional[Message] = None


@dataclass
class TransactionError:
    err: bytes = b""


@dataclass
class UiTokenAmount:
    ui_amount: float = 0.0
    decimals: int = 0
    amount: str = ""
    ui_amount_string: str = ""


@dataclass
class TokenBalance:
    account_index: int = 0
    mint: str = ""
    ui_token_amount: Optional[UiTokenAmount] = None
    owner: str = ""
    program_id: str = ""


@dataclass
class ReturnData:
    program_id: bytes = b""
    data: bytes = b""


@dataclass
class Reward:
    pubkey: str = ""
    lamports: int = 0
    post_balance: int = 0
    reward_type: RewardType = RewardType.UNSPECIFIED
    commission: str = ""


@dataclass
class Rewards:
    rewards: list[Reward] = field(default_factory=list)


@dataclass
class TransactionStatusMeta:
    err: Optional[TransactionError] = None
    fee: int = 0
    pre_balances: list[int] = field(default_factory=list)
    post_balances: list[int] = field(default_factory=list)
    inner_instructions: list[InnerInstructions] = field(default_factory=list)
    inner_instructions_none: bool = False
    log_messages: list[str] = field(default_factory=list)
    log_messages_none: bool = False
    pre_token_balances: list[TokenBalance] = field(default_factory=list)
    post_token_balances: list[TokenBalance] = field(default_factory=list)
    rewards: list[Reward] = field(default_factory=list)
    loaded_writable_addresses: list[bytes] = field(default_factory=list)
    loaded_readonly_addresses: list[bytes] = field(default_factory=list)
    return_data: Optional[ReturnData] = None
    return_data_none: bool = False
    # Sum of compute units consumed by all instructions; None on older ledgers.
    compute_units_consumed: Optional[int] = None


@dataclass
class ConfirmedTransaction:
    transaction: Optional[Transaction] = None
    meta: Optional[TransactionStatusMeta] = None


@dataclass
class UnixTimestamp:
    timestamp: int = 0


@dataclass
class BlockHeight:
    block_height: int = 0


@dataclass
class Block:
    previous_blockhash: str = ""
    blockhash: str = ""
    parent_slot: int = 0
    transactions: list[ConfirmedTransaction] = field(default_factory=list)
    rewards: list[Reward] = field(default_factory=list)
    block_time: Optional[UnixTimestamp] = None
    block_height: Optional[BlockHeight] = None
    slot: int = 0