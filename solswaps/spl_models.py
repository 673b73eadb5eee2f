"""Records for SPL token program instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Accounts:
    """Accounts named by an SPL token instruction; absent ones are None."""

    mint: Optional[str] = None
    rent_sysvar: Optional[str] = None
    account: Optional[str] = None
    owner: Optional[str] = None
    signer_accounts: list[str] = field(default_factory=list)
    source: Optional[str] = None
    destination: Optional[str] = None
    delegate: Optional[str] = None
    authority: Optional[str] = None
    payer: Optional[str] = None
    fund_relocation_sys_program: Optional[str] = None
    funding_account: Optional[str] = None
    mint_funding_sys_program: Optional[str] = None


@dataclass
class Arg:
    """Arguments of an SPL token instruction; absent ones are None."""

    amount: Optional[int] = None
    authority_type: Optional[str] = None
    freeze_authority: Optional[str] = None
    freeze_authority_option: Optional[int] = None
    mint_authority: Optional[str] = None
    new_authority: Optional[str] = None
    new_authority_option: Optional[int] = None
    owner: Optional[str] = None
    decimals: Optional[int] = None
    extension_type: Optional[int] = None
    ui_amount: Optional[str] = None
    status: Optional[int] = None


@dataclass
class SplTokenMeta:
    """One SPL token instruction found in a block."""

    block_date: str = ""
    block_time: int = 0
    tx_id: str = ""
    dapp: str = ""
    block_slot: int = 0
    instruction_index: int = 0
    is_inner_instruction: bool = False
    inner_instruction_index: int = 0
    instruction_type: str = ""
    input_accounts: Optional[Accounts] = None
    args: Optional[Arg] = None
    outer_program: str = ""


@dataclass
class SplTokens:
    data: list[SplTokenMeta] = field(default_factory=list)