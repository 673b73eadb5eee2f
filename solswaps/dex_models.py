"""Output records for DEX trades, created pools and aggregator swaps."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TradeData:
    block_time: int = 0
    block_slot: int = 0
    tx_id: str = ""
    signer: str = ""
    pool_address: str = ""
    base_mint: str = ""
    quote_mint: str = ""
    base_vault: str = ""
    quote_vault: str = ""
    base_amount: str = ""
    quote_amount: str = ""
    base_decimals: int = 0
    quote_decimals: int = 0
    base_reserves: int = 0
    quote_reserves: int = 0
    is_inner_instruction: bool = False
    instruction_index: int = 0
    instruction_type: str = ""
    # Field name follows the published schema.
    inner_instruxtion_index: int = 0
    outer_program: str = ""
    inner_program: str = ""
    txn_fee_lamports: int = 0


@dataclass
class Swaps:
    data: list[TradeData] = field(default_factory=list)


@dataclass
class Pool:
    program: str = ""
    address: str = ""
    created_at_timestamp: int = 0
    created_at_block_number: int = 0
    coin_mint: str = ""
    pc_mint: str = ""
    is_pump_fun: bool = False
    is_moonshot: bool = False
    tx_id: str = ""


@dataclass
class Pools:
    pools: list[Pool] = field(default_factory=list)


@dataclass
class JupiterTrade:
    dapp: str = ""
    block_time: int = 0
    block_slot: int = 0
    tx_id: str = ""
    signer: str = ""
    source_token_account: str = ""
    destination_token_account: str = ""
    source_mint: str = ""
    destination_mint: str = ""
    in_amount: str = ""
    quoted_out_amount: str = ""
    in_decimals: int = 0
    quoted_decimals: int = 0
    instruction_type: str = ""


@dataclass
class JupiterSwaps:
    data: list[JupiterTrade] = field(default_factory=list)