"""Decoders for the pool-creation instructions of the supported AMM programs.

Each decoder takes the raw instruction data and the instruction's resolved
account addresses. It returns a CreatePoolInstruction when the data is a pool
creation, or None when it is another instruction or lacks required accounts.
Data too short to hold a discriminator raises ValueError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from solswaps.constants import (
    METEORA_POOL_PROGRAM_ADDRESS,
    METEORA_PROGRAM_ADDRESS,
    MOONSHOT_ADDRESS,
    MOONSHOT_MIGRATION,
    ORCA_PROGRAM_ADDRESS,
    PUMP_FUN_AMM_PROGRAM_ADDRESS,
    PUMP_FUN_RAYDIUM_MIGRATION,
    RAYDIUM_CONCENTRATED_CAMM_PROGRAM_ADDRESS,
    RAYDIUM_CPMM_ADDRESS,
    RAYDIUM_POOL_V4_AMM_PROGRAM_ADDRESS,
)
from solswaps.pool_instruction import CreatePoolInstruction

WSOL_ADDRESS = "So11111111111111111111111111111111111111112"

RAYDIUM_V4_INITIALIZE = 0
RAYDIUM_V4_INITIALIZE2 = 1
INSTRUCTION_TYPE_INITIALIZE = "initialize"
INSTRUCTION_TYPE_INITIALIZE2 = "initialize2"

PUMP_FUN_CREATE = bytes([24, 30, 200, 40, 5, 28, 7, 119])
RAYDIUM_CLMM_CREATE_POOL = bytes([233, 146, 209, 142, 207, 104, 64, 188])
RAYDIUM_CPMM_INITIALIZE = bytes([175, 175, 109, 31, 13, 152, 155, 237])
METEORA_POOL_INITIALIZE = bytes([7, 166, 138, 171, 206, 171, 236, 244])
METEORA_DLMM_INITIALIZE_LB_PAIR = bytes([45, 154, 237, 210, 221, 15, 166, 92])
MOONSHOT_TOKEN_MINT = bytes([3, 44, 164, 184, 123, 13, 245, 179])
ORCA_INITIALIZE_POOL = bytes([95, 180, 10, 172, 84, 174, 232, 40])
ORCA_INITIALIZE_POOL_V2 = bytes([207, 45, 87, 242, 27, 63, 204, 67])


def _discriminator(data: bytes, size: int) -> bytes:
    if len(data) < size:
        raise ValueError(f"instruction data is shorter than {size} bytes")
    return bytes(data[:size])


def _has(accounts: Sequence[str], *indices: int) -> bool:
    return len(accounts) > max(indices)


def parse_raydium_v4(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode Raydium AMM v4 initialize / initialize2."""
    discriminator = _discriminator(data, 1)[0]
    if discriminator not in (RAYDIUM_V4_INITIALIZE, RAYDIUM_V4_INITIALIZE2):
        return None
    if not _has(accounts, 4, 8, 9, 17):
        return None
    migration = accounts[17]
    return CreatePoolInstruction(
        program=RAYDIUM_POOL_V4_AMM_PROGRAM_ADDRESS,
        name=(
            INSTRUCTION_TYPE_INITIALIZE
            if discriminator == RAYDIUM_V4_INITIALIZE
            else INSTRUCTION_TYPE_INITIALIZE2
        ),
        amm=accounts[4],
        coin_mint=accounts[8],
        pc_mint=accounts[9],
        is_pump_fun=migration == PUMP_FUN_RAYDIUM_MIGRATION,
        is_moonshot=migration == MOONSHOT_MIGRATION,
    )


def parse_pump_fun(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the pump.fun bonding-curve create instruction."""
    if _discriminator(data, 8) != PUMP_FUN_CREATE or not _has(accounts, 0, 2, 13):
        return None
    return CreatePoolInstruction(
        program=PUMP_FUN_AMM_PROGRAM_ADDRESS,
        name="create",
        amm=accounts[2],
        coin_mint=WSOL_ADDRESS,
        pc_mint=accounts[0],
        is_pump_fun=accounts[13] == PUMP_FUN_AMM_PROGRAM_ADDRESS,
    )


def parse_raydium_clmm(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Raydium concentrated-liquidity createPool instruction."""
    if _discriminator(data, 8) != RAYDIUM_CLMM_CREATE_POOL or not _has(accounts, 2, 3, 4):
        return None
    return CreatePoolInstruction(
        program=RAYDIUM_CONCENTRATED_CAMM_PROGRAM_ADDRESS,
        name="createPool",
        amm=accounts[2],
        coin_mint=accounts[3],
        pc_mint=accounts[4],
    )


def parse_raydium_cpmm(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Raydium constant-product initialize instruction."""
    if _discriminator(data, 8) != RAYDIUM_CPMM_INITIALIZE or not _has(accounts, 3, 4, 5):
        return None
    return CreatePoolInstruction(
        program=RAYDIUM_CPMM_ADDRESS,
        name="initialize",
        amm=accounts[3],
        coin_mint=accounts[4],
        pc_mint=accounts[5],
    )


def parse_meteora_pool(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Meteora permissionless constant-product pool creation."""
    if _discriminator(data, 8) != METEORA_POOL_INITIALIZE or not _has(accounts, 0, 3, 4, 18):
        return None
    return CreatePoolInstruction(
        program=METEORA_POOL_PROGRAM_ADDRESS,
        name="initializePermissionlessConstantProductPoolWithConfig",
        amm=accounts[0],
        coin_mint=accounts[3],
        pc_mint=accounts[4],
        is_moonshot=accounts[18] == MOONSHOT_MIGRATION,
    )


def parse_meteora_dlmm(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Meteora DLMM initializeLbPair instruction."""
    if _discriminator(data, 8) != METEORA_DLMM_INITIALIZE_LB_PAIR or not _has(accounts, 0, 2, 3):
        return None
    return CreatePoolInstruction(
        program=METEORA_PROGRAM_ADDRESS,
        name="initializeLbPair",
        amm=accounts[0],
        coin_mint=accounts[2],
        pc_mint=accounts[3],
    )


def parse_moonshot(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Moonshot token_mint instruction."""
    if _discriminator(data, 8) != MOONSHOT_TOKEN_MINT or not _has(accounts, 2, 3, 17):
        return None
    return CreatePoolInstruction(
        program=MOONSHOT_ADDRESS,
        name="token_mint",
        amm=accounts[2],
        coin_mint=WSOL_ADDRESS,
        pc_mint=accounts[3],
        is_moonshot=accounts[17] == MOONSHOT_ADDRESS,
    )


def parse_orca(data: bytes, accounts: Sequence[str]) -> Optional[CreatePoolInstruction]:
    """Decode the Orca Whirlpool initializePool / initializePoolV2 instructions."""
    discriminator = _discriminator(data, 8)
    if discriminator == ORCA_INITIALIZE_POOL:
        name, amm_index = "initializePool", 4
    elif discriminator == ORCA_INITIALIZE_POOL_V2:
        name, amm_index = "initializePoolV2", 6
    else:
        return None
    if not _has(accounts, amm_index, 1, 2):
        return None
    return CreatePoolInstruction(
        program=ORCA_PROGRAM_ADDRESS,
        name=name,
        amm=accounts[amm_index],
        coin_mint=accounts[1],
        pc_mint=accounts[2],
    )