"""Result of decoding a pool-creation instruction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CreatePoolInstruction:
    """A pool created by one of the supported AMM programs."""

    program: str = ""
    name: str = ""
    amm: str = ""
    coin_mint: str = ""
    pc_mint: str = ""
    is_pump_fun: bool = False
    is_moonshot: bool = False