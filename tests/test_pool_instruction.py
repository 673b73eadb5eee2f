from dataclasses import replace

from solswaps.constants import ORCA_PROGRAM_ADDRESS
from solswaps.pool_instruction import CreatePoolInstruction


def test_defaults_are_empty():
    instruction = CreatePoolInstruction()
    assert instruction.program == ""
    assert instruction.name == ""
    assert instruction.amm == ""
    assert instruction.coin_mint == ""
    assert instruction.pc_mint == ""
    assert instruction.is_pump_fun is False
    assert instruction.is_moonshot is False


def test_keyword_construction():
    instruction = CreatePoolInstruction(
        program=ORCA_PROGRAM_ADDRESS, name="initializePool", amm="pool", coin_mint="a", pc_mint="b"
    )
    assert instruction.program == ORCA_PROGRAM_ADDRESS
    assert instruction.name == "initializePool"
    assert (instruction.coin_mint, instruction.pc_mint) == ("a", "b")


def test_equality_and_replace():
    base = CreatePoolInstruction(program="p", amm="pool")
    flagged = replace(base, is_moonshot=True)
    assert base == CreatePoolInstruction(program="p", amm="pool")
    assert flagged != base
    assert flagged.is_moonshot is True
    assert flagged.amm == base.amm