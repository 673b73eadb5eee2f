import pytest

from solswaps.solana_types import (
    Block,
    CompiledInstruction,
    InnerInstruction,
    InnerInstructions,
    Reward,
    RewardType,
    TransactionStatusMeta,
    UnixTimestamp,
)


@pytest.mark.parametrize(
    "member, name",
    [
        (RewardType.UNSPECIFIED, "Unspecified"),
        (RewardType.FEE, "Fee"),
        (RewardType.RENT, "Rent"),
        (RewardType.STAKING, "Staking"),
        (RewardType.VOTING, "Voting"),
    ],
)
def test_reward_type_names(member, name):
    assert member.as_str_name() == name
    assert RewardType.from_str_name(name) is member


def test_reward_type_round_trip_for_every_member():
    for member in RewardType:
        assert RewardType.from_str_name(member.as_str_name()) is member


@pytest.mark.parametrize("value", ["", "fee", "FEE", "Other"])
def test_reward_type_unknown_name(value):
    assert RewardType.from_str_name(value) is None


def test_reward_type_wire_values():
    assert RewardType(1) is RewardType.FEE
    assert RewardType(4) is RewardType.VOTING


def test_block_defaults():
    block = Block()
    assert block.block_time is None
    assert block.transactions == []
    assert block.slot == 0


def test_default_lists_are_not_shared():
    first = TransactionStatusMeta()
    second = TransactionStatusMeta()
    first.inner_instructions.append(InnerInstructions(index=2))
    assert second.inner_instructions == []
    assert first.inner_instructions[0].index == 2


def test_reward_defaults_to_unspecified():
    assert Reward().reward_type is RewardType.UNSPECIFIED


def test_inner_instruction_stack_height_optional():
    assert InnerInstruction().stack_height is None
    assert InnerInstruction(stack_height=3).stack_height == 3


def test_equality_by_value():
    assert CompiledInstruction(1, b"\x00", b"\x01") == CompiledInstruction(1, b"\x00", b"\x01")
    assert CompiledInstruction(1, b"\x00", b"\x01") != CompiledInstruction(2, b"\x00", b"\x01")
    assert Block(block_time=UnixTimestamp(5)).block_time.timestamp == 5