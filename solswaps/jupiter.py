"""Decoding of Jupiter aggregator v6 route instructions and swap events."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from solswaps.constants import (
    JUPITER_AGGREGATOR_V6_EVENT_AUTHORITY,
    JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS,
)
from solswaps.pool_dapps import WSOL_ADDRESS
from solswaps.solana_types import CompiledInstruction, TransactionStatusMeta

USDC_ADDRESS = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_ADDRESS = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

ROUTE_DISCRIMINATOR = bytes([229, 23, 203, 151, 122, 227, 173, 42])
SHARED_ACCOUNTS_ROUTE_DISCRIMINATOR = bytes([193, 32, 155, 51, 65, 214, 156, 129])
EXACT_OUT_ROUTE_DISCRIMINATOR = bytes([208, 51, 239, 151, 123, 43, 237, 92])
SWAP_EVENT_DISCRIMINATOR = bytes([64, 198, 205, 232, 38, 8, 113, 226])

_B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_SWAP_EVENT_LAYOUT = struct.Struct("<32s32sQ32sQ")
_U64_MASK = (1 << 64) - 1


def _b58encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    digits = []
    while number:
        number, remainder = divmod(number, 58)
        digits.append(_B58_ALPHABET[remainder])
    leading_zeros = len(data) - len(bytes(data).lstrip(b"\0"))
    return "1" * leading_zeros + "".join(reversed(digits))


def _resolve_accounts(account_indices: Iterable[int], accounts: Sequence[str]) -> list[str]:
    return [accounts[index] for index in account_indices]


def _account_at(accounts: Sequence[str], index: int) -> str:
    return accounts[index] if index < len(accounts) else ""


@dataclass
class InstructionSwapEvent:
    """A swap event emitted by the aggregator for one hop of a route."""

    amm: bytes = bytes(32)
    input_mint: bytes = bytes(32)
    input_amount: int = 0
    output_mint: bytes = bytes(32)
    output_amount: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> "InstructionSwapEvent":
        """Decode the event body; trailing bytes are ignored."""
        if len(data) < _SWAP_EVENT_LAYOUT.size:
            raise ValueError(
                f"swap event needs {_SWAP_EVENT_LAYOUT.size} bytes, got {len(data)}"
            )
        amm, input_mint, input_amount, output_mint, output_amount = (
            _SWAP_EVENT_LAYOUT.unpack_from(data)
        )
        return cls(amm, input_mint, input_amount, output_mint, output_amount)

    def to_bytes(self) -> bytes:
        """Encode the event body in its on-chain layout."""
        return _SWAP_EVENT_LAYOUT.pack(
            bytes(self.amm),
            bytes(self.input_mint),
            self.input_amount,
            bytes(self.output_mint),
            self.output_amount,
        )


@dataclass
class RouterInstruction:
    """Accounts and amounts of a top-level aggregator route."""

    signer: str = ""
    instruction_types: str = ""
    source_token_account: str = ""
    destination_token_account: str = ""
    source_mint: str = ""
    destination_mint: str = ""
    in_amount: str = ""
    quoted_out_amount: str = ""


def parse_instruction(
    program: str,
    data: bytes,
    account_indices: Iterable[int],
    accounts: Sequence[str],
) -> Optional[RouterInstruction]:
    """Decode a route instruction, or return None for other programs and instructions.

    Data shorter than the 8-byte discriminator raises ValueError.
    """
    if program != JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS:
        return None
    resolved = _resolve_accounts(account_indices, accounts)
    if len(data) < 8:
        raise ValueError("instruction data is shorter than 8 bytes")
    discriminator = bytes(data[:8])

    def at(index: int) -> str:
        return _account_at(resolved, index)

    if discriminator == ROUTE_DISCRIMINATOR:
        return RouterInstruction(
            signer=at(1),
            instruction_types="Router",
            source_token_account=at(2),
            destination_token_account=at(3),
            destination_mint=at(5),
        )
    if discriminator == SHARED_ACCOUNTS_ROUTE_DISCRIMINATOR:
        return RouterInstruction(
            signer=at(2),
            instruction_types="SharedAccountsRoute",
            source_token_account=at(3),
            destination_token_account=at(6),
            source_mint=at(7),
            destination_mint=at(8),
        )
    if discriminator == EXACT_OUT_ROUTE_DISCRIMINATOR:
        return RouterInstruction(
            signer=at(1),
            instruction_types="ExactOutRoute",
            source_token_account=at(2),
            destination_token_account=at(3),
            source_mint=at(5),
            destination_mint=at(6),
        )
    return None


def parse_inner_instruction(
    program: str,
    data: bytes,
    account_indices: Iterable[int],
    accounts: Sequence[str],
) -> Optional[InstructionSwapEvent]:
    """Decode a swap event logged through the event authority, or return None.

    Data too short for the event header or body raises ValueError.
    """
    if program != JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS:
        return None
    resolved = _resolve_accounts(account_indices, accounts)
    if _account_at(resolved, 0) != JUPITER_AGGREGATOR_V6_EVENT_AUTHORITY:
        return None
    if len(data) < 16:
        raise ValueError("event data is shorter than 16 bytes")
    if bytes(data[8:16]) != SWAP_EVENT_DISCRIMINATOR:
        return None
    return InstructionSwapEvent.from_bytes(bytes(data[16:]))


def extract_instruction_events(
    accounts: Sequence[str],
    instruction: CompiledInstruction,
    idx: int,
    meta: TransactionStatusMeta,
) -> Optional[RouterInstruction]:
    """Combine a route instruction with the swap events of its inner instructions."""
    program = accounts[instruction.program_id_index]
    if program != JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS:
        return None
    router = (
        parse_instruction(program, instruction.data, instruction.accounts, accounts)
        or RouterInstruction()
    )
    events = [
        event
        for group in meta.inner_instructions
        if group.index == idx
        for inner in group.instructions
        if (
            event := parse_inner_instruction(
                accounts[inner.program_id_index], inner.data, inner.accounts, accounts
            )
        )
        is not None
    ]
    selected = select_swap_events(events)
    if selected is None:
        return None
    extracted = extract_swap_event_data(selected)
    if extracted is None:
        return None
    input_mint, input_amount, output_mint, output_amount = extracted
    router.source_mint = input_mint
    router.destination_mint = output_mint
    router.in_amount = str(input_amount)
    router.quoted_out_amount = str(output_amount)
    return router


def select_swap_events(
    events: Iterable[InstructionSwapEvent],
) -> Optional[list[InstructionSwapEvent]]:
    """Reduce a route's events to its first event and its (merged) last event."""
    events = list(events)
    if not events:
        return None
    if len(events) <= 2:
        return events
    *rest, last = events
    total_input = last.input_amount
    total_output = last.output_amount
    previous_output_mint = last.output_mint
    for event in reversed(rest):
        if event.output_mint != previous_output_mint or event.input_mint != last.input_mint:
            break
        total_input = (total_input + event.input_amount) & _U64_MASK
        total_output = (total_output + event.output_amount) & _U64_MASK
        previous_output_mint = event.input_mint
    return [
        rest[0],
        InstructionSwapEvent(
            amm=last.amm,
            input_mint=last.input_mint,
            input_amount=total_input,
            output_mint=last.output_mint,
            output_amount=total_output,
        ),
    ]


def extract_swap_event_data(
    events: Sequence[InstructionSwapEvent],
) -> Optional[tuple[str, int, str, int]]:
    """Return (input mint, input amount, output mint, output amount) of a route."""
    if not events:
        return None
    first, last = events[0], events[-1]
    return (
        _b58encode(first.input_mint),
        first.input_amount,
        _b58encode(last.output_mint),
        last.output_amount,
    )


def is_target_pair(source_mint: str, destination_mint: str, target_address: str) -> bool:
    """True when exactly one side of the swap is `target_address`."""
    return (source_mint == target_address) != (destination_mint == target_address)


def filter_data(source_mint: str, destination_mint: str) -> bool:
    """True when the swap pairs a token against WSOL, USDT or USDC."""
    return any(
        is_target_pair(source_mint, destination_mint, target)
        for target in (WSOL_ADDRESS, USDT_ADDRESS, USDC_ADDRESS)
    )