# solswaps

Decode Solana DEX activity from instruction data: new liquidity pools on the
major AMMs, and swaps routed through the Jupiter v6 aggregator.

## Install

```
pip install solswaps
pip install "solswaps[test]"   # with the test tools
```

## What it covers

- `solswaps.pool_dapps`: pool-creation decoders, one per supported program:
  `parse_raydium_v4`, `parse_pump_fun`, `parse_raydium_clmm`,
  `parse_raydium_cpmm`, `parse_meteora_pool`, `parse_meteora_dlmm`,
  `parse_moonshot` and `parse_orca`. Each takes the instruction data and the
  instruction's resolved account addresses. It returns a
  `CreatePoolInstruction` (from `solswaps.pool_instruction`). It returns
  `None` when the instruction is not a pool creation or lacks a required
  account. Data too short to hold the discriminator raises `ValueError`.
- `solswaps.jupiter`: Jupiter v6 decoding.
  - `parse_instruction` decodes the `Router`, `SharedAccountsRoute` and
    `ExactOutRoute` instructions into a `RouterInstruction`.
  - `parse_inner_instruction` decodes swap events emitted through the event
    authority. `InstructionSwapEvent.from_bytes` and `to_bytes` read and
    write the event body.
  - `extract_instruction_events` combines a top-level route instruction with
    the swap events among its inner instructions.
  - `select_swap_events` and `extract_swap_event_data` reduce a run of events
    to one input and one output.
  - `filter_data` keeps trades with WSOL, USDT or USDC on exactly one side.
    `is_target_pair` checks that for one address.
- `solswaps.solana_types`: block, transaction, instruction and token-balance
  records. These include `Block`, `ConfirmedTransaction`, `CompiledInstruction`,
  `InnerInstructions`, `TransactionStatusMeta`, `TokenBalance` and `RewardType`.
- `solswaps.dex_models`: output records `Pool`, `Pools`, `TradeData`, `Swaps`,
  `JupiterTrade` and `JupiterSwaps`.
- `solswaps.token_meta`, `solswaps.spl_models`, `solswaps.stream_models`,
  `solswaps.substreams_models` and `solswaps.sink_service` hold data records
  used around the decoders. Their enums (`UpdatePolicy`, `StoreMode`,
  `DeploymentStatus`) convert to and from schema names with `as_str_name` and
  `from_str_name`.
- `solswaps.constants`: program and authority addresses.

## Example

```python
from solswaps.pool_dapps import parse_orca

# resolved: the base58 addresses of the instruction's accounts, in order
pool = parse_orca(data, resolved)
if pool is not None:
    print(pool.name, pool.amm, pool.coin_mint, pool.pc_mint)
```

```python
from solswaps.constants import JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS
from solswaps.jupiter import parse_instruction

# accounts: the transaction's base58 addresses
# account_indices: the instruction's indices into accounts
route = parse_instruction(JUPITER_AGGREGATOR_V6_PROGRAM_ADDRESS, data, account_indices, accounts)
```

## What it does not do

- It does not walk a whole `Block` to collect `Pools` or `JupiterSwaps`.
  The caller loops over the transactions and instructions.
- It does not choose a pool decoder from a program address. The caller picks
  the matching `parse_*` function.
- It does not write to a database and does not connect to any streaming or
  deployment service. The records in `sink_service` and `substreams_models`
  are plain data.
- It provides no command-line tool.

## Tests

```
pytest
```