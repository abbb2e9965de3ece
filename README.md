# clarinet

Tools for smart-contract projects described by a `Clarinet.toml` manifest:
scaffolding new contracts and their tests, recording contract requirements in
the manifest, and turning block payloads from a Stacks node and a Bitcoin node
into standardized block data.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `clarinet` command uses the manifest given with `--manifest-path`, or
looks for `Clarinet.toml` in the current directory and its parents. If none is
found it prints `Could not find Clarinet.toml` and exits with status 1.

```
clarinet contract new counter
clarinet contract requirement SP000000000000000000002Q6VF78.pox
```

- `contract new <name>` creates `contracts/<name>.clar` from a template, a
  test file `tests/<name>_test.ts`, and adds a `[contracts.<name>]` entry
  (`path` and `depends_on`) to the manifest. Files that already exist are
  skipped with a message.
- `contract requirement <contract_id>` adds `{contract_id = ...}` to
  `project.requirements` in the manifest, unless it is already there.

After each command a hint is printed; set `CLARINET_DISABLE_HINTS=1` to turn
it off.

## Library use

Changes are plain dataclasses from `clarinet.changes` (`FileCreation`,
`DirectoryCreation`, `TOMLEdition`, `ContractConfig`, `RequirementConfig`).
`clarinet.generate` builds lists of them and `clarinet.apply.execute_changes`
applies them in order, writing the manifest once at the end.

```python
from pathlib import Path

from clarinet.apply import execute_changes
from clarinet.generate import get_changes_for_new_contract, get_changes_for_new_link

changes = get_changes_for_new_contract(Path("Clarinet.toml"), "counter", None, True, [])
changes += get_changes_for_new_link(Path("Clarinet.toml"), "SP000000000000000000002Q6VF78.pox")
execute_changes(changes)
```

Passing a string as `source` uses it as the contract body instead of the
template. `get_changes_for_new_notebook` currently returns an empty list.

### Indexing blocks

```python
from clarinet.indexer import Indexer, IndexerConfig

indexer = Indexer(IndexerConfig(
    stacks_node_rpc_url="http://localhost:20443",
    bitcoin_node_rpc_url="http://localhost:18443",
    bitcoin_node_rpc_username="user",
    bitcoin_node_rpc_password="password",
))
event = indexer.handle_stacks_block(payload)
print(event.block.block_identifier, event.block.metadata.pox_cycle_index)
```

- `Indexer.handle_stacks_block` calls `clarinet.stacks.standardize_stacks_block`,
  which decodes the payload (malformed input raises `ValueError`), turns each
  transaction's events into debit, credit and lock operations, and computes the
  block's PoX cycle index, position and length from the current `PoxInfo`.
- `Indexer.handle_bitcoin_block` calls `clarinet.bitcoin.standardize_bitcoin_block`,
  which byte-reverses the notified `burn_block_hash` and fetches the block
  header through `BitcoinRpcClient.get_block` (JSON-RPC `getblock`).
- Each handler returns a `ChainUpdatedWithBlock` and remembers the last seven
  consecutive block identifiers (`recent_stacks_blocks`, `recent_bitcoin_blocks`).
- `Indexer.update_pox_info` fetches `<stacks_node_rpc_url>/v2/pox` and keeps
  the reply only if it holds every `PoxInfo` field; `get_pox_info` returns a copy.

Fungible-token events need the token's symbol and decimals. Pass
`resolve_asset_class=callable(contract_address, contract_name) -> AssetClassCache`
to `Indexer`; results are cached per asset class. Without a resolver, an
uncached fungible-token event raises `LookupError`.

## Not included

- Only the `contract new` and `contract requirement` commands exist; there are
  no commands to create a whole project, check or test contracts, open a
  console, publish contracts or run a local network.
- Clarity values and transactions are not decoded: a transaction's `result`
  and `description` are the raw hex with the `0x` prefix removed.
- Gaps and reorganisations are not handled: such blocks are still returned as
  `ChainUpdatedWithBlock`, and `ChainUpdatedWithReorg` is never produced.