"""Build the list of changes that scaffold contracts, links and notebooks."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from clarinet.changes import (
    Change,
    ContractConfig,
    FileCreation,
    RequirementConfig,
    TOMLEdition,
)

_CONTRACT_TEMPLATE = """
;; {name}
;; <add a description here>

;; constants
;;

;; data maps and vars
;;

;; private functions
;;

;; public functions
;;
"""

_TEST_TEMPLATE = """
import { Clarinet, Tx, Chain, Account, types } from 'https://deno.land/x/clarinet@v0.14.0/index.ts';
import { assertEquals } from 'https://deno.land/std@0.90.0/testing/asserts.ts';

Clarinet.test({
    name: "Ensure that <...>",
    async fn(chain: Chain, accounts: Map<string, Account>) {
        let block = chain.mineBlock([
            /* 
             * Add transactions with: 
             * Tx.contractCall(...)
            */
        ]);
        assertEquals(block.receipts.length, 0);
        assertEquals(block.height, 2);

        block = chain.mineBlock([
            /* 
             * Add transactions with: 
             * Tx.contractCall(...)
            */
        ]);
        assertEquals(block.receipts.length, 0);
        assertEquals(block.height, 3);
    },
});
"""


def _green(text: str) -> str:
    return f"\x1b[1;32m{text}\x1b[0m"


def _yellow(text: str) -> str:
    return f"\x1b[1;33m{text}\x1b[0m"


def _project_dir(manifest_path: os.PathLike | str) -> str:
    return os.fspath(Path(manifest_path).parent)


def _contract_file(manifest_path, contract_name: str, source: str | None) -> FileCreation:
    content = source if source is not None else _CONTRACT_TEMPLATE.format(name=contract_name)
    name = f"{contract_name}.clar"
    return FileCreation(
        comment=f"{_green('Created file')} contracts/{name}",
        name=name,
        content=content,
        path=f"{_project_dir(manifest_path)}/contracts/{name}",
    )


def _test_file(manifest_path, contract_name: str) -> FileCreation:
    name = f"{contract_name}_test.ts"
    return FileCreation(
        comment=f"{_green('Created file')} tests/{name}",
        name=name,
        content=_TEST_TEMPLATE,
        path=f"{_project_dir(manifest_path)}/tests/{name}",
    )


def _manifest_entry(manifest_path, contract_name: str, deps: list[str]) -> TOMLEdition:
    config = ContractConfig(path=f"contracts/{contract_name}.clar", depends_on=list(deps))
    return TOMLEdition(
        comment=f"{_yellow('Updated Clarinet.toml')} with contract {contract_name}",
        manifest_path=Path(manifest_path),
        contracts_to_add={contract_name: config},
        requirements_to_add=[],
    )


@dataclass
class _NewNotebook:
    """Collects the changes that scaffold a notebook."""

    manifest_path: Path
    notebook_name: str
    changes: list[Change] = field(default_factory=list)

    def run(self) -> list[Change]:
        return list(self.changes)


def get_changes_for_new_contract(
    manifest_path, contract_name, source, include_test, deps
) -> list[Change]:
    """Changes creating a contract, optionally its test, and indexing it in the manifest."""
    changes: list[Change] = [_contract_file(manifest_path, contract_name, source)]
    if include_test:
        changes.append(_test_file(manifest_path, contract_name))
    changes.append(_manifest_entry(manifest_path, contract_name, list(deps)))
    return changes


def get_changes_for_new_link(manifest_path, contract_id) -> list[Change]:
    """Changes adding a remote contract as a requirement of the project."""
    return [
        TOMLEdition(
            comment=f"Adding {contract_id} as a requirement in Clarinet.toml",
            manifest_path=Path(manifest_path),
            contracts_to_add={},
            requirements_to_add=[RequirementConfig(contract_id=contract_id)],
        )
    ]


def get_changes_for_new_notebook(manifest_path, notebook_name) -> list[Change]:
    """Changes creating a notebook; notebooks need no scaffolding yet."""
    return _NewNotebook(Path(manifest_path), notebook_name).run()