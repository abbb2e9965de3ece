"""Command-line entry point for scaffolding contracts in a project."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from clarinet.apply import execute_changes
from clarinet.changes import RequirementConfig, TOMLEdition
from clarinet.generate import get_changes_for_new_contract

MANIFEST_NAME = "Clarinet.toml"
HINTS_ENV_VAR = "CLARINET_DISABLE_HINTS"


class ManifestNotFoundError(FileNotFoundError):
    """Raised when no project manifest can be located."""


def _yellow(text: str) -> str:
    return f"\x1b[1;33m{text}\x1b[0m"


def _blue(text: str) -> str:
    return f"\x1b[1;34m{text}\x1b[0m"


def find_manifest_path(path=None) -> Path:
    """Return the manifest path given, or search for one from the current directory up."""
    if path is not None:
        manifest_path = Path(path)
        if not manifest_path.exists():
            raise ManifestNotFoundError(f"Could not find {MANIFEST_NAME}")
        return manifest_path

    current = Path.cwd()
    for directory in (current, *current.parents):
        candidate = directory / MANIFEST_NAME
        if candidate.exists():
            return candidate
    raise ManifestNotFoundError(f"Could not find {MANIFEST_NAME}")


def _hints_enabled() -> bool:
    return os.environ.get(HINTS_ENV_VAR) != "1"


def _display_separator() -> None:
    print(_yellow("----------------------------"))


def _display_hint_header() -> None:
    _display_separator()
    print(_yellow("Hint: what's next?"))


def _display_hint_footer() -> None:
    print(_yellow(f"Disable these hints with the env var {HINTS_ENV_VAR}=1"))
    _display_separator()


def _display_post_check_hint() -> None:
    print()
    _display_hint_header()
    print(
        _yellow(
            "Once you are ready to write TypeScript unit tests for your contract, "
            "run the following command:\n"
        )
    )
    print(_blue("  $ clarinet test"))
    print(_yellow("    Run all run tests in the ./tests folder.\n"))
    print(
        _yellow(
            "Find more information on testing with Clarinet here: "
            "https://docs.hiro.so/docs/smart-contracts/clarinet#testing-with-the-test-harness"
        )
    )
    _display_hint_footer()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clarinet")
    commands = parser.add_subparsers(dest="command", required=True)

    contract = commands.add_parser("contract", help="Contract subcommand")
    contract_commands = contract.add_subparsers(dest="contract_command", required=True)

    new_contract = contract_commands.add_parser("new", help="New contract subcommand")
    new_contract.add_argument("name", help="Contract's name")
    new_contract.add_argument("--manifest-path", dest="manifest_path", help="Path to Clarinet.toml")

    requirement = contract_commands.add_parser(
        "requirement", help="Import contract subcommand"
    )
    requirement.add_argument("contract_id", help="Contract id")
    requirement.add_argument("--manifest-path", dest="manifest_path", help="Path to Clarinet.toml")

    return parser


def _run_contract_new(args: argparse.Namespace, manifest_path: Path) -> None:
    changes = get_changes_for_new_contract(manifest_path, args.name, None, True, [])
    execute_changes(changes)


def _run_contract_requirement(args: argparse.Namespace, manifest_path: Path) -> None:
    change = TOMLEdition(
        comment=f"Adding {args.contract_id} as a requirement to Clarinet.toml",
        manifest_path=manifest_path,
        contracts_to_add={},
        requirements_to_add=[RequirementConfig(contract_id=args.contract_id)],
    )
    execute_changes([change])


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the selected command; return the exit status."""
    args = _build_parser().parse_args(argv)
    hints = _hints_enabled()

    if args.command == "contract":
        print()
        try:
            manifest_path = find_manifest_path(args.manifest_path)
        except ManifestNotFoundError as error:
            print(error)
            return 1

        if args.contract_command == "new":
            _run_contract_new(args, manifest_path)
        else:
            _run_contract_requirement(args, manifest_path)

        if hints:
            _display_post_check_hint()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())