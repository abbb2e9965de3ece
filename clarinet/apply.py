"""Apply planned changes to the filesystem and the project manifest."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import tomlkit
from tomlkit.toml_document import TOMLDocument

from clarinet.changes import (
    Change,
    DirectoryCreation,
    FileCreation,
    RequirementConfig,
    TOMLEdition,
)


def _red(text: str) -> str:
    return f"\x1b[1;31m{text}\x1b[0m"


def _table(manifest, key: str):
    if key not in manifest:
        manifest[key] = tomlkit.table()
    return manifest[key]


def _apply_edition(manifest: TOMLDocument, edition: TOMLEdition) -> None:
    project = _table(manifest, "project")
    requirements = [
        RequirementConfig(contract_id=str(entry["contract_id"]))
        for entry in project.get("requirements", [])
    ]
    for requirement in edition.requirements_to_add:
        if requirement not in requirements:
            requirements.append(requirement)

    rendered = tomlkit.array()
    for requirement in requirements:
        entry = tomlkit.inline_table()
        entry["contract_id"] = requirement.contract_id
        rendered.append(entry)
    project["requirements"] = rendered

    if edition.contracts_to_add:
        contracts = _table(manifest, "contracts")
        for name, config in edition.contracts_to_add.items():
            entry = tomlkit.table()
            entry["path"] = config.path
            entry["depends_on"] = list(config.depends_on)
            contracts[name] = entry


def execute_changes(changes: Iterable[Change]) -> None:
    """Apply changes in order; manifest edits are accumulated and written once."""
    manifest: TOMLDocument | None = None
    manifest_path: Path | None = None

    for change in changes:
        if isinstance(change, FileCreation):
            target = Path(change.path)
            if target.is_file():
                print(
                    f"{_red('Skip creating file')}, file already exists at path {change.path}"
                )
                continue
            print(change.comment)
            target.write_text(change.content, encoding="utf-8")
        elif isinstance(change, DirectoryCreation):
            print(change.comment)
            Path(change.path).mkdir(parents=True, exist_ok=True)
        elif isinstance(change, TOMLEdition):
            if manifest is None:
                manifest_path = Path(change.manifest_path)
                manifest = tomlkit.parse(manifest_path.read_text(encoding="utf-8"))
            _apply_edition(manifest, change)
            print(change.comment)
        else:
            raise TypeError(f"unsupported change: {change!r}")

    if manifest is not None and manifest_path is not None:
        manifest_path.write_text(tomlkit.dumps(manifest), encoding="utf-8")