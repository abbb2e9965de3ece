"""Descriptions of filesystem and manifest changes to be applied to a project."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ContractConfig:
    """A contract entry of the project manifest."""

    path: str
    depends_on: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RequirementConfig:
    """A remote contract the project depends on."""

    contract_id: str


@dataclass
class FileCreation:
    """Create a file with the given content, unless it already exists."""

    comment: str
    name: str
    content: str
    path: str


@dataclass
class DirectoryCreation:
    """Create a directory, including missing parents."""

    comment: str
    name: str
    path: str


@dataclass
class TOMLEdition:
    """Add contracts and requirements to a project manifest."""

    comment: str
    manifest_path: Path
    contracts_to_add: dict[str, ContractConfig] = field(default_factory=dict)
    requirements_to_add: list[RequirementConfig] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.manifest_path = Path(self.manifest_path)


Change = FileCreation | DirectoryCreation | TOMLEdition