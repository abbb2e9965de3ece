from pathlib import Path

from clarinet.changes import (
    ContractConfig,
    DirectoryCreation,
    FileCreation,
    RequirementConfig,
    TOMLEdition,
)


def test_requirements_compare_by_contract_id():
    first = RequirementConfig(contract_id="SP000.token")
    second = RequirementConfig(contract_id="SP000.token")
    other = RequirementConfig(contract_id="SP000.other")
    assert first == second
    assert first != other
    assert len({first, second, other}) == 2


def test_contract_config_defaults_to_no_dependencies():
    config = ContractConfig(path="contracts/foo.clar")
    assert config.depends_on == []
    other = ContractConfig(path="contracts/bar.clar")
    config.depends_on.append("bar")
    assert other.depends_on == []


def test_toml_edition_defaults_are_independent():
    first = TOMLEdition(comment="a", manifest_path=Path("Clarinet.toml"))
    second = TOMLEdition(comment="b", manifest_path=Path("Clarinet.toml"))
    first.requirements_to_add.append(RequirementConfig(contract_id="x.y"))
    first.contracts_to_add["foo"] = ContractConfig(path="contracts/foo.clar")
    assert second.requirements_to_add == []
    assert second.contracts_to_add == {}


def test_toml_edition_normalises_manifest_path():
    edition = TOMLEdition(comment="c", manifest_path="project/Clarinet.toml")
    assert edition.manifest_path == Path("project") / "Clarinet.toml"


def test_file_and_directory_creation_hold_their_fields():
    file_change = FileCreation(comment="c", name="n", content="body", path="p/n")
    dir_change = DirectoryCreation(comment="c", name="n", path="p")
    assert (file_change.name, file_change.content, file_change.path) == ("n", "body", "p/n")
    assert (dir_change.name, dir_change.path) == ("n", "p")