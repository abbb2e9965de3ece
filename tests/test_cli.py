from pathlib import Path

import pytest
import tomlkit

from clarinet.cli import ManifestNotFoundError, find_manifest_path, main


@pytest.fixture
def project(tmp_path, monkeypatch):
    manifest = tmp_path / "Clarinet.toml"
    manifest.write_text('[project]\nname = "demo"\n', encoding="utf-8")
    (tmp_path / "contracts").mkdir()
    (tmp_path / "tests").mkdir()
    monkeypatch.setenv("CLARINET_DISABLE_HINTS", "1")
    return tmp_path


def test_find_manifest_path_explicit(project):
    manifest = project / "Clarinet.toml"
    assert find_manifest_path(str(manifest)) == manifest


def test_find_manifest_path_explicit_missing(tmp_path):
    with pytest.raises(ManifestNotFoundError, match="Could not find Clarinet.toml"):
        find_manifest_path(str(tmp_path / "Clarinet.toml"))


def test_find_manifest_path_searches_parents(project, monkeypatch):
    nested = project / "contracts" / "deep"
    nested.mkdir()
    monkeypatch.chdir(nested)
    assert find_manifest_path().resolve() == (project / "Clarinet.toml").resolve()


def test_find_manifest_path_in_current_directory(project, monkeypatch):
    monkeypatch.chdir(project)
    assert find_manifest_path(None).name == "Clarinet.toml"


def test_contract_new_creates_files_and_edits_manifest(project):
    manifest = project / "Clarinet.toml"
    status = main(["contract", "new", "counter", "--manifest-path", str(manifest)])
    assert status == 0

    contract = project / "contracts" / "counter.clar"
    assert contract.is_file()
    assert ";; counter" in contract.read_text(encoding="utf-8")
    assert (project / "tests" / "counter_test.ts").is_file()

    document = tomlkit.parse(manifest.read_text(encoding="utf-8"))
    assert document["contracts"]["counter"]["path"] == "contracts/counter.clar"
    assert list(document["contracts"]["counter"]["depends_on"]) == []


def test_contract_requirement_added_once(project):
    manifest = project / "Clarinet.toml"
    contract_id = "SP000000000000000000002Q6VF78.pox"
    assert main(["contract", "requirement", contract_id, "--manifest-path", str(manifest)]) == 0
    assert main(["contract", "requirement", contract_id, "--manifest-path", str(manifest)]) == 0

    document = tomlkit.parse(manifest.read_text(encoding="utf-8"))
    ids = [str(entry["contract_id"]) for entry in document["project"]["requirements"]]
    assert ids == [contract_id]


def test_contract_requirement_prints_comment(project, capsys):
    manifest = project / "Clarinet.toml"
    main(["contract", "requirement", "ST1.token", "--manifest-path", str(manifest)])
    out = capsys.readouterr().out
    assert "Adding ST1.token as a requirement to Clarinet.toml" in out


def test_missing_manifest_returns_error(tmp_path, capsys):
    status = main(
        ["contract", "new", "counter", "--manifest-path", str(tmp_path / "Clarinet.toml")]
    )
    assert status == 1
    assert "Could not find Clarinet.toml" in capsys.readouterr().out


def test_hints_shown_unless_disabled(project, capsys, monkeypatch):
    manifest = project / "Clarinet.toml"
    monkeypatch.delenv("CLARINET_DISABLE_HINTS", raising=False)
    main(["contract", "new", "alpha", "--manifest-path", str(manifest)])
    shown = capsys.readouterr().out
    assert "$ clarinet test" in shown

    monkeypatch.setenv("CLARINET_DISABLE_HINTS", "1")
    main(["contract", "new", "beta", "--manifest-path", str(manifest)])
    hidden = capsys.readouterr().out
    assert "$ clarinet test" not in hidden


def test_existing_contract_file_is_skipped(project, capsys):
    manifest = project / "Clarinet.toml"
    existing = project / "contracts" / "counter.clar"
    existing.write_text("(define-constant keep true)", encoding="utf-8")
    main(["contract", "new", "counter", "--manifest-path", str(manifest)])
    assert existing.read_text(encoding="utf-8") == "(define-constant keep true)"
    assert "file already exists at path" in capsys.readouterr().out


def test_missing_subcommand_exits():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_discovers_manifest_without_flag(project, monkeypatch):
    monkeypatch.chdir(project / "tests")
    assert main(["contract", "new", "vault"]) == 0
    assert Path(project / "contracts" / "vault.clar").is_file()