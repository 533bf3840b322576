from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from oboBridge.cli.__main__ import cli


def test_to_iri_and_from_iri_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--ontology-id", "test", "to-iri", "GO:001", "003", "MGI:MGI:1"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "http://purl.obolibrary.org/obo/GO_001",
        "http://purl.obolibrary.org/obo/test#003",
        "http://purl.obolibrary.org/obo/MGI_MGI%3A1",
    ]

    result = runner.invoke(
        cli,
        [
            "from-iri",
            "http://purl.obolibrary.org/obo/BFO_0000050",
            "http://purl.obolibrary.org/obo/My_Ont#_FOO_002",
            "http://purl.obolibrary.org/testont",
        ],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "BFO:0000050",
        "My_Ont:FOO_002",
        "http://purl.obolibrary.org/testont",
    ]


def test_unprefixed_id_without_ontology_fails_cleanly() -> None:
    result = CliRunner().invoke(cli, ["to-iri", "003"])
    assert result.exit_code == 1
    assert "no current ontology id" in result.output


def test_ontology_id_from_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "bridge.yml"
    cfg.write_text("ontology_id: uberon\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["--config", str(cfg), "to-iri", "part_of"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "http://purl.obolibrary.org/obo/uberon#part_of"


def test_missing_config_file_is_reported(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["--config", str(tmp_path / "nope.yml"), "diagnose"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_convert_round_trip(tmp_path: Path) -> None:
    source = tmp_path / "ids.txt"
    source.write_text("GO:001\n\nMy_Ont:FOO_002\nhttp://example.org/x\n", encoding="utf-8")
    iris = tmp_path / "out" / "iris.txt"
    back = tmp_path / "out" / "back.txt"

    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["convert", "--direction", "to-iri", "--input", str(source), "--output", str(iris)],
    )
    assert result.exit_code == 0, result.output
    assert "2 converted, 1 unchanged" in result.output
    assert iris.read_text(encoding="utf-8").splitlines() == [
        "http://purl.obolibrary.org/obo/GO_001",
        "",
        "http://purl.obolibrary.org/obo/My_Ont#_FOO_002",
        "http://example.org/x",
    ]

    result = runner.invoke(
        cli,
        ["convert", "--direction", "from-iri", "--input", str(iris), "--output", str(back)],
    )
    assert result.exit_code == 0, result.output
    assert back.read_text(encoding="utf-8") == source.read_text(encoding="utf-8")


def test_convert_reports_failing_line(tmp_path: Path) -> None:
    source = tmp_path / "ids.txt"
    source.write_text("GO:001\n003\n", encoding="utf-8")
    result = CliRunner().invoke(
        cli,
        ["convert", "--input", str(source), "--output", str(tmp_path / "o.txt")],
    )
    assert result.exit_code == 1
    assert "ids.txt:2" in result.output


def test_diagnose_prints_configuration() -> None:
    result = CliRunner().invoke(cli, ["--ontology-id", "go", "diagnose"])
    assert result.exit_code == 0, result.output
    assert '"ontology_id": "go"' in result.output
    assert '"owl": "http://www.w3.org/2002/07/owl#"' in result.output


def test_config_prefix_overlapping_obo_base_is_rejected(tmp_path: Path) -> None:
    cfg = tmp_path / "bridge.yml"
    cfg.write_text("prefixes:\n  obo: http://purl.obolibrary.org/obo/\n", encoding="utf-8")
    result = CliRunner().invoke(
        cli, ["--config", str(cfg), "from-iri", "http://purl.obolibrary.org/obo/GO_001"]
    )
    assert result.exit_code == 1
    assert "overlaps the OBO base" in result.output
