from pathlib import Path

from click.utils import strip_ansi
from typer.testing import CliRunner

import quickopen.__main__ as entrypoint
from quickopen import __version__

CORPUS_PATH = Path(__file__).parent / "data" / "project_dir_tree.txt"


def test_help_includes_expected_options() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--help"])
    output = strip_ansi(result.output)

    assert result.exit_code == 0
    assert "--input" in output
    assert "--max-results" in output
    assert "--max-misses" in output
    assert "--exact" in output
    assert "--version" in output


def test_version_flag_prints_version_and_exits() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == f"quickopen {__version__}"


def test_reads_candidates_from_stdin() -> None:
    runner = CliRunner()

    result = runner.invoke(
        entrypoint.cli,
        ["entity gd"],
        input=CORPUS_PATH.read_text(encoding="utf-8"),
    )

    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "./entity/entity_man.gd"


def test_reads_candidates_from_file_and_prints_scores(tmp_path: Path) -> None:
    runner = CliRunner()
    candidates = tmp_path / "paths.txt"
    candidates.write_text(
        "./entity/background_zone1/pu_sh.png\r\n"
        "\n"
        "./entity/background_zone1/background/push.png\n"
        "./menu/hud/hud.gd\n",
        encoding="utf-8",
    )

    result = runner.invoke(
        entrypoint.cli, ["push background", "--input", str(candidates), "--scores"]
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "340\t./entity/background_zone1/background/push.png",
        "228\t./entity/background_zone1/pu_sh.png",
    ]


def test_exact_mode_and_result_cap() -> None:
    runner = CliRunner()

    result = runner.invoke(
        entrypoint.cli,
        ["hud", "-i", str(CORPUS_PATH), "--exact", "-n", "1"],
    )

    assert result.exit_code == 0
    assert result.output.splitlines() == ["./menu/hud/hud.gd"]


def test_options_are_passed_to_search(monkeypatch) -> None:
    runner = CliRunner()
    captured: dict[str, object] = {}

    class _FakeSearch:
        def __init__(self, **kwargs: object) -> None:
            captured["options"] = kwargs

        def set_query(self, raw_query: str) -> None:
            captured["query"] = raw_query

        def search_all(self, targets: list[str]) -> list:
            captured["targets"] = targets
            return []

    monkeypatch.setattr(entrypoint, "FuzzySearch", _FakeSearch)

    result = runner.invoke(
        entrypoint.cli,
        ["Ham", "--max-misses", "0", "--start-offset", "2", "-n", "7", "--exact"],
        input="a\nb\n",
    )

    assert result.exit_code == 0
    assert result.output == ""
    assert captured == {
        "options": {
            "allow_subsequences": False,
            "max_misses": 0,
            "start_offset": 2,
            "max_results": 7,
        },
        "query": "Ham",
        "targets": ["a", "b"],
    }


def test_missing_input_file_exits_with_error(tmp_path: Path) -> None:
    runner = CliRunner()
    missing = tmp_path / "missing.txt"

    result = runner.invoke(entrypoint.cli, ["gd", "--input", str(missing)])

    assert result.exit_code == 1
    assert "Failed to read candidates" in result.output


def test_negative_limits_are_usage_errors() -> None:
    runner = CliRunner()

    result = runner.invoke(entrypoint.cli, ["gd", "--max-results", "-1"], input="")

    assert result.exit_code == 2


def test_verbose_logs_search_summary() -> None:
    runner = CliRunner()

    result = runner.invoke(
        entrypoint.cli,
        ["gd", "--verbose"],
        input=CORPUS_PATH.read_text(encoding="utf-8"),
    )

    assert result.exit_code == 0
    assert "Fuzzy search completed" in strip_ansi(result.output)
