"""Tests for the ``docindex`` subcommands.

Most tests call the command functions directly; the ``test_app_*`` tests go
through the Cyclopts app so option names and ``INPUT_*`` environment
overrides are parsed as on the command line. Each test runs from a temporary
working directory so the repository's ``config/index.yaml`` is not picked up
unless a test writes its own.
"""

from __future__ import annotations

from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from documenter_index import cli
from documenter_index.codec import load_search_index
from documenter_index.config import IndexConfigError
from documenter_index.models import SearchIndex


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_validate_reports_root_locations(
    sample_index_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.validate(source=str(sample_index_path))
    assert excinfo.value.code == 1
    err = capsys.readouterr().err.splitlines()
    assert err == [
        "36: empty-location: location is empty",
        "38: empty-location: location is empty",
        "39: empty-location: location is empty",
    ]


def test_validate_passes_with_root_allowed(
    sample_index_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.validate(source=str(sample_index_path), allow_root_location=True)
    assert capsys.readouterr().out == "ok: 40 entries\n"


def test_validate_reads_default_config(
    tmp_path: Path, sample_index_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "index.yaml").write_text(
        f"source: {sample_index_path}\nallow_root_location: true\n",
        encoding="utf-8",
    )
    cli.validate()
    assert capsys.readouterr().out == "ok: 40 entries\n"


def test_validate_reports_format_errors(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    broken = tmp_path / "search_index.js"
    broken.write_text('var documenterSearchIndex = {"docs":\n[', encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.validate(source=str(broken))
    assert "not valid JSON" in capsys.readouterr().err


def test_validate_requires_a_source() -> None:
    with pytest.raises(ValueError, match="No search index source"):
        cli.validate()


def test_convert_to_json(
    tmp_path: Path,
    sample_index_path: Path,
    sample_index: SearchIndex,
    capsys: pytest.CaptureFixture[str],
) -> None:
    cli.convert(source=str(sample_index_path), output=Path("out/index.json"))
    assert capsys.readouterr().out == "wrote out/index.json\n"
    written = tmp_path / "out" / "index.json"
    payload = msgspec_json.decode(written.read_bytes())
    assert len(payload["docs"]) == 40
    assert load_search_index(written) == sample_index


def test_convert_uses_config_variable_name(
    tmp_path: Path, sample_index_path: Path
) -> None:
    config_path = tmp_path / "custom.yaml"
    config_path.write_text(
        f"source: {sample_index_path}\n"
        "output: public/search_index.js\n"
        "variable_name: pkgSearchIndex\n",
        encoding="utf-8",
    )
    cli.convert(config=config_path)
    text = (tmp_path / "public" / "search_index.js").read_text(encoding="utf-8")
    assert text.startswith('var pkgSearchIndex = {"docs":\n[')


def test_convert_requires_output(sample_index_path: Path) -> None:
    with pytest.raises(ValueError, match="No output path"):
        cli.convert(source=str(sample_index_path))


def test_pages_lists_runs(
    sample_index_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.pages(source=str(sample_index_path))
    assert capsys.readouterr().out == "0\tAPI\t35\n35\tHome\t5\n"


def test_stats_summarizes_pages(
    sample_index_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.stats(source=str(sample_index_path))
    assert capsys.readouterr().out.splitlines() == [
        "API: 35 entries, 19 anchors "
        "(page=16, section=3, type=7, function=8, method=1)",
        "Home: 5 entries, 2 anchors (page=3, section=2)",
        "total: 40 entries across 2 pages",
    ]


def _run(tokens: list[str]) -> int:
    """Run the Cyclopts app and return its exit status."""
    try:
        result = cli.app(tokens, exit_on_error=False)
    except SystemExit as exc:
        return int(exc.code or 0)
    return result if isinstance(result, int) else 0


def test_app_convert_format_option_overrides_suffix(
    tmp_path: Path, sample_index_path: Path, sample_index: SearchIndex
) -> None:
    status = _run(
        [
            "convert",
            "--source",
            str(sample_index_path),
            "--output",
            "out/index.js",
            "--format",
            "json",
        ]
    )
    assert status == 0
    written = tmp_path / "out" / "index.js"
    payload = msgspec_json.decode(written.read_bytes())
    assert len(payload["docs"]) == 40
    assert load_search_index(written) == sample_index


def test_app_validate_reads_environment(
    sample_index_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("INPUT_SOURCE", str(sample_index_path))
    monkeypatch.setenv("INPUT_ALLOW_ROOT_LOCATION", "true")
    assert _run(["validate"]) == 0
    assert capsys.readouterr().out == "ok: 40 entries\n"


def test_app_validate_exits_non_zero_on_issues(
    sample_index_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setenv("INPUT_SOURCE", str(sample_index_path))
    assert _run(["validate"]) == 1
    assert capsys.readouterr().err.count("empty-location") == 3


def test_app_convert_variable_name_from_environment(
    tmp_path: Path, sample_index_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("INPUT_VARIABLE_NAME", "pkgSearchIndex")
    monkeypatch.setenv("INPUT_OUTPUT", str(tmp_path / "search_index.js"))
    assert _run(["convert", "--source", str(sample_index_path)]) == 0
    text = (tmp_path / "search_index.js").read_text(encoding="utf-8")
    assert text.startswith('var pkgSearchIndex = {"docs":\n[')


def test_app_rejects_empty_categories_config(
    tmp_path: Path, sample_index_path: Path
) -> None:
    config_path = tmp_path / "index.yaml"
    config_path.write_text(
        f"source: {sample_index_path}\nallow_root_location: true\ncategories: []\n",
        encoding="utf-8",
    )
    with pytest.raises(IndexConfigError, match="at least one category tag"):
        cli.validate(config=config_path)
