from __future__ import annotations

import json
from pathlib import Path

import pytest

from boundary_search.config import load_lookup_config, lookup_config_from_parts
from boundary_search.cli import main, run_lookup


def _write_config(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "lookup.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_lookup_config_defaults(tmp_path) -> None:
    path = _write_config(tmp_path, {"values": [1, 2.5, 2.5, 7], "target": 2.5})
    cfg = load_lookup_config(path)
    assert cfg.values == (1.0, 2.5, 2.5, 7.0)
    assert cfg.target == 2.5
    assert cfg.first == 0
    assert cfg.miss_index == -1
    assert cfg.config_path == path.resolve()


def test_load_lookup_config_rejects_unknown_key(tmp_path) -> None:
    path = _write_config(tmp_path, {"values": [1], "target": 1, "extra": True})
    with pytest.raises(ValueError, match="unknown keys"):
        load_lookup_config(path)


def test_load_lookup_config_requires_values_and_target(tmp_path) -> None:
    path = _write_config(tmp_path, {"values": [1, 2]})
    with pytest.raises(ValueError, match="missing required keys"):
        load_lookup_config(path)


def test_load_lookup_config_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "lookup.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError, match="must be an object"):
        load_lookup_config(path)


def test_load_lookup_config_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_lookup_config(tmp_path / "nope.json")


@pytest.mark.parametrize(
    ("values", "message"),
    [
        ([3, 1, 2], "sorted ascending"),
        ("1,2,3", "list of numbers"),
        ([[1, 2], [3, 4]], "flat list"),
        ([1, float("nan")], "NaN"),
        (["1", "2", "3"], "list of numbers"),
        ([False, True], "list of numbers"),
        ([0, 1, True], "list of numbers"),
    ],
)
def test_lookup_config_validates_values(values, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        lookup_config_from_parts(values=values, target=1)


def test_lookup_config_rejects_bool_indices() -> None:
    with pytest.raises(ValueError, match="first must be an integer"):
        lookup_config_from_parts(values=[1], target=1, first=True)


def test_run_lookup_reports_hit_and_offset() -> None:
    cfg = lookup_config_from_parts(values=[0, 1, 5, 5, 5, 8, 9], target=5, first=100)
    summary = run_lookup(cfg)
    assert summary["index"] == 102
    assert summary["outcome"] == "hit"
    assert summary["probes"] >= 1


def test_run_lookup_reports_too_low_and_miss() -> None:
    cfg = lookup_config_from_parts(values=[1, 2, 3], target=10)
    summary = run_lookup(cfg)
    assert summary["index"] == 2
    assert summary["outcome"] == "too_low"

    cfg = lookup_config_from_parts(values=[4, 5, 6], target=1, miss_index=-5)
    summary = run_lookup(cfg)
    assert summary["index"] == -5
    assert summary["outcome"] == "miss"


def test_main_with_inline_values(capsys) -> None:
    main(["--values", "1,2,5,5,9", "--target", "5"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "status: ok"
    assert "index: 2" in out
    assert "outcome: hit" in out


def test_main_with_config_and_override(tmp_path, capsys) -> None:
    path = _write_config(tmp_path, {"values": [10, 20, 30], "target": 25, "miss_index": -3})
    main(["--config", str(path), "--first", "1"])
    out = capsys.readouterr().out.splitlines()
    assert "index: 2" in out
    assert "outcome: too_low" in out


def test_main_requires_target(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--values", "1,2,3"])
    assert excinfo.value.code == 2
    assert "--target" in capsys.readouterr().err


def test_main_rejects_unsorted_values(capsys) -> None:
    with pytest.raises(SystemExit):
        main(["--values", "3,2,1", "--target", "2"])
    assert "sorted ascending" in capsys.readouterr().err


def test_lookup_config_rejects_bool_and_string_target() -> None:
    with pytest.raises(ValueError, match="target must be a number"):
        lookup_config_from_parts(values=[0, 1], target=True)
    with pytest.raises(ValueError, match="target must be a number"):
        lookup_config_from_parts(values=[0, 1], target="1")


def test_large_integers_are_compared_exactly(tmp_path) -> None:
    big = 2**53
    path = _write_config(tmp_path, {"values": [big, big + 1], "target": big + 1})
    cfg = load_lookup_config(path)
    assert cfg.values == (big, big + 1)
    assert all(isinstance(v, int) for v in cfg.values)

    summary = run_lookup(cfg)
    assert summary["index"] == 1
    assert summary["outcome"] == "hit"


def test_main_keeps_inline_integers_exact(capsys) -> None:
    big = 2**53
    main(["--values", f"{big},{big + 1}", "--target", str(big + 1)])
    out = capsys.readouterr().out.splitlines()
    assert "index: 1" in out
    assert "outcome: hit" in out


def test_config_api_is_not_exported_from_package_root() -> None:
    import boundary_search

    assert not hasattr(boundary_search, "load_lookup_config")
    assert "LookupConfig" not in boundary_search.__all__
