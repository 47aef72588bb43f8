import json
from dataclasses import replace

from config import DEFAULT_INSTANCE, LocalSearchParams
from core.instance_io import load_tour_ids
from scripts import run_local_search
from scripts.run_local_search import main


def test_cli_on_random_instance_writes_a_valid_tour(tmp_path, capsys):
    out = tmp_path / "random.tour"

    exit_code = main(["--random", "25", "--seed", "3", "--output", str(out), "--log-level", "WARNING"])

    assert exit_code == 0
    printed = capsys.readouterr().out
    summary = json.loads(printed[: printed.rindex("}") + 1])
    assert summary["num_cities"] == 25
    assert summary["final_length"] <= summary["two_opt_length"] <= summary["nearest_neighbour_length"]
    assert sorted(load_tour_ids(out)) == list(range(25))


def test_cli_defaults_come_from_config(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(run_local_search, "DEFAULT_INSTANCE", replace(DEFAULT_INSTANCE, seed=5))
    monkeypatch.setattr(run_local_search, "DEFAULT_LOCAL_SEARCH_PARAMS", LocalSearchParams(max_passes=1))
    implicit = tmp_path / "implicit.tour"
    explicit = tmp_path / "explicit.tour"

    run_local_search.main(["--random", "30", "--output", str(implicit), "--log-level", "ERROR"])
    printed = capsys.readouterr().out
    summary = json.loads(printed[: printed.rindex("}") + 1])
    run_local_search.main(["--random", "30", "--seed", "5", "--max-passes", "1",
                           "--output", str(explicit), "--log-level", "ERROR"])

    assert summary["two_opt_passes"] <= 1
    assert summary["or_opt_passes"] <= 1
    assert load_tour_ids(implicit) == load_tour_ids(explicit)


def test_cli_on_instance_file(tmp_path, capsys):
    instance = tmp_path / "square.txt"
    instance.write_text("0 0 0\n1 10 10\n2 10 0\n3 0 10\n", encoding="utf-8")

    exit_code = main(["--input", str(instance), "--metric", "euclidean", "--log-level", "ERROR"])

    assert exit_code == 0
    assert capsys.readouterr().out.strip().endswith("length: 40")
