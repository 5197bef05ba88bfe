import json
from pathlib import Path

from src.relief import main as cli
from src.relief.schemas.relief import ReliefRequest


def _scenario(tmp_path: Path, **overrides) -> Path:
    payload = {
        "beneficiaries": [
            {"name": "Sam", "age": 8, "gender": "M", "city": "B"},
            {"name": "Amy", "age": 8, "gender": "F", "city": "C"},
        ],
        "network": {
            "cities": ["A", "B", "C"],
            "roads": [
                {"from_city": "A", "to_city": "B", "distance": 4},
                {"from_city": "B", "to_city": "C", "distance": 3},
                {"from_city": "A", "to_city": "C", "distance": 10},
            ],
        },
        "source": "A",
        "destination": "C",
    }
    payload.update(overrides)
    path = tmp_path / "scenario.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_main_prints_text_report(tmp_path: Path, capsys):
    exit_code = cli.main(["--scenario", str(_scenario(tmp_path))])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Prioritized List of Beneficiaries" in out
    assert "Bellman-Ford Algorithm:" in out
    assert "Amy                   | Distance: 7, Path: A -> B -> C" in out


def test_main_prints_json_report(tmp_path: Path, capsys):
    exit_code = cli.main(["--scenario", str(_scenario(tmp_path)), "--json", "--algorithm", "floyd_warshall"])

    payload = json.loads(capsys.readouterr().out)
    assert exit_code == 0
    assert [entry["name"] for entry in payload["ranked"]] == ["Amy", "Sam"]
    assert payload["metadata"]["routing_algorithm"] == "floyd_warshall"


def test_main_reads_csv_inputs(tmp_path: Path, capsys):
    people = tmp_path / "people.csv"
    people.write_text("Name,Age,Gender,City\nJoe,70,M,B\n", encoding="utf-8")
    roads = tmp_path / "roads.csv"
    roads.write_text("From,To,Distance\nA,B,4\n", encoding="utf-8")

    exit_code = cli.main(["--beneficiaries", str(people), "--roads", str(roads), "--source", "A"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Joe                   | Distance: 4, Path: A -> B" in out


def test_main_requires_source_with_files(tmp_path: Path, capsys):
    roads = tmp_path / "roads.csv"
    roads.write_text("From,To,Distance\nA,B,4\n", encoding="utf-8")

    exit_code = cli.main(["--roads", str(roads)])

    assert exit_code == 1
    assert "--source is required" in capsys.readouterr().err


def test_main_reports_invalid_scenario(tmp_path: Path, capsys):
    exit_code = cli.main(["--scenario", str(_scenario(tmp_path, source="Nowhere"))])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err


def test_main_falls_back_to_interactive_entry(monkeypatch, capsys):
    request = ReliefRequest(network={"cities": ["A"]}, source="A")
    monkeypatch.setattr(cli, "prompt_request", lambda: request)

    exit_code = cli.main([])

    assert exit_code == 0
    assert "--- Routes from A to each Beneficiary ---" in capsys.readouterr().out


def test_main_reports_truncated_interactive_input(monkeypatch, capsys):
    def _closed_stdin():
        raise EOFError

    monkeypatch.setattr(cli, "prompt_request", _closed_stdin)

    exit_code = cli.main([])

    assert exit_code == 1
    assert "input ended" in capsys.readouterr().err


def test_main_reports_unknown_log_level(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.setattr(cli.settings, "log_level", "NOPE")

    exit_code = cli.main(["--scenario", str(_scenario(tmp_path))])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().err
