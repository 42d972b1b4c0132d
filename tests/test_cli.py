import json

from glitch_oracle import cli
from glitch_oracle.display import format_hexagram_lines, seed_fingerprint


def test_json_output_for_fixed_seed(capsys):
    assert cli.main(["--seed", "42", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["primary_hexagram_number"] == 31
    assert data["changing_hexagram_number"] == 6


def test_plain_output_mentions_both_hexagrams(capsys):
    assert cli.main(["--seed", "42", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "HEXAGRAM 31" in out
    assert "> CHANGING TO: HEXAGRAM 6" in out


def test_rich_output_renders(capsys):
    assert cli.main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "HEXAGRAM 60" in out
    assert "CHANGING TO" not in out


def test_save_jsonl_appends(tmp_path, capsys):
    path = tmp_path / "readings.jsonl"
    assert cli.main(["--seed", "1", "--json", "--save", str(path)]) == 0
    assert cli.main(["--seed", "42", "--json", "--save", str(path)]) == 0
    rows = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [row["seed"] for row in rows] == [1, 42]


def test_save_json_writes_file(tmp_path, capsys):
    path = tmp_path / "reading.json"
    assert cli.main(["--seed", "0", "--plain", "--save", str(path)]) == 0
    assert json.loads(path.read_text(encoding="utf-8"))["primary_hexagram_number"] == 56


def test_entropy_failure_exit_code(monkeypatch, capsys):
    real_source = cli.EntropySource

    def broken():
        raise OSError("no sensors")

    monkeypatch.setattr(cli, "EntropySource",
                        lambda delay: real_source(delay=0, battery_probe=broken))
    assert cli.main(["--plain"]) == 1
    assert "retry" in capsys.readouterr().err


def test_format_hexagram_lines_top_to_bottom():
    lines = format_hexagram_lines([1, 0, 0, 0, 0, 0], moving=[0])
    assert lines[0] == "━━   ━━"
    assert lines[-1] == "━━━━━━━ ✦"


def test_seed_fingerprint():
    assert seed_fingerprint(None) == "—"
    assert seed_fingerprint(1).endswith("…")
    assert len(seed_fingerprint(1)) == 17
