import json

import pytest

import spiderfy.__main__ as cli


def test_main_prints_circle_table(capsys):
    cli.main(["3"])

    out = capsys.readouterr().out
    assert "Mode: circle" in out
    assert "[2] angle=" in out
    assert "stack=-" in out


def test_main_prints_json_records(capsys):
    cli.main(["9", "--json", "--anchor-offset-x", "4"])

    records = json.loads(capsys.readouterr().out)
    assert [r["index"] for r in records] == list(range(9))
    assert records[8]["style"] == {"zIndex": 1}


def test_main_honours_infinite_switchover(capsys):
    cli.main(["40", "--circle-spiral-switchover", "inf"])

    assert "Mode: circle" in capsys.readouterr().out


def test_main_zero_markers(capsys):
    cli.main(["0"])

    out = capsys.readouterr().out
    assert "Mode: (none)" in out
    assert "(none)" in out


def test_main_rejects_bad_parameters():
    with pytest.raises(SystemExit) as exc:
        cli.main(["3", "--spiral-length-start", "long"])

    assert exc.value.code == 1


def test_main_writes_tikz_document(tmp_path, monkeypatch):
    rendered = []

    def _generate_document(records, **kwargs):
        rendered.append((len(records), kwargs))
        return "tikz document"

    monkeypatch.setattr(cli, "generate_tikz_document", _generate_document)

    tikz_path = tmp_path / "out" / "spider.tex"
    cli.main(["2", "--force-legs", "--tikz-output-path", str(tikz_path)])

    assert tikz_path.read_text(encoding="utf-8") == "tikz document"
    assert rendered == [(2, {"title": "2 marker(s)"})]
