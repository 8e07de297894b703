import json
import sys

import pytest

from chromokinesis import main as cli


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["chromokinesis", *argv])
    cli.main()


def test_writes_json_file(monkeypatch, tmp_path, capsys):
    out = tmp_path / "palette.json"
    run_cli(monkeypatch, "-C", "red=#ff0000", "-n", "3", "-o", str(out))
    doc = json.loads(out.read_text(encoding="utf-8"))
    assert list(doc["red"]["tints"]) == ["red-tint-25", "red-tint-50", "red-tint-75"]
    assert set(doc["red"]) == {"hue", "tints", "shades", "tones"}
    assert "your color variants are available" in capsys.readouterr().out


def test_colors_file_and_inline_override(monkeypatch, tmp_path, capsys):
    colors = tmp_path / "colors.json"
    colors.write_text(json.dumps({"brand": "#336699", "accent": "gold"}), encoding="utf-8")
    run_cli(monkeypatch, "-f", str(colors), "-C", "accent=#ff8800", "-m", "0.3", "-V", "tints", "--stdout")
    doc = json.loads(capsys.readouterr().out)
    assert list(doc) == ["brand", "accent"]
    assert doc["accent"]["hue"] == "#ff8800"
    assert list(doc["brand"]) == ["hue", "tints"]
    assert list(doc["brand"]["tints"]) == ["brand-tint-30", "brand-tint-60", "brand-tint-90"]


def test_css_to_stdout(monkeypatch, capsys):
    run_cli(monkeypatch, "-C", "red=#ff0000", "-n", "1", "-F", "rgb", "--css", "--stdout")
    out = capsys.readouterr().out
    assert out.startswith(":root {")
    assert "  --red: rgb(255, 0, 0);" in out
    assert "--red-tint-50: rgb(" in out


def test_default_count(monkeypatch, capsys):
    run_cli(monkeypatch, "-C", "red=#ff0000", "-V", "shade", "--stdout")
    doc = json.loads(capsys.readouterr().out)
    assert len(doc["red"]["shades"]) <= 7
    assert "red-shade-13" in doc["red"]["shades"]


def test_bad_color_rejects_run(monkeypatch, tmp_path, capsys):
    out = tmp_path / "palette.json"
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "-C", "red=#ff0000", "-C", "oops=nonsense", "-o", str(out))
    assert excinfo.value.code == 2
    assert not out.exists()
    assert "oops" in capsys.readouterr().err


def test_mix_implying_too_many_steps(monkeypatch, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, "-C", "red=#ff0000", "-m", "0.005", "--stdout")
    assert excinfo.value.code == 2
    assert "200" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv",
    [
        ["-C", "red=#ff0000", "-n", "101"],
        ["-C", "red=#ff0000", "-n", "0"],
        ["-C", "red=#ff0000", "-m", "1"],
        ["-C", "red=#ff0000", "-n", "3", "-m", "0.25"],
        ["-C", "red=#ff0000", "-F", "lab"],
        ["-C", "red"],
        [],
    ],
)
def test_argument_errors(monkeypatch, argv):
    with pytest.raises(SystemExit) as excinfo:
        run_cli(monkeypatch, *argv)
    assert excinfo.value.code == 2


def test_preview(monkeypatch, capsys):
    run_cli(monkeypatch, "-C", "red=#ff0000", "-n", "2", "-p", "--stdout")
    captured = capsys.readouterr()
    doc = json.loads(captured.out)
    assert "red-tint-33" in doc["red"]["tints"]
    assert "red-tint-33" in captured.err
    assert "\033[48;2;" in captured.err


def test_preview_with_file_output(monkeypatch, tmp_path, capsys):
    out = tmp_path / "palette.json"
    run_cli(monkeypatch, "-C", "red=#ff0000", "-n", "2", "-p", "-o", str(out))
    assert "\033[48;2;" in capsys.readouterr().out
    assert json.loads(out.read_text(encoding="utf-8"))["red"]["hue"] == "#ff0000"
