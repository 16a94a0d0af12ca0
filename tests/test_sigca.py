import pytest

from rparser import RuleParsingError
from sigca import Sigca, main


def test_display_str():
    runner = Sigca(nb_cells=3, nb_steps=2, seed="A")
    runner.load("A: 1.A")
    assert runner.display_str() == "0 | A . .\n1 | . A .\n2 | . . A"


def test_diagram_seeds_cell_zero():
    runner = Sigca(nb_cells=4, nb_steps=3)
    aut = runner.load("Init: 1.X")
    diagram = runner.diagram()
    assert len(diagram) == 4
    assert diagram[0].cells[0] == {aut.signals.lookup("Init")}
    assert diagram[1].cells[1] == {aut.signals.lookup("X")}


def test_load_reports_parse_errors(capsys):
    runner = Sigca()
    assert runner.load("A: 1.B\n(A %): 1.C") is None
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith("Parse error: Invalid condition on line 2")
    assert out[1] == "(A %): 1.C"
    assert out[2] == "   ^"
    assert runner.automaton is None


def test_load_assert_mode_raises():
    with pytest.raises(RuleParsingError):
        Sigca().load("1.B", mode="assert")


def test_diagram_needs_an_automaton():
    with pytest.raises(Exception):
        Sigca().diagram()


def test_verbose_load_warns_about_causality(capsys):
    Sigca(verbose=True).load("A: 0/1.B")
    out = capsys.readouterr().out
    assert "parsed 1 rules over 2 signals" in out
    assert "neighborhood [0, 1], future depth 1" in out
    assert "Warning: output 0/1.B of rule A: 0/1.B" in out


def test_main_with_preset(capsys):
    assert main(["--preset", "fischer", "--cells", "10", "--steps", "5", "--show-rules"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:3] == ["Init: 0.Wall", "Init: 4/0.Right", "Init: 2/0.Half"]
    assert out[-6].startswith("0 | Init ")
    assert out[-1].startswith("5 | ")


def test_main_with_file(tmp_path, capsys):
    path = tmp_path / "move.rules"
    path.write_text("Init: 1.Init\n", encoding="utf-8")
    assert main([str(path), "--cells", "3", "--steps", "1"]) == 0
    assert capsys.readouterr().out.splitlines() == ["0 | Init . .", "1 | . Init ."]


def test_main_with_bad_file(tmp_path, capsys):
    path = tmp_path / "bad.rules"
    path.write_text("Init: 1.Init\n  ) : 1.A\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Parse error" in capsys.readouterr().out


def test_main_needs_input():
    with pytest.raises(SystemExit):
        main([])
    with pytest.raises(SystemExit):
        main(["--preset", "fischer", "--cells", "0"])
