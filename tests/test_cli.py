from pokedsl.cli import main
from pokedsl.dex import Dex
from pokedsl.loader import load_ron_from_dir


def test_prints_loaded_dex(tmp_path, capsys):
    (tmp_path / "types.ron").write_text('[Type((id: "Fire")), Type((id: "Water"))]')
    assert main([str(tmp_path)]) == 0
    expected = Dex()
    load_ron_from_dir(expected, tmp_path)
    assert capsys.readouterr().out == repr(expected) + "\n"


def test_missing_directory_fails(tmp_path, capsys):
    assert main([str(tmp_path / "nothing")]) == 1
    assert "error:" in capsys.readouterr().err


def test_unresolved_reference_fails(tmp_path, capsys):
    (tmp_path / "move.ron").write_text(
        'Move((id: "m", type_ids: ["Ghost"], condition: Always,'
        " attempt: Cascade(attempts: [])))"
    )
    assert main([str(tmp_path)]) == 1
    assert "Ghost" in capsys.readouterr().err