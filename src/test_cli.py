import pyarrow.csv as pv
import pytest

from grid_calc.cli import main


@pytest.fixture
def grid_file(tmp_path):
    path = tmp_path / "input.csv"
    path.write_text("3 4 +,A0 2 *\nB1 1 +,A1 1 +\n")
    return path


def test_prints_table(grid_file, capsys):
    main([str(grid_file)])
    out = capsys.readouterr().out
    assert out == "\tA\tB\n0\t7\t14\n1\t#ERR\t#ERR\n"


def test_multiple_inputs_get_banners(grid_file, tmp_path, capsys):
    second = tmp_path / "second.csv"
    second.write_text("1 2 -\n")
    main([str(grid_file), str(second)])
    out = capsys.readouterr().out
    assert out.startswith("TEST 1: ---------------------------\n")
    assert "TEST 2: ---------------------------\n\tA\n0\t-1\n" in out


def test_show_dependencies(grid_file, capsys):
    main([str(grid_file), "--show-dependencies"])
    out = capsys.readouterr().out
    assert "A0 formula: " in out
    assert "Downstream dependencies -> B0" in out


def test_export_writes_csv(grid_file, tmp_path, capsys):
    main([str(grid_file), "--export"])
    exported = tmp_path / "input_values.csv"
    assert exported.exists()
    assert "Grid values saved to" in capsys.readouterr().out
    table = pv.read_csv(str(exported))
    assert table.column_names == ["A", "B"]
    assert table.num_rows == 2


def test_error_marker_option(grid_file, capsys):
    main([str(grid_file), "--error-marker", "ERR!"])
    assert "1\tERR!\tERR!" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "missing.csv")])
    assert info.value.code == 1
    assert "not found" in capsys.readouterr().out


def test_rejects_unknown_cycle_policy(grid_file):
    with pytest.raises(SystemExit):
        main([str(grid_file), "--cycle-policy", "everything"])


def test_rejects_multi_character_delimiter(grid_file, capsys):
    with pytest.raises(SystemExit) as info:
        main([str(grid_file), "--delimiter", ";;"])
    assert info.value.code == 2
    assert "single character" in capsys.readouterr().err


def test_skip_blank_cells_option(tmp_path, capsys):
    path = tmp_path / "blanks.csv"
    path.write_text("1,,2\n")
    main([str(path)])
    assert capsys.readouterr().out == "\tA\tB\tC\n0\t1\t#ERR\t2\n"
    main([str(path), "--skip-blank-cells"])
    assert capsys.readouterr().out == "\tA\tB\tC\n0\t1\t\t2\n"
