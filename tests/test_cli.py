from trafficflow.cli import main
from trafficflow.model import calculate, parse_project
from trafficflow.storage import format_table, load_project


def _create(path, *extra):
    return main(
        [
            "create",
            str(path),
            "--t0",
            "1",
            "--tmax",
            "5",
            *extra,
            "--row",
            "1000",
            "2,5",
            "1",
            "0,5",
        ]
    )


def test_create_writes_a_loadable_project(tmp_path):
    path = tmp_path / "data.bin"
    assert _create(path, "--delta-t", "1") == 0
    project = load_project(path)
    assert (project.t0, project.tmax, project.delta_t) == (1, 5, 1)
    assert len(project.rows) == 1
    assert project.rows[0].n1 == 1000
    assert project.rows[0].delta_n1 == 2.5


def test_show_prints_initial_data(tmp_path, capsys):
    path = tmp_path / "data.bin"
    _create(path, "--delta-t", "1")
    capsys.readouterr()
    assert main(["show", str(path)]) == 0
    out = capsys.readouterr().out
    assert "T0: 1" in out
    assert "№;\tN1;\tΔN1;\ta;\tb" in out
    assert "1;\t1000;\t2,500;\t1,000;\t0,500" in out


def test_calc_prints_result_table(tmp_path, capsys):
    path = tmp_path / "data.bin"
    _create(path, "--delta-t", "1")
    capsys.readouterr()
    assert main(["calc", str(path)]) == 0
    captured = capsys.readouterr()
    expected = calculate(
        parse_project("1", "5", "1", [["1", "1000", "2,500", "1,000", "0,500"]])
    )
    assert captured.out == format_table(expected.to_cells())
    assert captured.out.startswith("№;\tN1;\tΔN1;\ta;\tb \\ T")
    assert "Расчёт завершён успешно." in captured.err


def test_calc_exports_table_and_chart(tmp_path, capsys):
    path = tmp_path / "data.bin"
    _create(path, "--delta-t", "2")
    table_path = tmp_path / "result.csv"
    assert (
        main(["calc", str(path), "--table", str(table_path), "--chart", str(tmp_path / "graph")])
        == 0
    )
    out = capsys.readouterr().out
    assert table_path.read_bytes().decode("cp1251").replace("\r\n", "\n") == out
    assert (tmp_path / "graph.png").read_bytes().startswith(b"\x89PNG")


def test_calc_rejects_zero_delta_t(tmp_path, capsys):
    path = tmp_path / "data.bin"
    _create(path)
    capsys.readouterr()
    assert main(["calc", str(path)]) == 1
    assert "Поле ΔT не может быть равно 0!" in capsys.readouterr().err


def test_calc_missing_file(tmp_path, capsys):
    assert main(["calc", str(tmp_path / "absent.bin")]) == 1
    assert "Ошибка при открытии файла" in capsys.readouterr().err


def test_create_rejects_bad_number(tmp_path, capsys):
    path = tmp_path / "data.bin"
    code = main(["create", str(path), "--row", "abc", "1", "1", "1"])
    assert code == 1
    assert not path.exists()
    assert "Ошибка при сохранении данных" in capsys.readouterr().err