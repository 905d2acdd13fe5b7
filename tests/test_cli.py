import numpy as np
import pytest

from group_census.cli import main


def test_order_three_output(capsys):
    assert main(["3"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "n is prime or prime squared, all groups must be abelian.",
        "Valid group #1:",
        "0 1 2",
        "1 2 0",
        "2 0 1",
        "",
        "Total valid groups of size 3: 1",
    ]


def test_quiet_prints_only_total(capsys):
    assert main(["2", "--quiet"]) == 0
    assert capsys.readouterr().out == "Total valid groups of size 2: 1\n"


def test_eager_and_no_abelian(capsys):
    assert main(["5", "--eager", "--no-abelian", "--quiet"]) == 0
    assert capsys.readouterr().out.strip() == "Total valid groups of size 5: 1"


def test_save(tmp_path, capsys):
    path = tmp_path / "order4.npz"
    assert main(["4", "--eager", "--quiet", "--save", str(path)]) == 0
    data = np.load(path)
    assert data["canonical"].shape == (2, 16)
    assert data["tables"].shape == (2, 4, 4)


@pytest.mark.parametrize("argv", [[], ["0"], ["-2"], ["four"]])
def test_usage_errors(argv, capsys):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code != 0
    assert "usage" in capsys.readouterr().err


def test_memory_error_is_fatal(monkeypatch, capsys):
    def boom(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr("group_census.cli.generate_tables", boom)
    assert main(["3"]) == 1
    assert "Memory allocation failed." in capsys.readouterr().out


def test_abelian_notice_only_for_forced_orders(capsys):
    assert main(["4", "--eager"]) == 0
    assert capsys.readouterr().out.startswith("n is prime or prime squared, all groups must be abelian.\n")
    assert main(["1"]) == 0
    assert "abelian" not in capsys.readouterr().out
    assert main(["3", "--no-abelian"]) == 0
    assert "abelian" not in capsys.readouterr().out
