from __future__ import annotations

import pytest

from factories import row
from salesmr import cli
from salesmr.analyses import low_selling_products, top_selling_products


def test_program_prints_report(write_dataset, monkeypatch, capsys):
    path = write_dataset(row(code="A001", retail="50"), row(code="A001", retail="25"))
    monkeypatch.setenv("SALES_DATASET", str(path))
    assert top_selling_products.main([]) == 0
    out = capsys.readouterr().out
    assert "A001" in out
    assert "$75.00" in out


def test_missing_dataset_exits_nonzero(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SALES_DATASET", str(tmp_path / "nope.csv"))
    assert top_selling_products.main([]) == 1
    assert capsys.readouterr().out == ""


def test_low_selling_threshold_argument(write_dataset, monkeypatch, capsys):
    path = write_dataset(row(code="A", retail="150"), row(code="B", retail="20"))
    monkeypatch.setenv("SALES_DATASET", str(path))
    assert low_selling_products.main(["200"]) == 0
    assert "Found 2 products" in capsys.readouterr().out


def test_low_selling_threshold_from_environment(write_dataset, monkeypatch, capsys):
    path = write_dataset(row(code="A", retail="150"), row(code="B", retail="20"))
    monkeypatch.setenv("SALES_DATASET", str(path))
    monkeypatch.setenv("LOW_SALES_THRESHOLD", "10")
    assert low_selling_products.main([]) == 0
    assert "Found 0 products" in capsys.readouterr().out


def test_low_selling_rejects_non_numeric_threshold():
    with pytest.raises(SystemExit) as exc:
        low_selling_products.main(["lots"])
    assert exc.value.code == 2


def test_umbrella_cli_runs_subcommand(write_dataset, capsys):
    path = write_dataset(row(retail="300"), row(warehouse="700"))
    assert cli.main(["--dataset", str(path), "retail-vs-warehouse-split"]) == 0
    assert "Warehouse = 700 units" in capsys.readouterr().out


def test_umbrella_cli_passes_threshold(write_dataset, capsys):
    path = write_dataset(row(code="Z1"))
    assert cli.main(["--dataset", str(path), "low-selling-products", "5"]) == 0
    assert "Z1" in capsys.readouterr().out


def test_umbrella_cli_missing_config(tmp_path, write_dataset):
    path = write_dataset(row(code="A"))
    assert cli.main(["--dataset", str(path), "--config", str(tmp_path / "missing.yml"), "inspect"]) == 1


def test_inspect_reports_rows_and_item_types(write_dataset, capsys):
    path = write_dataset(row(item_type="WINE"), row(item_type="BEER"), row(item_type="WINE"), row(item_type=""))
    assert cli.main(["--dataset", str(path), "inspect"]) == 0
    out = capsys.readouterr().out
    assert "✅ Processed 4 rows" in out
    assert "['WINE', 'BEER']" in out
    assert out.count("Row ") == 3


def test_unknown_log_level_is_invalid_configuration(tmp_path, write_dataset, monkeypatch, capsys):
    path = write_dataset(row(code="A001", retail="50"))
    config = tmp_path / "analytics.yml"
    config.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
    monkeypatch.setenv("SALESMR_CONFIG", str(config))
    monkeypatch.setenv("SALES_DATASET", str(path))
    assert top_selling_products.main([]) == 1
    assert capsys.readouterr().out == ""


def test_umbrella_cli_unknown_log_level(tmp_path, write_dataset):
    path = write_dataset(row(code="A"))
    config = tmp_path / "analytics.yml"
    config.write_text("logging:\n  level: LOUD\n", encoding="utf-8")
    assert cli.main(["--dataset", str(path), "--config", str(config), "inspect"]) == 1
    assert cli.main(["--dataset", str(path), "--config", str(config), "monthly-sales-trends"]) == 1


@pytest.mark.parametrize("threshold", ["nan", "inf", "Infinity"])
def test_low_selling_rejects_non_finite_threshold(threshold):
    with pytest.raises(SystemExit) as exc:
        low_selling_products.main([threshold])
    assert exc.value.code == 2


def test_umbrella_cli_rejects_non_finite_threshold(write_dataset):
    path = write_dataset(row(code="Z1"))
    with pytest.raises(SystemExit) as exc:
        cli.main(["--dataset", str(path), "low-selling-products", "nan"])
    assert exc.value.code == 2


def test_non_finite_threshold_from_environment(write_dataset, monkeypatch, capsys):
    path = write_dataset(row(code="A", retail="150"))
    monkeypatch.setenv("SALES_DATASET", str(path))
    monkeypatch.setenv("LOW_SALES_THRESHOLD", "inf")
    assert low_selling_products.main([]) == 1
    assert "inf" not in capsys.readouterr().out
