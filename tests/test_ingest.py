from __future__ import annotations

import pytest

from factories import HEADER, csv_text, row, sales_frame
from salesmr.ingest import DatasetError, normalize_sales, parse_csv, read_dataset, to_records


def test_parse_csv_maps_header_to_values():
    records = to_records(parse_csv(csv_text(row(code="A001", retail="50"))))
    assert len(records) == 1
    assert records[0]["ITEM CODE"] == "A001"
    assert records[0]["RETAIL SALES"] == "50"
    assert records[0]["SUPPLIER"] == "ACME"


def test_parse_csv_preserves_file_order():
    df = parse_csv(csv_text(row(code="B"), row(code="A"), row(code="C")))
    assert list(df["ITEM CODE"]) == ["B", "A", "C"]


def test_short_rows_pad_with_empty_strings():
    df = parse_csv(HEADER + "\n2020,1,ACME,A001\n")
    assert df.loc[0, "ITEM CODE"] == "A001"
    assert df.loc[0, "RETAIL SALES"] == ""
    assert df.loc[0, "WAREHOUSE SALES"] == ""


def test_extra_trailing_fields_are_dropped():
    text = csv_text(row(code="A1", retail="1"), row(code="A2", retail="2") + ",extra,fields")
    df = parse_csv(text)
    assert list(df.columns) == HEADER.split(",")
    assert list(df["ITEM CODE"]) == ["A1", "A2"]
    assert df.loc[1, "WAREHOUSE SALES"] == "0"


def test_quoted_commas_stay_in_one_field():
    text = HEADER + '\n2020,1,"ACME, INC",A001,"RED, DRY",WINE,10,0,5\n'
    df = parse_csv(text)
    assert df.loc[0, "SUPPLIER"] == "ACME, INC"
    assert df.loc[0, "ITEM DESCRIPTION"] == "RED, DRY"
    assert df.loc[0, "RETAIL SALES"] == "10"


def test_header_only_gives_no_records():
    assert parse_csv(HEADER).empty


def test_empty_content_is_dataset_error():
    with pytest.raises(DatasetError):
        parse_csv("   \n")


def test_read_dataset_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_dataset(tmp_path / "missing.csv")


def test_read_dataset_from_disk(write_dataset):
    path = write_dataset(row(code="A001", retail="3"))
    df = read_dataset(path)
    assert df.loc[0, "ITEM CODE"] == "A001"


@pytest.mark.parametrize(
    "raw, expected",
    [("12.5", 12.5), ("", 0.0), ("abc", 0.0), ("12abc", 0.0), ("inf", 0.0), ("-inf", 0.0), ("nan", 0.0),
     (" 7 ", 7.0), ("-3", -3.0)],
)
def test_normalize_amounts(raw, expected):
    sales = sales_frame(row(retail=raw, warehouse="1"))
    assert sales.loc[0, "retail_sales"] == expected
    assert sales.loc[0, "total_sales"] == expected + 1.0


def test_normalize_total_is_retail_plus_warehouse():
    sales = sales_frame(row(retail="10.5", warehouse="4.5"), row(retail="x", warehouse="2"), row(retail="", warehouse=""))
    assert list(sales["retail_sales"]) == [10.5, 0.0, 0.0]
    assert list(sales["warehouse_sales"]) == [4.5, 2.0, 0.0]
    assert (sales["total_sales"] == sales["retail_sales"] + sales["warehouse_sales"]).all()


def test_normalize_missing_columns_default():
    sales = normalize_sales(parse_csv("ITEM CODE,RETAIL SALES\nA1,5\n"))
    assert sales.loc[0, "item_code"] == "A1"
    assert sales.loc[0, "supplier"] == ""
    assert sales.loc[0, "warehouse_sales"] == 0.0
    assert sales.loc[0, "total_sales"] == 5.0
