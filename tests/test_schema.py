"""
Tests for the record schema contract: columns, header list/set, row
flattening, row parsing and pack builders.
"""

import pytest

from csvpack import Column, ImportPack, ParseError, RecordSchema, SchemaError

from conftest import FIXED_NOW, PERSON_SCHEMA, PET_SCHEMA, Person, Pet


def test_header_list_follows_column_order():
    assert PERSON_SCHEMA.header_list() == ["Name", "Age"]
    assert PET_SCHEMA.header_list() == ["Pet Name", "Species", "Owner"]


def test_header_set_is_invariant_under_column_reordering():
    reordered = RecordSchema(
        record_type=Person,
        save_base_name="people",
        columns=tuple(reversed(PERSON_SCHEMA.columns)),
        parser=PERSON_SCHEMA.parser,
    )

    assert reordered.header_list() == ["Age", "Name"]
    assert reordered.header_set() == PERSON_SCHEMA.header_set() == frozenset({"Name", "Age"})


def test_duplicate_header_names_are_rejected():
    with pytest.raises(SchemaError, match="duplicate"):
        RecordSchema(
            record_type=Person,
            save_base_name="people",
            columns=[Column.attr("Name", "name"), Column.attr("Name", "age")],
            parser=lambda row: None,
        )


def test_empty_header_name_is_rejected():
    with pytest.raises(SchemaError):
        RecordSchema(
            record_type=Person,
            save_base_name="people",
            columns=[Column.attr("", "name")],
            parser=lambda row: None,
        )


def test_columns_are_frozen_into_a_tuple():
    cols = [Column.attr("Name", "name")]
    schema = RecordSchema(Person, "people", cols, lambda row: None)
    cols.append(Column.attr("Age", "age"))

    assert schema.header_list() == ["Name"]


def test_row_of_applies_accessors_in_column_order():
    assert PERSON_SCHEMA.row_of(Person("Ann", 30)) == ["Ann", 30]


def test_row_of_keeps_null_fields_as_none():
    assert PET_SCHEMA.row_of(Pet("Rex", "dog")) == ["Rex", "dog", None]


def test_column_with_callable_accessor():
    col = Column("Shout", lambda p: p.name.upper())
    assert col.value_of(Person("ann", 1)) == "ANN"


def test_round_trip_through_string_row():
    for person in (Person("Ann", 30), Person("Bo", 40), Person("", 0)):
        values = [str(v) for v in PERSON_SCHEMA.row_of(person)]
        row = dict(zip(PERSON_SCHEMA.header_list(), values))
        assert PERSON_SCHEMA.parse_row(row) == person


def test_parse_row_reports_missing_header():
    with pytest.raises(ParseError, match="Age"):
        PERSON_SCHEMA.parse_row({"Name": "Ann"})


def test_parse_row_wraps_conversion_errors():
    with pytest.raises(ParseError) as excinfo:
        PERSON_SCHEMA.parse_row({"Name": "Ann", "Age": "thirty"})

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_parse_row_ignores_extra_columns():
    assert PERSON_SCHEMA.parse_row({"Name": "Ann", "Age": "30", "Extra": "x"}) == Person("Ann", 30)


def test_export_pack_carries_items_name_headers_and_flattener():
    pack = PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW)

    assert pack.items == [Person("Ann", 30)]
    assert pack.file_name == "people_2024_03_07_09_15.csv"
    assert pack.header_list == ["Name", "Age"]
    assert pack.rows() == [["Ann", 30]]


def test_export_pack_timestamp_format_and_suffix_are_parameters():
    pack = PERSON_SCHEMA.export_pack(
        [],
        now=FIXED_NOW,
        timestamp_format="%Y%m%d",
        suffix="",
    )
    assert pack.file_name == "people_20240307"


def test_import_pack_is_keyed_by_record_type():
    pack = PET_SCHEMA.import_pack()

    assert isinstance(pack, ImportPack)
    assert pack.type_id is Pet
    assert pack.header_set == frozenset({"Pet Name", "Species", "Owner"})
    assert pack.parse_row({"Pet Name": "Rex", "Species": "dog", "Owner": ""}) == Pet("Rex", "dog")


def test_import_pack_normalises_header_set():
    pack = ImportPack(type_id="token", header_set={"A", "B"}, parse_row=dict)
    assert pack.header_set == frozenset({"A", "B"})
