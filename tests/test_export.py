"""
Tests for the export pipeline: CSV content, archive layout and naming,
per-pack allocation failures, temporary file cleanup, share invocation.
"""

from datetime import datetime
from pathlib import Path

import pytest

from csvpack import CsvExporter, ExportPack
from csvpack.export import write_pack_csv

from conftest import FIXED_NOW, PERSON_SCHEMA, PET_SCHEMA, Person, Pet, read_zip


def make_exporter(config, share_target, notifier, when=FIXED_NOW):
    return CsvExporter(config, share_target=share_target, notifier=notifier, clock=lambda: when)


def test_people_export_file_contents(config, share_target, notifier):
    pack = PERSON_SCHEMA.export_pack([Person("Ann", 30), Person("Bo", 40)], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([pack])

    assert read_zip(archive) == {
        "people_2024_03_07_09_15.csv": b"Name,Age\nAnn,30\nBo,40\n",
    }


def test_empty_pack_writes_header_only(config, share_target, notifier):
    pack = PERSON_SCHEMA.export_pack([], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([pack])

    assert read_zip(archive)[pack.file_name] == b"Name,Age\n"


def test_null_fields_are_written_empty(config, share_target, notifier):
    pack = PET_SCHEMA.export_pack([Pet("Rex", "dog"), Pet("Tom", "cat", "Ann")], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([pack])

    assert read_zip(archive)[pack.file_name] == (
        b"Pet Name,Species,Owner\nRex,dog,\nTom,cat,Ann\n"
    )


def test_values_needing_quotes_are_quoted(config, share_target, notifier):
    pack = PERSON_SCHEMA.export_pack([Person("Doe, Jane", 51)], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([pack])

    assert read_zip(archive)[pack.file_name] == b'Name,Age\n"Doe, Jane",51\n'


def test_one_entry_per_pack(config, share_target, notifier):
    packs = [
        PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW),
        PET_SCHEMA.export_pack([Pet("Rex", "dog")], now=FIXED_NOW),
    ]

    archive = make_exporter(config, share_target, notifier).export(packs)

    assert sorted(read_zip(archive)) == [
        "people_2024_03_07_09_15.csv",
        "pets_2024_03_07_09_15.csv",
    ]
    assert notifier.messages == []


def test_archive_is_named_after_the_export_date(config, work_dir, share_target, notifier):
    exporter = make_exporter(config, share_target, notifier, when=datetime(2025, 1, 2, 23, 59))

    archive = exporter.export([PERSON_SCHEMA.export_pack([], now=FIXED_NOW)])

    assert archive == work_dir.resolve() / "csv_bundle_2025_01_02.zip"
    assert archive.exists()


def test_share_target_receives_the_archive_exactly_once(config, share_target, notifier):
    packs = [
        PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW),
        PET_SCHEMA.export_pack([], now=FIXED_NOW),
    ]

    archive = make_exporter(config, share_target, notifier).export(packs)

    assert share_target.shared == [archive]


def test_temporary_csv_files_are_removed(config, work_dir, share_target, notifier):
    pack = PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([pack])

    assert [p.name for p in work_dir.iterdir()] == [archive.name]


def test_same_day_export_overwrites_archive(config, share_target, notifier):
    exporter = make_exporter(config, share_target, notifier)

    first = exporter.export([PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW)])
    second = exporter.export([PET_SCHEMA.export_pack([Pet("Rex", "dog")], now=FIXED_NOW)])

    assert first == second
    assert list(read_zip(second)) == ["pets_2024_03_07_09_15.csv"]


def test_unallocatable_pack_is_reported_and_skipped(config, share_target, notifier):
    bad = ExportPack(
        items=[Person("Ann", 30)],
        file_name="nested/people.csv",
        row_of=PERSON_SCHEMA.row_of,
        header_list=PERSON_SCHEMA.header_list(),
    )
    good = PET_SCHEMA.export_pack([Pet("Rex", "dog")], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([bad, good])

    assert notifier.messages == ["Error creating file nested/people.csv"]
    assert list(read_zip(archive)) == [good.file_name]
    assert share_target.shared == [archive]


def test_duplicate_file_name_in_one_batch_is_reported(config, share_target, notifier):
    first = PERSON_SCHEMA.export_pack([Person("Ann", 30)], now=FIXED_NOW)
    second = PERSON_SCHEMA.export_pack([Person("Bo", 40)], now=FIXED_NOW)

    archive = make_exporter(config, share_target, notifier).export([first, second])

    assert notifier.messages == [f"Error creating file {first.file_name}"]
    assert read_zip(archive)[first.file_name] == b"Name,Age\nAnn,30\n"


def test_all_packs_failing_still_shares_an_empty_archive(config, share_target, notifier):
    bad = ExportPack(items=[], file_name="..", row_of=PERSON_SCHEMA.row_of, header_list=["Name", "Age"])

    archive = make_exporter(config, share_target, notifier).export([bad])

    assert read_zip(archive) == {}
    assert len(notifier.messages) == 1
    assert share_target.shared == [archive]


def test_write_failure_propagates_and_cleans_up(config, work_dir, share_target, notifier):
    def broken_row(item):
        raise RuntimeError("accessor failed")

    bad = ExportPack(items=[Person("Ann", 30)], file_name="people.csv", row_of=broken_row, header_list=["Name", "Age"])

    with pytest.raises(RuntimeError):
        make_exporter(config, share_target, notifier).export([bad])

    assert list(work_dir.iterdir()) == []
    assert share_target.shared == []


def test_exporter_without_share_target_just_writes(config):
    exporter = CsvExporter(config, clock=lambda: FIXED_NOW)

    archive = exporter.export([PERSON_SCHEMA.export_pack([], now=FIXED_NOW)])

    assert archive.exists()


def test_write_pack_csv_rejects_short_rows(tmp_path: Path):
    pack = ExportPack(items=[1], file_name="x.csv", row_of=lambda i: [i], header_list=["A", "B"])

    with pytest.raises(ValueError, match="1 values for 2 headers"):
        write_pack_csv(tmp_path / "x.csv", pack)
