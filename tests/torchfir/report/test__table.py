"""Tests for the CSV report tables."""

import csv

import pytest

from torchfir import ReportWriteError
from torchfir.filter_analysis import analyze_first_order, analyze_second_order
from torchfir.report import (
    CATALOG,
    catalog_entry,
    report_rows,
    write_catalog,
    write_report,
)


class TestCatalog:
    """Tests for the example filter catalog."""

    def test_names(self) -> None:
        assert [entry.name for entry in CATALOG] == [
            "1_lpf",
            "1_hpf",
            "1_lpf2",
            "2_lpf",
            "2_hpf",
            "2_notch",
        ]

    def test_coefficients(self) -> None:
        values = {
            entry.name: (entry.coefficients.gain,) + entry.coefficients.alphas
            for entry in CATALOG
        }

        assert values["1_lpf"] == (0.5, 1.0)
        assert values["1_hpf"] == (0.5, -1.0)
        assert values["1_lpf2"] == (0.5, 2.0)
        assert values["2_lpf"] == (0.5, 2.0, 1.22)
        assert values["2_hpf"] == (0.5, -1.6, 0.8)
        assert values["2_notch"] == (0.5, 0.0, 1.0)

    def test_catalog_entry(self) -> None:
        assert catalog_entry("2_notch").coefficients.order == 2

    def test_catalog_entry_unknown(self) -> None:
        with pytest.raises(KeyError, match="unknown filter"):
            catalog_entry("3_lpf")


class TestReportRows:
    """Tests for report_rows."""

    def test_header(self) -> None:
        rows = report_rows(analyze_first_order(0.5, 1.0))

        assert rows[0] == [
            "Frequency",
            "Amplitude",
            "Phase",
            "",
            "a0 = 0.500000, alpha1 = 1.000000",
        ]

    def test_one_row_per_sample(self) -> None:
        rows = report_rows(analyze_second_order(0.5, 2.0, 1.22))

        assert len(rows) == 101
        assert rows[1][0] == "0.000000"
        assert rows[-1][0] == "1.000000"

    def test_annotations_on_second_and_fourth_rows(self) -> None:
        rows = report_rows(analyze_second_order(0.5, -1.6, 0.8))
        samples = rows[1:]

        assert [len(row) for row in samples[:5]] == [3, 5, 3, 5, 3]
        assert all(len(row) == 3 for row in samples[4:])
        assert samples[1][3] == ""
        assert samples[1][4].startswith("output[index] = ")
        assert samples[3][3] == ""
        assert samples[3][4].startswith("Zeroes = ")

    def test_first_sample_of_box_low_pass(self) -> None:
        rows = report_rows(analyze_first_order(0.5, 1.0))

        assert rows[1] == ["0.000000", "1.000000", "0.000000"]
        assert rows[4][4] == "Zero = -1.000000"

    @pytest.mark.parametrize("frequencies", [2, 3])
    def test_too_few_samples_for_zero_annotation(
        self, frequencies: int
    ) -> None:
        analysis = analyze_second_order(0.5, 0.0, 1.0, frequencies)

        with pytest.raises(ValueError, match="at least 4 samples"):
            report_rows(analysis)

    def test_fewest_samples_carry_both_annotations(self) -> None:
        rows = report_rows(analyze_second_order(0.5, 0.0, 1.0, 4))

        assert len(rows) == 5
        assert rows[2][4].startswith("output[index] = ")
        assert rows[4][4].startswith("Zeroes = ")


class TestWriteReport:
    """Tests for write_report."""

    def test_writes_quoted_csv(self, tmp_path) -> None:
        path = write_report(
            tmp_path / "1_lpf.csv", analyze_first_order(0.5, 1.0)
        )

        lines = path.read_text().split("\n")

        assert lines[0] == (
            '"Frequency","Amplitude","Phase","",'
            '"a0 = 0.500000, alpha1 = 1.000000"'
        )
        assert lines[1] == '"0.000000","1.000000","0.000000"'
        assert lines[2].endswith(
            ',"","output[index] = input[index] * 0.500000'
            ' + input[index-1] * 0.500000"'
        )
        assert lines[4].endswith(',"","Zero = -1.000000"')
        # 101 lines plus the empty string after the final newline
        assert len(lines) == 102
        assert lines[-1] == ""

    def test_round_trips_through_csv_reader(self, tmp_path) -> None:
        analysis = analyze_second_order(0.5, 0.0, 1.0)
        path = write_report(tmp_path / "2_notch.csv", analysis)

        with path.open(newline="") as file:
            rows = list(csv.reader(file))

        assert rows == report_rows(analysis)

    def test_accepts_string_path(self, tmp_path) -> None:
        path = write_report(
            str(tmp_path / "report.csv"), analyze_first_order(0.5, 2.0)
        )

        assert path.exists()

    def test_unwritable_destination(self, tmp_path) -> None:
        with pytest.raises(ReportWriteError, match="cannot write report"):
            write_report(
                tmp_path / "missing" / "1_lpf.csv",
                analyze_first_order(0.5, 1.0),
            )

    def test_logs_written_file(self, tmp_path, caplog) -> None:
        with caplog.at_level("INFO", logger="torchfir.report"):
            write_report(tmp_path / "a.csv", analyze_first_order(0.5, 1.0))

        assert "a.csv" in caplog.text


class TestWriteCatalog:
    """Tests for write_catalog."""

    def test_writes_one_file_per_filter(self, tmp_path) -> None:
        written = write_catalog(tmp_path)

        assert [path.name for path in written] == [
            f"{entry.name}.csv" for entry in CATALOG
        ]
        assert all(path.parent == tmp_path for path in written)
        assert all(path.exists() for path in written)

    def test_creates_directory(self, tmp_path) -> None:
        directory = tmp_path / "reports" / "fir"

        written = write_catalog(directory, names=["1_hpf"])

        assert written == [directory / "1_hpf.csv"]

    def test_names_filter(self, tmp_path) -> None:
        written = write_catalog(tmp_path, names=["2_notch", "1_lpf"])

        # Catalog order is kept
        assert [path.stem for path in written] == ["1_lpf", "2_notch"]

    def test_frequencies(self, tmp_path) -> None:
        (path,) = write_catalog(tmp_path, frequencies=10, names=["2_lpf"])

        assert len(path.read_text().splitlines()) == 11

    def test_too_few_frequencies(self, tmp_path) -> None:
        directory = tmp_path / "reports"

        with pytest.raises(ValueError, match="at least 4 samples"):
            write_catalog(directory, frequencies=3)
        assert not directory.exists()

    def test_directory_is_a_file(self, tmp_path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("")

        with pytest.raises(ReportWriteError, match="output directory"):
            write_catalog(blocker)
