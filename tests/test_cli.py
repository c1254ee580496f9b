import importlib.util
from pathlib import Path

from passports.cli import main
from passports.report import build_report, format_result
from passports.models import ValidationMode
from passports.parser import parse_passports


FIXTURES = Path(__file__).parent / "fixtures"

TWO_RECORDS = (
    "ecl:gry pid:860033327 eyr:2020 hcl:#fffffd\n"
    "byr:1937 iyr:2017 cid:147 hgt:183cm\n"
    "\n"
    "ecl:amb pid:028048884 eyr:2023 hcl:#cfa07d\n"
    "byr:1929 iyr:2013 cid:350\n"
)


def test_format_result():
    assert format_result(3) == "There were 3 valid passports"


def test_two_record_input_in_both_modes(tmp_path, capsys):
    path = tmp_path / "batch.txt"
    path.write_text(TWO_RECORDS, encoding="utf-8")

    assert main(["2", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "There were 1 valid passports"

    assert main(["1", str(path)]) == 0
    assert capsys.readouterr().out.strip() == "There were 1 valid passports"


def test_unknown_key_aborts_run(capsys):
    assert main(["1", str(FIXTURES / "unknown_key.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_missing_file_aborts_run(tmp_path, capsys):
    assert main(["2", str(tmp_path / "nope.txt")]) == 1
    assert capsys.readouterr().out == ""


def test_build_report_lists_failures():
    report = build_report(parse_passports(TWO_RECORDS), ValidationMode.STRICT)
    assert report["summary"] == {
        "mode": "strict",
        "records": 2,
        "valid": 1,
        "invalid": 1,
        "message": "There were 1 valid passports",
    }
    assert report["failures"] == [
        {"record": 2, "field": "hgt", "value": None, "issue": "missing"},
    ]


def test_package_runs_as_module():
    assert importlib.util.find_spec("passports.__main__") is not None
