from __future__ import annotations

import csv
import io

from src.infrastructure.reports.csv_export import generate_csv, header_key


def test_header_key_normalises_whitespace_and_case():
    assert header_key("Total  Animals") == "total_animals"
    assert header_key("Truck No") == "truck_no"


def test_values_are_looked_up_by_normalised_key_then_raw_header():
    text = generate_csv(
        [{"truck_no": "T 1", "Form No": "F-7", "goats": 0}],
        ["Truck No", "Form No", "Goats", "Sheep"],
    )
    assert text == "Truck No,Form No,Goats,Sheep\nT 1,F-7,0,"


def test_commas_and_quotes_are_quoted():
    text = generate_csv(
        [{"region": "Arusha, Region", "name": 'Say "hi"'}],
        ["Region", "Name"],
    )
    assert text.splitlines()[1] == '"Arusha, Region","Say ""hi"""'
    parsed = list(csv.reader(io.StringIO(text)))
    assert parsed[1] == ["Arusha, Region", 'Say "hi"']


def test_no_rows_yields_header_only():
    assert generate_csv([], ["Date", "Region"]) == "Date,Region"
