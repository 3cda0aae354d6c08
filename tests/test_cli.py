import json

import pytest
from loguru import logger

from owner_resolution.cli import load_mentions, main
from owner_resolution.models import RawOwnerMention


@pytest.fixture(autouse=True)
def reset_logger_sinks():
    yield
    logger.remove()


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_mentions_list_to_output_file(tmp_path):
    source = write_json(
        tmp_path / "mentions.json",
        [
            {"text": "SMITH, JOHN & MARY"},
            {"text": "DOE JANE", "context": "2015-06-01"},
            {"text": "N/A", "context": "2016-01-01"},
        ],
    )
    out = tmp_path / "out" / "owners.json"

    assert main([str(source), "-o", str(out), "--log-level", "WARNING"]) == 0

    record = json.loads(out.read_text(encoding="utf-8"))
    assert list(record["owners_by_date"]) == ["2015-06-01", "current"]
    assert [o["first_name"] for o in record["owners_by_date"]["current"]] == ["John", "Mary"]
    assert record["invalid_owners"] == [{"raw": "N/A", "reason": "placeholder_entry"}]


def test_document_with_parcel_id_to_stdout(tmp_path, capsys):
    source = write_json(
        tmp_path / "property.json",
        {
            "current_owners": ["ABC PROPERTIES LLC"],
            "sales": [{"date": "3/7/2019", "grantee": "ABC PROPERTIES LLC", "grantor": "SMITH JOHN"}],
        },
    )

    assert main([str(source), "--parcel-id", "0123", "--emit-nulls", "--log-level", "WARNING"]) == 0

    record = json.loads(capsys.readouterr().out)
    owners = record["property_0123"]["owners_by_date"]
    assert list(owners) == ["2019-03-07", "unknown_date_1", "current"]
    assert owners["current"] == [{"type": "company", "name": "ABC Properties LLC"}]
    assert owners["unknown_date_1"][0]["middle_name"] is None


def test_unreadable_input_exits_non_zero(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")

    assert main([str(bad), "--log-level", "ERROR"]) == 2
    assert main([str(tmp_path / "missing.json"), "--log-level", "ERROR"]) == 2


def test_malformed_mentions_exit_non_zero(tmp_path):
    source = write_json(tmp_path / "mentions.json", [{"context": "current"}])

    assert main([str(source), "--log-level", "ERROR"]) == 2


def test_load_mentions():
    assert load_mentions([{"text": "SMITH JOHN"}]) == [RawOwnerMention("SMITH JOHN")]
    assert load_mentions({"current_owners": "SMITH JOHN"}) == [RawOwnerMention("SMITH JOHN")]
