import json

from delta import compute_delta
from snapshot_store import load_snapshot, save_snapshot

RECORDS = [
    {
        "company_name": "Tata Steel",
        "high": 1250.0,
        "low": 1180.5,
        "last_price": 1234.5,
        "prev_close": 1190.0,
        "change": 44.5,
        "gain_or_loss_pct": 3.74,
        "gain_loss_since_last_run": "New Entrant",
    },
    {
        "company_name": "Wipro",
        "high": 460.0,
        "low": 441.2,
        "last_price": 455.0,
        "prev_close": 440.0,
        "change": 15.0,
        "gain_or_loss_pct": 3.41,
        "gain_loss_since_last_run": -1.25,
    },
]


def test_save_then_load(tmp_path):
    path = tmp_path / "gainers.json"
    assert save_snapshot(path, RECORDS)
    assert load_snapshot(path) == RECORDS


def test_save_is_pretty_printed_and_overwrites(tmp_path):
    path = tmp_path / "losers.json"
    save_snapshot(path, RECORDS)
    save_snapshot(path, RECORDS[:1])
    text = path.read_text(encoding="utf-8")
    assert text.startswith("[\n  {")
    [saved] = json.loads(text)
    assert saved["companyName"] == "Tata Steel"
    assert saved["lastPrice"] == 1234.5
    assert saved["gainLossSinceLastRun"] == "New Entrant"
    assert "company_name" not in saved


def test_missing_file(tmp_path):
    assert load_snapshot(tmp_path / "nope.json") is None


def test_empty_file(tmp_path):
    path = tmp_path / "gainers.json"
    path.write_text("")
    assert load_snapshot(path) is None


def test_corrupt_file(tmp_path):
    path = tmp_path / "gainers.json"
    path.write_text("[{\"company_name\": ")
    assert load_snapshot(path) is None


def test_not_a_list(tmp_path):
    path = tmp_path / "gainers.json"
    path.write_text("{\"company_name\": \"Wipro\"}")
    assert load_snapshot(path) is None


def test_save_creates_data_dir(tmp_path):
    path = tmp_path / "data" / "gainers.json"
    assert save_snapshot(path, RECORDS)
    assert path.exists()


def test_write_failure_is_logged_not_raised(tmp_path, caplog):
    # каталог на месте файла, open() упадёт
    path = tmp_path / "gainers.json"
    path.mkdir()
    assert save_snapshot(path, RECORDS) is False
    assert "could not write snapshot" in caplog.text


def test_file_uses_camel_case_record_keys(tmp_path):
    path = tmp_path / "gainers.json"
    save_snapshot(path, RECORDS)
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert list(saved[0]) == [
        "companyName", "high", "low", "lastPrice", "prevClose",
        "change", "gainOrLossPct", "gainLossSinceLastRun",
    ]


def test_snapshot_from_earlier_tool_gives_numeric_delta(tmp_path):
    path = tmp_path / "gainers.json"
    path.write_text(json.dumps([
        {"companyName": "Infosys", "lastPrice": 1500, "gainLossSinceLastRun": "New Entrant"},
        {"companyName": "Wipro", "lastPrice": 100},
    ]))
    prior = load_snapshot(path)
    assert prior[1] == {"company_name": "Wipro", "last_price": 100}

    record = {"company_name": "Wipro", "last_price": 110.0}
    compute_delta(prior, record)
    assert record["gain_loss_since_last_run"] == 10.0


def test_non_object_items_are_skipped(tmp_path):
    path = tmp_path / "gainers.json"
    path.write_text("[1, \"x\", {\"companyName\": \"Wipro\", \"lastPrice\": 100}]")
    assert load_snapshot(path) == [{"company_name": "Wipro", "last_price": 100}]
