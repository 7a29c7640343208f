import json

from onepux_parser.helpers import parse_options, verbosity_to_level
from onepux_parser.main import main


def test_parse_options():
    args = parse_options("test", ["export.1pux", "--dump-json", "out.json", "-vv"])
    assert args.filename == "export.1pux"
    assert args.dump_json == "out.json"
    assert args.verbose == 2


def test_verbosity_levels():
    assert verbosity_to_level(0) == "INFO"
    assert verbosity_to_level(1) == "VERBOSE"
    assert verbosity_to_level(2) == "DEBUG"
    assert verbosity_to_level(3) == "SPAM"
    assert verbosity_to_level(9) == "SPAM"


def test_main_dumps_store(tmp_path, write_archive, make_document, dropbox_item):
    path = write_archive(make_document([{"attrs": {"name": "Personal"}, "items": [dropbox_item]}]))
    out = tmp_path / "out" / "store.json"

    assert main([str(path), "--dump-json", str(out)]) == 0

    dumped = json.loads(out.read_text(encoding="utf-8"))
    (group,) = dumped["root"]["groups"]
    assert group["name"] == "Personal"
    (entry,) = group["entries"]
    assert entry["title"] == "Dropbox"
    assert entry["tags"] == "Favorite"
    assert entry["attributes"]["Security_PIN"] == {"value": "12345", "protected": True}
    assert entry["creation_time"] == "2021-02-26T00:22:36+00:00"


def test_main_reports_failure(tmp_path):
    assert main([str(tmp_path / "missing.1pux")]) == 1
