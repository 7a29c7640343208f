import pytest

from onepux_parser.parsing.document import DocumentNode


def test_maps_vault_to_group_in_item_order(vault_mapper, dropbox_item):
    items = []
    for title in ("One", "Two", "Three"):
        item = dict(dropbox_item, overview={"title": title})
        items.append({"item": item})
    group = vault_mapper.map_vault(DocumentNode({"attrs": {"name": "Personal"}, "items": items}))

    assert group is not None
    assert group.name == "Personal"
    assert [e.title for e in group.entries] == ["One", "Two", "Three"]
    assert all(e.group is group for e in group.entries)
    assert group.children == []


def test_unnamed_vault(vault_mapper):
    group = vault_mapper.map_vault(DocumentNode({"attrs": {}, "items": []}))
    assert group is not None
    assert group.name == ""
    assert group.entries == []


@pytest.mark.parametrize(
    "vault",
    [
        {"items": []},
        {"attrs": {"name": "x"}},
        {"attrs": "x", "items": []},
        {"attrs": {"name": "x"}, "items": {}},
        "not a vault",
        None,
    ],
)
def test_incomplete_vault_is_dropped(vault_mapper, vault):
    assert vault_mapper.map_vault(DocumentNode(vault)) is None


def test_bad_items_still_produce_entries(vault_mapper):
    group = vault_mapper.map_vault(
        DocumentNode({"attrs": {"name": "V"}, "items": [None, "junk", {"overview": {"title": "ok"}}]})
    )
    assert [e.title for e in group.entries] == ["", "", "ok"]
