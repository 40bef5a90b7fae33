"""Tests for the pure block operations and drop ingestion."""

import json
import logging
from itertools import count

import pytest

from themedoc.docs.document import (
    add_block,
    find_block,
    ingest_drop,
    move_block,
    parse_drop_payload,
    remove_block,
    update_block_content,
)
from themedoc.docs.models import BlockType, DocBlock, DocPage
from themedoc.errors import DropError, ErrorCode


def _ids(prefix="b"):
    counter = count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.fixture
def page():
    return DocPage(
        id="p1",
        title="Page",
        last_modified=1,
        blocks=(
            DocBlock("a", "h1", "Title"),
            DocBlock("b", "paragraph", "Body"),
            DocBlock("c", "divider"),
        ),
    )


class TestAddBlock:
    def test_appends_empty_block(self, page):
        new_page, block_id = add_block(page, "paragraph", id_factory=lambda: "x")
        assert block_id == "x"
        assert new_page.blocks[-1] == DocBlock("x", "paragraph", "", None)
        assert page.blocks[-1].id == "c"

    def test_initial_metadata_is_copied(self, page):
        metadata = {"role": "primary"}
        new_page, block_id = add_block(page, BlockType.COLOR, metadata)
        metadata["role"] = "secondary"
        assert find_block(new_page, block_id).metadata == {"role": "primary"}

    def test_ids_stay_unique(self, page):
        factory = iter(["a", "b", "fresh"])
        new_page, block_id = add_block(page, "paragraph", id_factory=lambda: next(factory))
        assert block_id == "fresh"
        assert len(set(new_page.block_ids)) == len(new_page.blocks)

    def test_unknown_type_rejected(self, page):
        with pytest.raises(ValueError):
            add_block(page, "carousel")

    def test_add_then_remove_round_trips(self, page):
        added, block_id = add_block(page, "paragraph")
        assert remove_block(added, block_id).blocks == page.blocks


class TestUpdateAndRemove:
    def test_update_replaces_content(self, page):
        updated = update_block_content(page, "b", "New body")
        assert find_block(updated, "b").content == "New body"
        assert updated.block_ids == page.block_ids

    def test_update_unknown_id_is_noop(self, page):
        assert update_block_content(page, "missing", "x") == page

    def test_remove_unknown_id_is_noop(self, page):
        assert remove_block(page, "missing") == page

    def test_remove_keeps_order(self, page):
        assert remove_block(page, "b").block_ids == ["a", "c"]


class TestMoveBlock:
    def test_move_to_front(self, page):
        assert move_block(page, "c", 0).block_ids == ["c", "a", "b"]

    def test_index_is_clamped(self, page):
        assert move_block(page, "a", 99).block_ids == ["b", "c", "a"]
        assert move_block(page, "c", -5).block_ids == ["c", "a", "b"]

    def test_unknown_id_is_noop(self, page):
        assert move_block(page, "zzz", 0) is page


class TestIngestDrop:
    def test_icon_drop_appends_block(self, page):
        raw = '{"type":"icon","data":{"iconName":"Star"}}'
        new_page, error = ingest_drop(page, raw, id_factory=_ids())
        assert error is None
        assert len(new_page.blocks) == len(page.blocks) + 1
        block = new_page.blocks[-1]
        assert block.type == "icon"
        assert block.content == ""
        assert block.metadata["iconName"] == "Star"

    def test_bytes_payload(self, page):
        raw = json.dumps({"type": "color", "data": {"role": "secondary"}}).encode("utf-8")
        new_page, error = ingest_drop(page, raw)
        assert error is None
        assert new_page.blocks[-1].metadata == {"role": "secondary"}

    def test_missing_data_gives_no_metadata(self, page):
        new_page, _ = ingest_drop(page, '{"type":"divider"}')
        assert new_page.blocks[-1].metadata is None

    def test_unknown_type_kept_verbatim(self, page):
        new_page, error = ingest_drop(page, '{"type":"carousel","data":{"slides":3}}')
        assert error is None
        assert new_page.blocks[-1].type == "carousel"
        assert new_page.blocks[-1].block_type is None

    def test_not_json(self, page):
        new_page, error = ingest_drop(page, "not json")
        assert new_page is page
        assert isinstance(error, DropError)
        assert error.code is ErrorCode.MALFORMED_DROP_PAYLOAD

    @pytest.mark.parametrize(
        "raw",
        [
            "[1, 2]",
            '{"data": {}}',
            '{"type": ""}',
            '{"type": 7}',
            '{"type": "icon", "data": [1]}',
            b"\xff\xfe",
            pytest.param('{"type": "icon", "data": ' + "[" * 200000 + "]" * 200000 + "}", id="deeply-nested"),
            pytest.param('{"type": "icon", "data": {"k": ' + "[" * 900 + "]" * 900 + "}}", id="nested-data"),
        ],
    )
    def test_malformed_payloads_leave_page_unchanged(self, page, raw):
        new_page, error = ingest_drop(page, raw)
        assert new_page is page
        assert error is not None

    def test_failure_is_logged(self, page, caplog):
        with caplog.at_level(logging.WARNING, logger="themedoc.docs.document"):
            ingest_drop(page, "{broken")
        assert "Failed to parse drop data" in caplog.text

    def test_parse_raises(self):
        with pytest.raises(DropError):
            parse_drop_payload("nope")


def test_page_mapping_round_trip(page):
    data = page.to_mapping()
    assert data["lastModified"] == 1
    assert data["blocks"][0] == {"id": "a", "type": "h1", "content": "Title"}
    assert DocPage.from_mapping(data) == page


class TestMetadataIsolation:
    def test_block_keeps_its_own_copy(self):
        source = {"role": "primary", "tags": ["brand"]}
        block = DocBlock("m", "color", "", source)
        source["role"] = "secondary"
        source["tags"].append("extra")
        assert block.metadata == {"role": "primary", "tags": ["brand"]}

    def test_pages_do_not_share_mutable_metadata(self):
        old = DocPage("p", "Page", 1, (DocBlock("m", "color", "", {"role": "primary"}), DocBlock("t", "paragraph")))
        new = update_block_content(old, "t", "text")
        with pytest.raises(TypeError):
            new.blocks[0].metadata["role"] = "secondary"
        assert old.blocks[0].metadata["role"] == "primary"

    def test_to_mapping_returns_plain_dict(self):
        data = DocBlock("m", "icon", "", {"iconName": "Star"}).to_mapping()
        data["metadata"]["iconName"] = "Bell"
        assert isinstance(data["metadata"], dict)
