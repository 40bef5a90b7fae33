"""Pure block operations on a single page.

Every function takes the current page and returns the next one; pages are
never mutated in place.
"""

from __future__ import annotations

import json
import logging
import uuid
from dataclasses import replace
from typing import Any, Callable, Mapping

from themedoc.docs.models import BlockType, DocBlock, DocPage
from themedoc.errors import DropError

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def new_block_id() -> str:
    return uuid.uuid4().hex[:12]


def _fresh_id(page: DocPage, id_factory: IdFactory | None) -> str:
    factory = id_factory or new_block_id
    taken = set(page.block_ids)
    block_id = factory()
    while block_id in taken:
        block_id = factory()
    return block_id


def find_block(page: DocPage, block_id: str) -> DocBlock | None:
    for block in page.blocks:
        if block.id == block_id:
            return block
    return None


def add_block(
    page: DocPage,
    block_type: str | BlockType,
    initial_metadata: Mapping[str, Any] | None = None,
    *,
    id_factory: IdFactory | None = None,
) -> tuple[DocPage, str]:
    """Append an empty block and return the new page and the block id.

    ``block_type`` must be a known tag; drops are the path for arbitrary tags.
    """
    block_type = BlockType(block_type)
    block_id = _fresh_id(page, id_factory)
    block = DocBlock(
        id=block_id,
        type=block_type.value,
        content="",
        metadata=dict(initial_metadata) if initial_metadata is not None else None,
    )
    return replace(page, blocks=page.blocks + (block,)), block_id


def update_block_content(page: DocPage, block_id: str, content: str) -> DocPage:
    """Replace a block's content; an unknown id returns ``page`` unchanged."""
    if find_block(page, block_id) is None:
        return page
    blocks = tuple(
        replace(block, content=content) if block.id == block_id else block
        for block in page.blocks
    )
    return replace(page, blocks=blocks)


def remove_block(page: DocPage, block_id: str) -> DocPage:
    """Drop a block by id; an unknown id returns ``page`` unchanged."""
    if find_block(page, block_id) is None:
        return page
    return replace(page, blocks=tuple(block for block in page.blocks if block.id != block_id))


def move_block(page: DocPage, block_id: str, index: int) -> DocPage:
    """Move a block to ``index`` (clamped) for caller-driven reordering."""
    block = find_block(page, block_id)
    if block is None:
        return page
    remaining = [item for item in page.blocks if item.id != block_id]
    index = max(0, min(index, len(remaining)))
    remaining.insert(index, block)
    return replace(page, blocks=tuple(remaining))


def parse_drop_payload(raw_payload: str | bytes) -> tuple[str, dict[str, Any] | None]:
    """Decode ``{"type": ..., "data": {...}}``; raises ``DropError``."""
    if isinstance(raw_payload, bytes):
        try:
            raw_payload = raw_payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DropError(message="Drop payload is not UTF-8 text.", details={"reason": str(exc)}) from exc
    try:
        data = json.loads(raw_payload)
    except (TypeError, ValueError, RecursionError) as exc:
        raise DropError(
            message="Drop payload is not valid JSON.",
            details={"reason": str(exc)},
            payload=str(raw_payload),
        ) from exc

    if not isinstance(data, dict):
        raise DropError(message="Drop payload must be a JSON object.", payload=raw_payload)
    block_type = data.get("type")
    if not isinstance(block_type, str) or not block_type:
        raise DropError(message="Drop payload has no block type.", payload=raw_payload)
    metadata = data.get("data")
    if metadata is not None and not isinstance(metadata, dict):
        raise DropError(message="Drop payload data must be a JSON object.", payload=raw_payload)
    return block_type, metadata


def ingest_drop(
    page: DocPage,
    raw_payload: str | bytes,
    *,
    id_factory: IdFactory | None = None,
) -> tuple[DocPage, DropError | None]:
    """Append a block described by a drag-and-drop payload.

    Malformed payloads leave the page unchanged and are reported through the
    returned ``DropError``; nothing is raised to the caller.
    """
    try:
        block_type, metadata = parse_drop_payload(raw_payload)
        block = _drop_block(page, block_type, metadata, id_factory)
    except DropError as error:
        logger.warning("Failed to parse drop data: %s (%s)", error.message, error.details or "-")
        return page, error
    return replace(page, blocks=page.blocks + (block,)), None


def _drop_block(
    page: DocPage,
    block_type: str,
    metadata: dict[str, Any] | None,
    id_factory: IdFactory | None,
) -> DocBlock:
    try:
        return DocBlock(id=_fresh_id(page, id_factory), type=block_type, content="", metadata=metadata)
    except RecursionError as exc:
        raise DropError(message="Drop payload data is nested too deeply.", details={"reason": str(exc)}) from exc
