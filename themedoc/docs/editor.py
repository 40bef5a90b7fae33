"""Editing session for the active documentation page."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping

from PySide6.QtCore import QObject, Signal

from themedoc.docs import document
from themedoc.docs.models import BlockType, DocPage
from themedoc.docs.pages import Clock, Commit, PageUpdate, now_ms
from themedoc.errors import DropError, ErrorCode

logger = logging.getLogger(__name__)


class DocumentEditor(QObject):
    """Routes UI events through the pure block operations.

    Holds the active page value and the active block id; every mutation is
    handed to ``commit`` together with a fresh ``lastModified`` stamp.
    """

    page_changed = Signal(object)          # DocPage
    active_block_changed = Signal(str)     # block id, "" when nothing is active
    drop_failed = Signal(object)           # DropError

    def __init__(
        self,
        page: DocPage,
        commit: Commit,
        *,
        clock: Clock = now_ms,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._page = page
        self._commit = commit
        self._clock = clock
        self._active_block_id: str | None = None

    @property
    def page(self) -> DocPage:
        return self._page

    @property
    def active_block_id(self) -> str | None:
        return self._active_block_id

    def load_page(self, page: DocPage) -> None:
        """Switch to another page without committing anything."""
        self._page = page
        self._set_active(None)
        self.page_changed.emit(page)

    # -- mutations --

    def add_block(
        self,
        block_type: str | BlockType = BlockType.PARAGRAPH,
        metadata: Mapping[str, Any] | None = None,
    ) -> str:
        page, block_id = document.add_block(self._page, block_type, metadata)
        self._apply(page, {"blocks": page.blocks})
        self._set_active(block_id)
        return block_id

    def update_block(self, block_id: str, content: str) -> None:
        page = document.update_block_content(self._page, block_id, content)
        if page is self._page:
            logger.debug("%s: update ignored for block %s", ErrorCode.UNKNOWN_BLOCK_ID.name, block_id)
            return
        self._apply(page, {"blocks": page.blocks})

    def remove_block(self, block_id: str) -> None:
        page = document.remove_block(self._page, block_id)
        if page is self._page:
            logger.debug("%s: remove ignored for block %s", ErrorCode.UNKNOWN_BLOCK_ID.name, block_id)
            return
        if self._active_block_id == block_id:
            self._set_active(None)
        self._apply(page, {"blocks": page.blocks})

    def move_block(self, block_id: str, index: int) -> None:
        page = document.move_block(self._page, block_id, index)
        if page.blocks == self._page.blocks:
            return
        self._apply(page, {"blocks": page.blocks})

    def drop(self, raw_payload: str | bytes) -> DropError | None:
        page, error = document.ingest_drop(self._page, raw_payload)
        if error is not None:
            self.drop_failed.emit(error)
            return error
        self._apply(page, {"blocks": page.blocks})
        return None

    def rename(self, title: str) -> None:
        if title == self._page.title:
            return
        self._apply(self._page, {"title": title})

    # -- selection --

    def select_block(self, block_id: str) -> None:
        if document.find_block(self._page, block_id) is None:
            return
        self._set_active(block_id)

    def clear_selection(self) -> None:
        self._set_active(None)

    # -- internals --

    def _apply(self, page: DocPage, update: PageUpdate) -> None:
        stamp = self._clock()
        update = {**update, "lastModified": stamp}
        changes: dict[str, Any] = {"last_modified": stamp}
        if "title" in update:
            changes["title"] = update["title"]
        self._page = replace(page, **changes)
        self._commit(self._page.id, update)
        self.page_changed.emit(self._page)

    def _set_active(self, block_id: str | None) -> None:
        if block_id == self._active_block_id:
            return
        self._active_block_id = block_id
        self.active_block_changed.emit(block_id or "")
