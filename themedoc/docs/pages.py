"""Page collection helpers and the commit contract."""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Callable, Iterable, TypedDict

from themedoc.docs.models import DocBlock, DocPage


class PageUpdate(TypedDict, total=False):
    """Fields handed to the persistence callback after a mutation."""

    title: str
    blocks: tuple[DocBlock, ...]
    lastModified: int


Commit = Callable[[str, PageUpdate], None]
Clock = Callable[[], int]


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_page(title: str = "New Page", *, now: int | None = None, page_id: str | None = None) -> DocPage:
    stamp = now if now is not None else now_ms()
    return DocPage(id=page_id or str(stamp), title=title, last_modified=stamp, blocks=())


def find_page(pages: Iterable[DocPage], page_id: str) -> DocPage | None:
    for page in pages:
        if page.id == page_id:
            return page
    return None


def add_page(pages: list[DocPage], page: DocPage) -> list[DocPage]:
    return [*pages, page]


def delete_page(pages: list[DocPage], page_id: str) -> list[DocPage]:
    return [page for page in pages if page.id != page_id]


def apply_update(page: DocPage, update: PageUpdate) -> DocPage:
    """Merge a ``PageUpdate`` into ``page``."""
    changes: dict[str, object] = {}
    if "title" in update:
        changes["title"] = update["title"]
    if "blocks" in update:
        changes["blocks"] = tuple(update["blocks"])
    if "lastModified" in update:
        changes["last_modified"] = update["lastModified"]
    return replace(page, **changes) if changes else page


def update_page(
    pages: list[DocPage],
    page_id: str,
    update: PageUpdate,
    *,
    now: int | None = None,
) -> list[DocPage]:
    """Apply ``update`` to the matching page and stamp ``last_modified``."""
    stamped: PageUpdate = {**update, "lastModified": now if now is not None else now_ms()}
    return [apply_update(page, stamped) if page.id == page_id else page for page in pages]


def upsert_page(
    pages: list[DocPage],
    page_id: str,
    title: str,
    blocks: Iterable[DocBlock],
    *,
    now: int | None = None,
) -> list[DocPage]:
    """Replace the blocks of ``page_id`` in place, or append a new page."""
    stamp = now if now is not None else now_ms()
    blocks = tuple(blocks)
    if find_page(pages, page_id) is None:
        return [*pages, DocPage(id=page_id, title=title, last_modified=stamp, blocks=blocks)]
    return [
        replace(page, blocks=blocks, last_modified=stamp) if page.id == page_id else page
        for page in pages
    ]
