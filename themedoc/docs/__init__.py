from themedoc.docs.document import (
    add_block,
    find_block,
    ingest_drop,
    move_block,
    parse_drop_payload,
    remove_block,
    update_block_content,
)
from themedoc.docs.models import BlockType, ComponentSubtype, DocBlock, DocPage, ShowcaseBlock
from themedoc.docs.pages import Commit, PageUpdate
from themedoc.docs.templates import ProjectConfig, regenerate_standard_pages, standard_pages
from themedoc.docs.views import resolve_block_view

__all__ = [
    "BlockType",
    "Commit",
    "ComponentSubtype",
    "DocBlock",
    "DocPage",
    "PageUpdate",
    "ProjectConfig",
    "ShowcaseBlock",
    "add_block",
    "find_block",
    "ingest_drop",
    "move_block",
    "parse_drop_payload",
    "regenerate_standard_pages",
    "remove_block",
    "resolve_block_view",
    "standard_pages",
    "update_block_content",
]
