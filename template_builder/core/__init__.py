"""Core — modèle de document, constructeurs, résolution de configuration."""
from .schemas import (
    BlockType,
    Block,
    BlockRef,
    DataSource,
    DragItem,
    DropTarget,
    ElementRef,
    GridArea,
    GridSpan,
    Section,
    SectionBackground,
    SectionGrid,
    SectionHeader,
    SectionLayout,
    SectionRef,
    Template,
    TemplateLayout,
    TemplateSettings,
    RegionConfig,
)
from .factory import blank_template, generate_id, new_block_from_type, new_section
from .resolver import deep_merge, resolve, resolve_block, responsive_value

__all__ = [
    "BlockType",
    "Block",
    "BlockRef",
    "DataSource",
    "DragItem",
    "DropTarget",
    "ElementRef",
    "GridArea",
    "GridSpan",
    "Section",
    "SectionBackground",
    "SectionGrid",
    "SectionHeader",
    "SectionLayout",
    "SectionRef",
    "Template",
    "TemplateLayout",
    "TemplateSettings",
    "RegionConfig",
    "blank_template",
    "generate_id",
    "new_block_from_type",
    "new_section",
    "deep_merge",
    "resolve",
    "resolve_block",
    "responsive_value",
]
