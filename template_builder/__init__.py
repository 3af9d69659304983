"""
NewsCore Template Builder — modèle de document + moteur d'édition des templates de page.

Usage (édition):
    >>> from template_builder import BuilderEngine, blank_template
    >>> engine = BuilderEngine()
    >>> engine.set_template(blank_template(with_main_section=False))
    >>> section = engine.add_section()
    >>> engine.add_block_from_type(section.id, "article-grid")

Usage (session liée à une page):
    >>> from template_builder import BuilderSession, PageContentStore, PagesApiClient
    >>> session = BuilderSession(PageContentStore(PagesApiClient(token=token), page_id))
    >>> session.open()
"""
__version__ = "0.3.0"

# ── Modèle de document ──────────────────────────────────────────────────────
from .core import (
    Block,
    BlockRef,
    BlockType,
    DataSource,
    DragItem,
    DropTarget,
    GridArea,
    GridSpan,
    Section,
    SectionRef,
    Template,
    blank_template,
    deep_merge,
    generate_id,
    new_block_from_type,
    new_section,
    resolve,
    resolve_block,
)

# ── Registry ────────────────────────────────────────────────────────────────
from .blocks import BlockMeta, BlockRegistry, BlockVariant, default_registry

# ── Éditeur ─────────────────────────────────────────────────────────────────
from .editor import (
    Autosaver,
    BuilderEngine,
    DropController,
    EditorError,
    EditorState,
    History,
    resolve_drop_target,
)

# ── Persistance ─────────────────────────────────────────────────────────────
from .persistence import (
    HandoffStore,
    MemorySessionStore,
    PageContentStore,
    PagesApiClient,
    SqlSessionStore,
    dumps_template,
    hand_off,
    loads_template,
    take_over,
)

from .builder import BuilderSession
from .errors import BridgeError, BuilderError, UnknownBlockType
from .renderer import CanvasRenderer, render_canvas

__all__ = [
    "__version__",
    # Document
    "Block", "BlockRef", "BlockType", "DataSource", "DragItem", "DropTarget",
    "GridArea", "GridSpan", "Section", "SectionRef", "Template",
    "blank_template", "deep_merge", "generate_id", "new_block_from_type", "new_section",
    "resolve", "resolve_block",
    # Registry
    "BlockMeta", "BlockRegistry", "BlockVariant", "default_registry",
    # Éditeur
    "Autosaver", "BuilderEngine", "DropController", "EditorError", "EditorState",
    "History", "resolve_drop_target",
    # Persistance
    "HandoffStore", "MemorySessionStore", "PageContentStore", "PagesApiClient",
    "SqlSessionStore", "dumps_template", "hand_off", "loads_template", "take_over",
    # Session / rendu
    "BuilderSession", "CanvasRenderer", "render_canvas",
    # Erreurs
    "BridgeError", "BuilderError", "UnknownBlockType",
]
