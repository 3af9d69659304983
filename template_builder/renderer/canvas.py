"""
Renderer canvas — HTML « outline » du template en cours d'édition.

Une <section data-section-id> par section, dans l'ordre de la liste, et un
placeholder par bloc. Les états de l'éditeur (sélection, survol, cible de
drop) sont portés par des classes CSS.
"""
from html import escape
from typing import Optional

from ..blocks.registry import BlockRegistry, default_registry
from ..core.resolver import resolve_block, responsive_value
from ..core.schemas import Block, BlockRef, Section, SectionRef
from ..editor.state import EditorState


class CanvasRenderer:
    """
    Usage:
        >>> html = CanvasRenderer().render_canvas(engine.state)
    """

    def __init__(self, registry: Optional[BlockRegistry] = None, lang: str = "en"):
        self.registry = registry or default_registry()
        self.lang = lang

    # ── Canvas ───────────────────────────────────────────────────────────────

    def render_canvas(self, state: EditorState) -> str:
        template = state.template
        if template is None:
            return '<div class="canvas canvas-empty">No template loaded</div>'

        classes = ["canvas", f"viewport-{state.viewport_size}"]
        if state.show_grid:     classes.append("show-grid")
        if state.show_outlines: classes.append("show-outlines")
        if state.preview_mode:  classes.append("preview")

        sections_html = "\n".join(self.render_section(s, state) for s in template.sections)
        if not template.sections:
            sections_html = '<div class="canvas-placeholder">Add a section to get started</div>'

        return (
            f'<div class="{" ".join(classes)}" data-template-id="{escape(template.id)}" '
            f'style="zoom:{state.zoom}%">\n{sections_html}\n</div>'
        )

    # ── Section ──────────────────────────────────────────────────────────────

    def render_section(self, section: Section, state: EditorState) -> str:
        classes = ["builder-section", f"container-{section.container}"]
        if _is_ref(state.selected, SectionRef, section.id):
            classes.append("is-selected")
        if _is_ref(state.hovered, SectionRef, section.id):
            classes.append("is-hovered")
        target = state.drop_target
        if state.is_dragging and target is not None and target.section_id == section.id:
            classes.append("is-drop-target")

        label = section.name_ar if self.lang == "ar" and section.name_ar else section.name
        blocks = [self.render_block(b, section, state) for b in section.blocks]
        if not blocks:
            blocks = ['  <div class="block-placeholder empty">Drop blocks here</div>']

        return (
            f'<section class="{" ".join(classes)}" data-section-id="{escape(section.id)}">\n'
            f'  <div class="section-label">{escape(label)}</div>\n'
            f'  <div class="section-grid">\n' + "\n".join(blocks) + "\n  </div>\n</section>"
        )

    # ── Bloc ─────────────────────────────────────────────────────────────────

    def render_block(self, block: Block, section: Section, state: EditorState) -> str:
        classes = ["builder-block"]
        if _is_ref(state.selected, BlockRef, block.id):
            classes.append("is-selected")
        if _is_ref(state.hovered, BlockRef, block.id):
            classes.append("is-hovered")

        column = block.grid_area.column
        span = responsive_value(column.span, state.viewport_size)
        style = f"grid-column:{column.start} / span {span}"

        meta = self.registry.get_block_meta(block.type)
        variant = self.registry.get_variant(block.type, block.variant)
        known = meta is not None and (variant is not None or block.variant in meta.variants)
        if not known:
            # Variant absent du registry : placeholder générique
            body = f'<span class="block-generic">{escape(block.type.value)}/{escape(block.variant)}</span>'
        else:
            title = block.name or meta.display_name(self.lang)
            config = resolve_block(block, self.registry)
            body = (
                f'<span class="block-name">{escape(title)}</span> '
                f'<span class="block-variant">{escape(variant.name if variant else block.variant)}</span>'
            )
            grid = config.get("grid")
            columns = grid.get("columns") if isinstance(grid, dict) else config.get("columns")
            if columns is not None:
                cols = responsive_value(columns, state.viewport_size)
                body += f' <span class="block-columns">{escape(str(cols))} cols</span>'

        return (
            f'    <div class="{" ".join(classes)}" data-block-id="{escape(block.id)}" '
            f'data-block-type="{escape(block.type.value)}" style="{style}">{body}</div>'
        )


def render_canvas(state: EditorState, registry: Optional[BlockRegistry] = None, lang: str = "en") -> str:
    """Raccourci : HTML outline complet du canvas."""
    return CanvasRenderer(registry, lang).render_canvas(state)


def _is_ref(ref, kind, element_id: str) -> bool:
    return isinstance(ref, kind) and ref.id == element_id
