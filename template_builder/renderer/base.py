"""
Protocol Renderer — interface pluggable pour le rendu d'un template en cours d'édition.
"""
from typing import Protocol, runtime_checkable

from ..core.schemas import Block, Section
from ..editor.state import EditorState


@runtime_checkable
class BlockRenderer(Protocol):
    def render_canvas(self, state: EditorState) -> str: ...
    def render_section(self, section: Section, state: EditorState) -> str: ...
    def render_block(self, block: Block, section: Section, state: EditorState) -> str: ...
