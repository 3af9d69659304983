"""
Moteur d'édition du builder.

Seules opérations autorisées sur le template en mémoire. Chaque opération
est synchrone et atomique : elle s'applique entièrement ou ne fait rien.
Un id inexistant n'est jamais une exception, c'est un no-op qui laisse
l'état transitoire intact.

L'ordre fait foi par la position dans les listes ; `Section.order` est
recopié depuis la position après chaque changement structurel.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, List, Optional, Tuple

from pydantic import ValidationError

from ..blocks.registry import BlockRegistry, default_registry
from ..config import HISTORY_LIMIT, ZOOM_MAX, ZOOM_MIN
from ..core.factory import generate_id, new_block_from_type, new_section
from ..core.resolver import deep_merge
from ..core.schemas import (
    Block,
    BlockRef,
    BlockType,
    Breakpoint,
    DragItem,
    DropTarget,
    Section,
    SectionRef,
    Template,
)
from .history import History
from .state import EditorError, EditorState

log = logging.getLogger(__name__)

Listener = Callable[[str], None]

_PROTECTED_SECTION_FIELDS = {"id", "blocks"}
_PROTECTED_BLOCK_FIELDS = {"id"}
_PROTECTED_TEMPLATE_FIELDS = {"id", "sections"}


class BuilderEngine:
    """
    Moteur d'édition d'une session (un éditeur, un template).

    Usage:
        >>> engine = BuilderEngine()
        >>> engine.set_template(blank_template(with_main_section=False))
        >>> section = engine.add_section()
        >>> block = engine.add_block_from_type(section.id, "article-grid")
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        registry: Optional[BlockRegistry] = None,
        history_limit: int = HISTORY_LIMIT,
    ):
        self.state = state or EditorState()
        self.registry = registry or default_registry()
        self.history = History(history_limit)
        self.revision = 0
        self._listeners: List[Listener] = []

    # ── Abonnements ──────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Appelé après chaque mutation du document (nom de l'action en argument)."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, action: str, before: Template) -> None:
        self.history.record(action, before)
        self._touch(action)

    def _touch(self, action: str) -> None:
        # Toute modification du document incrémente la révision
        self.revision += 1
        self.state.is_dirty = True
        log.debug("builder: %s (rev %d)", action, self.revision)
        self._notify(action)

    def _notify(self, action: str) -> None:
        for listener in list(self._listeners):
            listener(action)

    # ── Lecture ──────────────────────────────────────────────────────────────

    @property
    def template(self) -> Optional[Template]:
        return self.state.template

    @property
    def sections(self) -> List[Section]:
        return self.state.template.sections if self.state.template else []

    def find_section(self, section_id: str) -> Tuple[Optional[int], Optional[Section]]:
        for i, section in enumerate(self.sections):
            if section.id == section_id:
                return i, section
        return None, None

    def find_block(self, section_id: str, block_id: str) -> Tuple[Optional[int], Optional[Block]]:
        _, section = self.find_section(section_id)
        if section is None:
            return None, None
        for i, block in enumerate(section.blocks):
            if block.id == block_id:
                return i, block
        return None, None

    def locate_block(self, block_id: str) -> Tuple[Optional[Section], Optional[int]]:
        """Section propriétaire + position d'un bloc, recherché dans tout le document."""
        for section in self.sections:
            for i, block in enumerate(section.blocks):
                if block.id == block_id:
                    return section, i
        return None, None

    def selected_section(self) -> Optional[Section]:
        ref = self.state.selected
        if ref is None:
            return None
        section_id = ref.id if isinstance(ref, SectionRef) else ref.section_id
        return self.find_section(section_id)[1]

    def selected_block(self) -> Optional[Block]:
        ref = self.state.selected
        if not isinstance(ref, BlockRef):
            return None
        return self.find_block(ref.section_id, ref.id)[1]

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    @property
    def undo_actions(self) -> List[str]:
        """Libellés des actions annulables, de la plus ancienne à la plus récente."""
        return self.history.actions()

    # ── Template ─────────────────────────────────────────────────────────────

    def set_template(self, template: Optional[Template]) -> None:
        """Charge un document (ou None : « aucun template »). Réinitialise la session."""
        st = self.state
        st.template = template
        st.original_template = template.model_copy(deep=True) if template else None
        st.selected = None
        st.hovered = None
        self.end_drag()
        st.is_dirty = False
        self.revision += 1
        self.history.clear()
        log.info("Template chargé : %s", template.id if template else "—")

    def update_template(self, **updates: Any) -> Optional[Template]:
        tpl = self.state.template
        if tpl is None:
            return None
        patch = {
            k: v for k, v in updates.items()
            if k in Template.model_fields and k not in _PROTECTED_TEMPLATE_FIELDS
        }
        if not patch:
            return None
        data = tpl.model_dump()
        data.update(patch)
        try:
            updated = Template.model_validate(data)
        except ValidationError as e:
            log.warning("update_template ignoré : %s", e)
            return None
        before = tpl.model_copy(deep=True)
        for field in patch:
            setattr(tpl, field, getattr(updated, field))
        self._commit("Update Template", before)
        return tpl

    def reset_template(self) -> bool:
        """Revient au dernier état chargé/sauvegardé."""
        st = self.state
        if st.template is None or st.original_template is None:
            return False
        before = st.template.model_copy(deep=True)
        st.template = st.original_template.model_copy(deep=True)
        self._commit("Reset Template", before)
        st.is_dirty = False
        return True

    def mark_saved(self, snapshot: Optional[Template] = None, revision: Optional[int] = None) -> bool:
        """
        Enregistre `snapshot` (défaut : le document courant) comme dernière version sauvegardée.

        Args:
            snapshot: Copie effectivement écrite dans le store
            revision: Révision du document au moment de la copie

        Returns:
            True si le document est propre ; False s'il a été modifié
            depuis `revision` (il reste alors à sauvegarder)
        """
        st = self.state
        saved = snapshot if snapshot is not None else st.template
        if saved is not None:
            st.original_template = saved.model_copy(deep=True)
        st.last_saved = datetime.now(timezone.utc)
        if revision is not None and revision != self.revision:
            log.info("Template modifié pendant la sauvegarde (rev %d → %d)", revision, self.revision)
            return False
        st.is_dirty = False
        return True

    # ── Sections ─────────────────────────────────────────────────────────────

    def add_section(self, position: Optional[int] = None) -> Optional[Section]:
        """Insère une section neuve à `position` (fin par défaut) et la sélectionne."""
        tpl = self.state.template
        if tpl is None:
            return None
        before = tpl.model_copy(deep=True)
        section = new_section()
        index = len(tpl.sections) if position is None else max(0, min(position, len(tpl.sections)))
        tpl.sections.insert(index, section)
        self._reindex()
        self.state.selected = SectionRef(id=section.id)
        self._commit("Add Section", before)
        return section

    def update_section(self, section_id: str, updates: dict) -> Optional[Section]:
        index, section = self.find_section(section_id)
        if section is None:
            return None
        patch = {k: v for k, v in updates.items() if k not in _PROTECTED_SECTION_FIELDS}
        if not patch:
            return None
        data = section.model_dump()
        data.update(patch)
        try:
            updated = Section.model_validate(data)
        except ValidationError as e:
            log.warning("update_section %s ignoré : %s", section_id, e)
            return None
        before = self.state.template.model_copy(deep=True)
        updated.blocks = section.blocks
        self.state.template.sections[index] = updated
        self._reindex()
        self._commit("Update Section", before)
        return updated

    def delete_section(self, section_id: str) -> bool:
        """Supprime la section et ses blocs ; efface sélection/survol qui la visent."""
        index, section = self.find_section(section_id)
        if section is None:
            return False
        before = self.state.template.model_copy(deep=True)
        del self.state.template.sections[index]
        self._reindex()
        if _points_into_section(self.state.selected, section_id):
            self.state.selected = None
        if _points_into_section(self.state.hovered, section_id):
            self.state.hovered = None
        self._commit("Delete Section", before)
        return True

    def duplicate_section(self, section_id: str) -> Optional[Section]:
        """Copie profonde insérée juste après l'original ; ids neufs pour la section et chaque bloc."""
        index, section = self.find_section(section_id)
        if section is None:
            return None
        before = self.state.template.model_copy(deep=True)
        copy = section.model_copy(deep=True, update={"id": generate_id("section")})
        copy.blocks = [b.model_copy(deep=True, update={"id": generate_id("block")}) for b in section.blocks]
        self.state.template.sections.insert(index + 1, copy)
        self._reindex()
        self._commit("Duplicate Section", before)
        return copy

    def move_section(self, from_index: int, to_index: int) -> bool:
        """Seule primitive de réordonnancement. No-op hors bornes ou si from == to."""
        sections = self.sections
        n = len(sections)
        if from_index == to_index or not (0 <= from_index < n) or not (0 <= to_index < n):
            return False
        before = self.state.template.model_copy(deep=True)
        moved = sections.pop(from_index)
        sections.insert(to_index, moved)
        self._reindex()
        self._commit("Move Section", before)
        return True

    def move_section_up(self, section_id: str) -> bool:
        index, _ = self.find_section(section_id)
        return index is not None and self.move_section(index, index - 1)

    def move_section_down(self, section_id: str) -> bool:
        index, _ = self.find_section(section_id)
        return index is not None and self.move_section(index, index + 1)

    def _reindex(self) -> None:
        for i, section in enumerate(self.sections):
            section.order = i

    # ── Blocs ────────────────────────────────────────────────────────────────

    def add_block_from_type(
        self,
        section_id: str,
        block_type: BlockType | str,
        index: Optional[int] = None,
    ) -> Optional[Block]:
        """
        Crée un bloc du variant par défaut (surcharges vides) et l'insère
        à `index` (fin par défaut). No-op si la section ou le type est inconnu.
        """
        _, section = self.find_section(section_id)
        if section is None:
            return None
        meta = self.registry.get_block_meta(block_type)
        if meta is None:
            log.warning("Type de bloc inconnu : %r", block_type)
            return None
        before = self.state.template.model_copy(deep=True)
        block = new_block_from_type(meta.type, meta.default_variant, with_data_source=meta.has_data_source)
        position = len(section.blocks) if index is None else max(0, min(index, len(section.blocks)))
        section.blocks.insert(position, block)
        self.state.selected = BlockRef(id=block.id, section_id=section_id)
        self._commit(f"Add {meta.name}", before)
        return block

    def update_block(self, section_id: str, block_id: str, updates: dict) -> Optional[Block]:
        """Met à jour un bloc ; `config` est fusionné en profondeur avec l'existant."""
        index, block = self.find_block(section_id, block_id)
        if block is None:
            return None
        patch = {k: v for k, v in updates.items() if k not in _PROTECTED_BLOCK_FIELDS}
        if not patch:
            return None
        data = block.model_dump()
        if "config" in patch:
            data["config"] = deep_merge(block.config, patch.pop("config") or {})
        data.update(patch)
        try:
            updated = Block.model_validate(data)
        except ValidationError as e:
            log.warning("update_block %s ignoré : %s", block_id, e)
            return None
        before = self.state.template.model_copy(deep=True)
        self.find_section(section_id)[1].blocks[index] = updated
        self._commit("Update Block", before)
        return updated

    def delete_block(self, section_id: str, block_id: str) -> bool:
        index, block = self.find_block(section_id, block_id)
        if block is None:
            return False
        before = self.state.template.model_copy(deep=True)
        del self.find_section(section_id)[1].blocks[index]
        if _points_to_block(self.state.selected, block_id):
            self.state.selected = None
        if _points_to_block(self.state.hovered, block_id):
            self.state.hovered = None
        self._commit("Delete Block", before)
        return True

    def duplicate_block(self, section_id: str, block_id: str) -> Optional[Block]:
        """Copie insérée juste après l'original, seul l'id change."""
        index, block = self.find_block(section_id, block_id)
        if block is None:
            return None
        before = self.state.template.model_copy(deep=True)
        copy = block.model_copy(deep=True, update={"id": generate_id("block")})
        self.find_section(section_id)[1].blocks.insert(index + 1, copy)
        self._commit("Duplicate Block", before)
        return copy

    def move_block(self, from_section_id: str, to_section_id: str, from_index: int, to_index: int) -> bool:
        """Déplace un bloc (même section ou autre section). No-op hors bornes."""
        _, source = self.find_section(from_section_id)
        _, target = self.find_section(to_section_id)
        if source is None or target is None:
            return False
        if not 0 <= from_index < len(source.blocks):
            return False
        same = source is target
        upper = len(target.blocks) - 1 if same else len(target.blocks)
        if not 0 <= to_index <= upper or (same and from_index == to_index):
            return False
        before = self.state.template.model_copy(deep=True)
        moved = source.blocks.pop(from_index)
        target.blocks.insert(to_index, moved)
        for attr in ("selected", "hovered"):
            ref = getattr(self.state, attr)
            if isinstance(ref, BlockRef) and ref.id == moved.id:
                setattr(self.state, attr, BlockRef(id=moved.id, section_id=to_section_id))
        self._commit("Move Block", before)
        return True

    # ── Sélection / survol ───────────────────────────────────────────────────

    def select_element(self, ref: Optional[SectionRef | BlockRef]) -> None:
        # Un id inexistant est accepté : le canvas ne le fera simplement pas correspondre
        self.state.selected = ref

    def hover_element(self, ref: Optional[SectionRef | BlockRef]) -> None:
        self.state.hovered = ref

    def clear_selection(self) -> None:
        self.state.selected = None

    # ── Drag & drop ──────────────────────────────────────────────────────────

    def start_drag(self, item: DragItem | str) -> None:
        if isinstance(item, str):
            item = DragItem(payload=item)
        st = self.state
        st.mode = "dragging"
        st.dragged_item = item
        st.drop_target = None

    def update_drop_target(self, target: Optional[DropTarget]) -> None:
        if not self.state.is_dragging:
            return
        self.state.drop_target = target

    def end_drag(self) -> None:
        """Drop terminé ou annulé : retour à Idle, cible effacée sans condition."""
        st = self.state
        st.mode = "idle"
        st.dragged_item = None
        st.drop_target = None

    # ── Vue ──────────────────────────────────────────────────────────────────

    def set_viewport_size(self, size: Breakpoint) -> None:
        self.state.viewport_size = size

    def set_zoom(self, zoom: int) -> None:
        self.state.zoom = max(ZOOM_MIN, min(ZOOM_MAX, int(zoom)))

    def toggle_grid(self) -> None:
        self.state.show_grid = not self.state.show_grid

    def toggle_outlines(self) -> None:
        self.state.show_outlines = not self.state.show_outlines

    def toggle_preview_mode(self) -> None:
        st = self.state
        st.preview_mode = not st.preview_mode
        if st.preview_mode:
            st.selected = None

    # ── Historique ───────────────────────────────────────────────────────────

    def undo(self) -> bool:
        tpl = self.state.template
        if tpl is None:
            return False
        previous = self.history.undo(tpl)
        if previous is None:
            return False
        self.state.template = previous
        self._touch("Undo")
        return True

    def redo(self) -> bool:
        tpl = self.state.template
        if tpl is None:
            return False
        following = self.history.redo(tpl)
        if following is None:
            return False
        self.state.template = following
        self._touch("Redo")
        return True

    # ── Erreurs ──────────────────────────────────────────────────────────────

    def add_error(self, code: str, message: str, message_ar: str = "") -> EditorError:
        error = EditorError(code=code, message=message, message_ar=message_ar)
        self.state.errors.append(error)
        return error

    def clear_errors(self) -> None:
        self.state.errors.clear()


def _points_into_section(ref, section_id: str) -> bool:
    if isinstance(ref, SectionRef):
        return ref.id == section_id
    if isinstance(ref, BlockRef):
        return ref.section_id == section_id
    return False


def _points_to_block(ref, block_id: str) -> bool:
    return isinstance(ref, BlockRef) and ref.id == block_id
