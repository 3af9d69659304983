"""
Drag & drop : calcul de la cible de drop et protocole en trois phases
(début → survol → fin).

Seule la phase de fin modifie le document ; un drag annulé n'a aucun effet.
"""
import logging
from typing import Optional

from ..core.schemas import DragItem, DropTarget, Template
from .engine import BuilderEngine

log = logging.getLogger(__name__)


def resolve_drop_target(
    template: Optional[Template],
    section_id: str,
    index: Optional[int] = None,
    over_block_id: Optional[str] = None,
) -> Optional[DropTarget]:
    """
    Cible d'insertion pour un survol de section.

    Args:
        template: Document courant
        section_id: Section survolée
        index: Position d'insertion explicite (entre deux blocs)
        over_block_id: Bloc survolé (ignoré : on ajoute en fin)

    Returns:
        DropTarget, ou None si la section n'existe pas
    """
    if template is None:
        return None
    section = next((s for s in template.sections if s.id == section_id), None)
    if section is None:
        return None
    count = len(section.blocks)
    if index is not None and 0 <= index <= count:
        return DropTarget(section_id=section_id, index=index)
    return DropTarget(section_id=section_id, index=count)


class DropController:
    """
    Pilote un drag complet sur un engine.

    Usage:
        >>> drop = DropController(engine)
        >>> drop.begin("article-grid")
        >>> drop.hover(section.id)
        >>> block = drop.end()
    """

    def __init__(self, engine: BuilderEngine):
        self.engine = engine

    def begin(self, payload: str, source_section_id: Optional[str] = None) -> None:
        self.engine.start_drag(DragItem(payload=payload, source_section_id=source_section_id))

    def hover(
        self,
        section_id: Optional[str],
        index: Optional[int] = None,
        over_block_id: Optional[str] = None,
    ) -> Optional[DropTarget]:
        """Met à jour la cible ; section_id=None quand le pointeur quitte le canvas."""
        target = None
        if section_id is not None:
            target = resolve_drop_target(self.engine.template, section_id, index, over_block_id)
        self.engine.update_drop_target(target)
        return target

    def end(self):
        """
        Applique le drop puis revient à Idle.

        Returns:
            Le bloc créé, True pour un déplacement réussi, None sinon
        """
        state = self.engine.state
        item, target = state.dragged_item, state.drop_target
        try:
            if item is None or target is None:
                return None
            return self._apply(item, target)
        finally:
            self.engine.end_drag()

    def cancel(self) -> None:
        self.engine.end_drag()

    def _apply(self, item: DragItem, target: DropTarget):
        payload = item.payload
        if self.engine.registry.get_block_meta(payload) is not None:
            return self.engine.add_block_from_type(target.section_id, payload, target.index)

        source, from_index = self.engine.locate_block(payload)
        if source is None:
            log.warning("Payload de drag inconnu : %r", payload)
            return None
        to_index = target.index
        if source.id == target.section_id:
            # L'index visé compte le bloc lui-même
            if to_index > from_index:
                to_index -= 1
            to_index = min(to_index, len(source.blocks) - 1)
        return self.engine.move_block(source.id, target.section_id, from_index, to_index) or None
