"""
État de session de l'éditeur : le template vivant + l'état transitoire
(sélection, survol, drag, cible de drop, vue, erreurs).

Une seule instance par session, passée à l'engine ; aucun état global.
"""
from datetime import datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.schemas import Breakpoint, DragItem, DropTarget, ElementRef, Template


class EditorError(BaseModel):
    """Erreur affichée à l'utilisateur (ex. échec de sauvegarde)."""
    code: str
    message: str
    message_ar: str = ""
    at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class EditorState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    template: Optional[Template] = None
    original_template: Optional[Template] = None

    # Sélection / survol
    selected: Optional[ElementRef] = None
    hovered: Optional[ElementRef] = None

    # Drag & drop
    mode: Literal["idle", "dragging"] = "idle"
    dragged_item: Optional[DragItem] = None
    drop_target: Optional[DropTarget] = None

    # Vue
    viewport_size: Breakpoint = "desktop"
    zoom: int = 100
    show_grid: bool = True
    show_outlines: bool = False
    preview_mode: bool = False

    # Sauvegarde
    is_dirty: bool = False
    is_saving: bool = False
    last_saved: Optional[datetime] = None
    errors: List[EditorError] = Field(default_factory=list)

    @property
    def is_dragging(self) -> bool:
        return self.mode == "dragging"

    @property
    def has_template(self) -> bool:
        return self.template is not None
