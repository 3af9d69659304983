"""
API publique du Template Builder — cycle de vie d'une session d'édition.
"""
import logging
from typing import Optional

from apscheduler.schedulers.base import BaseScheduler

from .blocks.registry import BlockRegistry
from .config import AUTOSAVE_DELAY
from .core.factory import blank_template
from .core.schemas import Template
from .editor.autosave import Autosaver
from .editor.engine import BuilderEngine
from .errors import BridgeError
from .persistence.pages_api import TemplateStore
from .renderer.canvas import render_canvas

log = logging.getLogger(__name__)


class BuilderSession:
    """
    Session d'édition : charge un template, l'édite, le sauvegarde.

    Usage:
        >>> session = BuilderSession(PageContentStore(PagesApiClient(token=t), page_id))
        >>> session.open()
        >>> session.engine.add_block_from_type(section_id, "big-hero")
        >>> session.save()
        >>> session.close()
    """

    def __init__(
        self,
        store: Optional[TemplateStore] = None,
        registry: Optional[BlockRegistry] = None,
        autosave: bool = True,
        autosave_delay: float = AUTOSAVE_DELAY,
        scheduler: Optional[BaseScheduler] = None,
    ):
        """
        Args:
            store: Stockage du template (page, dépôt de session…) ; None = brouillon local
            registry: Registry de blocs (défaut : catalogue intégré)
            autosave: Active la sauvegarde différée après chaque modification
            autosave_delay: Période de calme avant autosave (secondes)
            scheduler: Scheduler APScheduler partagé (sinon un scheduler dédié)
        """
        self.store = store
        self.engine = BuilderEngine(registry=registry)
        self.autosaver: Optional[Autosaver] = None
        self._unsubscribe = None
        if autosave and store is not None:
            self.autosaver = Autosaver(self._autosave, autosave_delay, scheduler, on_error=self._on_save_error)

    @property
    def template(self) -> Optional[Template]:
        return self.engine.template

    def open(self, fallback_blank: bool = True) -> Optional[Template]:
        """
        Charge le template du store ; repli sur un template vierge si rien
        n'est exploitable (et `fallback_blank`).
        """
        template = None
        if self.store is not None:
            try:
                template = self.store.load()
            except BridgeError as e:
                log.error("Chargement du template échoué : %s", e)
                self.engine.add_error("load_failed", str(e), "فشل تحميل القالب")
        if template is None and fallback_blank:
            template = blank_template()
        self.engine.set_template(template)
        if self.autosaver and self._unsubscribe is None:
            self._unsubscribe = self.engine.subscribe(lambda action: self.autosaver.schedule())
        return template

    def save(self) -> bool:
        """Sauvegarde immédiate. En cas d'échec le document en mémoire est conservé."""
        template = self.engine.template
        if template is None or self.store is None:
            return False
        state = self.engine.state
        revision = self.engine.revision
        snapshot = template.model_copy(deep=True)
        state.is_saving = True
        try:
            self.store.save(snapshot)
        except BridgeError as e:
            self._on_save_error(e)
            return False
        finally:
            state.is_saving = False
        log.info("Template %s sauvegardé (rev %d)", snapshot.id, revision)
        if not self.engine.mark_saved(snapshot, revision) and self.autosaver:
            # Modifications arrivées pendant l'écriture : nouvelle sauvegarde
            self.autosaver.schedule()
        return True

    def preview_html(self) -> str:
        return render_canvas(self.engine.state, self.engine.registry)

    def close(self, save: bool = False) -> None:
        """Termine la session ; l'autosave en attente est annulé avant tout."""
        if self.autosaver:
            self.autosaver.cancel()
        if save and self.engine.state.is_dirty:
            self.save()
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        if self.autosaver:
            self.autosaver.shutdown()

    def _autosave(self) -> None:
        if self.engine.state.is_dirty:
            self.save()

    def _on_save_error(self, error: Exception) -> None:
        log.error("Sauvegarde échouée : %s", error)
        self.engine.add_error("save_failed", str(error), "فشل حفظ القالب")
