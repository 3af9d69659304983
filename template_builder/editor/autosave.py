"""
Autosave différé (debounce) via APScheduler.

Chaque mutation replanifie un job unique ; la sauvegarde ne part qu'après
`delay` secondes sans nouvelle modification. Dernière écriture gagnante.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger

from ..config import AUTOSAVE_DELAY
from ..core.factory import generate_id

log = logging.getLogger(__name__)

JOB_PREFIX = "autosave"


class Autosaver:
    """
    Args:
        save_fn: Sauvegarde à exécuter (sans argument)
        delay: Période de calme avant sauvegarde, en secondes
        scheduler: Scheduler existant (sinon un BackgroundScheduler dédié est démarré)
        on_error: Appelé avec l'exception si save_fn échoue

    Usage:
        >>> saver = Autosaver(session.save)
        >>> unsubscribe = engine.subscribe(lambda action: saver.schedule())
    """

    def __init__(
        self,
        save_fn: Callable[[], object],
        delay: float = AUTOSAVE_DELAY,
        scheduler: Optional[BackgroundScheduler] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ):
        self.save_fn = save_fn
        self.delay = delay
        self.on_error = on_error
        # Un job par session : plusieurs sessions peuvent partager le scheduler
        self.job_id = generate_id(JOB_PREFIX)
        self._owns_scheduler = scheduler is None
        self.scheduler = scheduler or BackgroundScheduler(timezone="UTC")
        if not self.scheduler.running:
            self.scheduler.start()

    @property
    def pending(self) -> bool:
        return self.scheduler.get_job(self.job_id) is not None

    def schedule(self) -> None:
        """(Re)programme la sauvegarde ; repousse l'échéance si un job attend déjà."""
        run_date = datetime.now(timezone.utc) + timedelta(seconds=self.delay)
        self.scheduler.add_job(
            self._run,
            trigger=DateTrigger(run_date=run_date),
            id=self.job_id,
            replace_existing=True,
            misfire_grace_time=30,
        )
        log.debug("Autosave programmé pour %s", run_date.isoformat())

    def cancel(self) -> None:
        try:
            self.scheduler.remove_job(self.job_id)
            log.debug("Autosave annulé")
        except JobLookupError:
            pass

    def flush(self) -> None:
        """Exécute immédiatement une sauvegarde en attente."""
        if self.pending:
            self.cancel()
            self._run()

    def shutdown(self) -> None:
        self.cancel()
        if self._owns_scheduler and self.scheduler.running:
            self.scheduler.shutdown(wait=False)

    def _run(self) -> None:
        try:
            self.save_fn()
        except Exception as e:
            log.error("Autosave échoué : %s", e)
            if self.on_error:
                self.on_error(e)
