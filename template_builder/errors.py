"""Exceptions du template builder."""


class BuilderError(Exception):
    """Erreur de base du template builder."""


class BridgeError(BuilderError):
    """Échec d'E/S avec le stockage externe (API admin, store de session)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnknownBlockType(BuilderError, ValueError):
    """Type de bloc absent du registry (helpers stricts uniquement)."""
