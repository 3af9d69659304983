"""
Configuration du template builder — lue depuis l'environnement.
"""
import os
from pathlib import Path

DATA_DIR = Path(__file__).parent.parent / "data"

# API admin (pages / articles)
API_URL     = os.getenv("NEWSCORE_API_URL", "http://localhost:3001/api/v1")
API_TIMEOUT = float(os.getenv("NEWSCORE_API_TIMEOUT", "10"))

# Éditeur
AUTOSAVE_DELAY = float(os.getenv("BUILDER_AUTOSAVE_DELAY", "2"))
HISTORY_LIMIT  = int(os.getenv("BUILDER_HISTORY_LIMIT", "50"))
ZOOM_MIN, ZOOM_MAX = 25, 200

# Store de transfert de session (SQLite)
DB_PATH = os.getenv("BUILDER_DB_PATH", str(DATA_DIR / "builder.db"))
