"""Éditeur — état de session, moteur de mutations, historique, drag & drop, autosave."""
from .autosave import Autosaver
from .drop import DropController, resolve_drop_target
from .engine import BuilderEngine
from .history import History, HistoryEntry
from .state import EditorError, EditorState

__all__ = [
    "Autosaver",
    "BuilderEngine",
    "DropController",
    "EditorError",
    "EditorState",
    "History",
    "HistoryEntry",
    "resolve_drop_target",
]
