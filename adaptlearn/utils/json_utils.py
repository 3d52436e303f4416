# Fichier : adaptlearn/utils/json_utils.py

from __future__ import annotations
import json
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


def safe_json_loads(raw: Optional[str], default: Any = None) -> Any:
    """
    Tente json.loads et renvoie ``default`` si l'entrée est vide ou invalide.
    Ne lève jamais d'exception: un document corrompu vaut un document absent.
    """
    if raw is None:
        return default

    text = str(raw).strip()
    if not text:
        return default

    try:
        return json.loads(text)
    except (TypeError, ValueError) as exc:
        logger.warning("JSON invalide ignoré (%s).", exc)
        return default


def safe_json_object(raw: Optional[str]) -> dict[str, Any]:
    """Like :func:`safe_json_loads` but only accepts a JSON object."""
    value = safe_json_loads(raw, default=None)
    if isinstance(value, dict):
        return value
    if value is not None:
        logger.warning("Document JSON inattendu (%s), remplacé par {}.", type(value).__name__)
    return {}
