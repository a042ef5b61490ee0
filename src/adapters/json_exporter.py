"""Salida JSON de resultados.

Por qué JSON:
- Interoperabilidad con scripts y pipelines (`passforge password --json | jq`).
- Solo se escribe a stdout: los secretos nunca se persisten en disco.
"""

from __future__ import annotations

import json

from pydantic import BaseModel

from core.domain.models import HistoryEntry


def render_json(model: BaseModel) -> str:
    """Serializa un modelo a JSON UTF-8 con formato estable."""

    payload = model.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)


def render_history_json(entries: list[HistoryEntry]) -> str:
    payload = [entry.model_dump(mode="json") for entry in entries]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
