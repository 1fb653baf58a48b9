# infra/i18n.py
from __future__ import annotations

import logging
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "filter.all": "All",
        "overview.allocated": "Total Allocated",
        "overview.spent": "Total Spent",
        "overview.utilization": "Overall Utilization",
        "overview.transparency": "Transparency Index",
        "status.on-track": "On Track",
        "status.delayed": "Delayed",
        "status.at-risk": "At Risk",
        "status.completed": "Completed",
        "report.type.spending-concern": "Spending Concern",
        "report.type.fraud-suspicion": "Fraud Suspicion",
        "report.type.delay-justification": "Delay Justification",
        "report.type.misallocation": "Misallocation",
        "report.type.quality-issue": "Quality Issue",
        "report.status.submitted": "Submitted",
        "report.status.under-review": "Under Review",
        "report.status.resolved": "Resolved",
        "severity.low": "Low",
        "severity.medium": "Medium",
        "severity.high": "High",
        "report.submitted": "Report submitted successfully",
        "report.confirm": "Please confirm your report before submitting",
        "export.completed": "Export completed",
        "export.failed": "Export failed",
    },
    "es": {
        "filter.all": "Todos",
        "overview.allocated": "Total Asignado",
        "overview.spent": "Total Gastado",
        "overview.utilization": "Utilización General",
        "overview.transparency": "Índice de Transparencia",
        "status.on-track": "En Curso",
        "status.delayed": "Retrasado",
        "status.at-risk": "En Riesgo",
        "status.completed": "Completado",
        "report.type.spending-concern": "Preocupación de Gasto",
        "report.type.fraud-suspicion": "Sospecha de Fraude",
        "report.type.delay-justification": "Justificación de Retraso",
        "report.type.misallocation": "Asignación Indebida",
        "report.type.quality-issue": "Problema de Calidad",
        "report.status.submitted": "Enviado",
        "report.status.under-review": "En Revisión",
        "report.status.resolved": "Resuelto",
        "severity.low": "Baja",
        "severity.medium": "Media",
        "severity.high": "Alta",
        "report.submitted": "Informe enviado correctamente",
        "report.confirm": "Confirme su informe antes de enviarlo",
        "export.completed": "Exportación completada",
        "export.failed": "La exportación falló",
    },
}


class CatalogTranslator:
    """Dictionary lookup: current language, then English, then the key itself."""

    def __init__(self, language: str = DEFAULT_LANGUAGE, catalogs: Mapping[str, Mapping[str, str]] | None = None):
        self._catalogs = catalogs if catalogs is not None else CATALOGS
        self._language = DEFAULT_LANGUAGE
        self.set_language(language)

    @property
    def current_language(self) -> str:
        return self._language

    @property
    def languages(self) -> tuple[str, ...]:
        return tuple(self._catalogs)

    def set_language(self, language: str) -> str:
        if language not in self._catalogs:
            logger.warning("Unsupported language %r; keeping %s", language, self._language)
            return self._language
        self._language = language
        return language

    def translate(self, key: str) -> str:
        current = self._catalogs.get(self._language, {})
        if key in current:
            return current[key]
        fallback = self._catalogs.get(DEFAULT_LANGUAGE, {})
        if key in fallback:
            return fallback[key]
        logger.debug("Missing translation for %r", key)
        return key


__all__ = ["CatalogTranslator", "CATALOGS", "DEFAULT_LANGUAGE"]
