from __future__ import annotations

import logging
from typing import Any

from helpex.config import HelpexSettings, get_settings
from helpex.extraction.document import HelpDocumentError
from helpex.host.module import HelpPredictorModule
from helpex.host.registry import PredictorRegistry
from helpex.prediction.models import FeedbackKind, PredictionClient, PredictionContext

logger = logging.getLogger(__name__)


MCP_CLIENT = PredictionClient(name="mcp", kind="mcp")


class HelpexCore:
    def __init__(self, settings: HelpexSettings | None = None):
        self.settings = settings or get_settings()
        self.registry = PredictorRegistry()
        self.module = HelpPredictorModule(self.registry, self.settings)
        self._start_error: str | None = None

    def start(self) -> None:
        try:
            self.module.activate()
            self._start_error = None
        except HelpDocumentError as exc:
            # Leave the predictor disabled; every query answers with no suggestions.
            self._start_error = str(exc)
            logger.error("Help predictor disabled: %s", exc)

    def stop(self) -> None:
        self.module.deactivate()

    def get_info(self) -> dict[str, Any]:
        predictor = self.module.predictor
        if predictor is None:
            return {
                "ok": False,
                "id": self.settings.predictor_id,
                "name": self.settings.predictor_name,
                "description": self.settings.predictor_description,
                "state": "unregistered",
                "examples": 0,
                "error": self._start_error,
            }
        return {
            "ok": True,
            "id": str(predictor.id),
            "name": predictor.name,
            "description": predictor.description,
            "state": predictor.state.value,
            "examples": len(predictor.examples),
        }

    def suggest(self, text: str) -> dict[str, Any]:
        context = PredictionContext.for_command_name(text)
        results = self.registry.get_suggestions(MCP_CLIENT, context)
        if not results:
            return {"ok": True, "suggestions": None}
        texts: list[str] = []
        for _predictor_id, package in results:
            texts.extend(package.texts())
        return {"ok": True, "suggestions": texts}

    def feedback(self, kind: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        try:
            feedback_kind = FeedbackKind(kind)
        except ValueError:
            return {"ok": False, "error": f"Unknown feedback kind: {kind}"}

        payload = payload or {}
        accepted = False
        for predictor in self.registry:
            if not predictor.can_accept_feedback(MCP_CLIENT, feedback_kind):
                continue
            accepted = True
            if feedback_kind is FeedbackKind.SUGGESTION_DISPLAYED:
                predictor.on_suggestion_displayed(
                    MCP_CLIENT, int(payload.get("session", 0)), int(payload.get("count_or_index", 0))
                )
            elif feedback_kind is FeedbackKind.SUGGESTION_ACCEPTED:
                predictor.on_suggestion_accepted(
                    MCP_CLIENT, int(payload.get("session", 0)), str(payload.get("suggestion", ""))
                )
            elif feedback_kind is FeedbackKind.COMMAND_LINE_ACCEPTED:
                predictor.on_command_line_accepted(MCP_CLIENT, list(payload.get("history", [])))
            else:
                predictor.on_command_line_executed(
                    MCP_CLIENT, str(payload.get("command_line", "")), bool(payload.get("success", True))
                )
        return {"ok": True, "accepted": accepted}
