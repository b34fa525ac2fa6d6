"""In-process registry of command predictors, keyed by predictor id."""
from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterator

from helpex.prediction.models import PredictionClient, PredictionContext, SuggestionPackage
from helpex.prediction.predictor import CommandPredictor

logger = logging.getLogger(__name__)


class PredictorRegistrationError(KeyError):
    pass


def _as_uuid(identifier: str | uuid.UUID) -> uuid.UUID:
    return identifier if isinstance(identifier, uuid.UUID) else uuid.UUID(str(identifier))


class PredictorRegistry:
    def __init__(self) -> None:
        self._predictors: dict[uuid.UUID, CommandPredictor] = {}
        self._lock = threading.Lock()

    def register(self, predictor: CommandPredictor) -> None:
        with self._lock:
            if predictor.id in self._predictors:
                raise PredictorRegistrationError(f"Predictor already registered: {predictor.id}")
            self._predictors[predictor.id] = predictor
        logger.info("Registered predictor %s (%s)", predictor.name, predictor.id)

    def unregister(self, identifier: str | uuid.UUID) -> CommandPredictor:
        key = _as_uuid(identifier)
        with self._lock:
            predictor = self._predictors.pop(key, None)
        if predictor is None:
            raise PredictorRegistrationError(f"Predictor not registered: {key}")
        logger.info("Unregistered predictor %s (%s)", predictor.name, key)
        return predictor

    def get(self, identifier: str | uuid.UUID) -> CommandPredictor | None:
        with self._lock:
            return self._predictors.get(_as_uuid(identifier))

    def __contains__(self, identifier: object) -> bool:
        try:
            return self.get(identifier) is not None  # type: ignore[arg-type]
        except ValueError:
            return False

    def __len__(self) -> int:
        with self._lock:
            return len(self._predictors)

    def __iter__(self) -> Iterator[CommandPredictor]:
        with self._lock:
            return iter(list(self._predictors.values()))

    def get_suggestions(
        self,
        client: PredictionClient,
        context: PredictionContext,
        cancellation: threading.Event | None = None,
    ) -> list[tuple[uuid.UUID, SuggestionPackage]]:
        """Ask every registered predictor; keep non-empty answers in registration order."""
        results: list[tuple[uuid.UUID, SuggestionPackage]] = []
        for predictor in self:
            if cancellation is not None and cancellation.is_set():
                break
            package = predictor.get_suggestion(client, context, cancellation)
            if package:
                results.append((predictor.id, package))
        return results
