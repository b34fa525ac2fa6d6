"""Command predictors serving help examples as inline suggestions."""
from __future__ import annotations

import enum
import logging
import threading
import uuid
from pathlib import Path
from typing import Callable, Iterable, Sequence

from helpex.extraction.document import Corpus, extract_examples
from helpex.prediction.models import (
    FeedbackKind,
    PredictionClient,
    PredictionContext,
    SuggestionPackage,
)
from helpex.prediction.sanitizer import QueryMisuseError, sanitize_typed_text

logger = logging.getLogger(__name__)


DEFAULT_NAME = "EWSPredictors"
DEFAULT_DESCRIPTION = "Predictions based on help examples"


class PredictorStateError(RuntimeError):
    pass


class PredictorState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class CommandPredictor:
    """Base class for predictors.

    Subclasses implement get_suggestion. Feedback notifications are accepted
    and ignored unless a subclass overrides them.
    """

    @property
    def id(self) -> uuid.UUID:  # pragma: no cover
        raise NotImplementedError

    @property
    def name(self) -> str:  # pragma: no cover
        raise NotImplementedError

    @property
    def description(self) -> str:  # pragma: no cover
        raise NotImplementedError

    def get_suggestion(
        self,
        client: PredictionClient,
        context: PredictionContext,
        cancellation: threading.Event | None = None,
    ) -> SuggestionPackage | None:  # pragma: no cover
        raise NotImplementedError

    def can_accept_feedback(self, client: PredictionClient, kind: FeedbackKind) -> bool:
        return False

    def on_suggestion_displayed(self, client: PredictionClient, session: int, count_or_index: int) -> None:
        pass

    def on_suggestion_accepted(self, client: PredictionClient, session: int, accepted_suggestion: str) -> None:
        pass

    def on_command_line_accepted(self, client: PredictionClient, history: Sequence[str]) -> None:
        pass

    def on_command_line_executed(self, client: PredictionClient, command_line: str, success: bool) -> None:
        pass


class HelpExamplePredictor(CommandPredictor):
    """Suggest help examples whose text starts with the typed command name.

    Matching is a case-insensitive prefix test over the whole example line.
    Results keep corpus order and are never deduplicated.
    """

    def __init__(
        self,
        identifier: str | uuid.UUID,
        *,
        corpus: Iterable[str] | None = None,
        loader: Callable[[], Iterable[str]] | None = None,
        name: str = DEFAULT_NAME,
        description: str = DEFAULT_DESCRIPTION,
        check_interval: int = 256,
    ):
        """Initialize predictor.

        Args:
            identifier: Stable predictor id (UUID or its string form).
            corpus: Examples to serve. Attaching makes the predictor ready.
            loader: Produces the corpus on first query when no corpus is given.
            name: Human-readable predictor name.
            description: Human-readable predictor description.
            check_interval: Examples scanned between cancellation checks.
        """
        if corpus is not None and loader is not None:
            raise ValueError("Pass either corpus or loader, not both")
        self._id = identifier if isinstance(identifier, uuid.UUID) else uuid.UUID(str(identifier))
        self._name = name
        self._description = description
        self._check_interval = max(1, int(check_interval))

        self._examples: Corpus = ()
        self._lowered: Corpus = ()
        self._ready = False

        self._loader = loader
        self._load_lock = threading.Lock()
        self._load_attempted = False

        if corpus is not None:
            self.attach(corpus)

    @classmethod
    def from_help_file(cls, identifier: str | uuid.UUID, path: Path | str, **kwargs) -> HelpExamplePredictor:
        """Build a ready predictor from a help document; extraction errors propagate."""
        return cls(identifier, corpus=extract_examples(path), **kwargs)

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def state(self) -> PredictorState:
        return PredictorState.READY if self._ready else PredictorState.UNINITIALIZED

    @property
    def examples(self) -> Corpus:
        return self._examples

    def attach(self, corpus: Iterable[str]) -> None:
        """Attach the corpus. Allowed once per predictor."""
        with self._load_lock:
            self._attach(corpus)

    def _attach(self, corpus: Iterable[str]) -> None:
        # Caller holds _load_lock
        if self._ready:
            raise PredictorStateError("Corpus already attached")
        examples = tuple(corpus)
        lowered = tuple(e.lower() for e in examples)
        self._examples = examples
        self._lowered = lowered
        self._ready = True
        logger.debug("Predictor %s ready with %d examples", self._id, len(examples))

    def _ensure_loaded(self) -> None:
        if self._ready or self._loader is None:
            return
        with self._load_lock:
            if self._ready or self._load_attempted:
                return
            self._load_attempted = True
            try:
                self._attach(self._loader())
            except Exception as exc:
                # Stay uninitialized; no retry for the predictor's lifetime.
                logger.error("Predictor %s failed to load examples: %s", self._id, exc)

    def suggest(self, typed_text: str, cancellation: threading.Event | None = None) -> SuggestionPackage | None:
        """Return examples starting with typed_text, or None when nothing matched."""
        try:
            text = sanitize_typed_text(typed_text)
        except QueryMisuseError as exc:
            logger.debug("Ignoring query: %s", exc)
            return None

        if cancellation is not None and cancellation.is_set():
            return None

        self._ensure_loaded()
        if not self._ready:
            return None

        needle = text.lower()
        matches: list[str] = []
        for i, lowered in enumerate(self._lowered):
            if cancellation is not None and i and i % self._check_interval == 0 and cancellation.is_set():
                logger.debug("Query for %r cancelled after %d examples", text, i)
                return None
            if lowered.startswith(needle):
                matches.append(self._examples[i])

        if not matches:
            return None
        return SuggestionPackage.from_texts(matches)

    def get_suggestion(
        self,
        client: PredictionClient,
        context: PredictionContext,
        cancellation: threading.Event | None = None,
    ) -> SuggestionPackage | None:
        token = getattr(context, "token_at_cursor", None)
        if token is None or not token.is_command_name:
            return None
        return self.suggest(token.text, cancellation)
