from .models import (
    FeedbackKind,
    PredictionClient,
    PredictionContext,
    PredictiveSuggestion,
    SuggestionPackage,
    TokenAtCursor,
    TokenFlags,
)
from .predictor import CommandPredictor, HelpExamplePredictor, PredictorState, PredictorStateError
from .sanitizer import QueryMisuseError, sanitize_typed_text

__all__ = [
    "FeedbackKind",
    "PredictionClient",
    "PredictionContext",
    "PredictiveSuggestion",
    "SuggestionPackage",
    "TokenAtCursor",
    "TokenFlags",
    "CommandPredictor",
    "HelpExamplePredictor",
    "PredictorState",
    "PredictorStateError",
    "QueryMisuseError",
    "sanitize_typed_text",
]
