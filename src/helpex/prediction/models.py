"""Request and result types exchanged between the host and predictors."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Iterator


class TokenFlags(enum.Flag):
    NONE = 0
    COMMAND_NAME = enum.auto()
    MEMBER_NAME = enum.auto()
    ATTRIBUTE_NAME = enum.auto()
    TYPE_NAME = enum.auto()


class FeedbackKind(enum.Enum):
    SUGGESTION_DISPLAYED = "suggestion_displayed"
    SUGGESTION_ACCEPTED = "suggestion_accepted"
    COMMAND_LINE_ACCEPTED = "command_line_accepted"
    COMMAND_LINE_EXECUTED = "command_line_executed"


@dataclass(frozen=True)
class PredictionClient:
    """The caller that initiated a prediction request."""
    name: str
    kind: str = "terminal"


@dataclass(frozen=True)
class TokenAtCursor:
    text: str
    flags: TokenFlags = TokenFlags.NONE

    @property
    def is_command_name(self) -> bool:
        return bool(self.flags & TokenFlags.COMMAND_NAME)


@dataclass(frozen=True)
class PredictionContext:
    """What the user has typed so far and the token under the cursor."""
    input_text: str
    token_at_cursor: TokenAtCursor | None = None

    @classmethod
    def for_command_name(cls, text: str) -> PredictionContext:
        return cls(input_text=text, token_at_cursor=TokenAtCursor(text, TokenFlags.COMMAND_NAME))


@dataclass(frozen=True)
class PredictiveSuggestion:
    text: str


@dataclass(frozen=True)
class SuggestionPackage:
    """Ordered suggestions returned for one query.

    Predictors return None rather than an empty package when nothing matched.
    """
    suggestions: tuple[PredictiveSuggestion, ...] = field(default_factory=tuple)

    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> SuggestionPackage:
        return cls(suggestions=tuple(PredictiveSuggestion(t) for t in texts))

    def texts(self) -> list[str]:
        return [s.text for s in self.suggestions]

    def __len__(self) -> int:
        return len(self.suggestions)

    def __iter__(self) -> Iterator[PredictiveSuggestion]:
        return iter(self.suggestions)
