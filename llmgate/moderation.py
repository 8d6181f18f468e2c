"""Moderation endpoint: request and response models and model validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from llmgate.endpoint import ApiRequest, omit_empty

MODERATION_OMNI_LATEST = "omni-moderation-latest"
MODERATION_OMNI_20240926 = "omni-moderation-2024-09-26"
MODERATION_TEXT_STABLE = "text-moderation-stable"
MODERATION_TEXT_LATEST = "text-moderation-latest"
# Deprecated: use MODERATION_TEXT_STABLE or MODERATION_TEXT_LATEST.
MODERATION_TEXT_001 = "text-moderation-001"

VALID_MODERATION_MODELS = frozenset(
    {
        MODERATION_OMNI_LATEST,
        MODERATION_OMNI_20240926,
        MODERATION_TEXT_STABLE,
        MODERATION_TEXT_LATEST,
    }
)

_INVALID_MODEL_MESSAGE = (
    "this model is not supported with moderation, please use "
    "text-moderation-stable or text-moderation-latest instead"
)

_CATEGORY_KEYS = (
    ("hate", "hate"),
    ("hate_threatening", "hate/threatening"),
    ("harassment", "harassment"),
    ("harassment_threatening", "harassment/threatening"),
    ("self_harm", "self-harm"),
    ("self_harm_intent", "self-harm/intent"),
    ("self_harm_instructions", "self-harm/instructions"),
    ("sexual", "sexual"),
    ("sexual_minors", "sexual/minors"),
    ("violence", "violence"),
    ("violence_graphic", "violence/graphic"),
)


class ModerationInvalidModelError(ValueError):
    """Raised when a moderation request names an unsupported model."""

    def __init__(self, message: str = _INVALID_MODEL_MESSAGE) -> None:
        super().__init__(message)


@dataclass
class ModerationRequest:
    input: str = ""
    model: str = ""

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"input": self.input, "model": self.model})


@dataclass
class ResultCategories:
    hate: bool = False
    hate_threatening: bool = False
    harassment: bool = False
    harassment_threatening: bool = False
    self_harm: bool = False
    self_harm_intent: bool = False
    self_harm_instructions: bool = False
    sexual: bool = False
    sexual_minors: bool = False
    violence: bool = False
    violence_graphic: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResultCategories:
        return cls(**{attr: bool(data.get(key, False)) for attr, key in _CATEGORY_KEYS})

    def to_dict(self) -> dict[str, bool]:
        return {key: getattr(self, attr) for attr, key in _CATEGORY_KEYS}


@dataclass
class ResultCategoryScores:
    hate: float = 0.0
    hate_threatening: float = 0.0
    harassment: float = 0.0
    harassment_threatening: float = 0.0
    self_harm: float = 0.0
    self_harm_intent: float = 0.0
    self_harm_instructions: float = 0.0
    sexual: float = 0.0
    sexual_minors: float = 0.0
    violence: float = 0.0
    violence_graphic: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResultCategoryScores:
        return cls(**{attr: float(data.get(key, 0.0)) for attr, key in _CATEGORY_KEYS})

    def to_dict(self) -> dict[str, float]:
        return {key: getattr(self, attr) for attr, key in _CATEGORY_KEYS}


@dataclass
class Result:
    categories: ResultCategories = field(default_factory=ResultCategories)
    category_scores: ResultCategoryScores = field(default_factory=ResultCategoryScores)
    flagged: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Result:
        return cls(
            categories=ResultCategories.from_dict(data.get("categories") or {}),
            category_scores=ResultCategoryScores.from_dict(data.get("category_scores") or {}),
            flagged=bool(data.get("flagged", False)),
        )


@dataclass
class ModerationResponse:
    id: str = ""
    model: str = ""
    results: list[Result] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ModerationResponse:
        return cls(
            id=data.get("id", ""),
            model=data.get("model", ""),
            results=[Result.from_dict(item) for item in data.get("results") or []],
        )


def validate_moderation_model(model: str) -> None:
    """Raise ModerationInvalidModelError for a non-empty, unsupported model."""
    if model and model not in VALID_MODERATION_MODELS:
        raise ModerationInvalidModelError()


def build_moderation_request(request: ModerationRequest) -> ApiRequest:
    """Validate ``request`` and describe the moderation call."""
    validate_moderation_model(request.model)
    return ApiRequest("POST", "/moderations", body=request.to_dict(), model=request.model)