"""Parameter checks for o-series reasoning models."""

from __future__ import annotations

from typing import Any, Mapping

_REASONING_PREFIXES = ("o1", "o3")


class ReasoningModelError(ValueError):
    """A request parameter is not accepted by reasoning models."""

    default_message = "this request is not supported by reasoning models"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class MaxTokensDeprecatedError(ReasoningModelError):
    default_message = "this model is not supported MaxTokens, please use MaxCompletionTokens"


class LogprobsNotSupportedError(ReasoningModelError):
    default_message = "this model has beta-limitations, logprobs not supported"


class FixedParameterError(ReasoningModelError):
    default_message = (
        "this model has beta-limitations, temperature, top_p and n are fixed at 1, "
        "while presence_penalty and frequency_penalty are fixed at 0"
    )


def _get(request: Any, name: str, default: Any) -> Any:
    if isinstance(request, Mapping):
        value = request.get(name, default)
    else:
        value = getattr(request, name, default)
    return default if value is None else value


class ReasoningValidator:
    """Checks a chat completion request against o-series model limitations."""

    def validate(self, request: Any) -> None:
        """Raise a ReasoningModelError if ``request`` breaks a limitation.

        ``request`` may be a mapping or an object with attributes ``model``,
        ``max_tokens``, ``logprobs``, ``temperature``, ``top_p``, ``n``,
        ``presence_penalty`` and ``frequency_penalty``.
        """
        model = _get(request, "model", "")
        if not model.startswith(_REASONING_PREFIXES):
            return
        if _get(request, "max_tokens", 0) > 0:
            raise MaxTokensDeprecatedError()
        if _get(request, "logprobs", False):
            raise LogprobsNotSupportedError()
        for name in ("temperature", "top_p", "n"):
            value = _get(request, name, 0)
            if value > 0 and value != 1:
                raise FixedParameterError()
        for name in ("presence_penalty", "frequency_penalty"):
            if _get(request, name, 0) > 0:
                raise FixedParameterError()