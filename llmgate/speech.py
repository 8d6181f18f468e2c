"""Text-to-speech endpoint: request model and call description."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from llmgate.endpoint import ApiRequest, omit_empty


class SpeechModel(str, Enum):
    TTS_1 = "tts-1"
    TTS_1_HD = "tts-1-hd"
    CANARY = "canary-tts"


class SpeechVoice(str, Enum):
    ALLOY = "alloy"
    ECHO = "echo"
    FABLE = "fable"
    ONYX = "onyx"
    NOVA = "nova"
    SHIMMER = "shimmer"


class SpeechResponseFormat(str, Enum):
    MP3 = "mp3"
    OPUS = "opus"
    AAC = "aac"
    FLAC = "flac"
    WAV = "wav"
    PCM = "pcm"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


@dataclass
class CreateSpeechRequest:
    model: SpeechModel | str
    input: str
    voice: SpeechVoice | str
    response_format: SpeechResponseFormat | str = ""
    speed: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        data = {"model": _plain(self.model), "input": self.input, "voice": _plain(self.voice)}
        data.update(omit_empty({"response_format": _plain(self.response_format), "speed": self.speed}))
        return data


def build_speech_request(request: CreateSpeechRequest) -> ApiRequest:
    """Describe the speech call; the response body is raw audio."""
    return ApiRequest(
        "POST",
        "/audio/speech",
        body=request.to_dict(),
        model=_plain(request.model),
        content_type="application/json",
    )