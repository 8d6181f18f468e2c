"""Assistant runs and run steps: models and call descriptions."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, TypeVar

from llmgate.endpoint import ApiRequest, Pagination, omit_empty
from llmgate.thread import ThreadMessage, ThreadRequest

E = TypeVar("E", bound=Enum)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _enum_or_str(enum_type: type[E], value: Any) -> E | str:
    try:
        return enum_type(value)
    except ValueError:
        return value


def _encode(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _encode(getattr(value, f.name)) for f in dataclasses.fields(value)}
    return value


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    return None if value is None else int(value)


class RunStatus(str, Enum):
    QUEUED = "queued"
    IN_PROGRESS = "in_progress"
    REQUIRES_ACTION = "requires_action"
    CANCELLING = "cancelling"
    FAILED = "failed"
    COMPLETED = "completed"
    INCOMPLETE = "incomplete"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class RequiredActionType(str, Enum):
    SUBMIT_TOOL_OUTPUTS = "submit_tool_outputs"


class RunError(str, Enum):
    SERVER_ERROR = "server_error"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"


class TruncationStrategy(str, Enum):
    AUTO = "auto"
    LAST_MESSAGES = "last_messages"


class RunStepStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    CANCELLING = "cancelled"
    FAILED = "failed"
    COMPLETED = "completed"
    EXPIRED = "expired"


class RunStepType(str, Enum):
    MESSAGE_CREATION = "message_creation"
    TOOL_CALLS = "tool_calls"


@dataclass
class ThreadTruncationStrategy:
    type: TruncationStrategy | str = ""
    last_messages: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data = omit_empty({"type": _plain(self.type)})
        if self.last_messages is not None:
            data["last_messages"] = self.last_messages
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadTruncationStrategy:
        return cls(
            type=_enum_or_str(TruncationStrategy, data.get("type", "")),
            last_messages=_optional_int(data, "last_messages"),
        )


@dataclass
class SubmitToolOutputs:
    tool_calls: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class RunRequiredAction:
    type: RequiredActionType | str = ""
    submit_tool_outputs: SubmitToolOutputs | None = None


@dataclass
class RunLastError:
    code: RunError | str = ""
    message: str = ""


@dataclass
class ResponseFormat:
    """Output format of a run: ``text`` or ``json_object``."""

    type: str = ""


def _last_error(data: Mapping[str, Any] | None) -> RunLastError | None:
    if data is None:
        return None
    return RunLastError(
        code=_enum_or_str(RunError, data.get("code", "")), message=data.get("message", "")
    )


def _required_action(data: Mapping[str, Any] | None) -> RunRequiredAction | None:
    if data is None:
        return None
    outputs = data.get("submit_tool_outputs")
    return RunRequiredAction(
        type=_enum_or_str(RequiredActionType, data.get("type", "")),
        submit_tool_outputs=None
        if outputs is None
        else SubmitToolOutputs(tool_calls=list(outputs.get("tool_calls") or [])),
    )


@dataclass
class Run:
    id: str = ""
    object: str = ""
    created_at: int = 0
    thread_id: str = ""
    assistant_id: str = ""
    status: RunStatus | str = ""
    required_action: RunRequiredAction | None = None
    last_error: RunLastError | None = None
    expires_at: int = 0
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str = ""
    instructions: str = ""
    tools: list[dict[str, Any]] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    usage: dict[str, Any] = field(default_factory=dict)
    temperature: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Run:
        truncation = data.get("truncation_strategy")
        temperature = data.get("temperature")
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            thread_id=data.get("thread_id", ""),
            assistant_id=data.get("assistant_id", ""),
            status=_enum_or_str(RunStatus, data.get("status", "")),
            required_action=_required_action(data.get("required_action")),
            last_error=_last_error(data.get("last_error")),
            expires_at=int(data.get("expires_at") or 0),
            started_at=_optional_int(data, "started_at"),
            cancelled_at=_optional_int(data, "cancelled_at"),
            failed_at=_optional_int(data, "failed_at"),
            completed_at=_optional_int(data, "completed_at"),
            model=data.get("model", ""),
            instructions=data.get("instructions", ""),
            tools=list(data.get("tools") or []),
            file_ids=list(data.get("file_ids") or []),
            metadata=data.get("metadata"),
            usage=dict(data.get("usage") or {}),
            temperature=None if temperature is None else float(temperature),
            max_prompt_tokens=int(data.get("max_prompt_tokens") or 0),
            max_completion_tokens=int(data.get("max_completion_tokens") or 0),
            truncation_strategy=None
            if truncation is None
            else ThreadTruncationStrategy.from_dict(truncation),
        )


@dataclass
class RunList:
    runs: list[Run] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunList:
        return cls(runs=[Run.from_dict(item) for item in data.get("data") or []])


@dataclass
class RunRequest:
    assistant_id: str
    model: str = ""
    instructions: str = ""
    additional_instructions: str = ""
    additional_messages: list[ThreadMessage] = field(default_factory=list)
    tools: list[dict[str, Any]] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    temperature: float | None = None
    top_p: float | None = None
    max_prompt_tokens: int = 0
    max_completion_tokens: int = 0
    truncation_strategy: ThreadTruncationStrategy | None = None
    tool_choice: Any = None
    response_format: Any = None
    parallel_tool_calls: Any = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"assistant_id": self.assistant_id}
        data.update(
            omit_empty(
                {
                    "model": self.model,
                    "instructions": self.instructions,
                    "additional_instructions": self.additional_instructions,
                    "additional_messages": [m.to_dict() for m in self.additional_messages],
                    "tools": self.tools,
                    "metadata": self.metadata,
                    "max_prompt_tokens": self.max_prompt_tokens,
                    "max_completion_tokens": self.max_completion_tokens,
                }
            )
        )
        optional = {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "truncation_strategy": self.truncation_strategy,
            "tool_choice": self.tool_choice,
            "response_format": self.response_format,
            "parallel_tool_calls": self.parallel_tool_calls,
        }
        data.update({key: _encode(value) for key, value in optional.items() if value is not None})
        return data


@dataclass
class RunModifyRequest:
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return omit_empty({"metadata": self.metadata})


@dataclass
class ToolOutput:
    tool_call_id: str = ""
    output: Any = None


@dataclass
class SubmitToolOutputsRequest:
    tool_outputs: list[ToolOutput] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tool_outputs": [
                {"tool_call_id": item.tool_call_id, "output": _encode(item.output)}
                for item in self.tool_outputs
            ]
        }


@dataclass
class CreateThreadAndRunRequest:
    run: RunRequest
    thread: ThreadRequest = field(default_factory=ThreadRequest)

    def to_dict(self) -> dict[str, Any]:
        data = self.run.to_dict()
        data["thread"] = self.thread.to_dict()
        return data


@dataclass
class StepDetailsMessageCreation:
    message_id: str = ""


@dataclass
class StepDetails:
    type: RunStepType | str = ""
    message_creation: StepDetailsMessageCreation | None = None
    tool_calls: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class RunStep:
    id: str = ""
    object: str = ""
    created_at: int = 0
    assistant_id: str = ""
    thread_id: str = ""
    run_id: str = ""
    type: RunStepType | str = ""
    status: RunStepStatus | str = ""
    step_details: StepDetails = field(default_factory=StepDetails)
    last_error: RunLastError | None = None
    expired_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStep:
        details = data.get("step_details") or {}
        creation = details.get("message_creation")
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            assistant_id=data.get("assistant_id", ""),
            thread_id=data.get("thread_id", ""),
            run_id=data.get("run_id", ""),
            type=_enum_or_str(RunStepType, data.get("type", "")),
            status=_enum_or_str(RunStepStatus, data.get("status", "")),
            step_details=StepDetails(
                type=_enum_or_str(RunStepType, details.get("type", "")),
                message_creation=None
                if creation is None
                else StepDetailsMessageCreation(message_id=creation.get("message_id", "")),
                tool_calls=list(details.get("tool_calls") or []),
            ),
            last_error=_last_error(data.get("last_error")),
            expired_at=_optional_int(data, "expired_at"),
            cancelled_at=_optional_int(data, "cancelled_at"),
            failed_at=_optional_int(data, "failed_at"),
            completed_at=_optional_int(data, "completed_at"),
            metadata=data.get("metadata"),
        )


@dataclass
class RunStepList:
    run_steps: list[RunStep] = field(default_factory=list)
    first_id: str = ""
    last_id: str = ""
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RunStepList:
        return cls(
            run_steps=[RunStep.from_dict(item) for item in data.get("data") or []],
            first_id=data.get("first_id") or "",
            last_id=data.get("last_id") or "",
            has_more=bool(data.get("has_more", False)),
        )


def _runs_path(thread_id: str) -> str:
    return f"/threads/{thread_id}/runs"


def create_run_request(thread_id: str, request: RunRequest) -> ApiRequest:
    """Describe the call that starts a run on a thread."""
    return ApiRequest("POST", _runs_path(thread_id), body=request.to_dict(), beta_assistants=True)


def retrieve_run_request(thread_id: str, run_id: str) -> ApiRequest:
    """Describe the call that retrieves a run."""
    return ApiRequest("GET", f"{_runs_path(thread_id)}/{run_id}", beta_assistants=True)


def modify_run_request(thread_id: str, run_id: str, request: RunModifyRequest) -> ApiRequest:
    """Describe the call that modifies a run."""
    return ApiRequest(
        "POST", f"{_runs_path(thread_id)}/{run_id}", body=request.to_dict(), beta_assistants=True
    )


def list_runs_request(thread_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the call that lists the runs of a thread."""
    return ApiRequest(
        "GET", _runs_path(thread_id) + pagination.query_string(), beta_assistants=True
    )


def submit_tool_outputs_request(
    thread_id: str, run_id: str, request: SubmitToolOutputsRequest
) -> ApiRequest:
    """Describe the call that submits tool outputs to a run."""
    return ApiRequest(
        "POST",
        f"{_runs_path(thread_id)}/{run_id}/submit_tool_outputs",
        body=request.to_dict(),
        beta_assistants=True,
    )


def cancel_run_request(thread_id: str, run_id: str) -> ApiRequest:
    """Describe the call that cancels a run."""
    return ApiRequest("POST", f"{_runs_path(thread_id)}/{run_id}/cancel", beta_assistants=True)


def create_thread_and_run_request(request: CreateThreadAndRunRequest) -> ApiRequest:
    """Describe the call that creates a thread and starts a run on it."""
    return ApiRequest("POST", "/threads/runs", body=request.to_dict(), beta_assistants=True)


def retrieve_run_step_request(thread_id: str, run_id: str, step_id: str) -> ApiRequest:
    """Describe the call that retrieves one step of a run."""
    return ApiRequest(
        "GET", f"{_runs_path(thread_id)}/{run_id}/steps/{step_id}", beta_assistants=True
    )


def list_run_steps_request(thread_id: str, run_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the call that lists the steps of a run."""
    return ApiRequest(
        "GET",
        f"{_runs_path(thread_id)}/{run_id}/steps" + pagination.query_string(),
        beta_assistants=True,
    )