"""Assistant threads: request and response models and call descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from llmgate.endpoint import ApiRequest, omit_empty

THREADS_SUFFIX = "/threads"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class ThreadMessageRole(str, Enum):
    ASSISTANT = "assistant"
    USER = "user"


class ChunkingStrategyType(str, Enum):
    AUTO = "auto"
    STATIC = "static"


@dataclass
class StaticChunkingStrategy:
    max_chunk_size_tokens: int = 0
    chunk_overlap_tokens: int = 0


@dataclass
class ChunkingStrategy:
    type: ChunkingStrategyType | str = ChunkingStrategyType.AUTO
    static: StaticChunkingStrategy | None = None


@dataclass
class VectorStoreToolResources:
    file_ids: list[str] = field(default_factory=list)
    chunking_strategy: ChunkingStrategy | None = None
    metadata: dict[str, Any] | None = None


@dataclass
class CodeInterpreterToolResources:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class FileSearchToolResources:
    vector_store_ids: list[str] = field(default_factory=list)


def _chunking_to_dict(strategy: ChunkingStrategy) -> dict[str, Any]:
    data: dict[str, Any] = {"type": _plain(strategy.type)}
    if strategy.static is not None:
        data["static"] = {
            "max_chunk_size_tokens": strategy.static.max_chunk_size_tokens,
            "chunk_overlap_tokens": strategy.static.chunk_overlap_tokens,
        }
    return data


def _vector_store_to_dict(store: VectorStoreToolResources) -> dict[str, Any]:
    data = omit_empty({"file_ids": store.file_ids, "metadata": store.metadata})
    if store.chunking_strategy is not None:
        data["chunking_strategy"] = _chunking_to_dict(store.chunking_strategy)
    return data


@dataclass
class ToolResources:
    code_interpreter: CodeInterpreterToolResources | None = None
    file_search: FileSearchToolResources | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.code_interpreter is not None:
            data["code_interpreter"] = omit_empty({"file_ids": self.code_interpreter.file_ids})
        if self.file_search is not None:
            data["file_search"] = omit_empty({"vector_store_ids": self.file_search.vector_store_ids})
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolResources:
        code = data.get("code_interpreter")
        search = data.get("file_search")
        return cls(
            code_interpreter=None
            if code is None
            else CodeInterpreterToolResources(file_ids=list(code.get("file_ids") or [])),
            file_search=None
            if search is None
            else FileSearchToolResources(vector_store_ids=list(search.get("vector_store_ids") or [])),
        )


@dataclass
class CodeInterpreterToolResourcesRequest:
    file_ids: list[str] = field(default_factory=list)


@dataclass
class FileSearchToolResourcesRequest:
    vector_store_ids: list[str] = field(default_factory=list)
    vector_stores: list[VectorStoreToolResources] = field(default_factory=list)


@dataclass
class ToolResourcesRequest:
    code_interpreter: CodeInterpreterToolResourcesRequest | None = None
    file_search: FileSearchToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.code_interpreter is not None:
            data["code_interpreter"] = omit_empty({"file_ids": self.code_interpreter.file_ids})
        if self.file_search is not None:
            data["file_search"] = omit_empty(
                {
                    "vector_store_ids": self.file_search.vector_store_ids,
                    "vector_stores": [_vector_store_to_dict(s) for s in self.file_search.vector_stores],
                }
            )
        return data


@dataclass
class ThreadAttachmentTool:
    type: str = ""


@dataclass
class ThreadAttachment:
    file_id: str = ""
    tools: list[ThreadAttachmentTool] = field(default_factory=list)


@dataclass
class ThreadMessage:
    role: ThreadMessageRole | str
    content: str
    file_ids: list[str] = field(default_factory=list)
    attachments: list[ThreadAttachment] = field(default_factory=list)
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"role": _plain(self.role), "content": self.content}
        attachments = [
            {"file_id": item.file_id, "tools": [{"type": tool.type} for tool in item.tools]}
            for item in self.attachments
        ]
        data.update(
            omit_empty({"file_ids": self.file_ids, "attachments": attachments, "metadata": self.metadata})
        )
        return data


@dataclass
class ThreadRequest:
    messages: list[ThreadMessage] = field(default_factory=list)
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResourcesRequest | None = None

    def to_dict(self) -> dict[str, Any]:
        data = omit_empty(
            {"messages": [message.to_dict() for message in self.messages], "metadata": self.metadata}
        )
        if self.tool_resources is not None:
            data["tool_resources"] = self.tool_resources.to_dict()
        return data


@dataclass
class ModifyThreadRequest:
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"metadata": self.metadata}
        if self.tool_resources is not None:
            data["tool_resources"] = self.tool_resources.to_dict()
        return data


@dataclass
class Thread:
    id: str = ""
    object: str = ""
    created_at: int = 0
    metadata: dict[str, Any] | None = None
    tool_resources: ToolResources = field(default_factory=ToolResources)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Thread:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            metadata=data.get("metadata"),
            tool_resources=ToolResources.from_dict(data.get("tool_resources") or {}),
        )


@dataclass
class ThreadDeleteResponse:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThreadDeleteResponse:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            deleted=bool(data.get("deleted", False)),
        )


def create_thread_request(request: ThreadRequest) -> ApiRequest:
    """Describe the call that creates a thread."""
    return ApiRequest("POST", THREADS_SUFFIX, body=request.to_dict(), beta_assistants=True)


def retrieve_thread_request(thread_id: str) -> ApiRequest:
    """Describe the call that retrieves a thread."""
    return ApiRequest("GET", f"{THREADS_SUFFIX}/{thread_id}", beta_assistants=True)


def modify_thread_request(thread_id: str, request: ModifyThreadRequest) -> ApiRequest:
    """Describe the call that modifies a thread."""
    return ApiRequest(
        "POST", f"{THREADS_SUFFIX}/{thread_id}", body=request.to_dict(), beta_assistants=True
    )


def delete_thread_request(thread_id: str) -> ApiRequest:
    """Describe the call that deletes a thread."""
    return ApiRequest("DELETE", f"{THREADS_SUFFIX}/{thread_id}", beta_assistants=True)