"""Vector stores, their files and file batches: models and call descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from llmgate.endpoint import ApiRequest, Pagination, omit_empty

VECTOR_STORES_SUFFIX = "/vector_stores"
VECTOR_STORES_FILES_SUFFIX = "/files"
VECTOR_STORES_FILE_BATCHES_SUFFIX = "/file_batches"


@dataclass
class VectorStoreFileCount:
    in_progress: int = 0
    completed: int = 0
    failed: int = 0
    cancelled: int = 0
    total: int = 0


@dataclass
class VectorStoreExpires:
    anchor: str = ""
    days: int = 0


def _file_count(data: Mapping[str, Any] | None) -> VectorStoreFileCount:
    data = data or {}
    return VectorStoreFileCount(
        in_progress=int(data.get("in_progress") or 0),
        completed=int(data.get("completed") or 0),
        failed=int(data.get("failed") or 0),
        cancelled=int(data.get("cancelled") or 0),
        total=int(data.get("total") or 0),
    )


def _expires(data: Mapping[str, Any] | None) -> VectorStoreExpires | None:
    if data is None:
        return None
    return VectorStoreExpires(anchor=data.get("anchor", ""), days=int(data.get("days") or 0))


def _expires_to_dict(expires: VectorStoreExpires) -> dict[str, Any]:
    return {"anchor": expires.anchor, "days": expires.days}


def _optional_int(data: Mapping[str, Any], key: str) -> int | None:
    value = data.get(key)
    return None if value is None else int(value)


@dataclass
class VectorStore:
    id: str = ""
    object: str = ""
    created_at: int = 0
    name: str = ""
    usage_bytes: int = 0
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)
    status: str = ""
    expires_after: VectorStoreExpires | None = None
    expires_at: int | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStore:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            name=data.get("name", ""),
            usage_bytes=int(data.get("usage_bytes") or 0),
            file_counts=_file_count(data.get("file_counts")),
            status=data.get("status", ""),
            expires_after=_expires(data.get("expires_after")),
            expires_at=_optional_int(data, "expires_at"),
            metadata=data.get("metadata"),
        )


@dataclass
class VectorStoreRequest:
    """Parameters for creating or modifying a vector store."""

    name: str = ""
    file_ids: list[str] = field(default_factory=list)
    expires_after: VectorStoreExpires | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = omit_empty({"name": self.name, "file_ids": self.file_ids})
        if self.expires_after is not None:
            data["expires_after"] = _expires_to_dict(self.expires_after)
        data.update(omit_empty({"metadata": self.metadata}))
        return data


@dataclass
class VectorStoresList:
    vector_stores: list[VectorStore] = field(default_factory=list)
    last_id: str | None = None
    first_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoresList:
        return cls(
            vector_stores=[VectorStore.from_dict(item) for item in data.get("data") or []],
            last_id=data.get("last_id"),
            first_id=data.get("first_id"),
            has_more=bool(data.get("has_more", False)),
        )


@dataclass
class VectorStoreDeleteResponse:
    id: str = ""
    object: str = ""
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreDeleteResponse:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            deleted=bool(data.get("deleted", False)),
        )


@dataclass
class VectorStoreFile:
    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    usage_bytes: int = 0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFile:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            vector_store_id=data.get("vector_store_id", ""),
            usage_bytes=int(data.get("usage_bytes") or 0),
            status=data.get("status", ""),
        )


@dataclass
class VectorStoreFileRequest:
    file_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"file_id": self.file_id}


@dataclass
class VectorStoreFilesList:
    vector_store_files: list[VectorStoreFile] = field(default_factory=list)
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFilesList:
        return cls(
            vector_store_files=[VectorStoreFile.from_dict(item) for item in data.get("data") or []],
            first_id=data.get("first_id"),
            last_id=data.get("last_id"),
            has_more=bool(data.get("has_more", False)),
        )


@dataclass
class VectorStoreFileBatch:
    id: str = ""
    object: str = ""
    created_at: int = 0
    vector_store_id: str = ""
    status: str = ""
    file_counts: VectorStoreFileCount = field(default_factory=VectorStoreFileCount)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> VectorStoreFileBatch:
        return cls(
            id=data.get("id", ""),
            object=data.get("object", ""),
            created_at=int(data.get("created_at") or 0),
            vector_store_id=data.get("vector_store_id", ""),
            status=data.get("status", ""),
            file_counts=_file_count(data.get("file_counts")),
        )


@dataclass
class VectorStoreFileBatchRequest:
    file_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"file_ids": list(self.file_ids)}


def _store_path(vector_store_id: str) -> str:
    return f"{VECTOR_STORES_SUFFIX}/{vector_store_id}"


def _files_path(vector_store_id: str) -> str:
    return _store_path(vector_store_id) + VECTOR_STORES_FILES_SUFFIX


def _batches_path(vector_store_id: str) -> str:
    return _store_path(vector_store_id) + VECTOR_STORES_FILE_BATCHES_SUFFIX


def create_vector_store_request(request: VectorStoreRequest) -> ApiRequest:
    """Describe the call that creates a vector store."""
    return ApiRequest("POST", VECTOR_STORES_SUFFIX, body=request.to_dict(), beta_assistants=True)


def retrieve_vector_store_request(vector_store_id: str) -> ApiRequest:
    """Describe the call that retrieves a vector store."""
    return ApiRequest("GET", _store_path(vector_store_id), beta_assistants=True)


def modify_vector_store_request(vector_store_id: str, request: VectorStoreRequest) -> ApiRequest:
    """Describe the call that modifies a vector store."""
    return ApiRequest(
        "POST", _store_path(vector_store_id), body=request.to_dict(), beta_assistants=True
    )


def delete_vector_store_request(vector_store_id: str) -> ApiRequest:
    """Describe the call that deletes a vector store."""
    return ApiRequest("DELETE", _store_path(vector_store_id), beta_assistants=True)


def list_vector_stores_request(pagination: Pagination) -> ApiRequest:
    """Describe the call that lists vector stores."""
    return ApiRequest(
        "GET", VECTOR_STORES_SUFFIX + pagination.query_string(), beta_assistants=True
    )


def create_vector_store_file_request(
    vector_store_id: str, request: VectorStoreFileRequest
) -> ApiRequest:
    """Describe the call that attaches a file to a vector store."""
    return ApiRequest(
        "POST", _files_path(vector_store_id), body=request.to_dict(), beta_assistants=True
    )


def retrieve_vector_store_file_request(vector_store_id: str, file_id: str) -> ApiRequest:
    """Describe the call that retrieves a vector store file."""
    return ApiRequest("GET", f"{_files_path(vector_store_id)}/{file_id}", beta_assistants=True)


def delete_vector_store_file_request(vector_store_id: str, file_id: str) -> ApiRequest:
    """Describe the call that removes a file from a vector store."""
    return ApiRequest("DELETE", f"{_files_path(vector_store_id)}/{file_id}", beta_assistants=True)


def list_vector_store_files_request(vector_store_id: str, pagination: Pagination) -> ApiRequest:
    """Describe the call that lists the files of a vector store."""
    return ApiRequest(
        "GET", _files_path(vector_store_id) + pagination.query_string(), beta_assistants=True
    )


def create_vector_store_file_batch_request(
    vector_store_id: str, request: VectorStoreFileBatchRequest
) -> ApiRequest:
    """Describe the call that creates a file batch in a vector store."""
    return ApiRequest(
        "POST", _batches_path(vector_store_id), body=request.to_dict(), beta_assistants=True
    )


def retrieve_vector_store_file_batch_request(vector_store_id: str, batch_id: str) -> ApiRequest:
    """Describe the call that retrieves a file batch."""
    return ApiRequest(
        "GET", f"{_batches_path(vector_store_id)}/{batch_id}", beta_assistants=True
    )


def cancel_vector_store_file_batch_request(vector_store_id: str, batch_id: str) -> ApiRequest:
    """Describe the call that cancels a file batch."""
    return ApiRequest(
        "POST", f"{_batches_path(vector_store_id)}/{batch_id}/cancel", beta_assistants=True
    )


def list_vector_store_files_in_batch_request(
    vector_store_id: str, batch_id: str, pagination: Pagination
) -> ApiRequest:
    """Describe the call that lists the files of a file batch."""
    return ApiRequest(
        "GET",
        f"{_batches_path(vector_store_id)}/{batch_id}/files" + pagination.query_string(),
        beta_assistants=True,
    )