import json

import pytest

from llmgate.endpoint import Pagination
from llmgate.vector_store import (
    VectorStore,
    VectorStoreDeleteResponse,
    VectorStoreExpires,
    VectorStoreFile,
    VectorStoreFileBatch,
    VectorStoreFileBatchRequest,
    VectorStoreFileCount,
    VectorStoreFileRequest,
    VectorStoreFilesList,
    VectorStoreRequest,
    VectorStoresList,
    cancel_vector_store_file_batch_request,
    create_vector_store_file_batch_request,
    create_vector_store_file_request,
    create_vector_store_request,
    delete_vector_store_file_request,
    delete_vector_store_request,
    list_vector_store_files_in_batch_request,
    list_vector_store_files_request,
    list_vector_stores_request,
    modify_vector_store_request,
    retrieve_vector_store_file_batch_request,
    retrieve_vector_store_file_request,
    retrieve_vector_store_request,
)

VECTOR_STORE_ID = "vs_abc123"
VECTOR_STORE_NAME = "TestStore"
FILE_ID = "file-abc123"
BATCH_ID = "vsfb_abc123"
PAGINATION = Pagination(limit=20, order="desc", after="vs_abc122", before="vs_abc123")
QUERY = "?after=vs_abc122&before=vs_abc123&limit=20&order=desc"


def test_create_vector_store():
    call = create_vector_store_request(VectorStoreRequest(name=VECTOR_STORE_NAME))
    assert call.method == "POST"
    assert call.path == "/vector_stores"
    assert call.body == {"name": VECTOR_STORE_NAME}
    assert call.beta_assistants is True


def test_retrieve_vector_store():
    call = retrieve_vector_store_request(VECTOR_STORE_ID)
    assert (call.method, call.path, call.body) == ("GET", "/vector_stores/vs_abc123", None)
    assert call.beta_assistants is True


def test_delete_vector_store():
    call = delete_vector_store_request(VECTOR_STORE_ID)
    assert (call.method, call.path) == ("DELETE", "/vector_stores/vs_abc123")


def test_list_vector_stores():
    call = list_vector_stores_request(PAGINATION)
    assert call.method == "GET"
    assert call.path == "/vector_stores" + QUERY


def test_list_vector_stores_without_pagination():
    assert list_vector_stores_request(Pagination()).path == "/vector_stores"


def test_create_vector_store_file():
    call = create_vector_store_file_request(VECTOR_STORE_ID, VectorStoreFileRequest(file_id=FILE_ID))
    assert (call.method, call.path) == ("POST", "/vector_stores/vs_abc123/files")
    assert call.body == {"file_id": FILE_ID}


def test_list_vector_store_files():
    call = list_vector_store_files_request(VECTOR_STORE_ID, PAGINATION)
    assert (call.method, call.path) == ("GET", "/vector_stores/vs_abc123/files" + QUERY)


def test_retrieve_vector_store_file():
    call = retrieve_vector_store_file_request(VECTOR_STORE_ID, FILE_ID)
    assert (call.method, call.path) == ("GET", "/vector_stores/vs_abc123/files/file-abc123")


def test_delete_vector_store_file():
    call = delete_vector_store_file_request(VECTOR_STORE_ID, FILE_ID)
    assert (call.method, call.path) == ("DELETE", "/vector_stores/vs_abc123/files/file-abc123")
    assert call.body is None


def test_modify_vector_store():
    call = modify_vector_store_request(VECTOR_STORE_ID, VectorStoreRequest(name=VECTOR_STORE_NAME))
    assert (call.method, call.path) == ("POST", "/vector_stores/vs_abc123")
    assert call.body == {"name": VECTOR_STORE_NAME}


def test_create_vector_store_file_batch():
    call = create_vector_store_file_batch_request(
        VECTOR_STORE_ID, VectorStoreFileBatchRequest(file_ids=[FILE_ID])
    )
    assert (call.method, call.path) == ("POST", "/vector_stores/vs_abc123/file_batches")
    assert call.body == {"file_ids": [FILE_ID]}


def test_retrieve_vector_store_file_batch():
    call = retrieve_vector_store_file_batch_request(VECTOR_STORE_ID, BATCH_ID)
    assert (call.method, call.path) == ("GET", "/vector_stores/vs_abc123/file_batches/vsfb_abc123")


def test_list_vector_store_files_in_batch():
    call = list_vector_store_files_in_batch_request(VECTOR_STORE_ID, BATCH_ID, PAGINATION)
    assert call.method == "GET"
    assert call.path == "/vector_stores/vs_abc123/file_batches/vsfb_abc123/files" + QUERY


def test_cancel_vector_store_file_batch():
    call = cancel_vector_store_file_batch_request(VECTOR_STORE_ID, BATCH_ID)
    assert (call.method, call.path) == (
        "POST",
        "/vector_stores/vs_abc123/file_batches/vsfb_abc123/cancel",
    )
    assert call.body is None


def test_vector_store_request_omits_empty_fields():
    assert VectorStoreRequest().to_dict() == {}


def test_vector_store_request_full():
    request = VectorStoreRequest(
        name="docs",
        file_ids=["f1", "f2"],
        expires_after=VectorStoreExpires(anchor="last_active_at", days=7),
        metadata={"key": "value"},
    )
    assert request.to_dict() == {
        "name": "docs",
        "file_ids": ["f1", "f2"],
        "expires_after": {"anchor": "last_active_at", "days": 7},
        "metadata": {"key": "value"},
    }


def test_file_batch_request_keeps_empty_list():
    assert VectorStoreFileBatchRequest().to_dict() == {"file_ids": []}


def test_json_body_of_file_request():
    call = create_vector_store_file_request(VECTOR_STORE_ID, VectorStoreFileRequest(file_id=FILE_ID))
    assert json.loads(call.json_body()) == {"file_id": FILE_ID}


def test_vector_store_from_dict():
    store = VectorStore.from_dict(
        {
            "id": VECTOR_STORE_ID,
            "object": "vector_store",
            "created_at": 1234567890,
            "name": VECTOR_STORE_NAME,
            "usage_bytes": 42,
            "file_counts": {"in_progress": 1, "completed": 2, "failed": 3, "cancelled": 4, "total": 10},
            "status": "completed",
            "expires_after": {"anchor": "last_active_at", "days": 3},
            "expires_at": 1234570000,
            "metadata": {"key": "value"},
        }
    )
    assert store.id == VECTOR_STORE_ID
    assert store.name == VECTOR_STORE_NAME
    assert store.created_at == 1234567890
    assert store.usage_bytes == 42
    assert store.file_counts == VectorStoreFileCount(1, 2, 3, 4, 10)
    assert store.expires_after == VectorStoreExpires("last_active_at", 3)
    assert store.expires_at == 1234570000
    assert store.metadata == {"key": "value"}


def test_vector_store_from_dict_with_nulls():
    store = VectorStore.from_dict({"id": VECTOR_STORE_ID, "expires_after": None, "expires_at": None})
    assert store.expires_after is None
    assert store.expires_at is None
    assert store.file_counts == VectorStoreFileCount()


def test_vector_stores_list_from_dict():
    listing = VectorStoresList.from_dict(
        {
            "data": [
                {"id": VECTOR_STORE_ID, "object": "vector_store", "created_at": 1234567890, "name": VECTOR_STORE_NAME}
            ],
            "last_id": VECTOR_STORE_ID,
            "first_id": VECTOR_STORE_ID,
            "has_more": False,
        }
    )
    assert [store.name for store in listing.vector_stores] == [VECTOR_STORE_NAME]
    assert listing.first_id == VECTOR_STORE_ID
    assert listing.last_id == VECTOR_STORE_ID
    assert listing.has_more is False


def test_vector_stores_list_missing_ids():
    listing = VectorStoresList.from_dict({"data": None, "has_more": True})
    assert listing.vector_stores == []
    assert listing.first_id is None
    assert listing.has_more is True


def test_delete_response_from_dict():
    response = VectorStoreDeleteResponse.from_dict(
        {"id": "vectorstore_abc123", "object": "vector_store.deleted", "deleted": True}
    )
    assert response == VectorStoreDeleteResponse("vectorstore_abc123", "vector_store.deleted", True)


def test_vector_store_file_from_dict():
    item = VectorStoreFile.from_dict(
        {
            "id": FILE_ID,
            "object": "vector_store.file",
            "created_at": 1234567890,
            "vector_store_id": VECTOR_STORE_ID,
            "status": "completed",
        }
    )
    assert item == VectorStoreFile(FILE_ID, "vector_store.file", 1234567890, VECTOR_STORE_ID, 0, "completed")


def test_vector_store_files_list_from_dict():
    listing = VectorStoreFilesList.from_dict(
        {"data": [{"id": FILE_ID, "vector_store_id": VECTOR_STORE_ID}], "first_id": FILE_ID, "last_id": None}
    )
    assert [item.id for item in listing.vector_store_files] == [FILE_ID]
    assert listing.first_id == FILE_ID
    assert listing.last_id is None


@pytest.mark.parametrize(
    "status, counts",
    [
        ("completed", {"completed": 1}),
        ("cancelling", {"in_progress": 0, "completed": 1, "failed": 0, "cancelled": 0, "total": 0}),
    ],
)
def test_file_batch_from_dict(status, counts):
    batch = VectorStoreFileBatch.from_dict(
        {
            "id": BATCH_ID,
            "object": "vector_store.file_batch",
            "created_at": 1234567890,
            "vector_store_id": VECTOR_STORE_ID,
            "status": status,
            "file_counts": counts,
        }
    )
    assert batch.id == BATCH_ID
    assert batch.status == status
    assert batch.file_counts.completed == 1
    assert batch.file_counts.total == 0
    assert batch.vector_store_id == VECTOR_STORE_ID