import json

from llmgate.thread import (
    ChunkingStrategy,
    ChunkingStrategyType,
    CodeInterpreterToolResources,
    CodeInterpreterToolResourcesRequest,
    FileSearchToolResources,
    FileSearchToolResourcesRequest,
    ModifyThreadRequest,
    StaticChunkingStrategy,
    Thread,
    ThreadAttachment,
    ThreadAttachmentTool,
    ThreadDeleteResponse,
    ThreadMessage,
    ThreadMessageRole,
    ThreadRequest,
    ToolResources,
    ToolResourcesRequest,
    VectorStoreToolResources,
    create_thread_request,
    delete_thread_request,
    modify_thread_request,
    retrieve_thread_request,
)

THREAD_ID = "thread_abc123"


def test_create_thread_request():
    call = create_thread_request(
        ThreadRequest(messages=[ThreadMessage(role=ThreadMessageRole.USER, content="Hello, World!")])
    )
    assert call.method == "POST"
    assert call.path == "/threads"
    assert call.beta_assistants is True
    assert call.body == {"messages": [{"role": "user", "content": "Hello, World!"}]}


def test_create_thread_json_body():
    call = create_thread_request(ThreadRequest(messages=[ThreadMessage("user", "Hi")]))
    assert json.loads(call.json_body()) == {"messages": [{"role": "user", "content": "Hi"}]}


def test_retrieve_thread_request():
    call = retrieve_thread_request(THREAD_ID)
    assert (call.method, call.path, call.body) == ("GET", "/threads/thread_abc123", None)
    assert call.beta_assistants is True


def test_modify_thread_request():
    call = modify_thread_request(THREAD_ID, ModifyThreadRequest(metadata={"key": "value"}))
    assert call.method == "POST"
    assert call.path == "/threads/thread_abc123"
    assert call.body == {"metadata": {"key": "value"}}


def test_modify_thread_request_keeps_null_metadata():
    assert ModifyThreadRequest().to_dict() == {"metadata": None}


def test_delete_thread_request():
    call = delete_thread_request(THREAD_ID)
    assert (call.method, call.path) == ("DELETE", "/threads/thread_abc123")


def test_thread_from_mock_response():
    thread = Thread.from_dict(
        {"id": THREAD_ID, "object": "thread", "created_at": 1234567890, "metadata": {"key": "value"}}
    )
    assert thread.id == THREAD_ID
    assert thread.object == "thread"
    assert thread.created_at == 1234567890
    assert thread.metadata == {"key": "value"}
    assert thread.tool_resources == ToolResources()


def test_thread_delete_response():
    raw = '{"id": "thread_abc123", "object": "thread.deleted", "deleted": true}'
    response = ThreadDeleteResponse.from_dict(json.loads(raw))
    assert response == ThreadDeleteResponse(id=THREAD_ID, object="thread.deleted", deleted=True)


def test_tool_resources_round_trip():
    resources = ToolResources(
        code_interpreter=CodeInterpreterToolResources(file_ids=["file-1"]),
        file_search=FileSearchToolResources(vector_store_ids=["vs_1", "vs_2"]),
    )
    data = resources.to_dict()
    assert data == {
        "code_interpreter": {"file_ids": ["file-1"]},
        "file_search": {"vector_store_ids": ["vs_1", "vs_2"]},
    }
    assert ToolResources.from_dict(data) == resources


def test_tool_resources_request_with_static_chunking():
    request = ToolResourcesRequest(
        code_interpreter=CodeInterpreterToolResourcesRequest(),
        file_search=FileSearchToolResourcesRequest(
            vector_stores=[
                VectorStoreToolResources(
                    file_ids=["file-1"],
                    chunking_strategy=ChunkingStrategy(
                        type=ChunkingStrategyType.STATIC,
                        static=StaticChunkingStrategy(max_chunk_size_tokens=800, chunk_overlap_tokens=400),
                    ),
                )
            ]
        ),
    )
    assert request.to_dict() == {
        "code_interpreter": {},
        "file_search": {
            "vector_stores": [
                {
                    "file_ids": ["file-1"],
                    "chunking_strategy": {
                        "type": "static",
                        "static": {"max_chunk_size_tokens": 800, "chunk_overlap_tokens": 400},
                    },
                }
            ]
        },
    }


def test_thread_message_with_attachment():
    message = ThreadMessage(
        role=ThreadMessageRole.ASSISTANT,
        content="see file",
        attachments=[ThreadAttachment(file_id="file-9", tools=[ThreadAttachmentTool(type="file_search")])],
        metadata={"a": 1},
    )
    assert message.to_dict() == {
        "role": "assistant",
        "content": "see file",
        "attachments": [{"file_id": "file-9", "tools": [{"type": "file_search"}]}],
        "metadata": {"a": 1},
    }


def test_thread_request_empty_is_empty_object():
    assert ThreadRequest().to_dict() == {}