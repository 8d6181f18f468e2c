# llmgate

`llmgate` describes the assistants side of an LLM HTTP API in plain Python.
It covers threads, runs and run steps, vector stores with their files and file
batches, and moderation and text-to-speech requests. It also has a reader for
the server-sent-event streams that completion endpoints send back, and a parser
for rate-limit headers.

It needs Python 3.10 or later and has no runtime dependencies.

## What the package does not do

`llmgate` sends nothing over the network, so the following are left to you:

- **No HTTP client.** You open connections, send requests and read responses
  with an HTTP library of your choice.
- **No base URL.** Paths in an `ApiRequest` are relative to the service's base
  URL, and you prepend it yourself.
- **No authentication headers.** You add these yourself.
- **No retries.** These are also your responsibility.

## Modules

| Module | Contents |
| --- | --- |
| `llmgate.endpoint` | `ApiRequest`, `Pagination`, `omit_empty` |
| `llmgate.thread` | thread models and `create_thread_request`, `retrieve_thread_request`, `modify_thread_request`, `delete_thread_request` |
| `llmgate.run` | run and run step models, status enums, and the run `*_request` functions |
| `llmgate.vector_store` | vector store, file and file batch models, and their `*_request` functions |
| `llmgate.moderation` | moderation models, `validate_moderation_model`, `build_moderation_request` |
| `llmgate.speech` | `CreateSpeechRequest`, model, voice and format enums, and `build_speech_request` |
| `llmgate.reasoning` | `ReasoningValidator` and its errors |
| `llmgate.ratelimit` | `RateLimitHeaders`, `ResetTime`, `parse_duration` |
| `llmgate.stream` | `StreamReader` and its errors |

## Describing a call

Every `*_request` function returns a frozen `ApiRequest` with these fields:

- `method`: the HTTP method, such as `"GET"` or `"POST"`.
- `path`: the path, with any query string included.
- `body`: a JSON-ready value, or `None` when the call sends no body.
- `model`: the model name, where the call carries one.
- `content_type`: the content type, where the call sets one.
- `beta_assistants`: `True` for the assistants endpoints (threads, runs and
  vector stores).

`json_body()` serialises the body as compact UTF-8 JSON, or returns `None`
when there is no body.

The example below creates a thread with one user message:

```python
from llmgate.thread import ThreadMessage, ThreadMessageRole, ThreadRequest, create_thread_request

call = create_thread_request(
    ThreadRequest(messages=[ThreadMessage(role=ThreadMessageRole.USER, content="Hello, World!")])
)
call.method       # "POST"
call.path         # "/threads"
call.json_body()  # b'{"messages":[{"role":"user","content":"Hello, World!"}]}'
```

Request models leave unset optional fields out of the body. `omit_empty`
applies the same rule to any mapping: it drops entries whose value is `None` or
an empty string, number, list or dict.

List endpoints take a `Pagination` with the fields `limit`, `order`, `after`
and `before`. `query_string()` encodes the fields that are set, sorted by key:

```python
from llmgate.endpoint import Pagination
from llmgate.run import list_runs_request

call = list_runs_request("thread_abc123", Pagination(limit=20, order="desc"))
call.path  # "/threads/thread_abc123/runs?limit=20&order=desc"
```

## Reading replies

Each response model has a `from_dict` class method that turns a decoded JSON
reply into a dataclass:

```python
from llmgate.run import RunList, RunStatus

runs = RunList.from_dict(reply_json)
runs.runs[0].status == RunStatus.QUEUED
```

Enum-valued fields hold the enum member when the value is known. When the
value is not known, they hold the raw string instead.

The response models are:

- **Threads:** `Thread`, `ThreadDeleteResponse`.
- **Runs:** `Run`, `RunList`, `RunStep`, `RunStepList`.
- **Vector stores:** `VectorStore`, `VectorStoresList`,
  `VectorStoreDeleteResponse`, `VectorStoreFile`, `VectorStoreFilesList`,
  `VectorStoreFileBatch`.
- **Moderation:** `ModerationResponse`.

## Checks before sending

### Moderation models

`validate_moderation_model(model)` raises `ModerationInvalidModelError`, a
`ValueError`, for a model that is not a supported moderation model. The
supported models are:

- `omni-moderation-latest`
- `omni-moderation-2024-09-26`
- `text-moderation-stable`
- `text-moderation-latest`

An empty model is allowed. `build_moderation_request` runs the same check
before it builds the call.

### Reasoning models

`ReasoningValidator().validate(request)` checks requests whose model starts
with `o1` or `o3`. The request may be a mapping or an object with attributes.
The validator raises a subclass of `ReasoningModelError`:

- `MaxTokensDeprecatedError` when `max_tokens` is greater than 0.
- `LogprobsNotSupportedError` when `logprobs` is set.
- `FixedParameterError` when `temperature`, `top_p` or `n` is positive but not
  1, or when `presence_penalty` or `frequency_penalty` is positive.

Requests for other models pass unchecked.

## Speech

```python
from llmgate.speech import CreateSpeechRequest, SpeechModel, SpeechVoice, build_speech_request

call = build_speech_request(
    CreateSpeechRequest(model=SpeechModel.TTS_1, input="Hello!", voice=SpeechVoice.ALLOY)
)
```

The call goes to `/audio/speech` with content type `application/json`. The
reply body is raw audio.

## Rate limits

`RateLimitHeaders.from_headers(headers)` reads the `x-ratelimit-*` headers.
Header names match without regard to case. A header that is missing, or that
is not a number, gives 0.

The reset values are `ResetTime` strings, such as `"6m0s"`.
`ResetTime.time(now=None)` adds that duration to `now`. When `now` is omitted,
it uses the current local time. An unparseable value gives `now` itself.

`parse_duration(text)` turns a string such as `"1h30m"`, `"1.5s"` or `"-20ms"`
into a `timedelta`. It raises `ValueError` for malformed input.

## Reading streams

`StreamReader(source, empty_messages_limit=300, decode=json.loads)` reads an
iterable of byte lines, such as a binary file or a response body. Iterating
over it yields one decoded payload for each `data:` line. Iteration stops at
`data: [DONE]` or at the end of the input.

```python
from llmgate.stream import StreamReader

with StreamReader(lines) as stream:
    for event in stream:
        handle(event)
```

Instead of iterating, you can read one event at a time:

- `recv()` returns the next decoded event.
- `recv_raw()` returns the next undecoded payload as bytes.

Both raise `EOFError` once the stream has ended.

Leaving the `with` block calls `close()`. That closes the source, if the source
has a `close` method.

Lines without a `data:` prefix count as empty messages. They are collected in
case they form an error document. The reader raises these errors:

- `TooManyEmptyStreamMessagesError`: more empty messages arrived in a row than
  `empty_messages_limit` allows.
- `StreamAPIError`: the stream carried an `{"error": {...}}` document. Its
  fields are `message`, `type`, `param`, `code` and `payload`.

Both derive from `StreamError`.