[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "llmgate"
version = "0.1.0"
description = "Request builders, response models and a server-sent-event stream reader for an LLM assistants API."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "llm",
    "assistants",
    "threads",
    "runs",
    "vector-stores",
    "moderation",
    "text-to-speech",
    "server-sent-events",
    "streaming",
    "rate-limits",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["llmgate"]

[tool.hatch.build.targets.sdist]
include = ["llmgate", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
