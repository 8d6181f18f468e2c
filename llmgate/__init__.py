"""Request descriptions, response models, validation, rate-limit parsing and stream reading for an LLM assistants API."""

__version__ = "0.1.0"