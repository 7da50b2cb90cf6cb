"""Lynix tools: a source tokenizer, JSON-like documents with a streaming parser and tree builder, and file helpers."""

__version__ = "0.1.0"

__all__ = ["builder", "files", "location", "lyson", "lyson_parser", "tokenizer"]