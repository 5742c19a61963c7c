"""Base shared constants for the protocol layer.

Central location for wire literals so framing code and tests agree on them.
"""
from __future__ import annotations

# Event stream framing
SSE_DATA_MARKER = "data:"
SSE_FRAME_TERMINATOR = "\n\n"
SSE_DONE_SENTINEL = "[DONE]"

# Request headers
API_KEY_HEADER = "api-key"
JSON_CONTENT_TYPE = "application/json"
MULTIPART_CONTENT_TYPE = "multipart/form-data"

# Upper bound on error body bytes echoed into exceptions and logs
ERROR_BODY_EXCERPT_LIMIT = 2048

# RFC 2046 limit on multipart boundary length
MAX_BOUNDARY_LENGTH = 70

# Endpoint operation paths under /openai/deployments/{deployment}/
OP_CHAT_COMPLETIONS = "chat/completions"
OP_EMBEDDINGS = "embeddings"
OP_AUDIO_TRANSCRIPTIONS = "audio/transcriptions"
OP_AUDIO_TRANSLATIONS = "audio/translations"
OP_IMAGES_GENERATIONS = "images/generations"
OP_IMAGES_VARIATIONS = "images/variations"
OP_IMAGES_EDITS = "images/edits"

__all__ = [
    "SSE_DATA_MARKER",
    "SSE_FRAME_TERMINATOR",
    "SSE_DONE_SENTINEL",
    "API_KEY_HEADER",
    "JSON_CONTENT_TYPE",
    "MULTIPART_CONTENT_TYPE",
    "ERROR_BODY_EXCERPT_LIMIT",
    "MAX_BOUNDARY_LENGTH",
    "OP_CHAT_COMPLETIONS",
    "OP_EMBEDDINGS",
    "OP_AUDIO_TRANSCRIPTIONS",
    "OP_AUDIO_TRANSLATIONS",
    "OP_IMAGES_GENERATIONS",
    "OP_IMAGES_VARIATIONS",
    "OP_IMAGES_EDITS",
]
