"""Convert neutral conversation messages into chat-completions wire messages.

Mapping rules:

* Plain string content passes through as ``{"role", "content"}``.
* User messages with parts: ``tool_result`` parts become separate
  ``{"role": "tool", "tool_call_id", "content"}`` messages, emitted first so
  each follows the assistant turn that requested it; the remaining text and
  image parts become one user message whose content is an array of
  ``{"type": "text"}`` / ``{"type": "image_url"}`` entries.
* Assistant messages with parts: text parts are joined into ``content``;
  ``tool_use`` parts become ``tool_calls`` with JSON-encoded arguments.
* System messages are flattened to text.

Pure function; no I/O.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from ..base.models import ContentPart, Message

WireMessage = Dict[str, Any]


def _image_url(part: ContentPart) -> Dict[str, Any]:
    data = part.data or {}
    media_type = data.get("media_type", "image/png")
    return {"type": "image_url", "image_url": {"url": f"data:{media_type};base64,{data.get('data', '')}"}}


def _tool_result_text(part: ContentPart) -> str:
    data = part.data or {}
    content = data.get("content")
    if content is None:
        return part.text or ""
    if isinstance(content, str):
        return content
    texts: List[str] = []
    for item in content:
        if isinstance(item, ContentPart):
            texts.append(item.text or f"[{item.type}]")
        elif isinstance(item, dict):
            texts.append(str(item.get("text") or f"[{item.get('type', 'other')}]"))
    return "\n".join(texts)


def _convert_user(message: Message) -> List[WireMessage]:
    out: List[WireMessage] = []
    content: List[Dict[str, Any]] = []
    for part in message.content:
        if part.type == "tool_result":
            out.append(
                {
                    "role": "tool",
                    "tool_call_id": (part.data or {}).get("tool_use_id", ""),
                    "content": _tool_result_text(part),
                }
            )
        elif part.type == "image":
            content.append(_image_url(part))
        elif part.type == "text" and part.text:
            content.append({"type": "text", "text": part.text})
    if content:
        out.append({"role": "user", "content": content})
    return out


def _convert_assistant(message: Message) -> List[WireMessage]:
    texts: List[str] = []
    tool_calls: List[Dict[str, Any]] = []
    for part in message.content:
        if part.type == "text" and part.text:
            texts.append(part.text)
        elif part.type == "tool_use":
            data = part.data or {}
            tool_calls.append(
                {
                    "id": data.get("id", ""),
                    "type": "function",
                    "function": {
                        "name": data.get("name", ""),
                        "arguments": json.dumps(data.get("input", {})),
                    },
                }
            )
    content: Optional[str] = "\n".join(texts) if texts else None
    wire: WireMessage = {"role": "assistant", "content": content}
    if tool_calls:
        wire["tool_calls"] = tool_calls
    if content is None and not tool_calls:
        return []
    return [wire]


def convert_to_openai_messages(messages: Sequence[Message]) -> List[WireMessage]:
    """Return the wire representation of ``messages`` in order."""
    out: List[WireMessage] = []
    for m in messages:
        if not m.is_structured():
            out.append({"role": m.role, "content": m.content})
        elif m.role == "user":
            out.extend(_convert_user(m))
        elif m.role == "assistant":
            out.extend(_convert_assistant(m))
        else:
            out.append({"role": m.role, "content": m.text_or_joined()})
    return out


__all__ = ["convert_to_openai_messages", "WireMessage"]
