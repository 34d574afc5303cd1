"""Message format conversion between the neutral DTOs and provider wire shapes."""

from .openai_format import convert_to_openai_messages

__all__ = ["convert_to_openai_messages"]
