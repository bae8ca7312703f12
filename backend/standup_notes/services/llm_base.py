"""
Standup Notes Backend - Abstract Completion Service Interface
=============================================================

What:  Abstract base class for text-generation providers.
How:   Concrete providers inherit from CompletionService and implement
       complete() and health_check().
Who:   SummaryService calls complete() when generating a standup summary;
       the health route calls health_check().

Message format:
    A list of {"role": ..., "content": ...} dicts, roles being "system",
    "user" or "assistant". Providers map these onto their own SDK shapes.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

Message = Dict[str, str]


class CompletionService(ABC):
    """
    Interface for chat-style text generation.

    Contract:
        - complete() returns the generated text of a single response
        - provider failures are raised as LLMServiceError
        - no retries; a failed call fails the caller's request
    """

    @abstractmethod
    async def complete(self, messages: List[Message]) -> str:
        """
        Generate a reply for a role-tagged conversation.

        Args:
            messages: Ordered conversation. At most one leading "system"
                      message; the last message is normally from "user".

        Returns:
            The generated text.

        Raises:
            LLMServiceError: The provider call failed or returned no text.
        """
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """True if the provider is reachable with the configured key."""
        ...
