from __future__ import annotations

from abc import ABC, abstractmethod

# Reply used when a provider answers successfully but without the expected text field.
NO_RESPONSE_TEXT = "No response text found"


class ChatBackend(ABC):
    """
    Interface for chat backends.

    Implementations translate a plain prompt into their provider's wire
    format, perform a single HTTP call and return the reply text. Instances
    hold no state that changes between calls.
    """

    name: str = ""

    @abstractmethod
    async def chat(self, prompt: str) -> str:
        """
        Send the prompt to the provider and return the reply text.

        Raises a ChatBackendError subclass when the provider cannot be
        reached, rejects the request, or returns a body that is not JSON.
        """
        ...
