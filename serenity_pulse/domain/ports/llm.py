"""Port for chat-completion style language model backends."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class LLMService(ABC):

    @abstractmethod
    async def generate_structured_response(
        self,
        messages: List[Dict[str, str]],
        response_format: Dict[str, Any],
        json_schema: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Return the assistant's reply parsed as a JSON object.

        Raises ``ValueError`` when the reply is not a JSON object; transport and
        configuration problems surface as other exceptions.
        """
