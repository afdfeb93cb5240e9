from typing import List, Dict, Any, Optional, Sequence
from pydantic import BaseModel, ConfigDict
import litellm

from .models import Message


class LLMClient(BaseModel):
    """
    Client for single-shot dictionary lookups via LiteLLM.

    Stateless between calls: each request carries its own messages and is
    always sent with the configured timeout.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 0.0
    max_tokens: Optional[int] = None
    timeout: Optional[float] = 10.0

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        return self.__pydantic_extra__ or {}

    def completion(self, messages: Sequence[Message], **kwargs: Any) -> Any:
        """
        Send one request.

        Args:
            messages: The messages for this lookup, in order
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        payload: List[Dict[str, str]] = [m.model_dump() for m in messages]

        params = {
            "model": self.model,
            "messages": payload,
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        if self.timeout is not None:
            params.setdefault("timeout", self.timeout)

        return litellm.completion(**params)
