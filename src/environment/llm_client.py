from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from .models import Message, Role


class LLMClient(BaseModel):
    """
    Conversation wrapper around LiteLLM for a single puzzle player.

    Keeps the full message history for the results file, but only sends
    the system prompt plus the most recent exchanges to the provider.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    history_pairs: int = Field(default=6, ge=1)
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Provider kwargs given at construction beyond the declared fields."""
        return dict(self.__pydantic_extra__ or {})

    def add_message(self, role: Role, content: str) -> None:
        """Append a message to the history."""
        self.messages.append(Message(role=role, content=content).model_dump())

    def clear_messages(self) -> None:
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """Return a copy of the full history in OpenAI format."""
        return self.messages.copy()

    def context_window(self) -> List[Dict[str, str]]:
        """
        Messages sent on the next completion.

        The system prompt (if any) followed by the last `history_pairs`
        user/assistant pairs. Each turn's prompt re-states the whole grid,
        so older turns carry no extra information.
        """
        system = [m for m in self.messages if m["role"] == "system"][:1]
        conversation = [m for m in self.messages if m["role"] != "system"]
        return system + conversation[-self.history_pairs * 2:]

    def completion(self, **kwargs: Any) -> Any:
        """
        Request a completion for the current context window.

        Args:
            **kwargs: Extra arguments forwarded to litellm.completion()

        Returns:
            The LiteLLM ModelResponse
        """
        params = {
            "model": self.model,
            "messages": self.context_window(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs,
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        # reasoning_effort is only forwarded when explicitly allowed
        if "reasoning_effort" in params:
            allowed = params.setdefault("allowed_openai_params", [])
            if "reasoning_effort" not in allowed:
                allowed.append("reasoning_effort")

        return litellm.completion(**params)
