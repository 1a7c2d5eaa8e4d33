from unittest.mock import Mock, patch
import pytest

from src.environment import LLMClient, Message


def create_mock_response(content: str = "Test response", model: str = "gpt-4o-mini") -> Mock:
    """Create a mock matching the shape of litellm's ModelResponse."""
    return Mock(
        id='chatcmpl-test123',
        model=model,
        object='chat.completion',
        choices=[
            Mock(
                finish_reason='stop',
                index=0,
                message=Mock(content=content, role='assistant', tool_calls=None)
            )
        ],
        usage=Mock(completion_tokens=10, prompt_tokens=5, total_tokens=15),
    )


class TestLLMClientInitialization:
    """Test cases for LLM client initialization."""

    def test_init_with_model_only(self):
        client = LLMClient(model="gpt-4o-mini")
        assert client.model == "gpt-4o-mini"
        assert client.temperature == 1.0
        assert client.max_tokens is None
        assert client.history_pairs == 6
        assert client.messages == []

    def test_additional_params(self):
        """Unknown keyword arguments are kept for the provider."""
        client = LLMClient(model="gpt-4o-mini", top_p=0.9, reasoning_effort="low")
        assert client.additional_params == {"top_p": 0.9, "reasoning_effort": "low"}

    def test_history_pairs_must_be_positive(self):
        with pytest.raises(Exception):
            LLMClient(model="gpt-4o-mini", history_pairs=0)


class TestMessageManagement:
    """Test cases for conversation history."""

    def test_add_messages(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("system", "Rules")
        client.add_message("user", "Turn 1")
        client.add_message("assistant", "<selection>0,0</selection>")

        assert [m["role"] for m in client.messages] == ["system", "user", "assistant"]

    def test_get_messages_returns_copy(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "Hello")

        messages = client.get_messages()
        messages.append({"role": "user", "content": "extra"})
        assert len(client.messages) == 1

    def test_clear_messages(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "Hello")
        client.clear_messages()
        assert client.messages == []

    def test_invalid_role(self):
        client = LLMClient(model="gpt-4o-mini")
        with pytest.raises(Exception):
            client.add_message("tool", "nope")


class TestContextWindow:
    """Test cases for history trimming."""

    def test_short_history_unchanged(self):
        client = LLMClient(model="gpt-4o-mini")
        client.add_message("system", "Rules")
        client.add_message("user", "Turn 1")
        assert client.context_window() == client.messages

    def test_keeps_system_and_last_pairs(self):
        client = LLMClient(model="gpt-4o-mini", history_pairs=2)
        client.add_message("system", "Rules")
        for i in range(5):
            client.add_message("user", f"Turn {i}")
            client.add_message("assistant", f"Answer {i}")

        window = client.context_window()
        assert window[0] == {"role": "system", "content": "Rules"}
        assert [m["content"] for m in window[1:]] == ["Turn 3", "Answer 3", "Turn 4", "Answer 4"]
        assert len(client.messages) == 11

    def test_no_system_prompt(self):
        client = LLMClient(model="gpt-4o-mini", history_pairs=1)
        client.add_message("user", "a")
        client.add_message("assistant", "b")
        client.add_message("user", "c")
        assert [m["content"] for m in client.context_window()] == ["b", "c"]


class TestCompletion:
    """Test cases for completion calls."""

    @patch('litellm.completion')
    def test_completion_basic(self, mock_completion):
        mock_completion.return_value = create_mock_response(content="<selection>0,0</selection>")

        client = LLMClient(model="gpt-4o-mini")
        client.add_message("user", "Turn 1")
        response = client.completion()

        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["model"] == "gpt-4o-mini"
        assert call_kwargs["messages"] == [{"role": "user", "content": "Turn 1"}]
        assert call_kwargs["temperature"] == 1.0
        assert "max_tokens" not in call_kwargs
        assert response.choices[0].message.content == "<selection>0,0</selection>"

    @patch('litellm.completion')
    def test_completion_sends_trimmed_history(self, mock_completion):
        mock_completion.return_value = create_mock_response()

        client = LLMClient(model="gpt-4o-mini", history_pairs=1)
        client.add_message("system", "Rules")
        client.add_message("user", "old")
        client.add_message("assistant", "old answer")
        client.add_message("user", "new")
        client.completion()

        sent = mock_completion.call_args[1]["messages"]
        assert [m["content"] for m in sent] == ["Rules", "old answer", "new"]

    @patch('litellm.completion')
    def test_completion_max_tokens_and_extras(self, mock_completion):
        mock_completion.return_value = create_mock_response()

        client = LLMClient(model="gpt-4o-mini", max_tokens=150, top_p=0.5)
        client.completion(n=2)

        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["max_tokens"] == 150
        assert call_kwargs["top_p"] == 0.5
        assert call_kwargs["n"] == 2

    @patch('litellm.completion')
    def test_reasoning_effort_allowed(self, mock_completion):
        mock_completion.return_value = create_mock_response()

        client = LLMClient(model="gpt-4o-mini", reasoning_effort="high")
        client.completion()

        call_kwargs = mock_completion.call_args[1]
        assert call_kwargs["reasoning_effort"] == "high"
        assert call_kwargs["allowed_openai_params"] == ["reasoning_effort"]


class TestMessageModel:
    """Test cases for Message model validation."""

    def test_model_dump(self):
        assert Message(role="user", content="Test").model_dump() == {"role": "user", "content": "Test"}

    def test_invalid_role(self):
        with pytest.raises(Exception):
            Message(role="invalid", content="Test")
