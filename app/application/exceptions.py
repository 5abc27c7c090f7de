class AgentRequestError(ValueError):
    """Raised when a chat request cannot be answered beyond the fallback reply."""

    reason = "invalid_request"


class InvalidPayloadError(AgentRequestError):
    """Raised when the request body is not a {messages: [...]} conversation."""

    reason = "invalid_payload"


class EmptyConversationError(AgentRequestError):
    """Raised when the conversation holds no user message."""

    reason = "empty_conversation"
