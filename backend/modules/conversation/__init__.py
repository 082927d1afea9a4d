"""modules/conversation — questionnaire state machine."""

from modules.conversation.controller import (
    ChatTurn,
    ConversationController,
    ConversationState,
    QUESTIONS,
)

__all__ = ["ChatTurn", "ConversationController", "ConversationState", "QUESTIONS"]
