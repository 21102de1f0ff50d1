"""
Tanqory AI chat backend.

Answers team questions with an LLM that is given the bundled company memory
corpus, a persona/tone directive and the recent conversation.
"""

from tanqory_ai.ai.chat.service import assistant_reply

__all__ = ["assistant_reply"]
