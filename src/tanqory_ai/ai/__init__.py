"""Model access and the chat pipeline."""
