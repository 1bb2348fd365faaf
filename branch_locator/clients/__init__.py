"""Client singletons for external API interactions."""
from branch_locator.clients.openai_client import OpenAIClient

__all__ = ["OpenAIClient"]
