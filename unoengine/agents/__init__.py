"""Built-in players."""

from unoengine.agents.computer_agent import FirstPlayablePolicy
from unoengine.agents.human_agent import HumanInputReader
from unoengine.agents.llm_agent import LLMPolicy

__all__ = ["FirstPlayablePolicy", "HumanInputReader", "LLMPolicy"]
