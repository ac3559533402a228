"""Settings read from the environment (and a .env file, loaded by the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

POLICIES = ("first", "llm")


def _int_env(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Game and player settings."""

    human_players: int = 1
    computer_players: int = 3
    seed: Optional[int] = None
    policy: str = "first"
    llm_provider: str = "openrouter"
    llm_model: str = "openai/gpt-4o-mini"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.policy not in POLICIES:
            raise ValueError(f"Unknown policy: {self.policy}. Use one of {', '.join(POLICIES)}.")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from UNO_* environment variables."""
        env = os.environ if env is None else env
        return cls(
            human_players=_int_env(env, "UNO_HUMAN_PLAYERS", 1),
            computer_players=_int_env(env, "UNO_COMPUTER_PLAYERS", 3),
            seed=_int_env(env, "UNO_SEED", None),
            policy=env.get("UNO_POLICY", "first").lower(),
            llm_provider=env.get("UNO_LLM_PROVIDER", "openrouter"),
            llm_model=env.get("UNO_LLM_MODEL", "openai/gpt-4o-mini"),
            log_level=env.get("UNO_LOG_LEVEL", "WARNING").upper(),
        )

    def make_policy(self):
        """Build the computer player policy these settings ask for."""
        if self.policy == "llm":
            from unoengine.agents.llm_agent import LLMPolicy

            return LLMPolicy(provider=self.llm_provider, model=self.llm_model)
        from unoengine.agents.computer_agent import FirstPlayablePolicy

        return FirstPlayablePolicy()
