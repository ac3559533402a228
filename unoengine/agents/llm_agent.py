"""Computer player backed by an LLM, using the OpenAI library with OpenRouter, Groq or Ollama."""

import json
import logging
import os
import re
import time
from typing import Any, Optional, Sequence

from openai import OpenAI

from unoengine.agents.computer_agent import FirstPlayablePolicy
from unoengine.engine.card import Card, Color, is_legal_follow_up

logger = logging.getLogger(__name__)

OPENROUTER_BASE = "https://openrouter.ai/api/v1"
GROQ_BASE = "https://api.groq.com/openai/v1"
OLLAMA_BASE = "http://localhost:11434/v1"
HUGGINGFACE_BASE = "https://router.huggingface.co/v1"

PROVIDERS = ("openrouter", "groq", "ollama", "huggingface")


def _format_hand(hand: Sequence[Card], top: Optional[Card]) -> str:
    """Format the hand and discard top as text for the LLM."""
    lines = [
        "=== Top card on discard ===",
        str(top) if top else "None (any card may be played)",
        "",
        "=== Your hand ===",
    ]
    for i, card in enumerate(hand):
        mark = "playable" if is_legal_follow_up(top, card) else "not playable"
        lines.append(f"  {i}: {card} ({mark})")
    return "\n".join(lines)


def _extract_json(response: str) -> Optional[dict]:
    """Find the first JSON-like object in a chatty response."""
    match = re.search(r"(\{.*?\})", response, re.DOTALL)
    if not match:
        return None
    json_str = match.group(1)
    for candidate in (json_str, json_str.replace("'", '"')):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None


def parse_card_response(response: str, hand: Sequence[Card], top: Optional[Card]) -> Optional[int]:
    """Parse an LLM answer into a legal card index.

    Returns None when no legal index was found.
    """
    data = _extract_json(response)
    if data is not None:
        idx = data.get("card_index")
        if isinstance(idx, int) and 0 <= idx < len(hand) and is_legal_follow_up(top, hand[idx]):
            return idx

    match = re.search(r'["\']?card_index["\']?\s*:\s*(\d+)', response, re.IGNORECASE)
    if match:
        idx = int(match.group(1))
        if 0 <= idx < len(hand) and is_legal_follow_up(top, hand[idx]):
            return idx

    return None


def parse_color_response(response: str) -> Optional[Color]:
    """Parse an LLM answer into a color."""
    data = _extract_json(response)
    if data is not None and isinstance(data.get("color"), str):
        try:
            return Color(data["color"].strip().lower())
        except ValueError:
            pass
    for word in re.findall(r"[a-zA-Z]+", response):
        try:
            return Color(word.lower())
        except ValueError:
            continue
    return None


class LLMPolicy:
    """Computer player that asks an LLM which card to play.

    Answers are checked against the rules. When the model fails, errors out
    or proposes an illegal card, the deterministic policy decides instead.
    """

    def __init__(
        self,
        provider: str = "openrouter",
        model: str = "openai/gpt-4o-mini",
        api_key: Optional[str] = None,
        timeout: float = 30.0,
        max_attempts: int = 2,
        client: Optional[Any] = None,
    ):
        self._model = model
        self._timeout = timeout
        self._provider = provider
        self._max_attempts = max_attempts
        self._fallback = FirstPlayablePolicy()

        if client is not None:
            self._client = client
            return

        if provider == "openrouter":
            base_url = OPENROUTER_BASE
            key = api_key or os.environ.get("OPENROUTER_API_KEY")
        elif provider == "groq":
            base_url = GROQ_BASE
            key = api_key or os.environ.get("GROQ_API_KEY")
        elif provider == "ollama":
            base_url = os.environ.get("OLLAMA_BASE_URL", OLLAMA_BASE)
            key = "ollama"
        elif provider == "huggingface":
            base_url = HUGGINGFACE_BASE
            key = api_key or os.environ.get("HUGGINGFACE_API_KEY")
        else:
            raise ValueError(f"Unknown provider: {provider}")

        if not key:
            raise ValueError(f"API key required for {provider}. Set {provider.upper()}_API_KEY or pass api_key.")

        self._client = OpenAI(api_key=key, base_url=base_url)
        logger.info("[%s] Initialized with provider=%s, base_url=%s", self.name, provider, base_url)

    @property
    def name(self) -> str:
        return f"llm-{self._model}"

    def _ask(self, prompt: str) -> Optional[str]:
        """Send a prompt, retrying on errors. Returns None if every attempt failed."""
        for attempt in range(1, self._max_attempts + 1):
            start_time = time.time()
            try:
                resp = self._client.chat.completions.create(
                    model=self._model,
                    messages=[{"role": "user", "content": prompt}],
                    timeout=self._timeout,
                )
                logger.debug("[%s] Received response in %.2fs", self.name, time.time() - start_time)
                return resp.choices[0].message.content or ""
            except Exception as e:
                logger.warning(
                    "[%s] Error on attempt %d after %.2fs: %s: %s",
                    self.name,
                    attempt,
                    time.time() - start_time,
                    type(e).__name__,
                    e,
                )
        return None

    def choose_card(self, hand: Sequence[Card], top: Optional[Card]) -> Optional[int]:
        if not any(is_legal_follow_up(top, card) for card in hand):
            return None

        prompt = f"""You are playing UNO.
Objective: empty your hand. A card can be played if it matches the top discard card by color, number or action (skip, reverse), if both cards make the next player draw, or if it is wild.

{_format_hand(hand, top)}

INSTRUCTIONS:
Pick the playable card that gives you the best chance to win.
Respond with a JSON object: {{"card_index": N}} to play card N.
"""
        content = self._ask(prompt)
        if content is not None:
            choice = parse_card_response(content, hand, top)
            if choice is not None:
                return choice
            logger.warning("[%s] Failed to parse a legal card from response: %r", self.name, content)

        return self._fallback.choose_card(hand, top)

    def choose_color(self, hand: Sequence[Card]) -> Color:
        prompt = f"""You are playing UNO and just played a wild card.

=== Your remaining hand ===
{" ".join(str(c) for c in hand) or "(empty)"}

Choose the color the next players must match.
Respond with a JSON object: {{"color": "red"}} (one of red, blue, green, yellow).
"""
        content = self._ask(prompt)
        if content is not None:
            color = parse_color_response(content)
            if color is not None:
                return color
            logger.warning("[%s] Failed to parse a color from response: %r", self.name, content)

        return self._fallback.choose_color(hand)
