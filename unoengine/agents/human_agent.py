"""Human player - reads input tokens from the terminal."""

from typing import Optional, TextIO

from unoengine.engine import Input, parse_input


class HumanInputReader:
    """Reads one line per call from `stream` (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None, prompt: str = "> "):
        self._stream = stream
        self._prompt = prompt

    def read(self) -> Optional[Input]:
        """Return the next token, or None once input is exhausted."""
        if self._stream is None:
            try:
                raw = input(self._prompt)
            except EOFError:
                return None
        else:
            raw = self._stream.readline()
            if not raw:
                return None
        return parse_input(raw)
