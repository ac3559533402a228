"""CLI entry point."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import typer
from dotenv import load_dotenv

from unoengine.config import POLICIES, Settings
from unoengine.engine.errors import InvariantViolation

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(help="UNO against computer players")
logger = logging.getLogger(__name__)


def _settings(**overrides) -> Settings:
    try:
        settings = Settings.from_env()
        settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    logging.basicConfig(level=settings.log_level)
    return settings


@app.command()
def play(
    humans: Optional[int] = typer.Option(None, "--humans", "-H", help="Number of human players (default 1)"),
    computers: Optional[int] = typer.Option(None, "--computers", "-c", help="Number of computer players (default 3)"),
    policy: Optional[str] = typer.Option(
        None,
        "--policy",
        "-P",
        help=f"Computer player policy: {' or '.join(POLICIES)}",
    ),
    llm_provider: Optional[str] = typer.Option(
        None,
        "--llm-provider",
        "-p",
        help="LLM provider for --policy llm: openrouter, groq, ollama or huggingface",
    ),
    llm_model: Optional[str] = typer.Option(
        None,
        "--llm-model",
        "-m",
        help="Model name (e.g. openai/gpt-4o-mini, meta-llama/llama-3-8b-instruct)",
    ),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play a single UNO game in the terminal."""
    from unoengine.agents.human_agent import HumanInputReader
    from unoengine.orchestration.game_runner import GameRunner

    settings = _settings(
        human_players=humans,
        computer_players=computers,
        policy=policy.lower() if policy else None,
        llm_provider=llm_provider,
        llm_model=llm_model,
        seed=seed,
    )
    try:
        result = GameRunner(settings, HumanInputReader()).run()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    except InvariantViolation:
        logger.exception("Game aborted: card bookkeeping is broken")
        raise

    if result.winner is None:
        typer.echo("Game abandoned.")


@app.command()
def simulate(
    games: int = typer.Option(100, "--games", "-g", help="Number of games"),
    players: int = typer.Option(4, "--players", "-n", help="Computer players per game"),
    seed: Optional[int] = typer.Option(None, "--seed", "-s", help="Random seed"),
) -> None:
    """Play many all-computer games and report wins per seat."""
    from unoengine.orchestration.tournament import run_simulations

    settings = _settings(seed=seed)
    try:
        wins = run_simulations(num_games=games, num_players=players, seed=settings.seed, policy=settings.make_policy())
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    except InvariantViolation:
        logger.exception("Simulation aborted: card bookkeeping is broken")
        raise
    typer.echo("Simulation results:")
    for seat, w in sorted(wins.items(), key=lambda x: -x[1]):
        typer.echo(f"  Player {seat}: {w} wins")


if __name__ == "__main__":
    app()
