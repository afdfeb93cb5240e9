"""
Main entry point for playing word scramble in a terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --seed 42 --output results/session.json --verbose

Type a word and press enter to submit it. Commands:
    :new    start a new round
    :state  show the current round again
    :quit   end the session (end of input works too)
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError as ConfigError

from .game import GameSession, GameConfig, WordSourceError
from .verifiers import DictionaryError
from .utils.display import render_state, render_alert


def load_config(config_path: Optional[str]) -> GameConfig:
    """Load game configuration from a YAML file (defaults when no path is given)."""
    if config_path is None:
        return GameConfig()

    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    """Apply command line overrides on top of the loaded configuration."""
    updates = {}
    if args.word_list:
        updates["word_list"] = args.word_list
    if args.seed is not None:
        updates["seed"] = args.seed

    dictionary_updates = {}
    if args.backend:
        dictionary_updates["backend"] = args.backend
    if args.dictionary:
        dictionary_updates["path"] = args.dictionary
    if args.model:
        dictionary_updates["model"] = args.model
    if dictionary_updates:
        updates["dictionary"] = config.dictionary.model_copy(update=dictionary_updates)

    return config.model_copy(update=updates)


def play(session: GameSession, lines, verbose: bool = False) -> None:
    """Run the submission loop until :quit or end of input."""
    print(render_state(session.get_state()))

    for line in lines:
        text = line.strip()
        if not text:
            continue

        if text == ":quit":
            break

        if text == ":new":
            root_word = session.new_game()
            if verbose:
                print(f"Round {session.rounds_played} ({len(root_word)} letters)")
            print()
            print(render_state(session.get_state()))
            continue

        if text == ":state":
            print(render_state(session.get_state()))
            continue

        try:
            result = session.submit(text)
        except DictionaryError as e:
            print(f"Error checking '{text}': {e}", file=sys.stderr)
            continue

        if result.title:
            print(render_alert(result.title, result.message or ""))

        if result.accepted:
            if verbose:
                print(f"+{result.score_delta} for '{result.word}'")
            print()
            print(render_state(session.get_state()))


def main():
    parser = argparse.ArgumentParser(
        description="Play word scramble: make words from the letters of a root word",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  word_list: start.txt
  seed: 42
  language: en
  dictionary:
    backend: wordfreq
    min_zipf: 2.0
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults are used without one)"
    )
    parser.add_argument(
        "--word-list",
        help="File of root words, one per line (default: bundled list)"
    )
    parser.add_argument(
        "--dictionary",
        help="Path to the dictionary file for the wordlist or twl backend"
    )
    parser.add_argument(
        "--backend",
        choices=["wordfreq", "wordlist", "twl", "llm"],
        help="Dictionary backend used to check that words are real"
    )
    parser.add_argument(
        "--model",
        help="LiteLLM model name for the llm backend"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for choosing and shuffling root words"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the session transcript as JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress and log details to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = apply_overrides(load_config(args.config), args)
    except (FileNotFoundError, yaml.YAMLError, ConfigError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        session = GameSession.create(config=config)
    except (WordSourceError, DictionaryError) as e:
        print(f"Error starting game: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Word list: {config.word_list or 'bundled'}")
        print(f"Dictionary: {config.dictionary.backend}")
        print()

    try:
        play(session, sys.stdin, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\nSession interrupted by user")

    if args.output:
        output_path = session.save_result(args.output)
        if args.verbose:
            print(f"Session saved to: {output_path}")

    result = session.get_result()

    # Print summary
    print()
    print("=== Session Summary ===")
    print(f"Rounds played: {result.rounds_played}")
    print(f"Accepted: {result.total_accepted}  Rejected: {result.total_rejected}")
    print(f"Final score: {result.final_state['score']}")
    print(f"Last root word: {result.final_state['root_word']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
