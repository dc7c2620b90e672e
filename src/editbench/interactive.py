from __future__ import annotations

"""Prompting the user for two words to compare."""

from typing import Callable, Tuple

import typer

Prompt = Callable[[str], str]


def normalise_word(raw: str) -> str:
    """First whitespace-delimited token of *raw*, lower-cased."""

    tokens = raw.split()
    return tokens[0].lower() if tokens else ""


def collect_words(prompt: Prompt = typer.prompt) -> Tuple[str, str]:
    first = normalise_word(prompt("Enter the first word"))
    second = normalise_word(prompt("Enter the second word"))
    return first, second
