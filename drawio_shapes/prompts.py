"""Interactive vendor/model selection on the terminal."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.validation import Validator

from .catalog import Catalog, CatalogEntry
from .exceptions import CatalogError

AskFn = Callable[..., str]


def _match(answer: str, choices: Sequence[str]) -> str | None:
    """Map a typed answer (number or exact text) to a choice."""
    answer = answer.strip()
    # exact names win, so all-digit model names stay pickable by name
    if answer in choices:
        return answer
    if answer.isascii() and answer.isdecimal():
        index = int(answer) - 1
        if 0 <= index < len(choices):
            return choices[index]
    return None


def choose(message: str, choices: Sequence[str], ask: AskFn | None = None) -> str:
    """
    Show a numbered list and return the picked choice.

    The answer may be the list number or the exact text; tab completes.
    """
    if not choices:
        raise CatalogError(f"Nothing to pick for: {message}")
    if len(choices) == 1:
        print(f"{message}: {choices[0]}")
        return choices[0]

    ask = ask or prompt
    for number, choice in enumerate(choices, 1):
        print(f"  {number:>3}) {choice}")

    validator = Validator.from_callable(
        lambda text: _match(text, choices) is not None,
        error_message="Pick a number or name from the list",
        move_cursor_to_end=True,
    )
    completer = WordCompleter(list(choices), ignore_case=True, sentence=True)
    answer = ask(f"{message}: ", completer=completer, validator=validator)
    picked = _match(answer, choices)
    if picked is None:
        raise CatalogError(f"Invalid choice {answer!r}")
    return picked


def pick_device(catalog: Catalog, ask: AskFn | None = None) -> CatalogEntry:
    """Ask for a vendor, then one of its models."""
    vendor = choose("Pick a vendor", catalog.vendors(), ask)
    model = choose("Pick a model", catalog.models(vendor), ask)
    return catalog.resolve(vendor, model)
