"""Interactive question prompts with defaults and re-asking on invalid input."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Optional, TextIO


@dataclass
class PromptConfig:
    """Where questions read answers from and write re-ask messages to."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _build_prompt_text(name, default):
    prompt_text = f"? {name}"
    if default:
        prompt_text += f" ({default})"
    prompt_text += ": "
    return prompt_text


def _read_answer(prompt_text, config):
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print("Input closed before all questions were answered.", file=config.output)
        sys.exit(1)


def _resolve_answer(raw_input, default):
    if raw_input == "" and default is not None:
        return default
    return raw_input


def ask(name, *, default: Optional[str] = None, validate=None, config=None):
    """Ask a single question and return the accepted answer.

    Args:
        name: Question label shown to the user.
        default: Value used when the user enters nothing.
        validate: Optional predicate; answers for which it returns False are
            rejected and the question is asked again.
        config: PromptConfig with input_fn and output stream (defaults apply).

    Returns:
        The accepted answer string.

    Raises:
        SystemExit(1): On EOF (e.g. piped input closed).
    """
    if config is None:
        config = PromptConfig()

    prompt_text = _build_prompt_text(name, default)

    while True:
        answer = _resolve_answer(_read_answer(prompt_text, config), default)
        if validate is None or validate(answer):
            return answer
        print(f">> Please enter a value for {name}.", file=config.output)
