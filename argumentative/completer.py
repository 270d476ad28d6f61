# Argumentative — (c) 2025 The Argumentative Authors — MIT Licensed
"""
Provides `FlagCompleter`, an autocompletion engine for prompt_toolkit sessions that
collect command-line style input for a `Flags` registry.

This completer supports:
- Long and short flag completion (e.g. `--verbose`, `-v`)
- Skipping flags that were already given earlier in the input
- Default value suggestions right after a string flag
- Quoting completions that contain spaces

Completions are generated from `Flags.suggest_next()`.
"""
from __future__ import annotations

import os
import shlex
from typing import TYPE_CHECKING, Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

if TYPE_CHECKING:
    from argumentative.parser.flags import Flags


class FlagCompleter(Completer):
    """
    Prompt Toolkit completer for input parsed by a `Flags` registry.

    The input buffer holds arguments only, without a program name.

    Args:
        flags (Flags): The registry providing flag names and defaults.
    """

    def __init__(self, flags: "Flags"):
        self.flags = flags

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Compute completions for the current user input.

        Args:
            document (Document): The current Prompt Toolkit document (input buffer & cursor).
            complete_event: The triggering event (TAB key, menu display, etc.), not used here.

        Yields:
            Completion: One or more completions matching the current stub text.
        """
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        cursor_at_end_of_token = text.endswith((" ", "\t"))

        stub = "" if cursor_at_end_of_token or not tokens else tokens[-1]
        suggestions = self.flags.suggest_next(tokens, cursor_at_end_of_token)
        yield from self._yield_lcp_completions(suggestions, stub)

    def _ensure_quote(self, text: str) -> str:
        """Quote `text` if it contains whitespace so it stays one shell token."""
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text

    def _yield_lcp_completions(
        self, suggestions: list[str], stub: str
    ) -> Iterable[Completion]:
        """
        Yield completions for the current stub using longest-common-prefix logic.

        Behavior:
        - If only one match → yield it fully.
        - If multiple matches share a longer prefix → insert the prefix, but also
            display all matches in the menu.
        - If no shared prefix → list all matches individually.
        """
        matches = [s for s in suggestions if s.startswith(stub)]
        if not matches:
            return

        lcp = os.path.commonprefix(matches)

        if len(matches) == 1:
            yield Completion(
                self._ensure_quote(matches[0]),
                start_position=-len(stub),
                display=matches[0],
            )
        elif len(lcp) > len(stub) and not lcp.startswith("-"):
            yield Completion(lcp, start_position=-len(stub), display=lcp)
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
        else:
            for match in matches:
                yield Completion(
                    self._ensure_quote(match), start_position=-len(stub), display=match
                )
