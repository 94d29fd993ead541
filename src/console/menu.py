"""
Interactive console menu.

Patterns are numbered 1..N in registration order and listed by category.
``A`` runs every pattern, ``Q`` (or end of input) quits. Demo output is
captured through the dispatcher and then written to the menu's stream, so the
console and the HTTP API show exactly the same text.
"""

import logging
import sys
from typing import Callable, Dict, Optional, TextIO

from src.constants import MENU_FAREWELL, MENU_QUIT_KEY, MENU_RUN_ALL_KEY, MENU_TITLE
from src.core.dispatcher import DispatchResult, PatternDispatcher
from src.core.registry import PatternEntry, Phase

logger = logging.getLogger(__name__)

BANNER_WIDTH = 59


class InteractiveMenu:
    """
    Console loop over the pattern registry.

    Args:
        dispatcher: Dispatcher used to run the demos
        input_func: Reads one line of input (``input`` by default)
        output: Stream the menu writes to (``sys.stdout`` at write time by default)
    """

    def __init__(
        self,
        dispatcher: PatternDispatcher,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.dispatcher = dispatcher
        self._input = input_func
        self._output = output
        self._choices: Dict[str, PatternEntry] = {
            str(number): entry
            for number, entry in enumerate(dispatcher.registry.list_all(), start=1)
        }

    @property
    def choices(self) -> Dict[str, PatternEntry]:
        """Menu key to pattern entry, in menu order."""
        return dict(self._choices)

    def _write(self, text: str = "") -> None:
        stream = self._output if self._output is not None else sys.stdout
        stream.write(f"{text}\n")

    def _pause(self, prompt: str) -> bool:
        """Wait for Enter. Returns False when input has ended."""
        try:
            self._input(prompt)
        except EOFError:
            return False
        return True

    def render(self) -> str:
        """Build the menu text."""
        numbers = {entry.id: key for key, entry in self._choices.items()}
        lines = [
            "╔" + "═" * BANNER_WIDTH + "╗",
            "║" + MENU_TITLE.center(BANNER_WIDTH) + "║",
            "╚" + "═" * BANNER_WIDTH + "╝",
            "",
            "Choose a pattern to explore:",
        ]

        grouped = self.dispatcher.categories().value
        for category, entries in grouped.items():
            lines.append("")
            lines.append(f"{category.value} Patterns:")
            for entry in entries:
                lines.append(f"  {numbers[entry.id]:>2}. {entry.name}")

        lines.append("")
        lines.append(f"   {MENU_RUN_ALL_KEY}. Run ALL patterns")
        lines.append(f"   {MENU_QUIT_KEY}. Quit")
        return "\n".join(lines)

    def _write_result(self, result: DispatchResult) -> None:
        if result.ok:
            self._write(result.value.output.rstrip("\n"))
            return

        # Demo failed: show what it printed before the error
        if result.partial_output:
            self._write(result.partial_output.rstrip("\n"))
        self._write(f"Error: {result.error}")

    def show_pattern(self, entry: PatternEntry) -> None:
        """Print one pattern's before and after demos."""
        self._write()
        self._write(f"═══ {entry.name} Pattern ═══")
        self._write()
        self._write("BEFORE (Problem):")
        self._write_result(self.dispatcher.run_phase(entry.id, Phase.BEFORE))
        self._write()
        self._write("AFTER (Solution):")
        self._write_result(self.dispatcher.run_phase(entry.id, Phase.AFTER))

    def show_all(self) -> None:
        """Print every pattern's demos."""
        self._write()
        self._write("Running all patterns...")
        self._write()
        self._write_result(self.dispatcher.run_all())

    def handle_choice(self, choice: str) -> bool:
        """
        Act on one menu choice.

        Returns:
            False when the menu should exit, True otherwise
        """
        choice = (choice or "").strip().upper()

        if choice == MENU_QUIT_KEY:
            return False

        if choice == MENU_RUN_ALL_KEY:
            self.show_all()
            self._write()
            return self._pause("Press Enter to return to menu...")

        entry = self._choices.get(choice)
        if entry is None:
            logger.debug(f"Invalid menu choice: {choice!r}")
            self._write()
            self._write("Invalid choice.")
            return self._pause("Press Enter to try again...")

        self.show_pattern(entry)
        self._write()
        return self._pause("Press Enter to return to menu...")

    def run(self) -> None:
        """Loop until the user quits or input ends."""
        while True:
            self._write(self.render())
            self._write()
            try:
                choice = self._input("Your choice: ")
            except EOFError:
                break
            if not self.handle_choice(choice):
                break

        self._write()
        self._write(MENU_FAREWELL)
