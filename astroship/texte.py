"""Character-by-character text output used throughout the game."""

from __future__ import annotations

import time
from dataclasses import dataclass


def affiche(texte: str, delay_ms: int) -> None:
    """Print ``texte`` one character at a time, pausing ``delay_ms`` between each."""
    pause = delay_ms / 1000
    for caractere in texte:
        print(caractere, end="", flush=True)
        time.sleep(pause)
    print()


@dataclass
class AfficheTexte:
    """A piece of text to be typed out with a fixed delay per character."""

    texte: str
    delay_ms: int

    def action(self) -> None:
        """Type the stored text out on standard output."""
        affiche(self.texte, self.delay_ms)