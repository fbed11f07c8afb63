"""Menu events and the numbered choice prompt that triggers them."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from astroship.texte import affiche

_ENTIER = re.compile(r"\+?[0-9]+")


def _entier(saisie: str) -> int | None:
    texte = saisie.strip()
    return int(texte) if _ENTIER.fullmatch(texte) else None


class Evenement(ABC):
    """Something that happens when the player picks a menu entry."""

    @abstractmethod
    def action(self) -> None:
        """Run the event."""


@dataclass
class Choix:
    """A numbered list of labelled events the player picks from."""

    choix: list[tuple[str, Evenement]]

    def affiche(self) -> None:
        """Type out every option as ``[n] - label``."""
        for numero, (texte, _) in enumerate(self.choix, start=1):
            affiche(f"[{numero}] - {texte}", 30)

    def demander_choix(self) -> Evenement:
        """Prompt until a valid option number is entered and return its event."""
        total = len(self.choix)
        while True:
            numero = _entier(input(f"=> 1-{total} : "))
            if numero is not None and 1 <= numero <= total:
                return self.choix[numero - 1][1]
            print("Entrée invalide. Essayez encore.")

    def lancer_choix(self) -> None:
        """Show the options, ask for one and run the chosen event."""
        self.affiche()
        self.demander_choix().action()


@dataclass
class Continuer(Evenement):
    """An event that does nothing, letting the caller carry on."""

    def action(self) -> None:
        """Do nothing."""


@dataclass
class QuitterJeu(Evenement):
    """Say goodbye and leave the program."""

    def action(self) -> None:
        """Print the farewell and exit with status 0."""
        affiche("Merci d'avoir joué, à bientot !", 30)
        raise SystemExit(0)