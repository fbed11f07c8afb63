"""Hostile zones where the player fights a rotating list of enemies."""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from astroship.animation import lancer_animation
from astroship.combat import lancer_combat
from astroship.ennemi import Ennemi
from astroship.evenement import Choix, Continuer, Evenement
from astroship.sauvegarde import Sauvegarde
from astroship.texte import affiche

_GRAINE_AUTO = 42


@dataclass
class StopExplorer(Evenement):
    """Leave the hostile zone."""

    stop: bool = field(default=False, init=False)

    def action(self) -> None:
        """Announce the departure and mark the exploration as finished."""
        affiche("Vous quittez la zone hostile.", 10)
        self.stop = True


@dataclass
class ZoneHostile:
    """A named zone holding the enemies met one after another."""

    nom: str
    ennemis: list[Ennemi] = field(default_factory=list)
    phrase_arrive: list[str] = field(default_factory=list)

    def explorer(self, sauvegarde: Sauvegarde | None = None) -> None:
        """Fight the enemies in turn, cycling, until the player stops exploring."""
        if not self.ennemis:
            raise ValueError("Aucun ennemi dans la zone hostile.")
        if sauvegarde is None:
            sauvegarde = Sauvegarde()

        lancer_animation("zone hostile", self.phrase_arrive)
        print("Vous venez de vous aventurer dans la zone hostile : ")

        for ennemi in itertools.cycle(self.ennemis):
            lancer_combat(ennemi, sauvegarde)
            print("Souhaitez-vous continuer à explorer ? (oui/non)")
            stop = StopExplorer()
            Choix([("Oui", Continuer()), ("Non", stop)]).lancer_choix()
            if stop.stop:
                break

        print("Exploration terminée.")

    def explorer_auto(self, continuer: Callable[[int], bool]) -> list[str]:
        """Collect loot from each enemy with a fixed seed.

        ``continuer`` receives the index of the enemy just met and tells
        whether to go on. Returns the names of the loot obtained.
        """
        rng = random.Random(_GRAINE_AUTO)
        butins_log: list[str] = []

        for index, ennemi in enumerate(self.ennemis):
            print(f"\n{ennemi.base.nom} apparaît :")
            for butin in ennemi.interaction(rng):
                butins_log.append(butin.objet.nom)
                print(f" - {butin.objet.nom}")
            if not continuer(index):
                print("Exploration arrêtée par le joueur.")
                break

        return butins_log

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "ennemis": [ennemi.to_dict() for ennemi in self.ennemis],
            "nom": self.nom,
            "phrase_arrive": list(self.phrase_arrive),
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> ZoneHostile:
        """Build a zone from its JSON representation."""
        return cls(
            nom=donnees["nom"],
            ennemis=[Ennemi.from_dict(e) for e in donnees["ennemis"]],
            phrase_arrive=list(donnees["phrase_arrive"]),
        )