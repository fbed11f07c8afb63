"""Enemies met in hostile zones and the loot they leave."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from astroship.entite import Entite
from astroship.marchandage import Butin


@dataclass
class Ennemi:
    """An opponent with base statistics, loot tables and lines of dialogue."""

    base: Entite
    butins_passifs: list[Butin]
    butins_hostiles: list[Butin]
    phrase_intro: str
    phrase_attaque: str
    monnaie: int

    def interaction(self, rng: random.Random) -> list[Butin]:
        """Draw the loot: hostile loot when defeated, passive loot otherwise."""
        if self.base.points_de_vie <= 0:
            return self.obtenir_butins_hostiles(rng)
        return self.obtenir_butins_passifs(rng)

    def interaction_par_defaut(self) -> list[Butin]:
        """Draw the loot with a fresh random generator."""
        return self.interaction(random.Random())

    def obtenir_butins_passifs(self, rng: random.Random) -> list[Butin]:
        """Loot obtained when the enemy is left alive."""
        return [butin for butin in self.butins_passifs if butin.est_obtenu(rng)]

    def obtenir_butins_hostiles(self, rng: random.Random) -> list[Butin]:
        """Loot obtained when the enemy is killed."""
        return [butin for butin in self.butins_hostiles if butin.est_obtenu(rng)]

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "base": self.base.to_dict(),
            "butins_passifs": [b.to_dict() for b in self.butins_passifs],
            "butins_hostiles": [b.to_dict() for b in self.butins_hostiles],
            "phrase_intro": self.phrase_intro,
            "phrase_attaque": self.phrase_attaque,
            "monnaie": self.monnaie,
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Ennemi:
        """Build an enemy from its JSON representation."""
        return cls(
            base=Entite.from_dict(donnees["base"]),
            butins_passifs=[Butin.from_dict(b) for b in donnees["butins_passifs"]],
            butins_hostiles=[Butin.from_dict(b) for b in donnees["butins_hostiles"]],
            phrase_intro=donnees["phrase_intro"],
            phrase_attaque=donnees["phrase_attaque"],
            monnaie=donnees["monnaie"],
        )