"""Shop deals and enemy loot."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any

from astroship.objet import Objet


@dataclass
class Affaire:
    """A shop offer: an item, its price and the remaining stock."""

    prix: int
    instance: Objet
    infini: bool
    quantite: int

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "prix": self.prix,
            "instance": self.instance.to_dict(),
            "infini": self.infini,
            "quantite": self.quantite,
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Affaire:
        """Build a deal from its JSON representation."""
        return cls(
            prix=donnees["prix"],
            instance=Objet.from_dict(donnees["instance"]),
            infini=donnees["infini"],
            quantite=donnees["quantite"],
        )


class Rarete(Enum):
    """Rarity level of a piece of loot."""

    COMMUN = "Commun"
    RARE = "Rare"
    EPIQUE = "Epique"
    LEGENDAIRE = "Legendaire"

    @classmethod
    def from_str(cls, texte: str) -> Rarete | None:
        """Parse a rarity name case-insensitively; ``None`` when unknown."""
        cible = texte.lower()
        return next((r for r in cls if r.value.lower() == cible), None)


@dataclass
class Butin:
    """An item that may drop with a given probability."""

    objet: Objet
    quantite: int
    probabilite: float
    rarete: Rarete

    def __post_init__(self) -> None:
        if self.probabilite < 0.0 or self.probabilite > 1.0:
            raise ValueError("La probabilité doit être entre 0.0 et 1.0 !")

    def est_obtenu(self, rng: random.Random) -> bool:
        """Draw from ``rng`` and tell whether the loot drops."""
        return rng.random() <= self.probabilite

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "objet": self.objet.to_dict(),
            "quantite": self.quantite,
            "probabilite": self.probabilite,
            "rarete": self.rarete.value,
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Butin:
        """Build loot from its JSON representation."""
        return cls(
            objet=Objet.from_dict(donnees["objet"]),
            quantite=donnees["quantite"],
            probabilite=donnees["probabilite"],
            rarete=Rarete(donnees["rarete"]),
        )