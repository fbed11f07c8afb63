"""Items that can be carried, sold and consumed."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from astroship.entite import Entite

_MULTIPLICATEURS = (
    "multiplicateur_pv",
    "multiplicateur_pv_max",
    "multiplicateur_force",
    "multiplicateur_vitesse",
)


def _arrondi(valeur: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(valeur) + 0.5), valeur))


def _stat_multipliee(valeur: int, mul: float) -> int:
    return max(_arrondi(valeur * mul), 1)


@dataclass
class Objet:
    """A named item with a quantity and optional consumable multipliers."""

    nom: str
    description: str
    quantite: int
    multiplicateur_pv: float | None = None
    multiplicateur_pv_max: float | None = None
    multiplicateur_force: float | None = None
    multiplicateur_vitesse: float | None = None

    def consommer(self, cible: Entite) -> None:
        """Add to each statistic of ``cible`` the share given by its multiplier."""
        if self.multiplicateur_pv is not None:
            cible.points_de_vie += max(int(cible.points_de_vie * self.multiplicateur_pv), 0)
        if self.multiplicateur_force is not None:
            cible.force += max(int(cible.force * self.multiplicateur_force), 0)
        if self.multiplicateur_vitesse is not None:
            cible.vitesse += max(int(cible.vitesse * self.multiplicateur_vitesse), 0)
        if self.multiplicateur_pv_max is not None:
            cible.points_de_vie_max += max(
                int(cible.points_de_vie_max * self.multiplicateur_pv_max), 0
            )

    def est_consommable(self) -> bool:
        """True when at least one multiplier is set."""
        return any(getattr(self, nom) is not None for nom in _MULTIPLICATEURS)

    def appliquer_effets(
        self, pv: int, pv_max: int, force: int, vitesse: int
    ) -> tuple[int, int, int, int]:
        """Return ``(pv, pv_max, force, vitesse)`` after the item is consumed."""
        if self.multiplicateur_pv_max is not None:
            pv_max = _stat_multipliee(pv_max, self.multiplicateur_pv_max)

        mul = self.multiplicateur_pv
        if mul is not None:
            if mul > 1.0:
                ajout = max(_arrondi(pv_max * (mul - 1.0)), 0)
                pv = min(pv + ajout, pv_max)
            elif mul < 1.0:
                retrait = max(_arrondi(pv_max * mul), 0)
                pv = max(pv - retrait, 0)
            pv = min(pv, pv_max)

        if self.multiplicateur_force is not None:
            force = _stat_multipliee(force, self.multiplicateur_force)
        if self.multiplicateur_vitesse is not None:
            vitesse = _stat_multipliee(vitesse, self.multiplicateur_vitesse)

        return pv, pv_max, force, vitesse

    def afficher(self) -> None:
        """Print the item card."""
        print(f"📦 Objet : {self.nom}")
        print(f"   📖 Description : {self.description}")
        print(f"   🔢 Quantité : {self.quantite}")
        if self.multiplicateur_pv is not None:
            print(f"   ❤ Recuperation PV : x{self.multiplicateur_pv:.2f}")
        if self.multiplicateur_pv_max is not None:
            print(f"   ❤ Multiplicateur PV Max : x{self.multiplicateur_pv_max:.2f}")
        if self.multiplicateur_force is not None:
            print(
                "   o()xxxx[@::::::::::::::::::> Multiplicateur Force : "
                f"x{self.multiplicateur_force:.2f}"
            )
        if self.multiplicateur_vitesse is not None:
            print(f"   ⚡ Multiplicateur Vitesse : x{self.multiplicateur_vitesse:.2f}")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation, leaving out unset multipliers."""
        donnees: dict[str, Any] = {
            "nom": self.nom,
            "description": self.description,
            "quantite": self.quantite,
        }
        for nom in _MULTIPLICATEURS:
            valeur = getattr(self, nom)
            if valeur is not None:
                donnees[nom] = valeur
        return donnees

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Objet:
        """Build an item from its JSON representation."""
        return cls(
            donnees["nom"],
            donnees["description"],
            donnees["quantite"],
            **{nom: donnees.get(nom) for nom in _MULTIPLICATEURS},
        )