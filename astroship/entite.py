"""Base statistics shared by characters and enemies."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Entite:
    """A living being with hit points and combat statistics."""

    nom: str
    points_de_vie: int
    points_de_vie_max: int
    force: int
    intelligence: int
    vitesse: int

    def est_mort(self) -> bool:
        """True when no hit points remain."""
        return self.points_de_vie <= 0

    def subir_degats(self, degats: int) -> None:
        """Remove ``degats`` hit points, never going below zero."""
        self.points_de_vie = max(self.points_de_vie - degats, 0)

    def soigner(self, soin: int) -> None:
        """Heal by ``soin`` unless dead or the heal would exceed the maximum."""
        if not self.est_mort() and self.points_de_vie + soin <= self.points_de_vie_max:
            self.points_de_vie += soin

    def soigner_completement(self) -> None:
        """Restore hit points to the maximum unless dead."""
        if not self.est_mort():
            self.points_de_vie = self.points_de_vie_max

    def augmentation_niveau(self, choix_statistique: str) -> None:
        """Level up: +5 max hit points, full heal and +1 to the chosen statistic."""
        self.points_de_vie_max += 5
        self.points_de_vie = self.points_de_vie_max

        if choix_statistique == "force":
            self.force += 1
            print("Votre force a augmenté !")
        elif choix_statistique == "intelligence":
            self.intelligence += 1
            print("Votre intelligence a augmenté !")
        elif choix_statistique == "vitesse":
            self.vitesse += 1
            print("Votre vitesse a augmenté !")
        else:
            print("Statistique inconnue, aucun changement effectué.")
        print(
            f"{self.nom} est monté en niveau ! "
            f"Nouveaux points de vie max : {self.points_de_vie_max}."
        )

    def afficher_statistiques(self) -> str:
        """Print the statistics block and return it."""
        texte = "\n".join(
            (
                f"=== {self.nom} ===",
                f"Points de vie : {self.points_de_vie}/{self.points_de_vie_max}",
                f"Force : {self.force}",
                f"Intelligence : {self.intelligence}",
                f"Vitesse : {self.vitesse}",
            )
        )
        print(texte)
        return texte

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return asdict(self)

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Entite:
        """Build an entity from its JSON representation."""
        return cls(
            nom=donnees["nom"],
            points_de_vie=donnees["points_de_vie"],
            points_de_vie_max=donnees["points_de_vie_max"],
            force=donnees["force"],
            intelligence=donnees["intelligence"],
            vitesse=donnees["vitesse"],
        )