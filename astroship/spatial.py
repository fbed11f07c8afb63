"""The spaceship and its travel destinations."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass


@dataclass
class VoyagePlanete:
    """A destination with the fuel it costs to reach."""

    nom: str
    cout_voyage: int


@dataclass
class Vaisseau:
    """The player's ship: fuel, uranium and the planet it is at, if any."""

    carburant: int
    uranium: int
    position: VoyagePlanete | None = None

    def afficher_etat(self) -> str:
        """Print the ship state and return where it is."""
        position = self.position.nom if self.position is not None else "Dans l'espace"
        print(f"Carburant: {self.carburant}, Uranium: {self.uranium}, Position: {position}")
        return position

    def voyager(self, planete: VoyagePlanete) -> bool:
        """Travel to ``planete`` when there is enough fuel; True on success."""
        if self.carburant >= planete.cout_voyage:
            self.carburant -= planete.cout_voyage
            self.position = dataclasses.replace(planete)
            print(f"Voyage réussi vers {planete.nom} ! Carburant restant: {self.carburant}")
            return True
        print(f"Pas assez de carburant pour aller sur {planete.nom} !")
        return False