"""Planets and the actions available while visiting one."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from astroship.animation import lancer_animation_spatiale
from astroship.combat import InventaireInteraction
from astroship.evenement import Choix, Evenement, QuitterJeu
from astroship.lieux import Auberge, Magasin
from astroship.personnage import PersonnagePrincipal, charger_personnage
from astroship.sauvegarde import Sauvegarde
from astroship.zone_hostile import ZoneHostile

_DOSSIER_DEFAUT = "planete_default"
_DOSSIER_PARTIE = "planete_json"


def _ou_defaut(sauvegarde: Sauvegarde | None) -> Sauvegarde:
    return sauvegarde if sauvegarde is not None else Sauvegarde()


@dataclass
class ExplorerZoneHostile(Evenement):
    """Explore the planet's hostile zone, then pick up the money earned."""

    zone_hostile: ZoneHostile
    personnage: PersonnagePrincipal
    sauvegarde: Sauvegarde

    def action(self) -> None:
        """Run the exploration and refresh the player's money from the save."""
        self.zone_hostile.explorer(self.sauvegarde)
        joueur = charger_personnage(self.sauvegarde)
        self.personnage.inventaire.monnaie = joueur.inventaire.monnaie


@dataclass
class AubergeProposerRepos(Evenement):
    """Go to the planet's inn."""

    auberge: Auberge
    sauvegarde: Sauvegarde

    def action(self) -> None:
        """Offer a rest to the saved player."""
        self.auberge.proposer_repos(self.sauvegarde)


@dataclass
class MagasinInteraction(Evenement):
    """Trade at the planet's shop."""

    magasin: Magasin
    personnage: PersonnagePrincipal
    sauvegarde: Sauvegarde

    def action(self) -> None:
        """Open the shop for the player."""
        self.magasin.interaction_magasin(self.personnage, self.sauvegarde)


@dataclass
class StopChoix(Evenement):
    """Leave the planet."""

    nom: str
    phrase_arrive: list[str] = field(default_factory=list)
    stop: bool = field(default=False, init=False)

    def action(self) -> None:
        """Play the departure animation and mark the visit as finished."""
        print(f"Vous quittez la planète {self.nom}.")
        lancer_animation_spatiale("depart", self.phrase_arrive)
        self.stop = True


@dataclass
class Planete:
    """A planet with an inn, a shop and a hostile zone."""

    nom: str
    auberge: Auberge
    magasin: Magasin
    zone_hostile: ZoneHostile
    phrase_arrive: list[str] = field(default_factory=list)
    cout_voyage: int = 0

    def visiter(
        self, personnage: PersonnagePrincipal, sauvegarde: Sauvegarde | None = None
    ) -> None:
        """Offer the planet's activities until the player leaves.

        ``personnage`` is updated with the player's state after each choice,
        and the planet is saved each time.
        """
        sauvegarde = _ou_defaut(sauvegarde)
        lancer_animation_spatiale("arrivee", self.phrase_arrive)

        while True:
            joueur = charger_personnage(sauvegarde)

            print(f"\nBienvenue sur la planète {self.nom} !")
            print(f"\nVotre réserve de carburant : [{joueur.carburant}]")
            print("Que souhaitez-vous faire ?")

            stop = StopChoix(self.nom, list(self.phrase_arrive))
            Choix(
                [
                    (
                        "Explorer une zone hostile",
                        ExplorerZoneHostile(self.zone_hostile, joueur, sauvegarde),
                    ),
                    ("Aller à l'auberge", AubergeProposerRepos(self.auberge, sauvegarde)),
                    (
                        "Marchander avec le magasin",
                        MagasinInteraction(self.magasin, joueur, sauvegarde),
                    ),
                    ("Inventaire", InventaireInteraction(joueur, sauvegarde)),
                    ("Quitter la planète", stop),
                    ("Quitter le jeux", QuitterJeu()),
                ]
            ).lancer_choix()

            for champ in dataclasses.fields(joueur):
                setattr(personnage, champ.name, getattr(joueur, champ.name))
            sauvegarde_planete(self, sauvegarde)
            if stop.stop:
                return

    def add_cout_voyage(self, cout_voyage: int) -> None:
        """Increase the fuel cost of travelling here."""
        self.cout_voyage += cout_voyage

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "nom": self.nom,
            "auberge": self.auberge.to_dict(),
            "magasin": self.magasin.to_dict(),
            "cout_voyage": self.cout_voyage,
            "zone_hostile": self.zone_hostile.to_dict(),
            "phrase_arrive": list(self.phrase_arrive),
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Planete:
        """Build a planet from its JSON representation."""
        return cls(
            nom=donnees["nom"],
            auberge=Auberge.from_dict(donnees["auberge"]),
            magasin=Magasin.from_dict(donnees["magasin"]),
            zone_hostile=ZoneHostile.from_dict(donnees["zone_hostile"]),
            phrase_arrive=list(donnees["phrase_arrive"]),
            cout_voyage=donnees["cout_voyage"],
        )


def charge_planete(
    nom: str, par_defaut: bool, sauvegarde: Sauvegarde | None = None
) -> Planete:
    """Load planet ``nom`` from the default set or from the current game."""
    dossier = _DOSSIER_DEFAUT if par_defaut else _DOSSIER_PARTIE
    donnees = _ou_defaut(sauvegarde).charge(f"{dossier}/{nom}.json")
    return Planete.from_dict(donnees)


def sauvegarde_planete(planete: Planete, sauvegarde: Sauvegarde | None = None) -> None:
    """Save ``planete`` into the current game."""
    _ou_defaut(sauvegarde).sauvegarde(
        f"{_DOSSIER_PARTIE}/{planete.nom}.json", planete.to_dict()
    )