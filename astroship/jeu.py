"""Game setup and the navigation loop between planets."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from astroship import intro
from astroship.combat import JoueurVaincu
from astroship.evenement import Choix, Evenement, QuitterJeu
from astroship.personnage import (
    PersonnagePrincipal,
    charger_personnage,
    sauvegarder_personnage,
)
from astroship.planete import charge_planete, sauvegarde_planete
from astroship.sauvegarde import Sauvegarde
from astroship.spatial import Vaisseau, VoyagePlanete
from astroship.texte import affiche

URANIUM_REQUIS = 30
DANS_L_ESPACE = "Dans l'espace"
_DELAI = 30
_ENTIER = re.compile(r"\+?[0-9]+")

_TEXTE_NOUVELLE_PARTIE = (
    "Bienvenue, aventurier des étoiles.\n"
    "        Votre vaisseau vient de subir une panne critique : plus une goutte "
    "d'uranium, le précieux carburant qui alimente votre propulsion hyperespace.\n"
    "        Vous dérivez désormais au cœur d’une galaxie inconnue, isolé, "
    "vulnérable... mais pas sans ressources.\n"
    "        Votre mission : explorer, survivre et trouver suffisamment d’uranium "
    "pour rallumer vos moteurs et rentrer enfin chez vous.\n"
    "        "
)


def noms_fichiers_sans_extensions(dossier: str | Path) -> list[str]:
    """Names without extension of the files directly inside ``dossier``.

    Sub-directories are ignored; an unreadable or missing directory gives an
    empty list.
    """
    try:
        entrees = list(Path(dossier).iterdir())
    except OSError:
        return []
    return sorted(entree.stem for entree in entrees if entree.is_file())


def _entier(saisie: str) -> int | None:
    texte = saisie.strip()
    return int(texte) if _ENTIER.fullmatch(texte) else None


@dataclass
class BoucleJeu:
    """A game in progress: the player, the ship and where they are saved."""

    personnage: PersonnagePrincipal
    vaisseau: Vaisseau
    sauvegarde: Sauvegarde = field(default_factory=Sauvegarde)

    @classmethod
    def nouvelle_partie(cls, sauvegarde: Sauvegarde | None = None) -> BoucleJeu:
        """Start a new game: reset the planets and the player from the defaults."""
        sauvegarde = sauvegarde if sauvegarde is not None else Sauvegarde()
        affiche(_TEXTE_NOUVELLE_PARTIE, _DELAI)

        (sauvegarde.chemin / "planete_json").mkdir(parents=True, exist_ok=True)
        for nom in noms_fichiers_sans_extensions(sauvegarde.chemin / "planete_default"):
            sauvegarde_planete(charge_planete(nom, True, sauvegarde), sauvegarde)

        personnage = PersonnagePrincipal.from_dict(
            sauvegarde.charge("nouveau_personnage.json")
        )
        sauvegarder_personnage(sauvegarde, personnage)
        vaisseau = Vaisseau(personnage.carburant, personnage.uranium, None)
        return cls(personnage, vaisseau, sauvegarde)

    @classmethod
    def charger(cls, sauvegarde: Sauvegarde | None = None) -> BoucleJeu:
        """Resume the saved game, placing the ship at the player's planet if any."""
        sauvegarde = sauvegarde if sauvegarde is not None else Sauvegarde()
        affiche("Chargement de la partie sauvegardée...", _DELAI)
        personnage = charger_personnage(sauvegarde)

        position = None
        if personnage.planete not in ("", "None"):
            planete = charge_planete(personnage.planete, False, sauvegarde)
            position = VoyagePlanete(personnage.planete, planete.cout_voyage)
        vaisseau = Vaisseau(personnage.carburant, personnage.uranium, position)
        return cls(personnage, vaisseau, sauvegarde)

    def _visiter(self, nom: str) -> None:
        planete = charge_planete(nom, False, self.sauvegarde)
        try:
            planete.visiter(self.personnage, self.sauvegarde)
        except JoueurVaincu:
            self.personnage.entite.points_de_vie = 0
        self.vaisseau.position = None
        self.vaisseau.carburant = self.personnage.carburant
        self.vaisseau.uranium = self.personnage.uranium

    def _planetes_disponibles(self) -> list[VoyagePlanete]:
        dossier = self.sauvegarde.chemin / "planete_json"
        planetes = []
        for nom in noms_fichiers_sans_extensions(dossier):
            planete = charge_planete(nom, False, self.sauvegarde)
            planetes.append(VoyagePlanete(planete.nom, planete.cout_voyage))
        return planetes

    def _en_vie(self) -> bool:
        return self.personnage.entite.points_de_vie > 0

    def boucle_jeu(self) -> None:
        """Run the navigation menu until the player quits, dies or wins."""
        planetes = self._planetes_disponibles()
        en_cours = True

        while en_cours and self._en_vie() and self.personnage.uranium < URANIUM_REQUIS:
            if (
                self.vaisseau.position is not None
                and self.personnage.planete != DANS_L_ESPACE
            ):
                self._visiter(self.personnage.planete)
                if self.personnage.uranium >= URANIUM_REQUIS or not self._en_vie():
                    break

            if (
                self.personnage.carburant <= 0
                and self.vaisseau.afficher_etat() == DANS_L_ESPACE
            ):
                print(
                    "Malheuresement vous êtes bloqué dans l'espace, vous n'avez pas su "
                    "gérer votre budget carburant\ncela vous a offert une croisière "
                    "dans l'espace jusqu'à la fin de vos jours.\nEntre autre : "
                )
                self.personnage.entite.points_de_vie = 0
                break

            print("\n=== Menu de navigation ===")
            self.vaisseau.afficher_etat()
            print("Choisissez une planète à visiter :")
            for numero, planete in enumerate(planetes, start=1):
                print(f"[{numero}] {planete.nom} Carburant nécessaire : {planete.cout_voyage}")
            print("[0] Quitter")

            choix = _entier(input())
            if choix == 0:
                print("Vous avez quitté le jeu.")
                sauvegarder_personnage(self.sauvegarde, self.personnage)
                en_cours = False
            elif choix is not None and 1 <= choix <= len(planetes):
                destination = planetes[choix - 1]
                print(f"Vous avez choisi de voyager vers {destination.nom}")
                if self.personnage.carburant < destination.cout_voyage:
                    affiche("Pas assez de carburant !", 20)
                    continue
                self.personnage.planete = destination.nom
                self.personnage.carburant -= destination.cout_voyage
                sauvegarder_personnage(self.sauvegarde, self.personnage)
                self.vaisseau.voyager(destination)
                self._visiter(self.personnage.planete)
            else:
                print("Choix invalide. Veuillez entrer un nombre valide.")

        if not self._en_vie():
            affiche("\nVous êtes mort !", 30)
            Choix(
                [
                    ("Charger la dernière sauvegarde", ChargerPartie(self.sauvegarde)),
                    ("Quitter", QuitterJeu()),
                ]
            ).lancer_choix()
        elif self.personnage.uranium >= URANIUM_REQUIS:
            sauvegarder_personnage(self.sauvegarde, self.personnage)
            intro.lancer_outro()
            affiche("Vous avez gagné !!!!!!!", 50)


@dataclass
class ChargerPartie(Evenement):
    """Resume the saved game."""

    sauvegarde: Sauvegarde = field(default_factory=Sauvegarde)

    def action(self) -> None:
        """Load the saved game and play it."""
        BoucleJeu.charger(self.sauvegarde).boucle_jeu()


@dataclass
class LancerPartie(Evenement):
    """Start a new game."""

    sauvegarde: Sauvegarde = field(default_factory=Sauvegarde)

    def action(self) -> None:
        """Set up a new game and play it."""
        BoucleJeu.nouvelle_partie(self.sauvegarde).boucle_jeu()