"""Places on a planet: the inn where the player rests and the shop."""

from __future__ import annotations

import re
import time
from dataclasses import dataclass, field
from typing import Any

from astroship.animation import lancer_animation
from astroship.evenement import Choix, Evenement
from astroship.marchandage import Affaire
from astroship.personnage import (
    Inventaire,
    PersonnagePrincipal,
    charger_personnage,
    sauvegarder_personnage,
)
from astroship.sauvegarde import Sauvegarde
from astroship.texte import affiche

_ENTIER = re.compile(r"\+?[0-9]+")


class AchatErreur(Exception):
    """Raised when a purchase cannot be made."""


def _entier(saisie: str) -> int | None:
    texte = saisie.strip()
    return int(texte) if _ENTIER.fullmatch(texte) else None


@dataclass
class ReposOui(Evenement):
    """Accept to rest at the inn: pay, heal fully and save."""

    personnage: PersonnagePrincipal
    prix_repos: int
    sauvegarde: Sauvegarde

    def action(self) -> None:
        """Pay the price, heal the character completely and save it."""
        delai = 10
        self.personnage.inventaire.remove_monnaie(self.prix_repos)
        affiche("Vous vous reposez...", delai)
        time.sleep(3)
        self.personnage.entite.soigner_completement()
        affiche("Vous êtes complètement soigné !", delai)
        sauvegarder_personnage(self.sauvegarde, self.personnage)


@dataclass
class ReposNon(Evenement):
    """Decline to rest at the inn."""

    def action(self) -> None:
        """Say goodbye politely."""
        affiche("Très bien, peut-être une autre fois.", 50)


@dataclass
class Auberge:
    """An inn where the player may rest for a price."""

    prix_repos: int
    phrase_arrive: list[str] = field(default_factory=list)

    def _peut_se_reposer(self, personnage: PersonnagePrincipal) -> bool:
        if personnage.inventaire.monnaie < self.prix_repos:
            print("Vous n'avez pas assez d'argent pour vous reposer.")
            return False
        entite = personnage.entite
        if entite.points_de_vie == entite.points_de_vie_max:
            print(
                f"Vous êtes en pleine forme ! "
                f"[{entite.points_de_vie}/{entite.points_de_vie_max}]"
            )
            return False
        return True

    def proposer_repos(self, sauvegarde: Sauvegarde) -> None:
        """Walk to the inn and offer the saved player a rest."""
        personnage = charger_personnage(sauvegarde)
        lancer_animation("auberge", self.phrase_arrive)
        print(
            "Bienvenue à l'auberge. Le prix pour se reposer est de "
            f"{self.prix_repos} pièces."
        )
        if not self._peut_se_reposer(personnage):
            return

        entite = personnage.entite
        print(f"Vos pv actuellement [{entite.points_de_vie}/{entite.points_de_vie_max}]")
        Choix(
            [
                ("Oui", ReposOui(personnage, self.prix_repos, sauvegarde)),
                ("Non", ReposNon()),
            ]
        ).lancer_choix()

    def proposer_repos_test(
        self, personnage: PersonnagePrincipal, choix: int | None = None
    ) -> None:
        """Offer a rest to ``personnage``; ``choix`` 1 accepts, anything else declines.

        When ``choix`` is None the answer is read from standard input.
        """
        print(
            "Bienvenue à l'auberge. Le prix pour se reposer est de "
            f"{self.prix_repos} pièces."
        )
        print(
            "Vos points de vies sont actuellement de : "
            f"{personnage.entite.points_de_vie}"
        )
        if not self._peut_se_reposer(personnage):
            return

        if choix is None:
            print("Souhaitez-vous vous reposer ? [1] Oui / [2] Non")
            valeur = _entier(input())
            reponse = valeur if valeur is not None and valeur <= 255 else 2
        else:
            reponse = choix

        if reponse == 1:
            personnage.inventaire.remove_monnaie(self.prix_repos)
            print("Vous vous reposez...")
            time.sleep(3)
            personnage.entite.soigner_completement()
            print("Vous êtes complètement soigné !")
        else:
            print("Très bien, peut-être une autre fois.")

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {"prix_repos": self.prix_repos, "phrase_arrive": list(self.phrase_arrive)}

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Auberge:
        """Build an inn from its JSON representation."""
        return cls(
            prix_repos=donnees["prix_repos"],
            phrase_arrive=list(donnees["phrase_arrive"]),
        )


@dataclass
class Magasin:
    """A shop offering a list of deals."""

    affaires: list[Affaire] = field(default_factory=list)
    phrase_arrive: list[str] = field(default_factory=list)

    def ajouter_affaire(self, affaire: Affaire) -> None:
        """Add a deal to the shop."""
        self.affaires.append(affaire)

    def acheter(self, index: int, inventaire: Inventaire) -> None:
        """Buy deal ``index`` (from 0) into ``inventaire``.

        Raises AchatErreur when the deal does not exist, funds are short or
        the stock is exhausted.
        """
        if not 0 <= index < len(self.affaires):
            raise AchatErreur("Affaire non valide.")
        affaire = self.affaires[index]
        if inventaire.monnaie < affaire.prix:
            raise AchatErreur("Fonds insuffisants.")
        if not affaire.infini and affaire.quantite == 0:
            raise AchatErreur("Stock épuisé.")

        inventaire.remove_monnaie(affaire.prix)
        inventaire.add_objet(affaire.instance)
        if not affaire.infini:
            affaire.quantite -= 1

    def _afficher(self, monnaie: int) -> None:
        print("\n=== Bienvenue au magasin ===")
        print(f"Monnaie actuelle : {monnaie} pièces")
        print("Voici les objets disponibles :")
        for numero, affaire in enumerate(self.affaires):
            infini = " (infini)" if affaire.infini else ""
            print(
                f"[{numero}] {affaire.instance.nom} ({affaire.instance.quantite}) - "
                f"{affaire.prix} pièces - Quantité disponibles : "
                f"{affaire.quantite}{infini}"
            )

    def interaction_magasin(
        self, personnage: PersonnagePrincipal, sauvegarde: Sauvegarde
    ) -> None:
        """Walk to the shop and let the saved player buy until they leave."""
        lancer_animation("magasin", self.phrase_arrive)
        acheteur = charger_personnage(sauvegarde)

        while True:
            self._afficher(acheteur.inventaire.monnaie)
            print("Entrez l'index de l'objet à acheter ou 'q' pour quitter le magasin :")
            saisie = input().strip()
            if saisie.lower() == "q":
                print("Merci de votre visite !")
                break

            index = _entier(saisie)
            if index is None or index >= len(self.affaires):
                print("Entrée invalide. Veuillez réessayer.")
                continue

            try:
                self.acheter(index, acheteur.inventaire)
            except AchatErreur as erreur:
                print(f"Achat échoué : {erreur}")
            else:
                print("Achat réussi.")

            acheteur.synchroniser_uranium()
            acheteur.synchroniser_carburant()
            personnage.synchroniser_uranium()
            personnage.synchroniser_carburant()
            sauvegarder_personnage(sauvegarde, acheteur)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "affaires": [affaire.to_dict() for affaire in self.affaires],
            "phrase_arrive": list(self.phrase_arrive),
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Magasin:
        """Build a shop from its JSON representation."""
        return cls(
            affaires=[Affaire.from_dict(a) for a in donnees["affaires"]],
            phrase_arrive=list(donnees["phrase_arrive"]),
        )