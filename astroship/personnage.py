"""The player character, the inventory and consuming items."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass, field
from typing import Any

from astroship.entite import Entite
from astroship.evenement import Choix, Evenement
from astroship.objet import Objet
from astroship.sauvegarde import Sauvegarde

FICHIER_PERSONNAGE = "personnage_principal.json"
MONNAIE_MAX = 2**32 - 1

_ENTIER = re.compile(r"\+?[0-9]+")


@dataclass
class Inventaire:
    """Money and items carried by the player."""

    monnaie: int = 0
    objets: list[Objet] = field(default_factory=list)

    def add_objet(self, objet: Objet) -> None:
        """Add an item, merging quantities with an item of the same name."""
        for existant in self.objets:
            if existant.nom == objet.nom:
                existant.quantite += objet.quantite
                return
        self.objets.append(dataclasses.replace(objet))

    def add_monnaie(self, montant: int) -> None:
        """Add money; the total may not go past the maximum."""
        if self.monnaie + montant > MONNAIE_MAX:
            raise OverflowError("Monnaie au-delà du maximum.")
        self.monnaie += montant

    def remove_monnaie(self, montant: int) -> None:
        """Take money away; the total may not become negative."""
        if montant > self.monnaie:
            raise ValueError("Monnaie insuffisante.")
        self.monnaie -= montant

    def est_vide(self) -> bool:
        """True when no money is held."""
        return self.monnaie == 0

    def est_plein(self) -> bool:
        """True when money is at its maximum."""
        return self.monnaie == MONNAIE_MAX

    def remove_objet_par_nom(self, nom: str) -> None:
        """Drop every item called ``nom``."""
        self.objets = [objet for objet in self.objets if objet.nom != nom]

    def afficher(self) -> None:
        """Print the inventory."""
        print("====================")
        print("=== INVENTAIRE ===")
        print("====================")
        print(f"Monnaie : {self.monnaie}\n")
        if not self.objets:
            print("Aucun objet dans l'inventaire.")
            return
        print("Objets disponibles :")
        for numero, objet in enumerate(self.objets, start=1):
            print(f"  [{numero}] {objet.nom} - {objet.description}")

    def afficher_interactif(self, sauvegarde: Sauvegarde) -> bool:
        """Browse the inventory; True once an item has been consumed."""
        while True:
            print("\n====================")
            print("=== Inventaire ===")
            print("====================")
            print(f"Monnaie : {self.monnaie}")
            for numero, objet in enumerate(self.objets, start=1):
                print(f"{numero}. {objet.nom} (x{objet.quantite}) - {objet.description}")
            print("\nEntrez le numéro d’un objet pour voir les détails, ou [Q] pour quitter :")

            saisie = input().strip()
            if saisie.lower() == "q":
                return False
            if not _ENTIER.fullmatch(saisie):
                print("Entrée invalide.")
                continue
            index = int(saisie)
            if 1 <= index <= len(self.objets):
                if self.afficher_details_objet(index, sauvegarde):
                    return True
            else:
                print("Numéro invalide.")

    def afficher_details_objet(self, index: int, sauvegarde: Sauvegarde) -> bool:
        """Show item ``index`` (from 1) and offer to consume it."""
        if not 1 <= index <= len(self.objets):
            print("Index invalide.")
            return False

        objet = self.objets[index - 1]
        print("\n=== Détails de l'objet ===")
        print(f"Nom : {objet.nom}")
        print(f"Description : {objet.description}")

        consommer = Consommer(self.objets, index, objet.est_consommable(), sauvegarde)
        Choix([("Consommer", consommer), ("Retour", Annuler())]).lancer_choix()
        return consommer.consomme

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {"monnaie": self.monnaie, "objets": [o.to_dict() for o in self.objets]}

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> Inventaire:
        """Build an inventory from its JSON representation."""
        return cls(
            monnaie=donnees["monnaie"],
            objets=[Objet.from_dict(o) for o in donnees["objets"]],
        )


@dataclass
class PersonnagePrincipal:
    """The player: base statistics, luck, fuel, uranium and an inventory."""

    entite: Entite
    chance: int = 0
    uranium: int = 0
    carburant: int = 0
    planete: str = ""
    inventaire: Inventaire = field(default_factory=Inventaire)

    def synchroniser_uranium(self) -> None:
        """Take the uranium count from the "Uranium" item of the inventory."""
        for objet in self.inventaire.objets:
            if objet.nom == "Uranium":
                self.uranium = objet.quantite

    def synchroniser_carburant(self) -> None:
        """Take the fuel count from the "Carburant" item of the inventory."""
        for objet in self.inventaire.objets:
            if objet.nom == "Carburant":
                self.carburant = objet.quantite

    def augmentation_niveau(self, choix_statistique: str) -> None:
        """Level up luck, or defer to the base entity for other statistics."""
        if choix_statistique == "chance":
            self.chance += 1
            print("Votre chance a augmenté !")
        else:
            self.entite.augmentation_niveau(choix_statistique)

    def afficher_statistiques(self) -> None:
        """Print statistics followed by the inventory."""
        self.entite.afficher_statistiques()
        print(f"Chance : {self.chance}")
        print("\n=== Inventaire ===")
        self.inventaire.afficher()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON representation."""
        return {
            "entite": self.entite.to_dict(),
            "inventaire": self.inventaire.to_dict(),
            "chance": self.chance,
            "uranium": self.uranium,
            "planete": self.planete,
            "carburant": self.carburant,
        }

    @classmethod
    def from_dict(cls, donnees: dict[str, Any]) -> PersonnagePrincipal:
        """Build the player from its JSON representation."""
        return cls(
            entite=Entite.from_dict(donnees["entite"]),
            chance=donnees["chance"],
            uranium=donnees["uranium"],
            carburant=donnees["carburant"],
            planete=donnees["planete"],
            inventaire=Inventaire.from_dict(donnees["inventaire"]),
        )


def charger_personnage(sauvegarde: Sauvegarde) -> PersonnagePrincipal:
    """Load the saved player."""
    return PersonnagePrincipal.from_dict(sauvegarde.charge(FICHIER_PERSONNAGE))


def sauvegarder_personnage(sauvegarde: Sauvegarde, personnage: PersonnagePrincipal) -> None:
    """Save the player."""
    sauvegarde.sauvegarde(FICHIER_PERSONNAGE, personnage.to_dict())


def consommer_perso_principal(sauvegarde: Sauvegarde, objet: Objet) -> PersonnagePrincipal:
    """Apply ``objet`` to the saved player, use up one of it and save the result."""
    joueur = charger_personnage(sauvegarde)
    base = joueur.entite
    pv, pv_max, force, vitesse = objet.appliquer_effets(
        base.points_de_vie, base.points_de_vie_max, base.force, base.vitesse
    )

    objets: list[Objet] = []
    for possede in joueur.inventaire.objets:
        if possede.nom != objet.nom:
            objets.append(possede)
        elif possede.quantite > 1:
            possede.quantite -= 1
            objets.append(possede)

    mis_a_jour = PersonnagePrincipal(
        entite=Entite(base.nom, pv, pv_max, force, base.intelligence, vitesse),
        chance=joueur.chance,
        uranium=joueur.uranium,
        carburant=joueur.carburant,
        planete=joueur.planete,
        inventaire=Inventaire(monnaie=joueur.inventaire.monnaie, objets=objets),
    )
    sauvegarder_personnage(sauvegarde, mis_a_jour)
    return mis_a_jour


@dataclass
class Consommer(Evenement):
    """Consume item ``index`` (from 1) of ``objets``."""

    objets: list[Objet]
    index: int
    consommable: bool
    sauvegarde: Sauvegarde
    consomme: bool = field(default=False, init=False)

    def action(self) -> None:
        """Apply the item to the saved player and use one up."""
        if not self.consommable:
            print("Cet objet ne peut pas être consommé.")
            self.consomme = False
            return

        objet = self.objets[self.index - 1]
        consommer_perso_principal(self.sauvegarde, objet)
        print("Objet consommé !")
        if objet.quantite > 1:
            objet.quantite -= 1
        else:
            del self.objets[self.index - 1]
            print("Objet supprimé.")
        self.consomme = True


@dataclass
class Annuler(Evenement):
    """Go back to the inventory without consuming anything."""

    consomme: bool = field(default=False, init=False)

    def action(self) -> None:
        """Report the return to the inventory."""
        print("Retour à l'inventaire.")
        self.consomme = False