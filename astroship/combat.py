"""Fight resolution: damage, escape and the turn-based combat loop."""

from __future__ import annotations

import copy
import dataclasses
import math
import random
import time
from dataclasses import dataclass, field

from astroship.des import lancer_console_combat
from astroship.ennemi import Ennemi
from astroship.entite import Entite
from astroship.evenement import Choix, Evenement
from astroship.marchandage import Butin
from astroship.personnage import (
    PersonnagePrincipal,
    charger_personnage,
    sauvegarder_personnage,
)
from astroship.sauvegarde import Sauvegarde
from astroship.texte import affiche

DEGATS_CRITIQUES = 999_999
_STATS_DE_BASE = 90
_LANCER_INVALIDE = "Le lancer de dé doit être entre 1 et 20 !"


class JoueurVaincu(Exception):
    """Raised when the player's hit points fall to zero during a fight."""


def calculer_degats(attaque_attaquant: int, attaque_defenseur: int, lancer_de: int) -> int:
    """Damage dealt for a die roll from 1 to 20."""
    if lancer_de == 1:
        return 1
    if lancer_de == 20:
        return DEGATS_CRITIQUES
    if not 2 <= lancer_de <= 19:
        raise ValueError(_LANCER_INVALIDE)
    multiplicateur = 0.5 + lancer_de / 20.0
    defense = float(attaque_defenseur)
    reduction = defense / (defense + 50.0)
    degats = math.floor(attaque_attaquant * (1.0 - reduction) * multiplicateur + 0.5)
    return max(degats, 1)


def tenter_fuite(vitesse_fuyard: int, vitesse_adversaire: int, lancer_de: int) -> bool:
    """Tell whether an escape attempt succeeds for a die roll from 1 to 20."""
    if lancer_de == 1:
        return False
    if lancer_de == 20:
        return True
    if not 2 <= lancer_de <= 19:
        raise ValueError(_LANCER_INVALIDE)
    diff_vitesse = vitesse_fuyard - vitesse_adversaire
    seuil = min(max(10 - int(diff_vitesse / 2), 2), 19)
    affiche(f"Pour réussir la fuite, il faut faire {seuil} ou plus au lancer de dé.", 20)
    return lancer_de >= seuil


def pourcentage_amelioration_joueur(
    pv_max_joueur: int, force_joueur: int, vitesse_joueur: int
) -> float:
    """Ratio between the player's current and starting combined statistics."""
    return (pv_max_joueur + force_joueur + vitesse_joueur) / _STATS_DE_BASE


def _joueur_apres_combat(
    joueur: PersonnagePrincipal, pv: int, pv_max: int, force: int, vitesse: int
) -> PersonnagePrincipal:
    base = joueur.entite
    return PersonnagePrincipal(
        entite=Entite(base.nom, pv, pv_max, force, base.intelligence, vitesse),
        chance=joueur.chance,
        uranium=joueur.uranium,
        carburant=joueur.carburant,
        planete=joueur.planete,
    )


def _recompenser(
    joueur: PersonnagePrincipal,
    mis_a_jour: PersonnagePrincipal,
    butins: list[Butin],
    monnaie: int,
    sauvegarde: Sauvegarde,
) -> None:
    for butin in butins:
        joueur.inventaire.add_objet(butin.objet)
        butin.objet.afficher()
    mis_a_jour.inventaire.add_monnaie(joueur.inventaire.monnaie + monnaie)
    mis_a_jour.inventaire.objets = [dataclasses.replace(o) for o in joueur.inventaire.objets]
    sauvegarder_personnage(sauvegarde, mis_a_jour)


@dataclass
class Attaquer(Evenement):
    """The player's attack on the enemy."""

    pv_ennemi: int
    attaque_joueur: int
    attaque_ennemi: int

    def action(self) -> None:
        """Roll, deal damage and lower the enemy's hit points."""
        lancer = lancer_console_combat(True)
        degats = calculer_degats(self.attaque_joueur, self.attaque_ennemi, lancer)
        self.pv_ennemi = max(self.pv_ennemi - degats, 0)
        affiche(
            f"Vous infligez {degats} dégâts. PV Ennemi restants : {self.pv_ennemi}", 15
        )


@dataclass
class Fuir(Evenement):
    """The player's attempt to escape the fight."""

    joueur: PersonnagePrincipal
    attaque_joueur: int
    vitesse_joueur: int
    pv_max: int
    pv_joueur: int
    ennemi: Ennemi
    vitesse_ennemi: int
    sauvegarde: Sauvegarde
    stop: bool = field(default=False, init=False)

    def action(self) -> None:
        """Roll to escape; on success collect passive loot and save the player."""
        lancer = lancer_console_combat(True)
        if not tenter_fuite(self.vitesse_joueur, self.vitesse_ennemi, lancer):
            affiche("❌ Vous n'avez pas réussi à fuir.", 20)
            return

        affiche("✅ Vous avez réussi à fuir !", 20)
        mis_a_jour = _joueur_apres_combat(
            self.joueur, self.pv_joueur, self.pv_max, self.attaque_joueur, self.vitesse_joueur
        )
        butins = self.ennemi.interaction(random.Random())
        _recompenser(self.joueur, mis_a_jour, butins, self.ennemi.monnaie, self.sauvegarde)
        self.stop = True


@dataclass
class InventaireInteraction(Evenement):
    """Open the inventory in the middle of a fight or a planet visit."""

    joueur: PersonnagePrincipal
    sauvegarde: Sauvegarde
    consomme: bool = field(default=False, init=False)
    inventaire_consulte: bool = field(default=False, init=False)

    def action(self) -> None:
        """Browse the inventory; after a consumption, reload the saved player."""
        a_consomme = self.joueur.inventaire.afficher_interactif(self.sauvegarde)
        self.inventaire_consulte = True
        self.consomme = a_consomme
        if not a_consomme:
            return
        recharge = charger_personnage(self.sauvegarde)
        for champ in dataclasses.fields(recharge):
            setattr(self.joueur, champ.name, getattr(recharge, champ.name))


def lancer_combat(ennemi: Ennemi, sauvegarde: Sauvegarde) -> bool:
    """Fight ``ennemi`` until it dies or the player escapes.

    Returns True when the fight is over; raises JoueurVaincu when the player dies.
    """
    joueur = charger_personnage(sauvegarde)
    pv_max = joueur.entite.points_de_vie_max
    pv_joueur = joueur.entite.points_de_vie
    attaque_joueur = joueur.entite.force
    vitesse_joueur = joueur.entite.vitesse

    pourcentage = pourcentage_amelioration_joueur(pv_max, attaque_joueur, vitesse_joueur)
    pv_ennemi = int(ennemi.base.points_de_vie * pourcentage)
    pv_max_ennemi = pv_ennemi
    attaque_ennemi = int(ennemi.base.force * pourcentage)
    vitesse_ennemi = int(ennemi.base.vitesse * pourcentage)

    affiche(ennemi.phrase_intro, 25)

    while True:
        time.sleep(1.5)
        affiche("\n--- Tour du joueur ---\n", 15)
        affiche(
            f"Vous : PV : {pv_joueur}/{pv_max} | Attaque : {attaque_joueur} "
            f"| Vitesse : {vitesse_joueur}\n",
            15,
        )
        affiche(
            f"{ennemi.base.nom} : PV : {pv_ennemi}/{pv_max_ennemi} "
            f"| Attaque : {attaque_ennemi} | Vitesse : {vitesse_ennemi}\n",
            15,
        )

        copie_joueur = copy.deepcopy(joueur)
        attaquer = Attaquer(pv_ennemi, attaque_joueur, attaque_ennemi)
        fuir = Fuir(
            copie_joueur,
            attaque_joueur,
            vitesse_joueur,
            pv_max,
            pv_joueur,
            copy.deepcopy(ennemi),
            vitesse_ennemi,
            sauvegarde,
        )
        inventaire = InventaireInteraction(copie_joueur, sauvegarde)
        Choix(
            [("Attaquer", attaquer), ("Fuir", fuir), ("Inventaire", inventaire)]
        ).lancer_choix()

        if fuir.stop:
            return True
        pv_ennemi = attaquer.pv_ennemi

        if inventaire.inventaire_consulte:
            if not inventaire.consomme:
                continue
            joueur = inventaire.joueur
            pv_max = joueur.entite.points_de_vie_max
            pv_joueur = joueur.entite.points_de_vie
            attaque_joueur = joueur.entite.force
            vitesse_joueur = joueur.entite.vitesse

        if pv_ennemi == 0:
            affiche("🎉 Ennemi vaincu !\n", 20)
            mis_a_jour = _joueur_apres_combat(
                joueur, pv_joueur, pv_max, attaque_joueur, vitesse_joueur
            )
            ennemi.base.points_de_vie = pv_ennemi
            butins = ennemi.interaction(random.Random())
            ennemi.base.points_de_vie = ennemi.base.points_de_vie_max
            _recompenser(joueur, mis_a_jour, butins, ennemi.monnaie, sauvegarde)
            return True

        time.sleep(1.5)
        affiche("\n--- Tour de l'ennemi ---", 20)
        lancer = lancer_console_combat(False)
        degats = calculer_degats(attaque_ennemi, attaque_joueur, lancer)
        pv_joueur = max(pv_joueur - degats, 0)
        affiche(
            f"{ennemi.phrase_attaque} Vous subissez {degats} dégâts. "
            f"Vos PV restants : {pv_joueur}",
            15,
        )

        if pv_joueur == 0:
            affiche("💀 Vous êtes vaincu...", 20)
            raise JoueurVaincu(ennemi.base.nom)

        courant = charger_personnage(sauvegarde)
        courant.entite.points_de_vie = pv_joueur
        sauvegarder_personnage(sauvegarde, courant)