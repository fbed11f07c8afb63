"""Twenty-sided die rolls."""

from __future__ import annotations

import random
import time

from astroship.texte import affiche


def lancer(rng: random.Random | None = None) -> int:
    """Roll a die from 1 to 20."""
    generateur = rng if rng is not None else random
    return generateur.randint(1, 20)


def lancer_console_combat(tour_joueur: bool, rng: random.Random | None = None) -> int:
    """Roll a die and narrate the result during a fight."""
    resultat = lancer(rng)
    affiche("Lancement du dé 🎲", 20)
    affiche("...", 1000)
    time.sleep(0.2)
    if tour_joueur:
        affiche(f"🎲 Vous avez lancé un dé : {resultat}", 20)
    else:
        affiche(f"🎲 L'ennemi a lancé un dé : {resultat}", 20)

    if resultat == 20:
        affiche("REUSSITE CRITIQUE !!!", 20)
    if resultat == 1:
        affiche("ECHEC CRITIQUE !!!", 20)
    return resultat