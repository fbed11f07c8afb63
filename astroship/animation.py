"""Console animations for moving around a planet and through space."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Sequence

from astroship.texte import affiche

_EFFACER = "\x1b[2J\x1b[1;1H"
_TRAJET_SPATIAL = 20
_PAS_TRAJET = 25

_STICKMAN = (
    "",
    "",
    "",
    "   O  ",
    "  /|\\ ",
    "  / \\ ",
)

_VAISSEAU = (
    "        |        ",
    "       -+-       ",
    "      /-|-\\      ",
    "      | O |      ",
    "      |   |      ",
    "     /-----\\     ",
)

_PLANETE = (
    "       _____       ",
    "    .-'     '-.    ",
    "  .'  PLANETE  '.  ",
    "  '-._______,-'    ",
)

_GROTTE = (
    "       ________      ",
    "     /          \\   ",
    "    /            \\  ",
    "   |              | ",
    "   |     ____     | ",
    "   |____|    |____| ",
)

_MAGASIN = (
    "    ____________   ",
    "   |   ____     |  ",
    "   |  |    |    |  ",
    "   |  |____|    |  ",
    "   |            |  ",
    "   |____________|  ",
)

_AUBERGE = (
    "       ________    ",
    "      |  ____  |   ",
    "     /| |    | |\\  ",
    "    || | [] | || | ",
    "    || |____| || | ",
    "    ||________||_| ",
)

_LIEUX = {
    "zone hostile": _GROTTE,
    "magasin": _MAGASIN,
    "auberge": _AUBERGE,
}


def lieu_ascii(destination: str) -> tuple[str, ...] | None:
    """The six-line ASCII drawing of a place, or ``None`` when unknown."""
    return _LIEUX.get(destination)


def frame(lieu: Sequence[str], position: int) -> list[str]:
    """Lines of a scene with the stick figure ``position`` columns to its right."""
    lignes = [
        ligne + " " * position + bonhomme for ligne, bonhomme in zip(lieu, _STICKMAN)
    ]
    lignes.extend(lieu[len(_STICKMAN):])
    return lignes


def afficher_frame(lieu: Sequence[str], position: int) -> None:
    """Print one frame of a scene."""
    for ligne in frame(lieu, position):
        print(ligne)


def phrase_random(phrases: Sequence[str]) -> str | None:
    """Type out one phrase picked at random; return it, or ``None`` if there are none."""
    if not phrases:
        return None
    phrase = random.choice(list(phrases))
    affiche(phrase, 10)
    time.sleep(1.5)
    return phrase


def _lignes_vides(nombre: int) -> None:
    print("\n" * max(nombre, 0), end="")


def _dessiner(lignes: Sequence[str]) -> None:
    for ligne in lignes:
        print(ligne)


def lancer_animation_spatiale(destination: str, phrases_arrivee: Sequence[str]) -> None:
    """Animate the ship arriving at (``"arrivee"``) or leaving (``"depart"``) a planet."""
    if destination == "arrivee":
        for etape in range(_TRAJET_SPATIAL):
            print(_EFFACER, end="")
            _lignes_vides(25 - len(_PLANETE) - etape)
            _dessiner(_PLANETE)
            _lignes_vides(_TRAJET_SPATIAL - etape)
            _dessiner(_VAISSEAU)
            time.sleep(0.1)
        phrase_random(phrases_arrivee)
    elif destination == "depart":
        for etape in reversed(range(_TRAJET_SPATIAL)):
            print(_EFFACER, end="")
            _lignes_vides(etape + 2)
            _dessiner(_VAISSEAU)
            _lignes_vides(25 - (len(_PLANETE) + etape + len(_VAISSEAU)))
            _dessiner(_PLANETE)
            time.sleep(0.1)
        print("\n🚀 La fusée a quitté l'orbite !")
    else:
        raise ValueError(
            'Commande spatiale inconnue : utilisez "depart" ou "arrivee"'
        )


def lancer_animation(destination: str, phrases_arrivee: Sequence[str]) -> None:
    """Animate the character walking up to a place on a planet."""
    lieu = lieu_ascii(destination)
    if lieu is None:
        raise ValueError("Destination inconnue.")

    for position in range(_PAS_TRAJET, -1, -1):
        print(_EFFACER, end="")
        afficher_frame(lieu, position)
        sys.stdout.flush()
        time.sleep(0.12)

    phrase_random(phrases_arrivee)
    print(f"\nLe personnage est arrivé à la {destination} !")