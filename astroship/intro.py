"""Title screen, main menu and the ending sequence."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass, field

from astroship import jeu
from astroship.evenement import Choix, Evenement, QuitterJeu
from astroship.sauvegarde import Sauvegarde
from astroship.texte import affiche

_LOGO = r"""
                              /================================================================================\
                              ||   █████╗ ███████╗████████╗██████╗  ██████╗     ███████╗██╗  ██╗██╗██████╗    ||
                              ||  ██╔══██╗██╔════╝╚══██╔══╝██╔══██╗██╔═══██╗    ██╔════╝██║  ██║██║██╔══██╗   ||
                              ||  ███████║███████╗   ██║   ██████╔╝██║   ██║    ███████╗███████║██║██████╔╝   ||
                              ||  ██╔══██║╚════██║   ██║   ██╔══██╗██║   ██║    ╚════██║██╔══██║██║██╔═══╝    ||
                              ||  ██║  ██║███████║   ██║   ██║  ██║╚██████╔╝    ███████║██║  ██║██║██║        ||
                              ||  ╚═╝  ╚═╝╚══════╝   ╚═╝   ╚═╝  ╚═╝ ╚═════╝     ╚══════╝╚═╝  ╚═╝╚═╝╚═╝        ||
                              \================================================================================/
                                                                |
                                                               -+-
                                                              /-|-\
                                                              | O |
                                                              |   |
                                                             /-----\
                                                            |_______|
                                  """

_VAISSEAU = r"""
                            |
                           -+-
                          /-|-\
                          | O |
                          |   |
                         /-----\
                        |_______|
"""

_ETOILES = (
    """
                                                 *        *

                           *           *                   *
       *       *                           *       *

""",
    """
                          *      *                 *         *
       *       *              *           *              *

                        *               *         *
""",
    """
           *          *     *         *      *      *       *

                     *       *        *          *        *

""",
    """
                     *     *     *     *     *     *     *
                                            *     *     *     *     *     *     *
                         *     *     *     *     *     *     *
""",
    """



""",
    """
                         *
          *                             *
                    *         *
       *      *           *         *      *
                            *
    *         *   *      *       *        *
               *                  *

               *                  *
    *        *     *     *     *     *
         *      *         *       *
   *               *                  *
""",
    """
          *          *         *
       *       *          *         *      *



       *          *         *       *    *
   *         *         *       *        *
""",
)

_EFFACER = "\x1b[2J\x1b[1;1H"


@dataclass
class Intro(Evenement):
    """The title screen and its main menu."""

    sauvegarde: Sauvegarde = field(default_factory=Sauvegarde)

    def lancer_intro(self) -> None:
        """Show the title and offer a new game, loading a game or quitting."""
        affiche(_LOGO, 1)
        Choix(
            [
                ("Nouvelle partie", jeu.LancerPartie(self.sauvegarde)),
                ("Charger Partie", jeu.ChargerPartie(self.sauvegarde)),
                ("Quitter", QuitterJeu()),
            ]
        ).lancer_choix()

    def action(self) -> None:
        """Run the title screen."""
        self.lancer_intro()


def lancer_outro() -> None:
    """Play the hyperspace jump that ends a won game."""
    affiche(
        "Vous avez réussi à accumuler assez d'uranium, vous pressez sur le bouton "
        "d'hyper espace pour commencer votre voyage retour",
        25,
    )
    time.sleep(5)

    for _ in range(5):
        for etoiles in _ETOILES:
            print(_EFFACER, end="")
            print(f"{etoiles}{etoiles}\n{_VAISSEAU}")
            sys.stdout.flush()
            time.sleep(0.3)

    print("Entrée réussie dans l'hyperespace !")
    print(
        "Vous apercevez votre planète, Astro ne peut s'emppêcher d'être ému en "
        "disant que \nc'est les émotions !"
    )


def main(argv: list[str] | None = None) -> int:
    """Start the game at its title screen."""
    Intro().action()
    return 0