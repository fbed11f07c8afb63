from dataclasses import dataclass

import pytest

from astroship.evenement import Choix, Continuer, Evenement, QuitterJeu


@pytest.fixture(autouse=True)
def sans_pause(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda _secondes: None)


@dataclass
class Compteur(Evenement):
    appels: int = 0

    def action(self):
        self.appels += 1


def saisies(monkeypatch, *valeurs):
    reponses = iter(valeurs)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(reponses))


def test_affiche_numerote_les_options(capsys):
    choix = Choix([("Oui", Continuer()), ("Non", Continuer())])
    choix.affiche()
    sortie = capsys.readouterr().out
    assert "[1] - Oui" in sortie
    assert "[2] - Non" in sortie


def test_demander_choix_retourne_l_evenement_choisi(monkeypatch):
    premier, second = Compteur(), Compteur()
    saisies(monkeypatch, "2")
    choix = Choix([("A", premier), ("B", second)])
    assert choix.demander_choix() is second


def test_demander_choix_redemande_sur_entree_invalide(monkeypatch, capsys):
    continuer = Continuer()
    saisies(monkeypatch, "abc", "0", "5", "-1", "1")
    choix = Choix([("Oui", continuer), ("Non", Compteur())])
    assert choix.demander_choix() is continuer
    assert capsys.readouterr().out.count("Entrée invalide. Essayez encore.") == 4


def test_lancer_choix_execute_uniquement_l_evenement_choisi(monkeypatch):
    premier, second = Compteur(), Compteur()
    saisies(monkeypatch, " 1 ")
    Choix([("A", premier), ("B", second)]).lancer_choix()
    assert premier.appels == 1
    assert second.appels == 0


def test_quitter_jeu_sort_avec_code_zero(capsys):
    with pytest.raises(SystemExit) as info:
        QuitterJeu().action()
    assert info.value.code == 0
    assert "Merci d'avoir joué, à bientot !" in capsys.readouterr().out


def test_evenement_est_abstrait():
    with pytest.raises(TypeError):
        Evenement()