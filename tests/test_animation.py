import time

import pytest

from astroship.animation import (
    afficher_frame,
    frame,
    lancer_animation,
    lancer_animation_spatiale,
    lieu_ascii,
    phrase_random,
)


@pytest.fixture(autouse=True)
def sans_pause(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda secondes: None)


@pytest.mark.parametrize("destination", ["zone hostile", "magasin", "auberge"])
def test_lieux_connus_ont_six_lignes(destination):
    lieu = lieu_ascii(destination)
    assert lieu is not None
    assert len(lieu) == 6


def test_lieu_magasin_premiere_ligne():
    assert lieu_ascii("magasin")[0] == "    ____________   "


def test_lieu_inconnu():
    assert lieu_ascii("vaisseau") is None


def test_frame_place_le_personnage():
    lieu = lieu_ascii("auberge")
    lignes = frame(lieu, 0)
    assert len(lignes) == len(lieu)
    assert lignes[3] == lieu[3] + "   O  "
    assert lignes[0] == lieu[0]


def test_frame_decalage_invariant():
    lieu = lieu_ascii("zone hostile")
    base = frame(lieu, 0)
    decale = frame(lieu, 5)
    for ligne_lieu, ligne_base, ligne_decalee in zip(lieu, base, decale):
        assert ligne_decalee == ligne_lieu + " " * 5 + ligne_base[len(ligne_lieu):]


def test_afficher_frame_imprime_les_lignes(capsys):
    lieu = lieu_ascii("magasin")
    afficher_frame(lieu, 2)
    sortie = capsys.readouterr().out.splitlines()
    assert sortie == frame(lieu, 2)


def test_phrase_random_vide():
    assert phrase_random([]) is None


def test_phrase_random_choisit_une_phrase(capsys):
    phrases = ["Bienvenue", "Salut voyageur"]
    choisie = phrase_random(phrases)
    assert choisie in phrases
    assert choisie in capsys.readouterr().out


def test_lancer_animation_arrivee(capsys):
    lancer_animation("magasin", ["Bonjour"])
    sortie = capsys.readouterr().out
    assert "Bonjour" in sortie
    assert sortie.rstrip().endswith("Le personnage est arrivé à la magasin !")


def test_lancer_animation_destination_inconnue():
    with pytest.raises(ValueError, match="Destination inconnue."):
        lancer_animation("lune", ["x"])


def test_animation_spatiale_arrivee(capsys):
    lancer_animation_spatiale("arrivee", ["Atterrissage"])
    sortie = capsys.readouterr().out
    assert "PLANETE" in sortie
    assert sortie.count("\x1b[2J\x1b[1;1H") == 20
    assert "Atterrissage" in sortie


def test_animation_spatiale_depart(capsys):
    lancer_animation_spatiale("depart", [])
    sortie = capsys.readouterr().out
    assert sortie.rstrip().endswith("🚀 La fusée a quitté l'orbite !")


def test_animation_spatiale_inconnue():
    with pytest.raises(ValueError, match="Commande spatiale inconnue"):
        lancer_animation_spatiale("orbite", [])