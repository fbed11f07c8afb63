import builtins
import time

import pytest

from astroship.entite import Entite
from astroship.jeu import (
    BoucleJeu,
    ChargerPartie,
    LancerPartie,
    noms_fichiers_sans_extensions,
)
from astroship.lieux import Auberge, Magasin
from astroship.personnage import (
    PersonnagePrincipal,
    charger_personnage,
    sauvegarder_personnage,
)
from astroship.planete import Planete, charge_planete
from astroship.sauvegarde import ChargementErreur, Sauvegarde
from astroship.spatial import Vaisseau, VoyagePlanete
from astroship.zone_hostile import ZoneHostile


@pytest.fixture(autouse=True)
def sans_pause(monkeypatch):
    monkeypatch.setattr(time, "sleep", lambda _secondes: None)


@pytest.fixture
def sauvegarde(tmp_path):
    (tmp_path / "planete_json").mkdir()
    (tmp_path / "planete_default").mkdir()
    return Sauvegarde(tmp_path)


def _saisies(monkeypatch, *reponses):
    reste = iter(reponses)
    monkeypatch.setattr(builtins, "input", lambda *args: next(reste))


def _planete(nom="Mars", cout=5):
    return Planete(
        nom,
        Auberge(10, ["Bienvenue"]),
        Magasin(),
        ZoneHostile("Grotte"),
        ["Arrivée"],
        cout_voyage=cout,
    )


def _joueur(carburant=10, uranium=0, planete=""):
    return PersonnagePrincipal(
        Entite("Astro", 50, 50, 20, 10, 20),
        chance=1,
        uranium=uranium,
        carburant=carburant,
        planete=planete,
    )


def test_noms_fichiers_sans_extensions(tmp_path):
    (tmp_path / "b.json").write_text("{}")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "dossier").mkdir()
    assert noms_fichiers_sans_extensions(tmp_path) == ["a", "b"]


def test_noms_fichiers_dossier_absent(tmp_path):
    assert noms_fichiers_sans_extensions(tmp_path / "absent") == []


def test_nouvelle_partie_copie_les_planetes(sauvegarde):
    sauvegarde.sauvegarde("planete_default/Mars.json", _planete().to_dict())
    sauvegarde.sauvegarde("nouveau_personnage.json", _joueur(12, 3).to_dict())

    partie = BoucleJeu.nouvelle_partie(sauvegarde)

    assert charge_planete("Mars", False, sauvegarde) == _planete()
    assert charger_personnage(sauvegarde) == _joueur(12, 3)
    assert partie.vaisseau == Vaisseau(12, 3, None)
    assert partie.personnage == _joueur(12, 3)


def test_charger_sur_une_planete(sauvegarde):
    sauvegarde.sauvegarde("planete_json/Mars.json", _planete(cout=7).to_dict())
    sauvegarder_personnage(sauvegarde, _joueur(planete="Mars"))

    partie = BoucleJeu.charger(sauvegarde)

    assert partie.vaisseau.position == VoyagePlanete("Mars", 7)
    assert partie.personnage.planete == "Mars"


def test_charger_dans_l_espace(sauvegarde):
    sauvegarder_personnage(sauvegarde, _joueur(planete="None"))
    partie = BoucleJeu.charger(sauvegarde)
    assert partie.vaisseau.position is None


def test_charger_sans_sauvegarde(sauvegarde):
    with pytest.raises(ChargementErreur):
        BoucleJeu.charger(sauvegarde)


def test_quitter_sauvegarde_le_joueur(sauvegarde, monkeypatch, capsys):
    sauvegarder_personnage(sauvegarde, _joueur())
    partie = BoucleJeu.charger(sauvegarde)
    _saisies(monkeypatch, "0")

    partie.boucle_jeu()

    assert "Vous avez quitté le jeu." in capsys.readouterr().out
    assert charger_personnage(sauvegarde) == _joueur()


def test_choix_invalides(sauvegarde, monkeypatch, capsys):
    sauvegarder_personnage(sauvegarde, _joueur())
    partie = BoucleJeu.charger(sauvegarde)
    _saisies(monkeypatch, "abc", "7", "0")

    partie.boucle_jeu()

    assert capsys.readouterr().out.count("Choix invalide") == 2


def test_pas_assez_de_carburant(sauvegarde, monkeypatch, capsys):
    sauvegarde.sauvegarde("planete_json/Mars.json", _planete(cout=50).to_dict())
    sauvegarder_personnage(sauvegarde, _joueur(carburant=10))
    partie = BoucleJeu.charger(sauvegarde)
    _saisies(monkeypatch, "1", "0")

    partie.boucle_jeu()

    assert "Pas assez de carburant !" in capsys.readouterr().out
    enregistre = charger_personnage(sauvegarde)
    assert enregistre.carburant == 10
    assert enregistre.planete == ""


def test_voyage_puis_depart(sauvegarde, monkeypatch):
    sauvegarde.sauvegarde("planete_json/Mars.json", _planete(cout=5).to_dict())
    sauvegarder_personnage(sauvegarde, _joueur(carburant=10))
    partie = BoucleJeu.charger(sauvegarde)
    _saisies(monkeypatch, "1", "5", "0")

    partie.boucle_jeu()

    enregistre = charger_personnage(sauvegarde)
    assert enregistre.planete == "Mars"
    assert enregistre.carburant == 5
    assert partie.vaisseau.position is None
    assert partie.vaisseau.carburant == 5


def test_victoire(sauvegarde, capsys):
    sauvegarder_personnage(sauvegarde, _joueur(uranium=30))
    partie = BoucleJeu.charger(sauvegarde)

    partie.boucle_jeu()

    assert "Vous avez gagné !!!!!!!" in capsys.readouterr().out
    assert charger_personnage(sauvegarde).uranium == 30


def test_bloque_dans_l_espace(sauvegarde, monkeypatch, capsys):
    sauvegarder_personnage(sauvegarde, _joueur(carburant=0))
    partie = BoucleJeu.charger(sauvegarde)
    _saisies(monkeypatch, "2")

    with pytest.raises(SystemExit) as sortie:
        partie.boucle_jeu()

    assert sortie.value.code == 0
    assert partie.personnage.entite.points_de_vie == 0
    assert "Vous êtes mort !" in capsys.readouterr().out


def test_lancer_partie(sauvegarde, monkeypatch):
    sauvegarde.sauvegarde("nouveau_personnage.json", _joueur(8, 2).to_dict())
    _saisies(monkeypatch, "0")

    LancerPartie(sauvegarde).action()

    assert charger_personnage(sauvegarde) == _joueur(8, 2)


def test_charger_partie(sauvegarde, monkeypatch, capsys):
    sauvegarder_personnage(sauvegarde, _joueur(carburant=4))
    _saisies(monkeypatch, "0")

    ChargerPartie(sauvegarde).action()

    assert "Chargement de la partie sauvegardée..." in capsys.readouterr().out
    assert charger_personnage(sauvegarde).carburant == 4