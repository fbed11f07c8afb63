import random

import pytest

from astroship.marchandage import Affaire, Butin, Rarete
from astroship.objet import Objet


class _TirageFixe:
    def __init__(self, valeur):
        self.valeur = valeur

    def random(self):
        return self.valeur


def test_creation_affaire():
    objet = Objet("Épée magique", "Description de l'épée", 1)
    affaire = Affaire(50000, objet, False, 10)
    assert affaire.prix == 50000
    assert affaire.instance.nom == "Épée magique"
    assert affaire.instance.description == "Description de l'épée"
    assert affaire.infini is False
    assert affaire.quantite == 10


def test_modification_prix():
    affaire = Affaire(10000, Objet("Bouclier", "Un bouclier puissant", 1), False, 5)
    affaire.prix = 80000
    assert affaire.prix == 80000


def test_modification_instance():
    affaire = Affaire(3000, Objet("Potion", "Une potion rare", 1), False, 1)
    affaire.instance = Objet("Potion de soin", "Sert à soigner les blessures", 1)
    assert affaire.instance.nom == "Potion de soin"
    assert affaire.instance.description == "Sert à soigner les blessures"


def test_modification_infini():
    affaire = Affaire(100, Objet("Pierre rare", "Une pierre précieuse et rare", 1), False, 50)
    affaire.infini = True
    assert affaire.infini is True


def test_modification_quantite():
    affaire = Affaire(2000, Objet("Arc", "Un arc de haute qualité", 1), False, 10)
    affaire.quantite = 20
    assert affaire.quantite == 20


def test_affaire_aller_retour():
    affaire = Affaire(250, Objet("Carburant", "Pour voyager", 5), True, 0)
    donnees = affaire.to_dict()
    assert donnees["instance"]["nom"] == "Carburant"
    assert Affaire.from_dict(donnees) == affaire


def test_creation_butin():
    objet = Objet("Épée légendaire", "Une arme ancienne dotée de pouvoirs mystiques.", 1)
    butin = Butin(objet, 1, 0.8, Rarete.LEGENDAIRE)
    assert butin.objet.nom == "Épée légendaire"
    assert butin.objet.description == "Une arme ancienne dotée de pouvoirs mystiques."
    assert butin.quantite == 1
    assert butin.probabilite == pytest.approx(0.8)
    assert butin.rarete is Rarete.LEGENDAIRE


@pytest.mark.parametrize("probabilite", [1.5, -0.1])
def test_probabilite_hors_limites(probabilite):
    objet = Objet("Potion rare", "Une potion très puissante.", 1)
    with pytest.raises(ValueError, match="La probabilité doit être entre 0.0 et 1.0 !"):
        Butin(objet, 2, probabilite, Rarete.RARE)


def test_est_obtenu_probabilite_100():
    butin = Butin(Objet("Bouclier indestructible", "Un bouclier légendaire.", 1), 1, 1.0, Rarete.LEGENDAIRE)
    rng = random.Random(42)
    assert all(butin.est_obtenu(rng) for _ in range(10))


def test_est_obtenu_probabilite_0():
    butin = Butin(Objet("Cendres", "Des cendres ordinaires.", 1), 3, 0.0, Rarete.COMMUN)
    rng = random.Random(42)
    assert not any(butin.est_obtenu(rng) for _ in range(10))


def test_est_obtenu_deterministe():
    objet = Objet(
        "Anneau d'invisibilité",
        "Un anneau magique permettant à son porteur de devenir invisible.",
        1,
    )
    butin = Butin(objet, 1, 0.5, Rarete.RARE)
    premier = [butin.est_obtenu(random.Random(42)) for _ in range(5)]
    rng_a, rng_b = random.Random(42), random.Random(42)
    assert [butin.est_obtenu(rng_a) for _ in range(5)] == [butin.est_obtenu(rng_b) for _ in range(5)]
    assert len(set(premier)) == 1


def test_est_obtenu_limite_incluse():
    butin = Butin(Objet("a", "b", 1), 1, 0.5, Rarete.RARE)
    assert butin.est_obtenu(_TirageFixe(0.5)) is True
    assert butin.est_obtenu(_TirageFixe(0.50001)) is False


@pytest.mark.parametrize(
    "texte, attendu",
    [
        ("commun", Rarete.COMMUN),
        ("Rare", Rarete.RARE),
        ("EPIQUE", Rarete.EPIQUE),
        ("legendaire", Rarete.LEGENDAIRE),
        ("mythique", None),
    ],
)
def test_rarete_from_str(texte, attendu):
    assert Rarete.from_str(texte) is attendu


def test_butin_aller_retour():
    butin = Butin(Objet("Or", "Une pièce d'or brillante.", 1), 10, 0.8, Rarete.COMMUN)
    donnees = butin.to_dict()
    assert donnees["rarete"] == "Commun"
    assert Butin.from_dict(donnees) == butin


def test_butin_from_dict_rarete_inconnue():
    donnees = Butin(Objet("Or", "x", 1), 1, 0.5, Rarete.RARE).to_dict()
    donnees["rarete"] = "Divin"
    with pytest.raises(ValueError):
        Butin.from_dict(donnees)