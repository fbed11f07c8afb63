import pytest

from astroship.sauvegarde import ChargementErreur, Sauvegarde


class _Element:
    def __init__(self, name, age):
        self.name = name
        self.age = age

    def to_dict(self):
        return {"name": self.name, "age": self.age}


@pytest.fixture
def sauvegarde(tmp_path):
    return Sauvegarde(tmp_path)


def test_sauvegarde_et_chargement(sauvegarde):
    tests = [
        {"name": "Alice", "age": 30},
        {"name": "Bob", "age": 25},
        {"name": "Charlie", "age": 35},
    ]
    sauvegarde.sauvegarde("test.json", tests)
    assert sauvegarde.charge("test.json") == tests


def test_erreur_chargement(sauvegarde):
    with pytest.raises(ChargementErreur, match="Fichier non trouvé"):
        sauvegarde.charge("testEchec.json")


def test_contenu_invalide(sauvegarde, tmp_path):
    (tmp_path / "casse.json").write_text("{pas du json", encoding="utf-8")
    with pytest.raises(ChargementErreur):
        sauvegarde.charge("casse.json")


def test_objet_avec_to_dict(sauvegarde):
    sauvegarde.sauvegarde("objets.json", [_Element("Alice", 30)])
    assert sauvegarde.charge("objets.json") == [{"name": "Alice", "age": 30}]


def test_objet_non_serialisable(sauvegarde):
    with pytest.raises(TypeError):
        sauvegarde.sauvegarde("rate.json", object())


def test_format_indente(sauvegarde, tmp_path):
    sauvegarde.sauvegarde("indent.json", {"nom": "Héros"})
    assert sauvegarde.charge("indent.json") == {"nom": "Héros"}
    texte = (tmp_path / "indent.json").read_text(encoding="utf-8")
    assert texte == '{\n  "nom": "Héros"\n}'


def test_sauvegarde_ecrase_le_fichier(sauvegarde):
    sauvegarde.sauvegarde("f.json", {"a": [1, 2, 3, 4, 5]})
    sauvegarde.sauvegarde("f.json", {"b": 1})
    assert sauvegarde.charge("f.json") == {"b": 1}


def test_sous_dossier(sauvegarde, tmp_path):
    (tmp_path / "planete_json").mkdir()
    sauvegarde.sauvegarde("planete_json/Mars.json", {"nom": "Mars"})
    assert sauvegarde.charge("planete_json/Mars.json") == {"nom": "Mars"}


def test_chemin_par_defaut():
    assert Sauvegarde().chemin.name == "JSON"