# astroship

Un jeu de rôle spatial qui se joue dans le terminal.

Votre vaisseau est tombé en panne d'uranium au cœur d'une galaxie inconnue.
Voyagez de planète en planète, explorez les zones hostiles, affrontez des
ennemis au lancer de dé (1 à 20), reposez-vous à l'auberge, marchandez au
magasin et accumulez 30 unités d'uranium pour rallumer l'hyperespace et
rentrer chez vous.

Le paquet n'utilise que la bibliothèque standard (Python 3.10 ou plus récent).

## Installation

```
pip install .
```

## Jouer

```
astroship
```

La commande appelle `astroship.intro.main`, qui affiche l'écran titre et
le menu principal :

1. Nouvelle partie
2. Charger Partie
3. Quitter

Sur une planète, vous pouvez explorer la zone hostile, aller à l'auberge,
marchander au magasin, ouvrir l'inventaire, quitter la planète ou quitter le
jeu. Chaque voyage coûte du carburant ; sans carburant dans l'espace, la
partie est perdue.

## Données de jeu

Le jeu lit et écrit ses fichiers JSON dans le dossier `JSON/` du répertoire
courant (le chemin par défaut de `Sauvegarde`) :

- `JSON/nouveau_personnage.json` : le personnage de départ d'une nouvelle partie ;
- `JSON/planete_default/*.json` : les planètes dans leur état initial ;
- `JSON/planete_json/*.json` : l'état courant des planètes, créé au début
  d'une nouvelle partie puis réécrit à chaque action sur une planète ;
- `JSON/personnage_principal.json` : la sauvegarde du personnage.

Lancez la commande depuis le dossier qui contient `JSON/`.

Chaque fichier suit le `to_dict` de la classe correspondante. Un personnage
(`PersonnagePrincipal`) a la forme :

```json
{
  "entite": {"nom": "Astro", "points_de_vie": 50, "points_de_vie_max": 50,
             "force": 20, "intelligence": 10, "vitesse": 20},
  "inventaire": {"monnaie": 0, "objets": []},
  "chance": 0,
  "uranium": 0,
  "planete": "",
  "carburant": 30
}
```

Une planète (`Planete`) contient `nom`, `auberge` (`prix_repos`,
`phrase_arrive`), `magasin` (`affaires`, `phrase_arrive`), `cout_voyage`,
`zone_hostile` (`ennemis`, `nom`, `phrase_arrive`) et `phrase_arrive`. Un
objet (`Objet`) porte `nom`, `description`, `quantite` et, s'il est
consommable, un ou plusieurs des champs `multiplicateur_pv`,
`multiplicateur_pv_max`, `multiplicateur_force`, `multiplicateur_vitesse`.

Les objets nommés `Uranium` et `Carburant` achetés au magasin fixent les
réserves d'uranium et de carburant du personnage.

## Ce que le paquet ne fournit pas

Le paquet ne contient aucune donnée de jeu : ni personnage de départ, ni
planètes. Sans les fichiers `JSON/nouveau_personnage.json` et
`JSON/planete_default/*.json` écrits par vos soins, une nouvelle partie
s'arrête sur `ChargementErreur`.

## Utilisation comme bibliothèque

Les règles du jeu sont utilisables directement :

```python
from astroship.combat import calculer_degats, tenter_fuite
from astroship.spatial import Vaisseau, VoyagePlanete

calculer_degats(50, 30, 20)        # réussite critique : 999999
calculer_degats(50, 30, 1)         # échec critique : 1
vaisseau = Vaisseau(100, 10, None)
vaisseau.voyager(VoyagePlanete("Mars", 50))   # True, il reste 50 de carburant
```

Un lancer hors de 1 à 20 fait lever `ValueError` à `calculer_degats` et à
`tenter_fuite`.

Quelques autres points d'entrée :

- `astroship.personnage.Inventaire.add_objet` fusionne les quantités des
  objets de même nom ; `remove_monnaie` lève `ValueError` si la monnaie ne
  suffit pas.
- `astroship.lieux.Magasin.acheter` lève `AchatErreur` pour une affaire
  inexistante, des fonds insuffisants ou un stock épuisé.
- `astroship.marchandage.Butin` refuse une probabilité hors de 0.0 à 1.0
  (`ValueError`) ; `Butin.est_obtenu` tire dans le `random.Random` fourni.
- `astroship.ennemi.Ennemi.interaction` renvoie les butins hostiles d'un
  ennemi vaincu et les butins passifs sinon.
- `astroship.sauvegarde.Sauvegarde(chemin)` lit et écrit du JSON relatif à
  `chemin` ; `charge` lève `ChargementErreur` lorsque le fichier est
  introuvable ou illisible.

## Tests

```
pip install .[test]
pytest
```