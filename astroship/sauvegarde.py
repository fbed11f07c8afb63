"""JSON persistence of game state in a save directory."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class ChargementErreur(Exception):
    """Raised when a save file cannot be read or decoded."""


def _encoder(obj: Any) -> Any:
    to_dict = getattr(obj, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Objet non sérialisable : {type(obj).__name__}")


@dataclass
class Sauvegarde:
    """Reads and writes JSON files relative to a base directory."""

    chemin: Path = field(default_factory=lambda: Path("JSON"))

    def __post_init__(self) -> None:
        self.chemin = Path(self.chemin)

    def charge(self, fichier: str) -> Any:
        """Load and decode the JSON document stored in ``fichier``."""
        cible = self.chemin / fichier
        try:
            with cible.open(encoding="utf-8") as flux:
                return json.load(flux)
        except OSError as exc:
            raise ChargementErreur("Fichier non trouvé") from exc
        except json.JSONDecodeError as exc:
            raise ChargementErreur(f"Contenu JSON invalide : {cible}") from exc

    def sauvegarde(self, fichier: str, donnees: Any) -> None:
        """Write ``donnees`` as indented JSON into ``fichier``, replacing it."""
        texte = json.dumps(donnees, indent=2, ensure_ascii=False, default=_encoder)
        (self.chemin / fichier).write_text(texte, encoding="utf-8")