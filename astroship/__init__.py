"""Jeu de rôle spatial en console : exploration de planètes, combats au dé, commerce et sauvegarde JSON."""

__version__ = "0.1.0"