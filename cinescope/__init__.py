"""
CineScope - Decouverte de films et series TV.

Ce package liste les titres tendance et populaires depuis l'API TMDB,
propose la recherche, les fiches detaillees avec titres similaires et
des favoris stockes localement. Un petit backend d'authentification
(inscription/connexion) est fourni a part.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports)
- services/ : Couche application (favoris, affiches generees, auth, vues)
- adapters/ : Couche infrastructure (client TMDB, stockage cle-valeur, CLI)
- infrastructure/ : Persistance SQLModel des utilisateurs
- web/ : Applications FastAPI (catalogue et authentification)
"""
