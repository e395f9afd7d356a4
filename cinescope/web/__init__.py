"""
Interfaces web FastAPI.

- app : catalogue (tendances, populaires, recherche, fiches, favoris)
- auth_app : backend d'authentification (inscription, connexion)
"""
