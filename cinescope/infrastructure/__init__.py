"""
Couche infrastructure : persistance des comptes utilisateurs.
"""
