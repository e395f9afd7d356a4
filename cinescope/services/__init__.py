"""
Couche application (services).

- bookmarks : Favoris locaux (BookmarkService)
- placeholder : Affiches SVG generees (render_placeholder)
- cards : Modeles de vue des cartes et fiches
- auth : Inscription et connexion (AuthService)
"""
