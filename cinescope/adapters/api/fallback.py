"""
Catalogue local de repli.

Jeu de titres fixe utilise quand l'API TMDB est desactivee, injoignable ou
ne retourne rien. Les affiches sont des SVG generes localement, donc le
catalogue s'affiche sans aucun acces reseau.

Le catalogue est injecte dans le gateway a sa construction : les tests
peuvent fournir leur propre FallbackCatalog.
"""

from dataclasses import dataclass
from typing import Optional

from cinescope.core.entities.media import MediaKind, Movie, Series, Title
from cinescope.services.placeholder import render_placeholder


@dataclass(frozen=True)
class FallbackCatalog:
    """
    Jeux de donnees de repli, un par type de media.

    Attributes:
        movies: Films de repli (ordre d'affichage)
        series: Series de repli (ordre d'affichage)
    """

    movies: tuple[Movie, ...] = ()
    series: tuple[Series, ...] = ()

    def for_kind(self, kind: MediaKind) -> list[Title]:
        """Liste de repli pour un type de media (copie)."""
        if kind is MediaKind.MOVIE:
            return list(self.movies)
        return list(self.series)

    def combined(self) -> list[Title]:
        """Films puis series."""
        return [*self.movies, *self.series]

    def find(self, kind: MediaKind, title_id: int) -> Optional[Title]:
        """Titre de repli par (type, id), ou None."""
        for item in self.for_kind(kind):
            if item.id == title_id:
                return item
        return None

    def search(self, query: str) -> list[Title]:
        """Filtre insensible a la casse sur le titre affiche, films et series confondus."""
        needle = query.lower()
        return [item for item in self.combined() if needle in item.title.lower()]


def _movie(id: int, title: str, release_date: str, vote_average: float, overview: str) -> Movie:
    return Movie(
        id=id,
        title=title,
        release_date=release_date,
        vote_average=vote_average,
        overview=overview,
        poster_path=render_placeholder(title, release_date[:4]),
    )


def _series(id: int, name: str, first_air_date: str, vote_average: float, overview: str) -> Series:
    return Series(
        id=id,
        title=name,
        release_date=first_air_date,
        vote_average=vote_average,
        overview=overview,
        poster_path=render_placeholder(name, first_air_date[:4]),
    )


FALLBACK_MOVIES: tuple[Movie, ...] = (
    _movie(550, "Fight Club", "1999-10-15", 8.8,
           "An insomniac office worker and a devil-may-care soapmaker form an underground "
           "fight club that evolves into much more."),
    _movie(278, "The Shawshank Redemption", "1994-09-23", 9.3,
           "Two imprisoned men bond over a number of years, finding solace and eventual redemption."),
    _movie(238, "The Godfather", "1972-03-24", 9.2,
           "The aging patriarch of an organized crime dynasty transfers control of his "
           "clandestine empire to his reluctant youngest son."),
    _movie(155, "The Dark Knight", "2008-07-18", 9.0,
           "When the menace known as the Joker wreaks havoc and chaos on the people of Gotham, "
           "Batman must accept one of the greatest psychological tests."),
    _movie(27205, "Inception", "2010-07-16", 8.8,
           "A thief who steals corporate secrets through the use of dream-sharing technology "
           "is given the inverse task of planting an idea."),
    _movie(680, "Pulp Fiction", "1994-10-14", 8.9,
           "The lives of two mob hitmen, a boxer, a gangster and his wife intertwine in four "
           "tales of violence and redemption."),
    _movie(13, "Forrest Gump", "1994-07-06", 8.8,
           "The presidencies of Kennedy and Johnson unfold from the perspective of an Alabama "
           "man with an IQ of 75."),
    _movie(603, "The Matrix", "1999-03-31", 8.7,
           "A computer hacker learns from mysterious rebels about the true nature of his "
           "reality and his role in the war against its controllers."),
    _movie(24428, "Interstellar", "2014-11-07", 8.6,
           "A team of explorers travel through a wormhole in space in an attempt to ensure "
           "humanity's survival."),
    _movie(100402, "The Avengers", "2012-05-04", 8.0,
           "Earth's mightiest heroes must come together and learn to fight as a team to save "
           "the world."),
    _movie(19995, "Avatar", "2009-12-18", 7.8,
           "A paraplegic Marine dispatched to the moon Pandora on a unique mission becomes "
           "torn between following his orders and his new world."),
    _movie(807, "Se7en", "1995-09-22", 8.6,
           "Two detectives hunt a serial killer who uses the seven deadly sins as his motives."),
)

FALLBACK_SERIES: tuple[Series, ...] = (
    _series(1396, "Breaking Bad", "2008-01-20", 9.5,
            "A high school chemistry teacher diagnosed with inoperable lung cancer turns to "
            "cooking methamphetamine with a former student."),
    _series(1399, "Game of Thrones", "2011-04-17", 9.2,
            "Nine noble families fight for control over the lands of Westeros, while an "
            "ancient evil awakens in the far North."),
    _series(2316, "The Office", "2005-03-24", 9.0,
            "A mockumentary on a group of typical office workers, where the workday consists "
            "of ego clashes, inappropriate behavior, and tedium."),
    _series(66573, "Stranger Things", "2016-07-15", 8.7,
            "When a young boy disappears, his friends, family and local police uncover a "
            "mystery involving secret government experiments."),
    _series(46952, "The Crown", "2016-11-04", 8.6,
            "Follows the political rivalries and romance of Queen Elizabeth II's reign and "
            "the events that shaped the second half of the twentieth century."),
    _series(1668, "Friends", "1994-09-22", 8.9,
            "Follows the personal and professional lives of six twenty to thirty-something-"
            "year-old friends living in Manhattan."),
    _series(1400, "The Sopranos", "1999-01-10", 9.2,
            "New Jersey mob boss Tony Soprano deals with personal and professional struggles "
            "in his home and business life."),
    _series(19885, "Sherlock", "2010-07-25", 9.1,
            "A modern update finds the famous sleuth and his doctor partner solving crime in "
            "21st century London."),
    _series(82856, "The Mandalorian", "2019-11-12", 8.7,
            "After the fall of the Empire, a lone bounty hunter operates in the outer reaches "
            "of the galaxy."),
    _series(54613, "Succession", "2018-06-03", 8.9,
            "The Roy family is known for controlling the biggest media and entertainment "
            "company in the world."),
    _series(1402, "The Wire", "2002-06-02", 9.3,
            "Baltimore homicide detective Jimmy McNulty is forced to work with criminals to "
            "solve murders."),
)

DEFAULT_FALLBACK = FallbackCatalog(movies=FALLBACK_MOVIES, series=FALLBACK_SERIES)
