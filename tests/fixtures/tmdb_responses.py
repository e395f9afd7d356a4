"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the trending, popular,
search/multi, details and similar endpoints.
These fixtures are used with respx to mock httpx calls in tests.
"""

# GET /trending/movie/week
# Fight Club has no poster: the fallback catalog provides one
TMDB_TRENDING_MOVIES_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "id": 550,
            "media_type": "movie",
            "title": "Fight Club",
            "original_title": "Fight Club",
            "overview": "A ticking-time-bomb insomniac and a slippery soap salesman...",
            "poster_path": None,
            "release_date": "1999-10-15",
            "vote_average": 8.4,
            "vote_count": 29000,
        },
        {
            "adult": False,
            "id": 693134,
            "media_type": "movie",
            "title": "Dune: Part Two",
            "original_title": "Dune: Part Two",
            "overview": "Follow the mythic journey of Paul Atreides...",
            "poster_path": "/1pdfLvkbY9ohJlCjQH2CZjjYVvJ.jpg",
            "release_date": "2024-02-27",
            "vote_average": 8.2,
            "vote_count": 5000,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# GET /tv/popular?page=2
TMDB_POPULAR_TV_RESPONSE = {
    "page": 2,
    "results": [
        {
            "id": 1396,
            "name": "Breaking Bad",
            "original_name": "Breaking Bad",
            "overview": "Walter White, a New Mexico chemistry teacher...",
            "poster_path": "/ztkUQFLlC19CCMYHW9o1zWhJRNq.jpg",
            "first_air_date": "2008-01-20",
            "vote_average": 8.9,
            "vote_count": 13000,
        },
    ],
    "total_pages": 500,
    "total_results": 10000,
}

# GET /search/multi?query=matrix
# search/multi also returns people, which are ignored
TMDB_SEARCH_MULTI_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 603,
            "media_type": "movie",
            "title": "The Matrix",
            "overview": "Set in the 22nd century, The Matrix tells the story of a computer hacker...",
            "poster_path": "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg",
            "release_date": "1999-03-30",
            "vote_average": 8.2,
        },
        {
            "id": 6384,
            "media_type": "person",
            "name": "Keanu Reeves",
            "known_for_department": "Acting",
            "profile_path": "/4D0PpNI0kmP58hgrwGC3wCjxhnm.jpg",
        },
        {
            "id": 13380,
            "media_type": "tv",
            "name": "The Matrix Files",
            "overview": "",
            "poster_path": None,
            "first_air_date": "",
            "vote_average": 0,
        },
    ],
    "total_pages": 1,
    "total_results": 3,
}

TMDB_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /movie/27205
TMDB_MOVIE_DETAILS_RESPONSE = {
    "id": 27205,
    "title": "Inception",
    "original_title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    "release_date": "2010-07-15",
    "vote_average": 8.4,
    "runtime": 148,
    "budget": 160000000,
    "revenue": 825532764,
    "tagline": "Your mind is the scene of the crime.",
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
        {"id": 12, "name": "Adventure"},
    ],
}

# GET /tv/1396
TMDB_TV_DETAILS_RESPONSE = {
    "id": 1396,
    "name": "Breaking Bad",
    "original_name": "Breaking Bad",
    "overview": "Walter White, a New Mexico chemistry teacher...",
    "poster_path": "/ztkUQFLlC19CCMYHW9o1zWhJRNq.jpg",
    "first_air_date": "2008-01-20",
    "vote_average": 8.9,
    "number_of_seasons": 5,
    "number_of_episodes": 62,
    "status": "Ended",
    "genres": [{"id": 18, "name": "Drama"}, {"id": 80, "name": "Crime"}],
    "networks": [{"id": 174, "name": "AMC"}],
}

# GET /movie/27205/similar
TMDB_SIMILAR_MOVIES_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 157336,
            "title": "Interstellar",
            "overview": "The adventures of a group of explorers...",
            "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
            "release_date": "2014-11-05",
            "vote_average": 8.4,
        },
    ],
    "total_pages": 1,
    "total_results": 1,
}

TMDB_UNAUTHORIZED_RESPONSE = {
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
    "success": False,
}
