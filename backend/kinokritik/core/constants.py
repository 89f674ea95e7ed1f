NOT_AVAILABLE = "n/a"
UNTITLED = "Untitled"

# Served by the frontend's public folder
MOVIE_THUMBNAIL = "/movieThumbnail.png"

# Search terms drawn from when assembling the movies of the day
RANDOM_QUERIES = [
    "Liebe",
    "Krieg",
    "Western",
    "Horror",
    "Komödie",
    "Drama",
    "Krimi",
    "Abenteuer",
    "Familie",
    "Musik",
    "Berlin",
    "Sommer",
    "Nacht",
    "Geheimnis",
    "Freundschaft",
]
