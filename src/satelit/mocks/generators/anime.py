from typing import List

from satelit.models import Anime, AnimeType, AiringSeason, AiringStatus


def predefined_animes() -> List[Anime]:
    """Return the list of all predefined anime shows."""
    return [
        Anime(
            name=name,
            thumbnail_url=thumbnail,
            type=anime_type,
            season=season,
            year=year,
            airing_status=status,
            score=score,
        )
        for name, thumbnail, anime_type, season, year, status, score in zip(
            _NAMES, _THUMBNAILS, _TYPES, _SEASONS, _YEARS, _STATUSES, _SCORES
        )
    ]


# --- Predefined --- #

_NAMES = [
    "Boku no Hero Academia (2019)",
    "BNA",
    "Kakushigoto",
    "Yuru Yuri Ten",
    "Shokugeki no Souma: Gou no Sara",
    "Re:Zero kara Hajimeru Isekai Seikatsu (2018)",
    "Kuusen Madoushi Kouhosei no Kyoukan",
    "Ore no Imouto ga Konna ni Kawaii Wake ga Nai.",
    "Code Geass: Hangyaku no Lelouch",
    "Yahari Ore no Seishun LoveCome wa Machigatte Iru. Kan",
]

_THUMBNAILS = [
    "https://cdn-eu.anidb.net/images/main/238059.jpg",
    "https://cdn-eu.anidb.net/images/main/244892.jpg",
    "https://cdn-eu.anidb.net/images/main/244800.jpg",
    "https://cdn-eu.anidb.net/images/main/237553.jpg",
    "https://cdn-eu.anidb.net/images/main/244734.jpg",
    "https://cdn-eu.anidb.net/images/main/221173.jpg",
    "https://cdn-eu.anidb.net/images/main/221957.jpg",
    "https://cdn-eu.anidb.net/images/main/221834.jpg",
    "https://cdn-eu.anidb.net/images/main/221573.jpg",
    "https://cdn-eu.anidb.net/images/main/248007.jpg",
]

_TYPES = [
    AnimeType.TV,
    AnimeType.ONA,
    AnimeType.TV,
    AnimeType.OVA,
    AnimeType.TV,
    AnimeType.MOVIE,
    AnimeType.TV,
    AnimeType.TV,
    AnimeType.TV,
    AnimeType.TV,
]

_SEASONS = [
    AiringSeason.WINTER,
    AiringSeason.SPRING,
    AiringSeason.SPRING,
    AiringSeason.FALL,
    AiringSeason.SUMMER,
    AiringSeason.FALL,
    AiringSeason.SUMMER,
    AiringSeason.SPRING,
    AiringSeason.FALL,
    AiringSeason.SUMMER,
]

_YEARS = [2019, 2020, 2020, 2019, 2020, 2018, 2015, 2013, 2007, 2020]

_STATUSES = [
    AiringStatus.AIRED,
    AiringStatus.AIRED,
    AiringStatus.AIRING,
    AiringStatus.AIRED,
    AiringStatus.UNAIRED,
    AiringStatus.AIRED,
    AiringStatus.AIRED,
    AiringStatus.AIRED,
    AiringStatus.AIRED,
    AiringStatus.UNAIRED,
]

_SCORES = [7.64, 7.40, 6.75, 7.15, 0, 7.05, 5.67, 6.98, 8.66, 0]
