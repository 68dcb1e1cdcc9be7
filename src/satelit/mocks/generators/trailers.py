from typing import List

from satelit.models import Trailer
from satelit.mocks.generators.anime import predefined_animes


def predefined_trailers() -> List[Trailer]:
    """Return the list of predefined trailers, one per predefined anime show."""
    return [
        Trailer(anime=anime, video_url=url, popularity=views)
        for anime, url, views in zip(predefined_animes(), _VIDEO_URLS, _VIEWS)
    ]


# --- Predefined --- #

_VIDEO_URLS = [
    "https://www.youtube.com/watch?v=RnOwqnIfSqI",
    "https://www.youtube.com/watch?v=aUOTU8JZriE",
    "https://www.youtube.com/watch?v=f8p9_r2w98g",
    "https://www.youtube.com/watch?v=tAgw7NQa-H4",
    "https://www.youtube.com/watch?v=Y3hlmOU09Qw",
    "https://www.youtube.com/watch?v=1YANqqz0qS8",
    "https://www.youtube.com/watch?v=oS4HbeJiZRg",
    "https://www.youtube.com/watch?v=em-V_Ti3nTI",
    "https://www.youtube.com/watch?v=DR1d_Pm729o",
    "https://www.youtube.com/watch?v=V_Cvvl1fVBE",
]

_VIEWS = [
    1_284_311,
    402_118,
    96_540,
    58_201,
    733_906,
    2_015_774,
    31_480,
    417_392,
    3_902_650,
    265_013,
]
