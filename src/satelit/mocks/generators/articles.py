import random
from datetime import datetime, timezone
from typing import List

from satelit.models import Article


def predefined_articles() -> List[Article]:
    """Return the list of predefined anime news articles, each with a random like count."""
    return [
        Article(
            title=title,
            summary=summary,
            source=source,
            source_url=url,
            likes=random.randint(0, 9999),
            published_at=datetime.fromtimestamp(timestamp, tz=timezone.utc),
        )
        for title, summary, source, url, timestamp in zip(
            _TITLES, _SUMMARIES, _SOURCES, _URLS, _TIMESTAMPS
        )
    ]


# --- Predefined --- #

_TITLES = [
    "Uzaki-chan Wants to Hang Out! Anime's Video Reveals Opening Song, More Cast, July 10 Debut",
    'Sing "Yesterday" for Me – Episode 10',
    "You Can Now Brew Coffee With the Evangelion Crew",
]

_SUMMARIES = [
    (
        "The official website for the television anime of Take's Uzaki-chan Wants to "
        "Hang Out! (Uzaki-chan wa Asobitai!) manga began streaming the anime's third "
        'promotional video on Tuesday. The video reveals and previews the anime\'s opening '
        'theme song "Nadamesukashi Negotiation" (Negotiation by Comforting) by Kano and '
        "Naomi Ōzora as her character Uzaki-chan. It also reveals a new cast member, and "
        "the anime's July 10 premiere date."
    ),
    (
        'So just up front here, this episode of Sing "Yesterday" for Me ends on an '
        "absolutely vicious cliffhanger, which had me genuinely considering seeking out "
        "the manga to read through and find out what happened."
    ),
    (
        "Ever wondered what kind of coffee the Evangelion pilots drink? Well, wonder no "
        "more, because Nescafé has the answers."
    ),
]

_SOURCES = ["AnimeNewsNetwork", "AnimeNewsNetwork", "AnimeNewsNetwork"]

_TIMESTAMPS = [1_591_703_234, 1_591_703_134, 1_591_701_234]

_URLS = [
    "https://www.animenewsnetwork.com/news/2020-06-08/uzaki-chan-wants-to-hang-out-anime-video-reveals-opening-song-more-cast-july-10-debut/.160408",
    "https://www.animenewsnetwork.com/review/sing-yesterday-for-me/episode-10/.160350",
    "https://www.animenewsnetwork.com/interest/2020-06-08/you-can-now-brew-coffee-with-the-evangelion-crew/.159558",
]
