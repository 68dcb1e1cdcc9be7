from .anime import predefined_animes
from .articles import predefined_articles
from .trailers import predefined_trailers

__all__ = ["predefined_animes", "predefined_articles", "predefined_trailers"]
