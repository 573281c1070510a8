"""Stemmer adapter: maps a token to its canonical root form."""

import logging
from collections.abc import Callable

from nltk.stem.porter import PorterStemmer

logger = logging.getLogger(__name__)

StemFunc = Callable[[str], str]

_porter = PorterStemmer(mode=PorterStemmer.MARTIN_EXTENSIONS)


def porter_stem(token: str) -> str:
    """English Porter stem of a lowercase token.

    Examples:
        >>> porter_stem("ninjas")
        'ninja'
    """
    return _porter.stem(token)


def identity_stem(token: str) -> str:
    return token


_STEMMERS: dict[str, StemFunc] = {
    "porter": porter_stem,
    "none": identity_stem,
}


def get_stemmer(name: str) -> StemFunc:
    """Resolve a configured stemmer name to its function."""
    try:
        return _STEMMERS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown stemmer {name!r}; expected one of {sorted(_STEMMERS)}"
        ) from None


class CachedStemmer:
    """Memoising wrapper around a stem function.

    Meant to live for a single scoring call. A failing stem function never
    aborts scoring: the token is returned unchanged instead.

    Args:
        stem_func: The underlying token -> stem function.
    """

    def __init__(self, stem_func: StemFunc) -> None:
        self.stem_func = stem_func
        self._cache: dict[str, str] = {}

    def __call__(self, token: str) -> str:
        cached = self._cache.get(token)
        if cached is not None:
            return cached
        try:
            stem = self.stem_func(token)
        except Exception as exc:  # noqa: BLE001
            logger.warning("[Stemmer] Failed to stem %r, keeping token: %s", token, exc)
            stem = token
        if not isinstance(stem, str):
            stem = token
        self._cache[token] = stem
        return stem
