import logging
from typing import Dict, List

from starlette.concurrency import run_in_threadpool

from ..errors import NotFoundError
from .bible_loader import BibleLoader, Translation, TranslationInfo

logger = logging.getLogger(__name__)


class TranslationStore:
    """Process-wide cache of loaded translations, one copy per key, never evicted.

    Two requests missing the cache for the same key may both load it; the
    second store simply replaces an equal value.
    """

    def __init__(self, loader: BibleLoader):
        self.loader = loader
        self._cache: Dict[str, Translation] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)

    async def get(self, key: str) -> Translation:
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        if key not in self.loader.list_translations():
            raise NotFoundError(f"Translation '{key}'")
        try:
            translation = await run_in_threadpool(self.loader.load_translation, key)
        except FileNotFoundError:
            raise NotFoundError(f"Translation '{key}'")

        self._cache[key] = translation
        logger.info("Cached translation %s (%s books)", key, len(translation.books))
        return translation

    def info(self, key: str) -> TranslationInfo:
        return self.loader.load_info(key)

    def available(self) -> List[TranslationInfo]:
        return [self.loader.load_info(key) for key in self.loader.list_translations()]
