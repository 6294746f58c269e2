from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils.aliases import AliasResolver
from .utils.bible_loader import BibleLoader
from .utils.canon import Canon
from .utils.locator import BookLocator
from .utils.translation_store import TranslationStore


@dataclass
class BibleRegistry:
    """Everything the API reads from: canon, aliases, translations and the book locator.

    Built once by the application's lifespan handler and handed to routes through
    a dependency, so tests can swap in small fixture datasets.
    """

    canon: Canon
    aliases: AliasResolver
    store: TranslationStore
    locator: BookLocator


def build_registry(assets_dir: Optional[Path] = None) -> BibleRegistry:
    canon = Canon()
    aliases = AliasResolver(canon)
    return BibleRegistry(
        canon=canon,
        aliases=aliases,
        store=TranslationStore(BibleLoader(assets_dir)),
        locator=BookLocator(canon, aliases),
    )
