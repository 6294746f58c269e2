from fastapi import Depends, HTTPException, Request, status

from .registry import BibleRegistry
from .utils.bible_loader import Translation


def get_registry(request: Request) -> BibleRegistry:
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Bible registry not initialized")
    return registry


async def get_translation(translation_key: str, registry: BibleRegistry = Depends(get_registry)) -> Translation:
    return await registry.store.get(translation_key)
