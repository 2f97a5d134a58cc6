"""
Settings endpoints — the dropdown catalogues (rooms, subjects, faculties...).

Categories are fixed; only their item lists change. Every route requires
an authenticated user.
"""

import logging

from fastapi import APIRouter, Depends

from liveboard.api.deps import get_token_claims
from liveboard.core.exceptions import ConflictError, NotFoundError, ValidationError
from liveboard.db.store import DEFAULT_SETTINGS, Store, get_store
from liveboard.schemas.settings import (CategoryItemCreate, CategoryItemsUpdate,
                                        CategoryMutationResponse, CategoryRead)
from liveboard.schemas.token import TokenClaims

router = APIRouter(prefix="/settings", tags=["settings"])
logger = logging.getLogger(__name__)


def _items_or_404(store: Store, category: str) -> list[str]:
    items = store.settings.get(category)
    if items is None:
        raise NotFoundError("Category not found")
    return items


@router.get("")
async def get_all_settings(
    _claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> dict[str, list[str]]:
    return store.settings


@router.post("/reset")
async def reset_all_settings(
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> dict:
    store.settings = {name: list(items) for name, items in DEFAULT_SETTINGS.items()}
    logger.info("All settings reset to defaults by %s", claims.username)
    return {"message": "All settings reset to defaults", "settings": store.settings}


@router.get("/{category}", response_model=CategoryRead)
async def get_category(
    category: str,
    _claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> CategoryRead:
    return CategoryRead(category=category, items=_items_or_404(store, category))


@router.put("/{category}", response_model=CategoryMutationResponse)
async def update_category(
    category: str,
    body: CategoryItemsUpdate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> CategoryMutationResponse:
    """Replace a category's items wholesale."""
    if category not in DEFAULT_SETTINGS:
        raise ValidationError("Invalid category")
    store.settings[category] = list(body.items)
    logger.info("Settings %s updated by %s (%d items)", category, claims.username, len(body.items))
    return CategoryMutationResponse(
        message="Settings updated successfully", category=category, items=store.settings[category]
    )


@router.post("/{category}/reset", response_model=CategoryMutationResponse)
async def reset_category(
    category: str,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> CategoryMutationResponse:
    if category not in DEFAULT_SETTINGS:
        raise NotFoundError("Category not found")
    store.settings[category] = list(DEFAULT_SETTINGS[category])
    logger.info("Settings %s reset to defaults by %s", category, claims.username)
    return CategoryMutationResponse(
        message="Category reset to defaults", category=category, items=store.settings[category]
    )


@router.post("/{category}/items", response_model=CategoryMutationResponse, status_code=201)
async def add_item(
    category: str,
    body: CategoryItemCreate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> CategoryMutationResponse:
    items = _items_or_404(store, category)
    if body.item in items:
        raise ConflictError("Item already exists")
    items.append(body.item)
    logger.info("Settings item %r added to %s by %s", body.item, category, claims.username)
    return CategoryMutationResponse(
        message="Item added successfully", category=category, item=body.item, items=items
    )


@router.delete("/{category}/items/{item:path}", response_model=CategoryMutationResponse)
async def remove_item(
    category: str,
    item: str,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> CategoryMutationResponse:
    items = _items_or_404(store, category)
    if item not in items:
        raise NotFoundError("Item not found")
    items.remove(item)
    logger.info("Settings item %r removed from %s by %s", item, category, claims.username)
    return CategoryMutationResponse(
        message="Item removed successfully", category=category, item=item, items=items
    )
