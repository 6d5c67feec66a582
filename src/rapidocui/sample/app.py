"""Sample FastAPI application serving its API documentation with RapiDoc.

The application exposes:
- a health check
- a small in-memory items API
- its OpenAPI document at ``/openapi.json``
- the RapiDoc page at ``/swagger`` (light theme)

Run it with ``rapidocui serve`` or ``uvicorn rapidocui.sample.app:app``.
"""

from __future__ import annotations

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel, Field

from rapidocui.common.enums import Theme
from rapidocui.hosting.fastapi import use_rapidoc
from rapidocui.settings.user import UserSettings

OPENAPI_URL = "/openapi.json"


class Item(BaseModel):
    """An item in the sample catalogue."""

    id: int = Field(..., ge=1, description="Item identifier")
    name: str = Field(..., min_length=1, description="Display name")
    price: float = Field(..., ge=0, description="Unit price")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")


_ITEMS: dict[int, Item] = {
    1: Item(id=1, name="Widget", price=9.99, tags=["hardware"]),
    2: Item(id=2, name="Gadget", price=24.5, tags=["hardware", "new"]),
}

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=list[Item])
def list_items() -> list[Item]:
    """List all items."""
    return list(_ITEMS.values())


@router.get("/{item_id}", response_model=Item)
def get_item(item_id: int) -> Item:
    """Get a single item by id."""
    item = _ITEMS.get(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found")
    return item


def create_app(user_settings: UserSettings | None = None) -> FastAPI:
    """Build the sample application.

    Args:
        user_settings: Configuration for the RapiDoc page. When None, the page
            points at this application's OpenAPI document with the light theme.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="RapiDoc Sample API",
        version="0.1.0",
        description="Hello world!",
        openapi_url=OPENAPI_URL,
        docs_url=None,
        redoc_url=None,
    )
    app.include_router(router)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        """Health check endpoint.

        Returns:
            dict: ``{"status": "ok", "service": "rapidoc-sample"}``.
        """
        return {"status": "ok", "service": "rapidoc-sample"}

    if user_settings is None:
        settings = UserSettings(document_path=OPENAPI_URL).build_rapidoc_settings()
        settings.theme = Theme.LIGHT
    else:
        settings = user_settings.build_rapidoc_settings()

    use_rapidoc(app, settings)
    return app


app = create_app()
