"""Demo dataset served when the content store is empty or unreachable."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any


def example_content_items() -> list[dict[str, Any]]:
    """
    Raw example documents, shaped like what the store hands back.

    Timestamps are intentionally mixed (ISO strings, datetimes and
    {seconds, nanoseconds} records) so every read goes through the same
    normalization as stored documents.
    """
    now = datetime.now(timezone.utc)
    today = now.strftime("%Y-%m-%d")

    return [
        {
            "id": "example-4",
            "title": "Campaña Hoy: Día del Programador",
            "description": "¡Feliz día a todos los desarrolladores! Código limpio y café fuerte.",
            "fileUrl": "https://picsum.photos/seed/hoy/400/300",
            "category": "campañas",
            "suggestedDate": today,
            "status": "approved",
            "comments": "Publicar a las 9 AM.",
            "createdAt": now.isoformat(),
            "updatedAt": now.isoformat(),
        },
        {
            "id": "example-1",
            "title": "Lanzamiento Nueva Web",
            "description": "¡Estamos emocionados de anunciar el lanzamiento de nuestra nueva página web! Visítala ahora.",
            "fileUrl": "https://picsum.photos/seed/lanzamiento/400/300",
            "category": "branding",
            "suggestedDate": "2024-08-15",
            "status": "published",
            "comments": "Post principal de la campaña de lanzamiento.",
            "createdAt": datetime(2024, 7, 10, 10, 0, tzinfo=timezone.utc),
            "updatedAt": datetime(2024, 7, 12, 15, 30, tzinfo=timezone.utc),
        },
        {
            "id": "example-2",
            "title": "Promo Verano 20% OFF",
            "description": "Aprovecha nuestro descuento del 20% en todos los servicios durante el mes de agosto.",
            "fileUrl": "https://picsum.photos/seed/promo/400/300",
            "category": "promociones",
            # stored as a native timestamp
            "suggestedDate": {"seconds": 1722470400, "nanoseconds": 0},
            "status": "approved",
            "comments": "Revisar copy final antes de publicar.",
            "createdAt": {"seconds": 1721466000, "nanoseconds": 0},
            "updatedAt": {"seconds": 1721905200, "nanoseconds": 0},
        },
        {
            "id": "example-3",
            "title": "Tip: Optimiza tu SEO Local",
            "description": "Mejora tu visibilidad en búsquedas locales con estos 5 sencillos pasos.",
            "fileUrl": "https://picsum.photos/seed/tip/400/300",
            "category": "tips",
            "suggestedDate": "2024-08-22",
            "status": "draft",
            "createdAt": "2024-07-28T14:00:00Z",
            "updatedAt": "2024-07-28T14:00:00Z",
        },
    ]
