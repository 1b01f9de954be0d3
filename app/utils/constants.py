STATUSES = ("draft", "approved", "published")
CATEGORIES = ("branding", "promociones", "tips", "campañas", "otro")

STATUS_LABELS = {
    "draft": "Borrador",
    "approved": "Aprobado",
    "published": "Publicado",
}

ALL = "all"
ALL_CATEGORIES_LABEL = "Todas las Categorías"
ALL_STATUSES_LABEL = "Todos los Estados"

LIST_ROUTE = "/dashboard"
COPY_SUFFIX = " (Copia)"
UNTITLED = "Sin Título"
