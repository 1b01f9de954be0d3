from typing import Any


class ContentError(Exception):
    """Base for failures scoped to a single dashboard interaction."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_detail(self) -> dict[str, Any]:
        return {"message": self.message}


class ContentNotFound(ContentError):
    status_code = 404

    def __init__(self, content_id: str):
        super().__init__("Content item not found.")
        self.content_id = content_id


class StoreUnavailable(ContentError):
    """List fetch failed and there is nothing to fall back to. The client may retry."""

    status_code = 503

    def to_detail(self) -> dict[str, Any]:
        return {"message": self.message, "retry": True}


class PersistenceFailed(ContentError):
    """Create/update failed; carries the submitted values so the form can be resubmitted."""

    def __init__(self, action: str, form: dict[str, Any]):
        super().__init__(f"Failed to {action} content. Please try again.")
        self.action = action
        self.form = form

    def to_detail(self) -> dict[str, Any]:
        return {"message": self.message, "form": self.form}
