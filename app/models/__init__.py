from app.models.content_item import ContentItem
from .user import User
from .session import Session
