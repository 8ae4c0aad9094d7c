from .models import SessionRecord

__all__ = ["SessionRecord"]
