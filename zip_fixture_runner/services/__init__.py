from .http_client import HttpClient
from .zippopotam_service import ZippopotamService

__all__ = ["HttpClient", "ZippopotamService"]
