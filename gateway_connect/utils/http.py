from typing import Optional

import httpx

from ..settings import settings

def client(timeout_sec: Optional[float] = None) -> httpx.Client:
    return httpx.Client(timeout=settings.HTTP_TIMEOUT_SEC if timeout_sec is None else timeout_sec)
