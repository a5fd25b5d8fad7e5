from typing import Optional

from .envelope import Envelope


class HealthResponse(Envelope):
    service: str = ""
    status: str = ""
    timestamp: Optional[str] = None
