from .api_endpoints import ENDPOINTS
from .api_responses import ApiResponses

__all__ = ["ENDPOINTS", "ApiResponses"]
