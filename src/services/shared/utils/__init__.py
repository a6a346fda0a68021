from .http_response import api_response

__all__ = ["api_response"]
