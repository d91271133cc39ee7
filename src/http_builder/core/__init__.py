from .request import RequestBuilder, encode_values, format_body
from .transport import close_default_client, create_client, get_default_client, set_default_client

__all__ = [
    "RequestBuilder",
    "encode_values",
    "format_body",
    "create_client",
    "get_default_client",
    "set_default_client",
    "close_default_client",
]
