"""N2YO REST API access: URI building, transport, decoding and the client."""

from .client import N2YOClient, format_float, format_unsigned
from .decoders import decode_positions, decode_radio_passes, decode_visual_passes
from .errors import DecodeError, N2YOError, SchemaError, ServerError, TransportError
from .transport import RequestsTransport, Transport
from .uri import BASE_URL, build_uri, mask_api_key

__all__ = [
    # Client
    "N2YOClient",
    "format_float",
    "format_unsigned",
    # URI
    "BASE_URL",
    "build_uri",
    "mask_api_key",
    # Transport
    "Transport",
    "RequestsTransport",
    # Decoders
    "decode_positions",
    "decode_radio_passes",
    "decode_visual_passes",
    # Errors
    "N2YOError",
    "TransportError",
    "ServerError",
    "SchemaError",
    "DecodeError",
]
