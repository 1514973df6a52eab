# Services Package
from dohclient.services.response_decoder import ResponseDecoder, DecodeError
from dohclient.services.endpoint_resolver import EndpointResolver
from dohclient.services.doh_client import (
    DoHClient,
    ResolveError,
    TransportError,
    RequestFailed,
    DecodeFailed,
)

__all__ = [
    'ResponseDecoder',
    'DecodeError',
    'EndpointResolver',
    'DoHClient',
    'ResolveError',
    'TransportError',
    'RequestFailed',
    'DecodeFailed',
]
