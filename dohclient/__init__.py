# DNS-over-HTTPS JSON API client
from dohclient.models import (
    RecordType,
    UnknownRecordType,
    ResponseCode,
    Question,
    Answer,
    Response,
    ResolveOptions,
    Provider,
)
from dohclient.services import (
    DoHClient,
    ResponseDecoder,
    EndpointResolver,
    DecodeError,
    ResolveError,
    TransportError,
    RequestFailed,
    DecodeFailed,
)

__all__ = [
    'RecordType',
    'UnknownRecordType',
    'ResponseCode',
    'Question',
    'Answer',
    'Response',
    'ResolveOptions',
    'Provider',
    'DoHClient',
    'ResponseDecoder',
    'EndpointResolver',
    'DecodeError',
    'ResolveError',
    'TransportError',
    'RequestFailed',
    'DecodeFailed',
]
