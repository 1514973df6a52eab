# Data Models Package
from .record_type import RecordType, UnknownRecordType
from .response_code import ResponseCode
from .response import Question, Answer, Response
from .resolve_options import ResolveOptions
from .provider import Provider, ProviderKind, TypeParamStyle

__all__ = [
    'RecordType',
    'UnknownRecordType',
    'ResponseCode',
    'Question',
    'Answer',
    'Response',
    'ResolveOptions',
    'Provider',
    'ProviderKind',
    'TypeParamStyle',
]
