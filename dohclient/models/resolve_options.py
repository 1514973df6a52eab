"""Per-call resolve options."""
from dataclasses import dataclass

from dohclient.models.record_type import RecordType, RecordTypeLike


@dataclass(frozen=True)
class ResolveOptions:
    """Options for a single resolve call.

    Attributes:
        type: Record type to query
        checking_disabled: Ask the provider to skip DNSSEC validation (cd)
        dnssec_ok: Ask for DNSSEC records in the answer (do)
    """
    type: RecordTypeLike = RecordType.A
    checking_disabled: bool = False
    dnssec_ok: bool = False
