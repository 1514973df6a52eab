"""DNS record type data model."""
from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class UnknownRecordType:
    """A record type code with no entry in RecordType.

    Attributes:
        code: Raw numeric type code as reported by the provider
    """
    code: int

    @property
    def label(self) -> str:
        """Presentation label for an unknown type (RFC 3597 style)."""
        return f"TYPE{self.code}"

    def to_code(self) -> int:
        """Return the raw numeric type code."""
        return self.code

    def __str__(self) -> str:
        return self.label


class RecordType(Enum):
    """Well-known DNS resource record types.

    See https://www.iana.org/assignments/dns-parameters
    """
    A = 1
    NS = 2
    MD = 3
    MF = 4
    CNAME = 5
    SOA = 6
    MB = 7
    MG = 8
    MR = 9
    NULL = 10
    WKS = 11
    PTR = 12
    HINFO = 13
    MINFO = 14
    MX = 15
    TXT = 16
    RP = 17
    AFSDB = 18
    X25 = 19
    ISDN = 20
    RT = 21
    NSAP = 22
    SIG = 24
    KEY = 25
    PX = 26
    GPOS = 27
    AAAA = 28
    LOC = 29
    NXT = 30
    SRV = 33
    NAPTR = 35
    KX = 36
    CERT = 37
    A6 = 38
    DNAME = 39
    OPT = 41
    APL = 42
    DS = 43
    SSHFP = 44
    IPSECKEY = 45
    RRSIG = 46
    NSEC = 47
    DNSKEY = 48
    DHCID = 49
    NSEC3 = 50
    NSEC3PARAM = 51
    TLSA = 52
    SMIMEA = 53
    HIP = 55
    CDS = 59
    CDNSKEY = 60
    OPENPGPKEY = 61
    CSYNC = 62
    ZONEMD = 63
    SVCB = 64
    HTTPS = 65
    SPF = 99
    EUI48 = 108
    EUI64 = 109
    TKEY = 249
    TSIG = 250
    IXFR = 251
    AXFR = 252
    MAILB = 253
    MAILA = 254
    ANY = 255
    URI = 256
    CAA = 257
    AMTRELAY = 260
    TA = 32768
    DLV = 32769

    @property
    def label(self) -> str:
        """Mnemonic used in presentation format and DoH query strings."""
        return self.name

    def to_code(self) -> int:
        """Return the numeric type code."""
        return self.value

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_code(cls, code: int) -> Union["RecordType", UnknownRecordType]:
        """Map a numeric type code to its symbolic record type.

        Codes without a RecordType member map to UnknownRecordType so that
        newly assigned or rare types never break decoding.

        Args:
            code: Non-negative DNS type code

        Returns:
            RecordType member, or UnknownRecordType carrying the code

        Raises:
            ValueError: If code is negative
        """
        if code < 0:
            raise ValueError(f"DNS type code must be non-negative, got {code}")
        try:
            return cls(code)
        except ValueError:
            return UnknownRecordType(code)

    @classmethod
    def parse(cls, text: str) -> Union["RecordType", UnknownRecordType]:
        """Parse a mnemonic ("aaaa"), a TYPE<n> label or a decimal code.

        Raises:
            ValueError: If text is none of the accepted forms
        """
        value = text.strip().upper()
        if value in cls.__members__:
            return cls[value]
        if value.startswith("TYPE") and value[4:].isdigit():
            return cls.from_code(int(value[4:]))
        if value.isdigit():
            return cls.from_code(int(value))
        raise ValueError(f"Unknown DNS record type: {text!r}")


RecordTypeLike = Union[RecordType, UnknownRecordType]
