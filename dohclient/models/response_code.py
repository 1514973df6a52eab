"""DNS response code (RCODE) data model."""
from enum import Enum


class ResponseCode(Enum):
    """DNS response codes as allocated by IANA.

    UNASSIGNED and RESERVED stand for whole numeric ranges, so they carry
    no single code.
    """
    NOERROR = "noerror"
    FORMERR = "formerr"
    SERVFAIL = "servfail"
    NXDOMAIN = "nxdomain"
    NOTIMP = "notimp"
    REFUSED = "refused"
    YXDOMAIN = "yxdomain"
    YXRRSET = "yxrrset"
    NXRRSET = "nxrrset"
    NOTAUTH = "notauth"
    NOTZONE = "notzone"
    DSOTYPENI = "dsotypeni"
    BADVERS = "badvers"
    BADKEY = "badkey"
    BADTIME = "badtime"
    BADMODE = "badmode"
    BADNAME = "badname"
    BADALG = "badalg"
    BADTRUNC = "badtrunc"
    BADCOOKIE = "badcookie"
    UNASSIGNED = "unassigned"
    RESERVED = "reserved"

    @classmethod
    def from_code(cls, code: int) -> "ResponseCode":
        """Classify a 16-bit response code.

        Args:
            code: Response code in the range 0-65535

        Returns:
            Dedicated member for assigned codes, UNASSIGNED or RESERVED
            for the catch-all ranges

        Raises:
            ValueError: If code is outside 0-65535
        """
        if not 0 <= code <= 0xFFFF:
            raise ValueError(f"Response code must be in 0-65535, got {code}")

        assigned = _BY_CODE.get(code)
        if assigned is not None:
            return assigned
        if 3841 <= code <= 4095 or code == 0xFFFF:
            return cls.RESERVED
        # 12-15, 24-3840 and 4096-65534
        return cls.UNASSIGNED

    def to_code(self) -> int:
        """Return the numeric code of an assigned response code.

        Raises:
            ValueError: For UNASSIGNED and RESERVED, which cover ranges
        """
        try:
            return _TO_CODE[self]
        except KeyError:
            raise ValueError(f"{self.name} does not map to a single code") from None

    @property
    def is_error(self) -> bool:
        """Check if the code reports anything other than success."""
        return self is not ResponseCode.NOERROR


_BY_CODE = {
    0: ResponseCode.NOERROR,
    1: ResponseCode.FORMERR,
    2: ResponseCode.SERVFAIL,
    3: ResponseCode.NXDOMAIN,
    4: ResponseCode.NOTIMP,
    5: ResponseCode.REFUSED,
    6: ResponseCode.YXDOMAIN,
    7: ResponseCode.YXRRSET,
    8: ResponseCode.NXRRSET,
    9: ResponseCode.NOTAUTH,
    10: ResponseCode.NOTZONE,
    11: ResponseCode.DSOTYPENI,
    16: ResponseCode.BADVERS,
    17: ResponseCode.BADKEY,
    18: ResponseCode.BADTIME,
    19: ResponseCode.BADMODE,
    20: ResponseCode.BADNAME,
    21: ResponseCode.BADALG,
    22: ResponseCode.BADTRUNC,
    23: ResponseCode.BADCOOKIE,
}

_TO_CODE = {rcode: code for code, rcode in _BY_CODE.items()}
