"""DoH JSON response data models."""
from dataclasses import dataclass
from typing import Tuple

from dohclient.models.record_type import RecordType, RecordTypeLike
from dohclient.models.response_code import ResponseCode


@dataclass(frozen=True)
class Question:
    """A question echoed back by the provider.

    Attributes:
        name: Queried domain name (usually fully qualified, e.g. "example.com.")
        type: Raw numeric DNS type code
    """
    name: str
    type: int

    @property
    def record_type(self) -> RecordTypeLike:
        """Symbolic record type of the question."""
        return RecordType.from_code(self.type)

    def to_dict(self) -> dict:
        """Convert to dictionary using the DoH JSON field names."""
        return {"name": self.name, "type": self.type}

    @classmethod
    def from_dict(cls, data: dict) -> "Question":
        """Create Question from an already validated dictionary."""
        return cls(name=data["name"], type=data["type"])


@dataclass(frozen=True)
class Answer:
    """A single resource record from the answer section.

    Attributes:
        name: Owner name of the record
        type: Raw numeric DNS type code, kept even when it is not a known type
        ttl: Time to live in seconds
        data: Record data in presentation format (IP address, target, etc.)
    """
    name: str
    type: int
    ttl: int
    data: str

    @property
    def record_type(self) -> RecordTypeLike:
        """Symbolic record type, derived from the raw type code."""
        return RecordType.from_code(self.type)

    def to_dict(self) -> dict:
        """Convert to dictionary using the DoH JSON field names."""
        return {
            "name": self.name,
            "type": self.type,
            "TTL": self.ttl,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Answer":
        """Create Answer from an already validated dictionary."""
        return cls(
            name=data["name"],
            type=data["type"],
            ttl=data["TTL"],
            data=data["data"],
        )


@dataclass(frozen=True)
class Response:
    """Decoded DoH JSON response.

    Attributes:
        status: Raw DNS response code
        truncated: TC flag
        recursion_desired: RD flag
        recursion_available: RA flag
        dnssec_validated: AD flag, the upstream claims DNSSEC validation
        checking_disabled: CD flag
        questions: Question section, in provider order
        answers: Answer section, in provider order
    """
    status: int
    truncated: bool
    recursion_desired: bool
    recursion_available: bool
    dnssec_validated: bool
    checking_disabled: bool
    questions: Tuple[Question, ...]
    answers: Tuple[Answer, ...]

    @property
    def response_code(self) -> ResponseCode:
        """Symbolic response code, derived from the raw status."""
        return ResponseCode.from_code(self.status)

    @property
    def ok(self) -> bool:
        """Check if the provider reported NOERROR."""
        return self.response_code is ResponseCode.NOERROR

    def answers_of(self, record_type: RecordTypeLike) -> Tuple[Answer, ...]:
        """Return answers of one record type, keeping provider order."""
        code = record_type.to_code()
        return tuple(answer for answer in self.answers if answer.type == code)

    def to_dict(self) -> dict:
        """Convert to dictionary using the DoH JSON field names."""
        return {
            "Status": self.status,
            "TC": self.truncated,
            "RD": self.recursion_desired,
            "RA": self.recursion_available,
            "AD": self.dnssec_validated,
            "CD": self.checking_disabled,
            "Question": [q.to_dict() for q in self.questions],
            "Answer": [a.to_dict() for a in self.answers],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Response":
        """Create Response from an already validated dictionary."""
        return cls(
            status=data["Status"],
            truncated=data["TC"],
            recursion_desired=data["RD"],
            recursion_available=data["RA"],
            dnssec_validated=data["AD"],
            checking_disabled=data["CD"],
            questions=tuple(Question.from_dict(q) for q in data["Question"]),
            answers=tuple(Answer.from_dict(a) for a in data["Answer"]),
        )
