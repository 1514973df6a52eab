"""Decoder for DoH JSON response bodies."""
import json
import logging
from typing import Any, Union

from dohclient.models import Answer, Question, Response


logger = logging.getLogger(__name__)

MAX_INT = 2 ** 64
MAX_RCODE = 0xFFFF


class DecodeError(ValueError):
    """Raised when a response body does not match the DoH JSON schema."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class ResponseDecoder:
    """Decoder turning DoH JSON documents into Response objects.

    Unknown fields are ignored at every level so that provider schema
    additions (Comment, Authority, edns_client_subnet...) never break
    decoding. Required fields are never defaulted.
    """

    FLAG_FIELDS = ("TC", "RD", "RA", "AD", "CD")

    @classmethod
    def decode(cls, body: Union[bytes, str]) -> Response:
        """Decode a DoH JSON response body.

        Args:
            body: Raw response body, UTF-8 encoded bytes or text

        Returns:
            Decoded Response

        Raises:
            DecodeError: If the body is not valid UTF-8 JSON or does not
                match the expected structure
        """
        if isinstance(body, bytes):
            try:
                body = body.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DecodeError(f"Body is not valid UTF-8: {e}") from e

        # int literals over the digit limit raise ValueError, deep nesting RecursionError
        try:
            document = json.loads(body)
        except (ValueError, RecursionError) as e:
            raise DecodeError(f"Body is not valid JSON: {e}") from e

        response = cls.decode_document(document)
        logger.debug(
            f"Decoded response: status={response.status}, "
            f"{len(response.questions)} questions, {len(response.answers)} answers"
        )
        return response

    @classmethod
    def decode_document(cls, document: Any) -> Response:
        """Decode an already parsed JSON document.

        Raises:
            DecodeError: If the document does not match the expected structure
        """
        cls._require_object(document, "")

        validated = {
            "Status": cls._require_int(document, "Status", "", max_value=MAX_RCODE),
        }
        for flag in cls.FLAG_FIELDS:
            validated[flag] = cls._require_bool(document, flag, "")

        validated["Question"] = [
            cls._decode_question(item, f"Question[{index}]")
            for index, item in enumerate(cls._require_list(document, "Question", ""))
        ]
        validated["Answer"] = [
            cls._decode_answer(item, f"Answer[{index}]")
            for index, item in enumerate(cls._require_list(document, "Answer", ""))
        ]
        return Response.from_dict(validated)

    @classmethod
    def _decode_question(cls, item: Any, path: str) -> dict:
        cls._require_object(item, path)
        return {
            "name": cls._require_str(item, "name", path),
            "type": cls._require_int(item, "type", path),
        }

    @classmethod
    def _decode_answer(cls, item: Any, path: str) -> dict:
        cls._require_object(item, path)
        return {
            "name": cls._require_str(item, "name", path),
            "type": cls._require_int(item, "type", path),
            "TTL": cls._require_int(item, "TTL", path),
            "data": cls._require_str(item, "data", path),
        }

    @staticmethod
    def _field_path(parent: str, key: str) -> str:
        return f"{parent}.{key}" if parent else key

    @staticmethod
    def _require_object(value: Any, path: str) -> None:
        if not isinstance(value, dict):
            raise DecodeError(
                f"expected object, got {type(value).__name__}", path or "<root>"
            )

    @classmethod
    def _require(cls, obj: dict, key: str, parent: str) -> Any:
        if key not in obj:
            raise DecodeError("missing required field", cls._field_path(parent, key))
        return obj[key]

    @classmethod
    def _require_int(
        cls, obj: dict, key: str, parent: str, max_value: int = MAX_INT - 1
    ) -> int:
        value = cls._require(obj, key, parent)
        # bool is a subclass of int
        if isinstance(value, bool) or not isinstance(value, int):
            raise DecodeError(
                f"expected integer, got {type(value).__name__}",
                cls._field_path(parent, key),
            )
        if not 0 <= value <= max_value:
            raise DecodeError(
                f"integer {value} out of range", cls._field_path(parent, key)
            )
        return value

    @classmethod
    def _require_bool(cls, obj: dict, key: str, parent: str) -> bool:
        value = cls._require(obj, key, parent)
        if not isinstance(value, bool):
            raise DecodeError(
                f"expected boolean, got {type(value).__name__}",
                cls._field_path(parent, key),
            )
        return value

    @classmethod
    def _require_str(cls, obj: dict, key: str, parent: str) -> str:
        value = cls._require(obj, key, parent)
        if not isinstance(value, str):
            raise DecodeError(
                f"expected string, got {type(value).__name__}",
                cls._field_path(parent, key),
            )
        # \ud800-style escapes parse as lone surrogates
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise DecodeError(
                "string is not valid text", cls._field_path(parent, key)
            ) from e
        return value

    @classmethod
    def _require_list(cls, obj: dict, key: str, parent: str) -> list:
        value = cls._require(obj, key, parent)
        if not isinstance(value, list):
            raise DecodeError(
                f"expected array, got {type(value).__name__}",
                cls._field_path(parent, key),
            )
        return value
