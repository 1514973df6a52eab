"""Property tests for DoH JSON response decoding.

Property 3: Response Decoding Fidelity
For any well-formed DoH JSON document, the decoder SHALL preserve every
question and answer in provider order, ignore unknown fields, and reject
documents with missing or mistyped required fields.
"""
import json
import pytest
from hypothesis import given, strategies as st, settings

from dohclient.models import RecordType, Response
from dohclient.services.response_decoder import ResponseDecoder, DecodeError


name_strategy = st.text(
    min_size=1,
    max_size=60,
    alphabet='abcdefghijklmnopqrstuvwxyz0123456789-.',
)

answer_strategy = st.fixed_dictionaries({
    "name": name_strategy,
    "type": st.integers(min_value=0, max_value=65535),
    "TTL": st.integers(min_value=0, max_value=2 ** 31 - 1),
    "data": st.text(max_size=100),
})

question_strategy = st.fixed_dictionaries({
    "name": name_strategy,
    "type": st.integers(min_value=0, max_value=65535),
})


def _document(answers, questions=None, **overrides):
    document = {
        "Status": 0,
        "TC": False,
        "RD": True,
        "RA": True,
        "AD": False,
        "CD": False,
        "Question": questions if questions is not None else [{"name": "example.com.", "type": 1}],
        "Answer": answers,
    }
    document.update(overrides)
    return document


def _encode(document) -> bytes:
    return json.dumps(document).encode("utf-8")


class TestResponseDecodingFidelity:
    """Property 3: Response Decoding Fidelity"""

    @given(
        answers=st.lists(answer_strategy, max_size=10),
        questions=st.lists(question_strategy, max_size=3),
    )
    @settings(max_examples=100)
    def test_sections_preserved_in_order(self, answers, questions):
        """Decoded answers and questions SHALL match the document, in order.

        Feature: doh-client, Property 3: Response Decoding Fidelity
        """
        response = ResponseDecoder.decode(_encode(_document(answers, questions)))

        assert [a.to_dict() for a in response.answers] == answers
        assert [q.to_dict() for q in response.questions] == questions

    @given(
        status=st.integers(min_value=0, max_value=65535),
        flags=st.lists(st.booleans(), min_size=5, max_size=5),
    )
    @settings(max_examples=100)
    def test_status_and_flags_preserved(self, status, flags):
        """Status and all five flags SHALL be decoded as given.

        Feature: doh-client, Property 3: Response Decoding Fidelity
        """
        tc, rd, ra, ad, cd = flags
        document = _document([], Status=status, TC=tc, RD=rd, RA=ra, AD=ad, CD=cd)

        response = ResponseDecoder.decode(_encode(document))

        assert response.status == status
        assert response.truncated is tc
        assert response.recursion_desired is rd
        assert response.recursion_available is ra
        assert response.dnssec_validated is ad
        assert response.checking_disabled is cd

    def test_two_answers_keep_order(self):
        """An A answer followed by an AAAA answer SHALL stay in that order."""
        document = _document([
            {"name": "example.com.", "type": 1, "TTL": 60, "data": "93.184.216.34"},
            {"name": "example.com.", "type": 28, "TTL": 60, "data": "2606:2800:220:1::"},
        ])

        response = ResponseDecoder.decode(_encode(document))

        assert response.answers[0].type == 1
        assert response.answers[1].type == 28
        assert response.answers[1].record_type is RecordType.AAAA

    def test_unknown_top_level_field_ignored(self):
        """An extra "Comment" field SHALL be ignored."""
        document = _document([], Comment="x")

        response = ResponseDecoder.decode(_encode(document))

        assert response.answers == ()

    def test_unknown_nested_fields_ignored(self):
        """Provider extras inside records and sections SHALL be ignored."""
        document = _document(
            [{"name": "a.", "type": 1, "TTL": 1, "data": "1.2.3.4", "extra": [1]}],
            Authority=[{"name": "a.", "type": 6, "TTL": 1, "data": "soa"}],
            edns_client_subnet="0.0.0.0/0",
        )

        response = ResponseDecoder.decode(_encode(document))

        assert len(response.answers) == 1
        assert response.answers[0].data == "1.2.3.4"

    def test_empty_sections_decoded(self):
        """Empty Question and Answer arrays SHALL decode to empty tuples."""
        response = ResponseDecoder.decode(_encode(_document([], [])))

        assert response.questions == ()
        assert response.answers == ()

    def test_accepts_text_body(self):
        """A str body SHALL decode like its UTF-8 bytes."""
        document = _document([])

        assert ResponseDecoder.decode(json.dumps(document)) == ResponseDecoder.decode(_encode(document))

    def test_json_escapes_decoded(self):
        """JSON string escapes SHALL follow standard JSON semantics."""
        body = _encode(_document([]))[:-1] + b', "x": 1}'
        body = body.replace(b'"example.com."', b'"ex\\u0061mple.com."')

        response = ResponseDecoder.decode(body)

        assert response.questions[0].name == "example.com."


class TestResponseDecodingRejection:
    """Property 3: Response Decoding Fidelity (rejection cases)"""

    @pytest.mark.parametrize("field", ["Status", "TC", "RD", "RA", "AD", "CD", "Question", "Answer"])
    def test_missing_required_field(self, field):
        """A missing required field SHALL fail, never default.

        Feature: doh-client, Property 3: Response Decoding Fidelity
        """
        document = _document([])
        del document[field]

        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(_encode(document))

        assert exc_info.value.path == field

    @pytest.mark.parametrize("field", ["name", "type", "TTL", "data"])
    def test_missing_answer_field(self, field):
        """A missing field inside an answer SHALL fail with its path."""
        answer = {"name": "a.", "type": 1, "TTL": 1, "data": "1.2.3.4"}
        del answer[field]

        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(_encode(_document([answer])))

        assert exc_info.value.path == f"Answer[0].{field}"

    @pytest.mark.parametrize("field,value", [
        ("Status", "0"),
        ("Status", 1.5),
        ("Status", True),
        ("Status", -1),
        ("Status", 2 ** 64),
        ("TC", 0),
        ("AD", "false"),
        ("CD", None),
        ("Question", {}),
        ("Answer", "none"),
        ("Answer", [1]),
    ])
    def test_wrong_shape_rejected(self, field, value):
        """Required fields with the wrong JSON type SHALL fail."""
        document = _document([], **{field: value})

        with pytest.raises(DecodeError):
            ResponseDecoder.decode(_encode(document))

    @pytest.mark.parametrize("field,value", [
        ("TTL", -5),
        ("TTL", "300"),
        ("type", 1.0),
        ("data", 42),
        ("name", None),
    ])
    def test_wrong_answer_shape_rejected(self, field, value):
        """Answer fields with the wrong JSON type SHALL fail."""
        answer = {"name": "a.", "type": 1, "TTL": 1, "data": "1.2.3.4"}
        answer[field] = value

        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(_encode(_document([answer])))

        assert exc_info.value.path == f"Answer[0].{field}"

    def test_largest_integer_accepted(self):
        """Integers up to 2**64 - 1 SHALL be accepted."""
        answer = {"name": "a.", "type": 1, "TTL": 2 ** 64 - 1, "data": ""}

        response = ResponseDecoder.decode(_encode(_document([answer])))

        assert response.answers[0].ttl == 2 ** 64 - 1

    @pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b"null", b'{"Status": 0'])
    def test_malformed_body_rejected(self, body):
        """Bodies that are not a JSON object SHALL fail."""
        with pytest.raises(DecodeError):
            ResponseDecoder.decode(body)

    def test_invalid_utf8_rejected(self):
        """Bodies that are not valid UTF-8 SHALL fail."""
        body = _encode(_document([])).replace(b"example", b"ex\xffmple")

        with pytest.raises(DecodeError):
            ResponseDecoder.decode(body)

    def test_lone_surrogate_rejected(self):
        """Escapes that do not form valid text SHALL fail."""
        body = _encode(_document([])).replace(b'"example.com."', b'"\\ud800"')

        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(body)

        assert exc_info.value.path == "Question[0].name"

    def test_decode_error_is_value_error(self):
        """DecodeError SHALL be catchable as ValueError."""
        with pytest.raises(ValueError):
            ResponseDecoder.decode(b"{}")

    def test_answers_of_filters_by_type(self):
        """answers_of SHALL keep only one type, in provider order."""
        document = _document([
            {"name": "a.", "type": 5, "TTL": 1, "data": "b."},
            {"name": "b.", "type": 1, "TTL": 1, "data": "1.1.1.1"},
            {"name": "b.", "type": 1, "TTL": 1, "data": "2.2.2.2"},
        ])

        response = ResponseDecoder.decode(_encode(document))

        assert [a.data for a in response.answers_of(RecordType.A)] == ["1.1.1.1", "2.2.2.2"]
        assert [a.data for a in response.answers_of(RecordType.CNAME)] == ["b."]
        assert response.answers_of(RecordType.MX) == ()

    def test_response_to_dict_matches_document(self, sample_document):
        """to_dict SHALL reproduce the DoH JSON field layout."""
        response = ResponseDecoder.decode(_encode(sample_document))

        assert response.to_dict() == sample_document


class TestResponseDecodingLimits:
    """Property 3: Response Decoding Fidelity (parser limits)"""

    @given(status=st.integers(min_value=65536, max_value=2 ** 64 - 1))
    @settings(max_examples=50)
    def test_status_beyond_16_bits_rejected(self, status):
        """A Status that does not fit the 16-bit RCODE range SHALL fail.

        Feature: doh-client, Property 3: Response Decoding Fidelity
        """
        with pytest.raises(DecodeError) as exc_info:
            ResponseDecoder.decode(_encode(_document([], Status=status)))

        assert exc_info.value.path == "Status"

    def test_status_65536_rejected(self):
        """Status 65536 SHALL fail while 65535 decodes."""
        with pytest.raises(DecodeError):
            ResponseDecoder.decode(_encode(_document([], Status=65536)))

        assert ResponseDecoder.decode(_encode(_document([], Status=65535))).status == 65535

    def test_oversized_integer_literal_rejected(self):
        """An integer literal of thousands of digits SHALL fail as DecodeError."""
        body = b'{"Status": ' + b'9' * 5000 + b'}'

        with pytest.raises(DecodeError):
            ResponseDecoder.decode(body)

    def test_deeply_nested_unknown_field_rejected(self):
        """Nesting beyond the parser's depth limit SHALL fail as DecodeError."""
        body = b'{"Status":0,"x":' + b'[' * 100000 + b']' * 100000 + b'}'

        with pytest.raises(DecodeError):
            ResponseDecoder.decode(body)

    def test_response_sections_are_required(self):
        """A Response SHALL not be built without its question and answer sections."""
        with pytest.raises(TypeError):
            Response(
                status=0,
                truncated=False,
                recursion_desired=True,
                recursion_available=True,
                dnssec_validated=False,
                checking_disabled=False,
            )
