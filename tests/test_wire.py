# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Tests for the JSON wire codec."""

import json

import pytest

from identity_backends import User
from identity_backends.wire import (
    decode_json_object,
    decode_user,
    encode_json,
    encode_raw,
    encode_user,
    split_object,
)


class TestSplitObject:
    """Tests for split_object."""

    def test_members_keep_source_text(self):
        """Test each member value is returned exactly as written."""
        text = ' { "a" : 1.50 , "b":{"x" : [1, 2]},"c": "s\\u00e9"\n} '

        assert split_object(text) == {"a": "1.50", "b": '{"x" : [1, 2]}', "c": '"s\\u00e9"'}

    def test_empty_object(self):
        """Test an empty object has no members."""
        assert split_object("{ }") == {}

    @pytest.mark.parametrize(
        "text",
        ["", "[]", '"s"', '{"a": 1', '{"a" 1}', '{"a": 1,}', '{a: 1}', '{"a": 1} trailing', '{"a": }'],
    )
    def test_rejects_malformed_input(self, text):
        """Test anything but one well-formed object raises ValueError."""
        with pytest.raises(ValueError):
            split_object(text)


class TestUserCodec:
    """Tests for encode_user and decode_user."""

    def test_decode_user(self):
        """Test named fields are decoded and attributes kept raw."""
        body = b'{"userId": "u1", "userType": "customer", "ouId": "ou", "attributes": {"k" :  "v"}}'

        assert decode_user(body) == User(
            user_id="u1", user_type="customer", ou_id="ou", attributes='{"k" :  "v"}'
        )

    def test_decode_user_with_missing_and_null_fields(self):
        """Test absent or null fields fall back to empty values."""
        assert decode_user(b'{"userId": "u1", "ouId": null, "attributes": null}') == User(user_id="u1")

    def test_decode_user_rejects_mistyped_fields(self):
        """Test a non-string user ID is a decode error."""
        with pytest.raises(ValueError):
            decode_user(b'{"userId": 42}')

    def test_decode_user_rejects_invalid_utf8(self):
        """Test bodies that are not UTF-8 are a decode error."""
        with pytest.raises(ValueError):
            decode_user(b'{"userId": "\xff"}')

    def test_encode_user_splices_attributes(self):
        """Test attributes are embedded verbatim and the document stays valid JSON."""
        attributes = '{"z": 1, "a":   [true, null]}'
        body = encode_user(User(user_id="u1", user_type="t", ou_id="ou", attributes=attributes))

        assert attributes.encode("utf-8") in body
        assert json.loads(body) == {
            "userId": "u1",
            "userType": "t",
            "ouId": "ou",
            "attributes": {"z": 1, "a": [True, None]},
        }

    def test_encode_user_omits_empty_id_and_attributes(self):
        """Test unset optional members are left out."""
        assert json.loads(encode_user(User(user_type="t"))) == {"userType": "t", "ouId": ""}

    def test_encoded_user_decodes_to_same_record(self):
        """Test a record survives an encode/decode cycle unchanged."""
        user = User(user_id="u1", user_type="t", ou_id="ou", attributes='{"a":1}')

        assert decode_user(encode_user(user)) == user

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
    def test_encode_user_rejects_non_standard_numbers(self, literal):
        """Test attribute text holding NaN or Infinity is not spliced in."""
        with pytest.raises(ValueError, match="is not valid JSON"):
            encode_user(User(user_type="t", attributes='{"score": ' + literal + "}"))

    def test_decode_user_rejects_non_standard_numbers(self):
        """Test a peer body holding NaN is a decode error."""
        with pytest.raises(ValueError):
            decode_user(b'{"userId": "u1", "attributes": {"score": NaN}}')


class TestGenericCodec:
    """Tests for the generic JSON helpers."""

    def test_encode_json_rejects_nan(self):
        """Test values outside strict JSON are refused."""
        with pytest.raises(ValueError):
            encode_json({"x": float("nan")})

    def test_encode_raw_passes_text_through(self):
        """Test pre-serialized payloads are forwarded unchanged."""
        assert encode_raw('{ "a" : 1 }') == b'{ "a" : 1 }'
        assert encode_raw(b"{}") == b"{}"
        assert json.loads(encode_raw({"a": 1})) == {"a": 1}

    @pytest.mark.parametrize("content", [b"[1]", b"null", b"nope", b'{"x": NaN}'])
    def test_decode_json_object_requires_object(self, content):
        """Test non-object bodies are a decode error."""
        with pytest.raises(ValueError):
            decode_json_object(content)
