"""
Tests for payload JSON encoding.
"""

import pytest

from stormpath_client.resources.models import AccountStoreMapping, Link
from stormpath_client.runtime.codec import decode_json, encode_json
from stormpath_client.runtime.errors import SerializationError


class TestEncodeJson:
    """Tests for encode_json()."""

    def test_compact_output(self):
        assert encode_json({"a": 1, "b": [1, 2]}) == b'{"a":1,"b":[1,2]}'

    def test_none_encodes_as_null(self):
        assert encode_json(None) == b"null"

    def test_non_ascii_kept_as_utf8(self):
        assert encode_json({"surname": "Müller"}) == '{"surname":"Müller"}'.encode("utf-8")

    def test_pydantic_model_omits_unset(self):
        mapping = AccountStoreMapping(
            application=Link(href="a"),
            account_store=Link(href="b"),
            list_index=0,
        )
        assert encode_json(mapping) == b'{"listIndex":0,"application":{"href":"a"},"accountStore":{"href":"b"}}'

    def test_model_nested_in_dict(self):
        """Models inside plain containers are dumped by alias."""
        assert encode_json({"accountStore": Link(href="d")}) == b'{"accountStore":{"href":"d"}}'

    def test_list_of_models(self):
        mappings = [
            AccountStoreMapping(application=Link(href="a"), account_store=Link(href="b")),
            AccountStoreMapping(application=Link(href="a"), account_store=Link(href="c"), is_default_group_store=True),
        ]
        assert encode_json(mappings) == (
            b'[{"application":{"href":"a"},"accountStore":{"href":"b"}},'
            b'{"isDefaultGroupStore":true,"application":{"href":"a"},"accountStore":{"href":"c"}}]'
        )

    def test_none_in_plain_dict_kept(self):
        assert encode_json({"middleName": None}) == b'{"middleName":null}'

    def test_unserializable_raises(self):
        with pytest.raises(SerializationError) as exc_info:
            encode_json({1, 2})
        assert exc_info.value.details == {"type": "set"}


class TestDecodeJson:
    """Tests for decode_json()."""

    def test_empty_body(self):
        assert decode_json(b"") is None

    def test_object(self):
        assert decode_json(b'{"href":"x"}') == {"href": "x"}
