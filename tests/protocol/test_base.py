"""
Tests for the error payload and its polymorphic wire decoding.
"""

import pytest
from pydantic import ValidationError

from rpclib.protocol.base import ADHOC_ERROR_CODE, METHOD_NOT_FOUND, Error


class TestErrorFromProtocol:
    def test_null_is_no_error(self):
        assert Error.from_protocol(None) is None

    @pytest.mark.parametrize("message", ["method not found", "", "ünïcode"])
    def test_string_becomes_adhoc_error(self, message):
        error = Error.from_protocol(message)
        assert error.code == ADHOC_ERROR_CODE
        assert error.message == message

    def test_object_is_parsed(self):
        error = Error.from_protocol({"code": METHOD_NOT_FOUND, "message": "nope"})
        assert error == Error(code=METHOD_NOT_FOUND, message="nope")

    def test_existing_error_passes_through(self):
        error = Error(code=3, message="three")
        assert Error.from_protocol(error) is error

    @pytest.mark.parametrize("value", [42, 1.5, True, [1, 2], ["message"]])
    def test_other_shapes_are_rejected(self, value):
        with pytest.raises(ValueError):
            Error.from_protocol(value)

    def test_object_without_message_is_rejected(self):
        with pytest.raises(ValidationError):
            Error.from_protocol({"code": 1})

    def test_boolean_code_is_rejected(self):
        with pytest.raises(ValidationError):
            Error.from_protocol({"code": True, "message": "bool"})
