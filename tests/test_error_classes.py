"""Error class hierarchy tests."""

import pytest

from pywebvtt._errors import TimestampFormatError, UnsupportedUnitError, WebVTTError


class TestWebVTTErrorBase:
    def test_str_returns_user_message(self):
        err = WebVTTError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = WebVTTError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = WebVTTError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ValueError("root cause")
        err = WebVTTError("user msg", wrapped=cause)
        assert err.wrapped is cause


class TestErrorHierarchy:
    ALL_ERROR_CLASSES = [TimestampFormatError, UnsupportedUnitError]

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_subclass_of_base(self, cls):
        assert issubclass(cls, WebVTTError)

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_instantiation(self, cls):
        err = cls("test message", "internal detail")
        assert str(err) == "test message"
        assert err.internal() == "internal detail"

    @pytest.mark.parametrize("cls", ALL_ERROR_CLASSES)
    def test_is_catchable_as_base(self, cls):
        with pytest.raises(WebVTTError):
            raise cls("test")
