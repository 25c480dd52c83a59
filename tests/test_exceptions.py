import json
import pickle

import pytest

from registry_http.exceptions import (
    DomainError,
    FatalError,
    HumanError,
    InternalError,
    NotFound,
    RegistryException,
    human,
    internal,
    internal_error,
)


def test_pickling_of_exceptions():
    exc = InternalError("failed to run command `git`", detail="--- stderr\nboom\n")

    unpickled_exc = pickle.loads(pickle.dumps(exc))

    assert unpickled_exc.description == exc.description
    assert unpickled_exc.detail == exc.detail


def test_pickling_of_human_errors_drops_the_response():
    unpickled_exc = pickle.loads(pickle.dumps(human("bad input")))

    assert unpickled_exc.message == "bad input"
    assert unpickled_exc.response() is None


class TestRegistryException:
    def test_exception_with_extra_info(self):
        exc = RegistryException("An error occurred", extra_info="Extra info")

        assert exc.args == ("An error occurred",)
        assert exc.extra_info == "Extra info"

    def test_exception_no_args(self):
        exc = RegistryException()

        assert exc.args == ()
        assert exc.extra_info is None


class TestHumanError:
    def test_human_error_without_response(self):
        exc = HumanError("invalid semver")

        assert isinstance(exc, DomainError)
        assert str(exc) == "invalid semver"
        assert exc.response() is None

    def test_human_helper_renders_a_response(self):
        exc = human("invalid semver")
        response = exc.response()

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json; charset=utf-8"
        assert json.loads(response.get_data()) == {
            "errors": [{"detail": "invalid semver"}]
        }

    def test_not_found(self):
        exc = NotFound()

        assert isinstance(exc, HumanError)
        assert exc.response().status_code == 404
        assert json.loads(exc.response().get_data()) == {
            "errors": [{"detail": "Not Found"}]
        }


class TestInternalError:
    def test_internal(self):
        exc = internal("index is locked")

        assert isinstance(exc, DomainError)
        assert exc.description == "index is locked"
        assert exc.detail is None
        assert exc.response() is None

    def test_internal_error_with_detail(self):
        exc = internal_error("git push failed", "--- stdout\nrejected\n")

        assert str(exc) == "git push failed"
        assert exc.detail == "--- stdout\nrejected\n"


class TestFatalError:
    def test_from_internal_error_keeps_detail_out_of_message(self):
        error = internal_error("git push failed", "secret remote url")

        fatal = FatalError.from_error(error)

        assert fatal.error is error
        assert "git push failed" in str(fatal)
        assert "secret remote url" not in str(fatal)

    def test_from_human_error(self):
        error = HumanError("unrendered")

        fatal = FatalError.from_error(error)

        assert fatal.error is error
        assert "unrendered" in str(fatal)

    def test_without_error(self):
        fatal = FatalError("mount is misconfigured")

        assert fatal.error is None

    def test_is_not_a_domain_error(self):
        with pytest.raises(RegistryException):
            raise FatalError("boom")

        assert not issubclass(FatalError, DomainError)
