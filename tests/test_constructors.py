from __future__ import annotations

import pytest

import errcap


class TestPublic:
    def test_public_error(self):
        err = errcap.public("public", 400)
        assert isinstance(err, errcap.PublicStatusError)
        assert str(err) == "public"
        assert err.message == "public"
        assert errcap.is_public(err)
        assert errcap.status(err) == 400
        assert errcap.code(err) == ""

    @pytest.mark.parametrize("code", ["CODE", "  CODE  "])
    def test_public_with_code(self, code):
        err = errcap.public_with_code("message", 409, code)
        assert isinstance(err, errcap.PublicStatusCodeError)
        assert errcap.status(err) == 409
        assert errcap.code(err) == "CODE"
        assert errcap.is_public(err)

    @pytest.mark.parametrize("code", ["", "   ", "\t\n"])
    def test_blank_code_falls_back_to_public(self, code):
        err = errcap.public_with_code("message", 409, code)
        assert type(err) is errcap.PublicStatusError
        assert not isinstance(err, errcap.Coder)
        assert errcap.code(err) == ""
        assert errcap.status(err) == errcap.status(errcap.public("message", 409))
        assert errcap.is_public(err)

    def test_public_errors_are_raisable(self):
        with pytest.raises(errcap.PublicStatusError) as excinfo:
            raise errcap.public_with_code("quota exceeded", 429, "QUOTA")
        assert errcap.has_code(excinfo.value, "QUOTA")

    def test_with_context_is_not_public(self):
        err = errcap.public("public", 401).with_context(user="alice")
        assert not errcap.is_public(err)
        assert errcap.is_public(errcap.cause(err))
        assert str(err) == "user=alice: public"


class TestTemporary:
    def test_temporary(self):
        err = errcap.temporary("x")
        assert str(err) == "x"
        assert errcap.is_temporary(err)
        assert isinstance(errcap.cause(err), errcap.TemporaryError)

    def test_wrapped_temporary(self):
        err = errcap.wrap(errcap.temporary("x"), "y")
        assert str(err) == "y: x"
        assert errcap.is_temporary(err)

    def test_temporary_is_not_public(self):
        assert not errcap.is_public(errcap.temporary("x"))


class TestClientErrors:
    @pytest.mark.parametrize(
        ("factory", "want_status", "want_message"),
        [
            (errcap.bad_request, 400, "bad request"),
            (errcap.unauthorized, 401, "unauthorized"),
            (errcap.forbidden, 403, "forbidden"),
            (errcap.not_found, 404, "not found"),
            (errcap.conflict, 409, "conflict"),
        ],
    )
    def test_defaults(self, factory, want_status, want_message):
        err = factory()
        assert str(err) == want_message
        assert errcap.status(err) == want_status
        assert errcap.is_public(err)

    def test_message_override(self):
        err = errcap.bad_request("", "  ", "custom")
        assert str(err) == "custom"
        assert errcap.status(err) == 400

    def test_blank_messages_use_default(self):
        assert str(errcap.forbidden("", "  ")) == "forbidden"

    def test_multiple_messages_are_joined(self):
        assert str(errcap.not_found(" user ", "alice")) == "user alice"


class TestNotImplemented:
    def test_status_and_message(self):
        err = errcap.not_implemented()
        assert errcap.status(err) == 501
        assert str(errcap.cause(err)) == "not implemented"
        assert errcap.is_public(errcap.cause(err))
        assert not errcap.is_public(err)

    def test_caller_context(self):
        err = errcap.not_implemented("export is coming soon")
        site = err.context["caller"]
        assert isinstance(site, errcap.CallSite)
        assert site.function == "test_caller_context"
        assert site.filename == __file__
        assert str(err) == f"caller={site}: export is coming soon"
