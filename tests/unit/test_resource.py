"""
Unit tests for the Resource base class.
"""

import logging

import pytest

from resourceful import Resource, Action, ActionNotDefined, HTTPStatus
from resourceful.http.response import Response

from conftest import Widgets, Gadgets, make_request


class TestResourceHandle:
    """Tests for Resource.handle()."""

    def test_list(self):
        """GET without identifier runs list()."""
        response = Widgets(None, {}).handle(make_request("GET"))
        assert response.status == 200
        assert response.body == "all widgets"

    def test_read_passes_identifier(self):
        """GET with identifier runs read(id)."""
        response = Widgets("5", {}).handle(make_request("GET", "/widgets/5", "5"))
        assert response.status == 200
        assert response.body == "widget 5"
        assert response.headers["X-Widget"] == "5"

    def test_put_creates_with_or_without_identifier(self):
        """PUT runs create() whether or not an identifier is present."""
        assert Widgets(None, {}).handle(make_request("PUT")).status == 201
        assert Widgets("9", {}).handle(make_request("PUT", "/widgets/9", "9")).status == 201

    def test_post_without_identifier_not_implemented(self):
        """POST without identifier has no action: 501."""
        response = Widgets(None, {}).handle(make_request("POST"))
        assert response.status == HTTPStatus.NOT_IMPLEMENTED
        assert response.body == "Not Implemented"

    def test_unknown_method_not_implemented(self):
        """Methods outside the table answer 501."""
        response = Widgets("1", {}).handle(make_request("PATCH", "/widgets/1", "1"))
        assert response.status == 501

    def test_undefined_action_not_implemented(self):
        """An action the resource does not define answers 501."""
        response = Widgets("1", {}).handle(make_request("POST", "/widgets/1", "1"))
        assert response.status == 501

        response = Gadgets(None, {}).handle(make_request("GET", "/gadgets"))
        assert response.status == 501

    def test_raising_action_internal_error(self, caplog):
        """An action that raises answers 500 without leaking the error."""
        with caplog.at_level(logging.ERROR, logger="resourceful.resource"):
            response = Widgets("boom", {}).handle(make_request("GET", "/widgets/boom", "boom"))

        assert response.status == HTTPStatus.INTERNAL_SERVER_ERROR
        assert response.body == "Internal Server Error"
        assert "hunter2" not in response.body
        assert "RuntimeError" not in response.body
        assert "Widgets.read failed" in caplog.text

    def test_empty_result_not_found(self):
        """An action returning an empty value answers 404."""
        response = Widgets("7", {}).handle(make_request("DELETE", "/widgets/7", "7"))
        assert response.status == HTTPStatus.NOT_FOUND
        assert response.body == "Not Found"

    def test_none_result_not_found(self):
        """An action returning None answers 404."""
        response = Widgets("missing", {}).handle(make_request("GET", "/widgets/missing", "missing"))
        assert response.status == 404

    def test_string_result_is_wrapped(self):
        """A string result becomes a 200 text/html response."""
        response = Gadgets("3", {}).handle(make_request("GET", "/gadgets/3", "3"))
        assert response.status == 200
        assert response.body == "gadget 3"
        assert response.headers["Content-Type"] == "text/html"

    def test_unsupported_result_internal_error(self):
        """A result that is neither Response nor str answers 500."""
        class Numbers(Resource):
            def list(self):
                return 42

        response = Numbers(None, {}).handle(make_request("GET", "/numbers"))
        assert response.status == 500

    def test_wrong_arity_internal_error(self):
        """A defined action that cannot take the identifier answers 500."""
        class Strict(Resource):
            def read(self):
                return "never"

        response = Strict("1", {}).handle(make_request("GET", "/strict/1", "1"))
        assert response.status == 500

    def test_action_raising_action_not_defined(self):
        """ActionNotDefined raised inside an action still answers 501."""
        class Deferred(Resource):
            def list(self):
                raise ActionNotDefined("Deferred", "list")

        response = Deferred(None, {}).handle(make_request("GET", "/deferred"))
        assert response.status == 501

    def test_attribute_error_inside_action_is_500(self):
        """Only a missing action means 501; other errors inside it are 500."""
        class Broken(Resource):
            def list(self):
                return None.title

        response = Broken(None, {}).handle(make_request("GET", "/broken"))
        assert response.status == 500

    def test_content_length_on_success(self):
        """Successful responses carry the body's byte length."""
        response = Widgets("ü", {}).handle(make_request("GET", "/widgets/x", "ü"))
        assert response.status == 200
        assert response.headers["Content-Length"] == str(len(response.body.encode("utf-8")))

    def test_request_is_bound(self):
        """handle() exposes the request to actions."""
        seen = {}

        class Echo(Resource):
            def list(self):
                seen["request"] = self.request
                return "ok"

        request = make_request("GET", "/echo")
        Echo(None, {}).handle(request)
        assert seen["request"] is request


class TestResourceState:
    """Tests for identifier, params and the action table."""

    def test_id_and_params(self):
        """Identifier and parameters are bound at construction."""
        resource = Widgets("5", {"page": "2"})
        assert resource.id == "5"
        assert resource.params == {"page": "2"}

    def test_params_default_empty(self):
        """Parameters default to an empty dict."""
        assert Resource().params == {}
        assert Resource().id is None

    def test_action_table_lists_defined_actions(self):
        """Only defined actions appear in the table."""
        table = Widgets(None, {}).action_table()
        assert set(table) == {Action.LIST, Action.READ, Action.CREATE, Action.DELETE}

    def test_base_resource_has_no_actions(self):
        """The bare base class defines no actions."""
        assert Resource().action_table() == {}

    def test_invoke_missing_raises(self):
        """invoke() signals a missing action with ActionNotDefined."""
        with pytest.raises(ActionNotDefined) as exc_info:
            Gadgets("1", {}).invoke(Action.DELETE)
        assert exc_info.value.action == "delete"

    def test_non_callable_attribute_is_not_an_action(self):
        """A plain attribute named like an action is ignored."""
        class Listed(Resource):
            list = ["not", "callable"]

        assert Action.LIST not in Listed().action_table()


class TestResourceResponses:
    """Tests for respond() and the canned responses."""

    def test_respond_defaults(self):
        """respond() defaults to 200 "OK" text/html."""
        response = Resource().respond()
        assert isinstance(response, Response)
        assert response.status == 200
        assert response.body == "OK"
        assert dict(response.headers) == {"Content-Type": "text/html", "Content-Length": "2"}

    def test_caller_headers_win(self):
        """Caller headers override both the defaults and the computed length."""
        response = Resource().respond(
            "{}",
            headers={"Content-Type": "application/json", "Content-Length": "99"},
        )
        assert response.headers["Content-Type"] == "application/json"
        assert response.headers["Content-Length"] == "99"

    @pytest.mark.parametrize("method, status, body", [
        ("not_found", 404, "Not Found"),
        ("unprocessable", 422, "Unprocessable Entity"),
        ("internal_error", 500, "Internal Server Error"),
        ("not_implemented", 501, "Not Implemented"),
    ])
    def test_canned(self, method, status, body):
        """Canned responses have fixed status and body."""
        response = getattr(Resource(), method)()
        assert response.status == status
        assert response.body == body
        assert response.headers["Content-Length"] == str(len(body))
