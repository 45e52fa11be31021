"""
Unit tests for src/common/error_handling.py
"""

from unittest.mock import MagicMock

import pytest
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from src.common.error_handling import (
    CareerCoachError,
    DataCorrupt,
    GenerationFailed,
    MalformedResponse,
    NotFound,
    OnboardingRequired,
    RateLimited,
    StoreUnavailable,
    Unauthorized,
    UserNotFound,
    safe_execute,
    store_operation,
)


class TestErrorTypes:

    @pytest.mark.parametrize(
        "error, status",
        [
            (Unauthorized(), 401),
            (UserNotFound("auth0|x"), 404),
            (OnboardingRequired("auth0|x"), 409),
            (NotFound("no user"), 404),
            (StoreUnavailable("down"), 503),
            (GenerationFailed("boom"), 502),
            (RateLimited("quota"), 429),
            (MalformedResponse("empty"), 502),
            (DataCorrupt("quiz", "bad"), 502),
        ],
    )
    def test_status_codes(self, error, status):
        assert error.status_code == status

    def test_to_dict_names_the_condition(self):
        assert DataCorrupt("quiz", "missing questions").to_dict() == {
            "error": "DataCorrupt",
            "detail": "Generated quiz could not be parsed: missing questions",
        }

    def test_default_message_is_class_name(self):
        assert Unauthorized().message == "Unauthorized"

    def test_generation_family(self):
        assert issubclass(RateLimited, GenerationFailed)
        assert issubclass(MalformedResponse, GenerationFailed)
        assert issubclass(OnboardingRequired, UserNotFound)


class TestStoreOperation:

    def test_maps_connectivity_errors(self):
        @store_operation("find user")
        def find():
            raise ServerSelectionTimeoutError("no servers")

        with pytest.raises(StoreUnavailable, match="find user failed"):
            find()

    def test_other_errors_propagate_unchanged(self):
        @store_operation("insert")
        def insert():
            raise DuplicateKeyError("dup")

        with pytest.raises(DuplicateKeyError):
            insert()

    def test_returns_result(self):
        @store_operation("noop")
        def noop():
            return 42

        assert noop() == 42


class TestSafeExecute:

    def test_returns_result(self):
        assert safe_execute(lambda x: x * 2, 21, operation_name="double") == 42

    def test_workflow_error_returns_fallback_and_logs(self):
        logger = MagicMock()

        def fail():
            raise GenerationFailed("upstream 500")

        result = safe_execute(fail, operation_name="tip", logger=logger, fallback="none")

        assert result == "none"
        logger.warning.assert_called_once()
        assert "tip" in logger.warning.call_args[0][0]

    def test_programming_errors_propagate(self):
        def broken():
            raise KeyError("bug")

        with pytest.raises(KeyError):
            safe_execute(broken, operation_name="tip")


def test_all_conditions_share_base():
    for cls in (Unauthorized, NotFound, StoreUnavailable, GenerationFailed, DataCorrupt):
        assert issubclass(cls, CareerCoachError)
