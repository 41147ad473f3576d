# tests/test_retry.py
"""Tests for RetryPolicy."""
import pytest
from unittest.mock import AsyncMock
from pymongo.errors import OperationFailure

from mongo_sequence import CounterNotFoundError, RetryPolicy, is_creation_race
from mongo_sequence.core.retry import NO_RETRY


class TestIsCreationRace:
    def test_counter_not_found_is_a_race(self):
        assert is_creation_race(CounterNotFoundError("seq"))

    def test_store_errors_are_not_races(self):
        assert not is_creation_race(OperationFailure("boom", code=2))
        assert not is_creation_race(ValueError("boom"))


class TestRetryPolicy:
    @pytest.mark.asyncio
    async def test_returns_first_success(self):
        attempt = AsyncMock(return_value=5)

        assert await RetryPolicy().run(attempt) == 5
        assert attempt.await_count == 1

    @pytest.mark.asyncio
    async def test_default_retries_matching_error_once(self):
        attempt = AsyncMock(side_effect=[CounterNotFoundError("seq"), 9])

        assert await RetryPolicy().run(attempt) == 9
        assert attempt.await_count == 2

    @pytest.mark.asyncio
    async def test_last_error_propagates_when_retries_exhausted(self):
        last = CounterNotFoundError("seq")
        attempt = AsyncMock(side_effect=[CounterNotFoundError("seq"), last])

        with pytest.raises(CounterNotFoundError) as exc_info:
            await RetryPolicy().run(attempt)
        assert exc_info.value is last

    @pytest.mark.asyncio
    async def test_non_matching_error_is_not_retried(self):
        attempt = AsyncMock(side_effect=OperationFailure("boom", code=2))

        with pytest.raises(OperationFailure):
            await RetryPolicy(max_retries=3).run(attempt)
        assert attempt.await_count == 1

    @pytest.mark.asyncio
    async def test_custom_predicate_and_attempt_count(self):
        attempt = AsyncMock(side_effect=[KeyError("a"), KeyError("b"), KeyError("c"), "ok"])
        policy = RetryPolicy(max_retries=3, retry_on=lambda e: isinstance(e, KeyError))

        assert await policy.run(attempt) == "ok"
        assert attempt.await_count == 4

    @pytest.mark.asyncio
    async def test_no_retry_policy_runs_once(self):
        attempt = AsyncMock(side_effect=CounterNotFoundError("seq"))

        with pytest.raises(CounterNotFoundError):
            await NO_RETRY.run(attempt)
        assert attempt.await_count == 1

    def test_negative_retries_rejected(self):
        with pytest.raises(ValueError):
            RetryPolicy(max_retries=-1)

    def test_repr_names_predicate(self):
        assert repr(RetryPolicy()) == "RetryPolicy(max_retries=1, retry_on='is_creation_race')"
