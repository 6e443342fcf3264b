"""Unit tests for notion_api.rate_limit module."""

from unittest.mock import MagicMock, patch

import pytest

from src.notion_api.rate_limit import RateLimiter


class TestRateLimiter:
    """Test cases for RateLimiter."""

    @pytest.mark.parametrize("rate", [0, -1])
    def test_rejects_non_positive_rate(self, rate):
        """The refill rate must be positive."""
        with pytest.raises(ValueError):
            RateLimiter(rate)

    @patch('src.notion_api.rate_limit.time.sleep')
    @patch('src.notion_api.rate_limit.time.monotonic')
    def test_burst_passes_without_waiting(self, mock_monotonic, mock_sleep):
        """Calls within the bucket capacity don't sleep."""
        mock_monotonic.return_value = 100.0
        limiter = RateLimiter(requests_per_second=3)

        waits = [limiter.acquire() for _ in range(3)]

        assert waits == [0.0, 0.0, 0.0]
        mock_sleep.assert_not_called()

    @patch('src.notion_api.rate_limit.time.sleep')
    @patch('src.notion_api.rate_limit.time.monotonic')
    def test_waits_when_bucket_empty(self, mock_monotonic, mock_sleep):
        """Once the bucket is empty, the caller sleeps for one token's worth."""
        mock_monotonic.return_value = 100.0
        limiter = RateLimiter(requests_per_second=2, burst=1)

        limiter.acquire()
        wait = limiter.acquire()

        assert wait == pytest.approx(0.5)
        mock_sleep.assert_called_once()
        assert mock_sleep.call_args[0][0] == pytest.approx(0.5)

    @patch('src.notion_api.rate_limit.time.sleep')
    @patch('src.notion_api.rate_limit.time.monotonic')
    def test_tokens_refill_over_time(self, mock_monotonic, mock_sleep):
        """Elapsed time refills the bucket up to its capacity."""
        mock_monotonic.return_value = 100.0
        limiter = RateLimiter(requests_per_second=1, burst=1)
        limiter.acquire()

        mock_monotonic.return_value = 101.0
        assert limiter.acquire() == 0.0
        mock_sleep.assert_not_called()

    @patch('src.notion_api.rate_limit.time.sleep')
    def test_call_passes_arguments_and_result(self, mock_sleep):
        """call() invokes the function with its arguments and returns its result."""
        limiter = RateLimiter(requests_per_second=10)
        func = MagicMock(return_value="ok")

        assert limiter.call(func, "a", key="b") == "ok"
        func.assert_called_once_with("a", key="b")

    @patch('src.notion_api.rate_limit.time.sleep')
    def test_call_does_not_retry(self, mock_sleep):
        """Errors from the wrapped function propagate after a single attempt."""
        limiter = RateLimiter(requests_per_second=10)
        func = MagicMock(side_effect=RuntimeError("429 Too Many Requests"))

        with pytest.raises(RuntimeError):
            limiter.call(func)

        assert func.call_count == 1
