"""Tests for pacing module - table lookups and jittered delays."""

import asyncio
import logging
from unittest.mock import AsyncMock, patch

import pytest
from chain_pacing import Chain, Job, JobKind
from chain_pacing.pacing import (
    ChainPacing,
    DEFAULT_PACING,
    PACING_TABLE,
    pacing_for,
    request_pace_ms,
    rescan_delay_ms,
    jitter_delay,
    rescan_delay,
    job_error_delay,
    recalculate_delay,
    remove_data_delay,
)


@pytest.fixture
def sleep():
    """Replace asyncio.sleep so delays return at once."""
    with patch("chain_pacing.pacing.delay.asyncio.sleep", new_callable=AsyncMock) as mock:
        yield mock


def slept_ms(mock: AsyncMock) -> float:
    return mock.await_args.args[0] * 1000


class TestPacingTable:
    """Test per-chain pacing constants."""

    def test_default_pace_is_500ms(self):
        assert request_pace_ms(Chain.ETHEREUM) == 500
        assert request_pace_ms(Chain.POLYGON) == 500

    def test_slow_chains_pace_at_one_second(self):
        assert request_pace_ms(Chain.ELROND) == 1000
        assert request_pace_ms(Chain.OPTIMISM) == 1000

    def test_solana_relies_on_client_limiter(self):
        assert request_pace_ms(Chain.SOLANA) == 0

    def test_fast_chains_rescan_every_second(self):
        assert rescan_delay_ms(Chain.SOLANA) == 1000
        assert rescan_delay_ms(Chain.INTERNET_COMPUTER) == 1000

    def test_throttled_chains_rescan_slower(self):
        assert rescan_delay_ms(Chain.POLKADOT) == 7000
        assert rescan_delay_ms(Chain.KUSAMA) == 7000
        assert rescan_delay_ms(Chain.OPTIMISM) == 10000

    def test_unlisted_chain_rescans_every_30_seconds(self):
        assert Chain.BINANCE not in PACING_TABLE
        assert rescan_delay_ms(Chain.BINANCE) == 30000
        assert pacing_for(Chain.BINANCE) is DEFAULT_PACING

    def test_lookups_are_stable(self):
        for chain in Chain:
            assert request_pace_ms(chain) == request_pace_ms(chain)
            assert rescan_delay_ms(chain) == rescan_delay_ms(chain)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            PACING_TABLE[Chain.BINANCE] = ChainPacing(rescan_secs=1)

    def test_rescan_ms_property(self):
        assert ChainPacing(rescan_secs=7).rescan_ms == 7000


class TestJitterDelay:
    """Test the jittered sleep."""

    @pytest.mark.asyncio
    async def test_sleeps_at_least_base(self, sleep):
        with patch("chain_pacing.pacing.delay.random.randrange", return_value=0):
            await jitter_delay(250)

        assert slept_ms(sleep) == pytest.approx(250)

    @pytest.mark.asyncio
    async def test_jitter_below_ten_ms(self, sleep):
        with patch("chain_pacing.pacing.delay.random.randrange", return_value=9) as randrange:
            await jitter_delay(250)

        randrange.assert_called_once_with(10)
        assert slept_ms(sleep) == pytest.approx(259)

    @pytest.mark.asyncio
    async def test_sampled_delays_within_bounds(self, sleep):
        for _ in range(50):
            await jitter_delay(100)
            assert 100 <= slept_ms(sleep) < 110

    @pytest.mark.asyncio
    async def test_zero_base_only_jitters(self, sleep):
        await jitter_delay(0)

        assert 0 <= slept_ms(sleep) < 10

    @pytest.mark.asyncio
    async def test_negative_base_rejected(self, sleep):
        with pytest.raises(ValueError):
            await jitter_delay(-1)

        sleep.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cancellation_abandons_delay(self):
        task = asyncio.create_task(jitter_delay(60_000))
        await asyncio.sleep(0)

        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task


class TestWaiters:
    """Test the fixed-interval and rescan waiters."""

    @pytest.mark.asyncio
    async def test_rescan_delay_uses_chain_interval(self, sleep, caplog):
        with caplog.at_level(logging.DEBUG, logger="chain_pacing.pacing.delay"):
            await rescan_delay(Chain.POLKADOT)

        assert 7000 <= slept_ms(sleep) < 7010
        assert "delaying 7000 ms to rescan chain polkadot" in caplog.text

    @pytest.mark.asyncio
    async def test_job_error_delay(self, sleep, caplog):
        job = Job(JobKind.IMPORT_BLOCKS, Chain.NEAR)

        with caplog.at_level(logging.DEBUG, logger="chain_pacing.pacing.delay"):
            await job_error_delay(job)

        assert 1000 <= slept_ms(sleep) < 1010
        assert "retry job import-blocks(near)" in caplog.text

    @pytest.mark.asyncio
    async def test_recalculate_delay(self, sleep):
        await recalculate_delay()

        assert 5000 <= slept_ms(sleep) < 5010

    @pytest.mark.asyncio
    async def test_remove_data_delay_is_one_day(self, sleep):
        await remove_data_delay()

        assert 86_400_000 <= slept_ms(sleep) < 86_400_010
