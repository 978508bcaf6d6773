"""
Unit tests for capture status use cases.
"""
from unittest.mock import AsyncMock

import pytest
from memorylens.domain.models.capture_status import CaptureStatus
from memorylens.application.use_cases.status.get_capture_status import GetCaptureStatusUseCase
from memorylens.application.use_cases.status.set_capture_status import SetCaptureStatusUseCase
from memorylens.application.use_cases.status.toggle_capture_status import ToggleCaptureStatusUseCase


@pytest.fixture
def mock_status_repo():
    return AsyncMock()


class TestCaptureStatus:
    @pytest.mark.parametrize("raw,expected", [
        ("1", CaptureStatus.CAPTURING),
        (1, CaptureStatus.CAPTURING),
        ("0", CaptureStatus.STOPPED),
        (None, CaptureStatus.STOPPED),
        ("yes", CaptureStatus.STOPPED),
    ])
    def test_from_value(self, raw, expected):
        assert CaptureStatus.from_value(raw) is expected

    def test_toggled(self):
        assert CaptureStatus.STOPPED.toggled() is CaptureStatus.CAPTURING
        assert CaptureStatus.CAPTURING.toggled() is CaptureStatus.STOPPED


class TestGetCaptureStatusUseCase:
    @pytest.mark.asyncio
    async def test_returns_current_flag(self, mock_status_repo):
        mock_status_repo.get.return_value = CaptureStatus.CAPTURING
        result = await GetCaptureStatusUseCase(mock_status_repo).execute()
        assert result.status == "1"
        assert result.capturing is True


class TestToggleCaptureStatusUseCase:
    @pytest.mark.asyncio
    async def test_start_capturing(self, mock_status_repo):
        mock_status_repo.get.return_value = CaptureStatus.STOPPED

        result = await ToggleCaptureStatusUseCase(mock_status_repo).execute()

        mock_status_repo.set.assert_awaited_once_with(CaptureStatus.CAPTURING)
        assert result.status == "1"
        assert result.title == "MemoryLens started capturing memories"
        assert result.description == "The device will now automatically capture images at set intervals."

    @pytest.mark.asyncio
    async def test_stop_capturing(self, mock_status_repo):
        mock_status_repo.get.return_value = CaptureStatus.CAPTURING

        result = await ToggleCaptureStatusUseCase(mock_status_repo).execute()

        mock_status_repo.set.assert_awaited_once_with(CaptureStatus.STOPPED)
        assert result.status == "0"
        assert result.capturing is False
        assert result.title == "MemoryLens stopped capturing memories"
        assert result.description == "The device has stopped capturing images."

    @pytest.mark.asyncio
    async def test_write_failure(self, mock_status_repo):
        mock_status_repo.get.return_value = CaptureStatus.STOPPED
        mock_status_repo.set.side_effect = RuntimeError("permission denied")

        with pytest.raises(RuntimeError, match="Failed to update status: permission denied"):
            await ToggleCaptureStatusUseCase(mock_status_repo).execute()


class TestSetCaptureStatusUseCase:
    @pytest.mark.asyncio
    async def test_explicit_set(self, mock_status_repo):
        result = await SetCaptureStatusUseCase(mock_status_repo).execute(CaptureStatus.STOPPED)
        mock_status_repo.set.assert_awaited_once_with(CaptureStatus.STOPPED)
        assert result.status == "0"
