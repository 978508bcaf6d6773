"""
Unit tests for the background recognition worker.
"""
from unittest.mock import AsyncMock

import pytest
from memorylens.infrastructure.recognition.recognition_worker import RecognitionWorker


@pytest.mark.asyncio
async def test_each_image_recognized_once():
    recognize = AsyncMock()
    worker = RecognitionWorker(recognize, retry_delay_seconds=0)

    assert worker.enqueue("m1") is True
    assert worker.enqueue("m1") is False
    assert worker.enqueue_many(["m2", "m1", ""]) == 1

    worker.start()
    await worker.join()
    await worker.stop()

    assert [call.args[0] for call in recognize.await_args_list] == ["m1", "m2"]
    assert worker.is_finished("m1")
    # Empty detectedFaces lists disappear from the database; do not redo the work
    assert worker.enqueue("m1") is False


@pytest.mark.asyncio
async def test_retries_until_success():
    recognize = AsyncMock(side_effect=[RuntimeError("network"), None])
    worker = RecognitionWorker(recognize, max_attempts=3, retry_delay_seconds=0)

    worker.enqueue("m1")
    worker.start()
    await worker.join()
    await worker.stop()

    assert recognize.await_count == 2
    assert worker.is_finished("m1")
    assert worker.attempts("m1") == 0


@pytest.mark.asyncio
async def test_gives_up_after_max_attempts():
    recognize = AsyncMock(side_effect=RuntimeError("Face detection failed: boom"))
    worker = RecognitionWorker(recognize, max_attempts=3, retry_delay_seconds=0)

    worker.enqueue("m1")
    worker.start()
    await worker.join()
    await worker.stop()

    assert recognize.await_count == 3
    assert worker.is_finished("m1")


@pytest.mark.asyncio
async def test_value_error_is_not_retried():
    recognize = AsyncMock(side_effect=ValueError("Memory not found"))
    worker = RecognitionWorker(recognize, retry_delay_seconds=0)

    assert await worker.process("gone") is False
    assert recognize.await_count == 1
    assert worker.is_finished("gone")
    assert worker.pending == 0


@pytest.mark.asyncio
async def test_failed_attempt_is_requeued():
    recognize = AsyncMock(side_effect=RuntimeError("timeout"))
    worker = RecognitionWorker(recognize, max_attempts=2, retry_delay_seconds=0)

    assert await worker.process("m1") is False
    assert worker.attempts("m1") == 1
    assert worker.pending == 1
    assert not worker.is_finished("m1")


@pytest.mark.asyncio
async def test_stop_without_start():
    worker = RecognitionWorker(AsyncMock())
    await worker.stop()
    assert not worker.is_running
