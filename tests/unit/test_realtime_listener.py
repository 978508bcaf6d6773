"""
Unit tests for realtime database event handling.
"""
import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from memorylens.domain.models.capture_status import CaptureStatus
from memorylens.infrastructure.db.realtime_listener import RealtimeListener, pending_image_ids


def _event(path, data, event_type="put"):
    return SimpleNamespace(event_type=event_type, path=path, data=data)


class TestPendingImageIds:
    def test_initial_snapshot(self):
        data = {
            "m1": {"imgUrl": "u1"},
            "m2": {"imgUrl": "u2", "detectedFaces": []},
            "m3": {"imgUrl": "u3", "detectedFaces": [{"name": "Alice"}]},
        }
        assert pending_image_ids("/", data) == ["m1"]

    def test_new_image(self):
        assert pending_image_ids("/m4", {"imgUrl": "u4"}) == ["m4"]

    def test_image_already_recognized(self):
        assert pending_image_ids("/m4", {"imgUrl": "u4", "detectedFaces": []}) == []

    def test_deleted_image(self):
        assert pending_image_ids("/m4", None) == []

    def test_nested_write_is_ignored(self):
        assert pending_image_ids("/m4/detectedFaces", [{"name": "Alice"}]) == []

    def test_empty_node(self):
        assert pending_image_ids("/", None) == []


class TestRealtimeListener:
    @pytest.mark.asyncio
    async def test_events_are_handed_to_the_loop(self):
        received = {}
        done = asyncio.Event()

        async def on_status(status):
            received["status"] = status

        async def on_images(image_ids):
            received["images"] = image_ids
            done.set()

        listener = RealtimeListener(
            asyncio.get_running_loop(),
            on_status,
            on_images,
            status_reference=MagicMock(),
            images_reference=MagicMock(),
        )

        # SDK callbacks run on their own thread
        await asyncio.to_thread(listener._handle_status_event, _event("/", "1"))
        await asyncio.to_thread(listener._handle_images_event, _event("/m9", {"imgUrl": "u9"}))
        await asyncio.wait_for(done.wait(), timeout=2)

        assert received["status"] is CaptureStatus.CAPTURING
        assert received["images"] == ["m9"]

    def test_start_and_stop(self):
        status_ref, images_ref = MagicMock(), MagicMock()

        async def noop(_):
            return None

        listener = RealtimeListener(
            MagicMock(), noop, noop, status_reference=status_ref, images_reference=images_ref
        )
        listener.start()
        assert listener.is_running
        status_ref.listen.assert_called_once()
        images_ref.listen.assert_called_once()

        listener.stop()
        assert not listener.is_running
        status_ref.listen.return_value.close.assert_called_once()
        images_ref.listen.return_value.close.assert_called_once()

    def test_closed_loop_drops_events(self):
        loop = asyncio.new_event_loop()
        loop.close()
        calls = []

        async def on_status(status):
            calls.append(status)

        async def on_images(image_ids):
            calls.append(image_ids)

        listener = RealtimeListener(loop, on_status, on_images, MagicMock(), MagicMock())
        listener._handle_status_event(_event("/", "0"))
        assert calls == []
