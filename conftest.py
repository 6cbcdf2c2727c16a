"""Shared fixtures: mocked Gemini transport and fake ports."""

import asyncio
import json
from unittest import mock

import pytest

from script_automation.domain.models import ScriptText
from script_automation.ports.interfaces import IClipboard, IScheduler, IScriptGenerator


def _envelope(text="SCRIPT_BODY", finish_reason="STOP"):
    part = {} if text is None else {"text": text}
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [part]},
                "finishReason": finish_reason,
            }
        ]
    }


def _response(status_code=200, payload=None, text=None):
    response = mock.Mock()
    response.status_code = status_code
    if payload is None:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = text if text is not None else "<html>Bad Gateway</html>"
    else:
        response.json.return_value = payload
        response.text = text if text is not None else json.dumps(payload)
    return response


@pytest.fixture
def gemini_envelope():
    return _envelope


@pytest.fixture
def make_response():
    return _response


@pytest.fixture
def gemini_post():
    """Patch requests.post inside the Gemini adapter; default reply echoes SCRIPT_BODY."""
    with mock.patch("script_automation.adapters.gemini.requests.post") as post:
        post.return_value = _response(payload=_envelope())
        yield post


class FakeScriptGenerator(IScriptGenerator):
    """Counts calls; holds each call open until release() when gated."""

    def __init__(self, result=None, gated=False):
        self.result = result or ScriptText("Roteiro de teste")
        self.calls = []
        self._gate = asyncio.Event() if gated else None
        self.started = asyncio.Event()

    def release(self):
        self._gate.set()

    async def generate(self, prompt):
        self.calls.append(prompt)
        self.started.set()
        if self._gate is not None:
            await self._gate.wait()
        return self.result


class FakeClipboard(IClipboard):

    def __init__(self, fail=False):
        self.fail = fail
        self.copied = []

    def copy(self, text):
        if self.fail:
            raise RuntimeError("clipboard unavailable")
        self.copied.append(text)


class FakeScheduler(IScheduler):
    """Records callbacks instead of waiting; run_all() fires them."""

    def __init__(self):
        self.scheduled = []

    def call_later(self, delay, callback):
        self.scheduled.append((delay, callback))

    def run_all(self):
        for _, callback in self.scheduled:
            callback()
        self.scheduled.clear()


@pytest.fixture
def fake_clipboard():
    return FakeClipboard()


@pytest.fixture
def failing_clipboard():
    return FakeClipboard(fail=True)


@pytest.fixture
def fake_scheduler():
    return FakeScheduler()


@pytest.fixture
def fake_generator_cls():
    return FakeScriptGenerator
