"""Shared pytest fixtures"""
import io

import pytest

from canvas_groups.config.settings import Settings
from canvas_groups.utils.progress_logger import ProgressLogger
from stub_services import STUB_CANVAS_URL, STUB_COURSE_ID, StubCanvasService


@pytest.fixture
def stub():
    return StubCanvasService()


@pytest.fixture
def settings():
    return Settings(
        canvas_url=STUB_CANVAS_URL,
        api_token='test-token',
        course_id=STUB_COURSE_ID,
        request_delay=0.5
    )


@pytest.fixture
def console():
    return io.StringIO()


@pytest.fixture
def progress(console):
    return ProgressLogger(stream=console)


ENV_VARS = [
    'CANVAS_URL', 'CANVAS_API_TOKEN', 'COURSE_ID', 'GROUP_CATEGORY_NAME', 'ROSTER_PATH',
    'ROSTER_SECTION_MARKER', 'REQUEST_DELAY', 'REQUEST_TIMEOUT', 'PAGE_SIZE', 'LOG_LEVEL', 'LOG_FILE',
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        # setenv first so anything load_dotenv writes is removed on teardown
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
