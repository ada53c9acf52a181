"""Pytest configuration and common fixtures."""

import os
import sys
import warnings
from pathlib import Path

from dotenv import load_dotenv

# Try to load test-specific environment file if it exists
test_env_file = Path(__file__).parent / ".env.test"
if test_env_file.exists():
    load_dotenv(test_env_file)

# Set before any dentalhub_bot imports so settings resolve to testing
os.environ.setdefault("ENV", "testing")

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from typing import Any, Callable, Dict, Iterable, List
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from loguru import logger

from dentalhub_bot.core.config import AppConfig
from dentalhub_bot.services.intake import ConsolePrompter, IntakeService


def pytest_configure(config):
    """Configure pytest environment before tests run."""
    warnings.filterwarnings("ignore", message="coroutine.*was never awaited")


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Automatically set up test environment for all tests."""
    monkeypatch.setenv("ENV", "testing")

    from dentalhub_bot.core.config.settings import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def no_sleep():
    """Patch asyncio.sleep so UI settle delays and retry waits return immediately."""
    with patch("asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
        yield mock_sleep


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def make_locator(texts: Iterable[str] = (), count: int = 0) -> MagicMock:
    """Mock Playwright locator over a fixed list of option texts."""
    texts = list(texts)
    locator = MagicMock()
    locator.all_text_contents = AsyncMock(return_value=texts)
    locator.count = AsyncMock(return_value=count or len(texts))

    items = []
    for text in texts:
        item = MagicMock()
        item.click = AsyncMock()
        item.text_content = AsyncMock(return_value=text)
        items.append(item)
    locator.items = items
    locator.nth = MagicMock(side_effect=lambda i: items[i])

    first = items[0] if items else MagicMock()
    if not items:
        first.click = AsyncMock()
        first.text_content = AsyncMock(return_value=None)
    locator.first = first
    return locator


@pytest.fixture
def locator_factory() -> Callable[..., MagicMock]:
    """Factory for mock locators; see make_locator."""
    return make_locator


@pytest.fixture
def mock_page():
    """Mock Playwright page object."""
    page = AsyncMock()
    page.goto = AsyncMock()
    page.fill = AsyncMock()
    page.click = AsyncMock()
    page.focus = AsyncMock()
    page.type = AsyncMock()
    page.input_value = AsyncMock(return_value="")
    page.evaluate = AsyncMock()
    page.eval_on_selector = AsyncMock()
    page.locator = MagicMock(return_value=make_locator())
    page.wait_for_selector = AsyncMock()
    page.wait_for_function = AsyncMock()
    page.keyboard = MagicMock()
    page.keyboard.press = AsyncMock()
    page.expect_navigation = MagicMock()
    page.url = "https://uk.dentalhub.online/soe/new/Kilmarnock%20Smile%20Studio?pid=UKSHQ02"
    page.screenshot = AsyncMock()
    page.close = AsyncMock()
    return page


@pytest.fixture
def app_config() -> AppConfig:
    """Default application configuration."""
    return AppConfig()


def scripted_input(answers: Iterable[str]) -> Callable[[str], str]:
    """Input function that replays answers in order."""
    remaining = iter(answers)

    def _input(prompt: str) -> str:
        return next(remaining)

    return _input


@pytest.fixture
def make_intake(app_config) -> Callable[..., IntakeService]:
    """Build an IntakeService driven by scripted answers; echoed lines go to ``.echoed``."""

    def _make(answers: Iterable[str]) -> IntakeService:
        echoed: List[str] = []
        prompter = ConsolePrompter(input_func=scripted_input(answers), echo=echoed.append)
        intake = IntakeService(prompter, app_config.intake_defaults)
        intake.echoed = echoed  # type: ignore[attr-defined]
        return intake

    return _make


@pytest.fixture
def patient_answers() -> List[str]:
    """Answers for the patient profile prompts (Jane Doe)."""
    return ["Jane", "Doe", "05/09/1990", "female", "+447123456789", "", "no", ""]


@pytest.fixture
def preference_answers() -> List[str]:
    """Answers for the booking preference prompts."""
    return ["ExistingPatient", "NHS", "Air Polish", "Any Provider"]


@pytest.fixture
def availability_snapshot() -> Dict[str, Any]:
    """Raw table snapshot: one free slot on Monday, nothing on Tuesday."""
    return {
        "headers": [["Mon", "01 Sep"], ["Tue", "02 Sep"]],
        "rows": [
            [
                {"text": "10:00am", "available": True},
                {"text": "10:00am", "available": False},
            ],
            [
                {"text": "", "available": False},
                {"text": "", "available": False},
            ],
        ],
    }
