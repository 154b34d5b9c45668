"""Shared pytest fixtures for tagprint tests.

Fixtures are organized by category:
- Template fixtures: Ready-made TextTemplate subclasses for rendering tests
- Destination fixtures: Sinks that record or fail writes
- Configuration fixtures: Config dictionaries for loader tests
"""

import io
import logging
from collections.abc import Callable, Iterator
from typing import Any

import pytest

from tagprint import TextTemplate

# =============================================================================
# Template Fixtures
# =============================================================================


class BodyTemplate(TextTemplate):
    """Template whose render() body is supplied as a callable."""

    def __init__(self, body: Callable[[TextTemplate], None], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.body = body

    def render(self) -> None:
        self.body(self)


class ExamplePage(TextTemplate):
    """The heading-plus-list document used across tests."""

    def render(self) -> None:
        self.h2("Title")
        self.ul(lambda t: (t.li("One"), t.li("Two")))


@pytest.fixture
def make_template() -> Callable[..., BodyTemplate]:
    """Return a factory building a template from a render body (newline pinned to LF)."""

    def factory(body: Callable[[TextTemplate], None], **kwargs: Any) -> BodyTemplate:
        kwargs.setdefault("newline", "\n")
        return BodyTemplate(body, **kwargs)

    return factory


@pytest.fixture
def example_page() -> ExamplePage:
    """Return the example page with an LF separator."""
    return ExamplePage(newline="\n", encoding="utf-8")


@pytest.fixture
def expected_example_page() -> str:
    """Return the expected rendering of ExamplePage with LF separators."""
    return "<H2>\nTitle\n</H2>\n<UL>\n<LI>\nOne\n</LI>\n<LI>\nTwo\n</LI>\n</UL>\n"


# =============================================================================
# Destination Fixtures
# =============================================================================


class FailingStream(io.BytesIO):
    """Byte stream that fails every write and counts close() calls."""

    def __init__(self) -> None:
        super().__init__()
        self.close_calls = 0

    def write(self, data: Any) -> int:
        raise OSError("disk full")

    def close(self) -> None:
        self.close_calls += 1
        super().close()


class RecordingStream(io.BytesIO):
    """Byte stream that records each write and keeps its value after close."""

    def __init__(self) -> None:
        super().__init__()
        self.writes: list[bytes] = []
        self.close_calls = 0
        self.final_value = b""

    def write(self, data: Any) -> int:
        self.writes.append(bytes(data))
        return super().write(data)

    def close(self) -> None:
        self.close_calls += 1
        if not self.closed:
            self.final_value = self.getvalue()
        super().close()


@pytest.fixture
def failing_stream() -> FailingStream:
    """Return a stream whose writes always fail."""
    return FailingStream()


@pytest.fixture
def recording_stream() -> RecordingStream:
    """Return a stream that records writes."""
    return RecordingStream()


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def minimal_config() -> dict[str, Any]:
    """Return a minimal valid tagprint configuration."""
    return {
        "output": {
            "newline": "lf",
        }
    }


@pytest.fixture
def full_config() -> dict[str, Any]:
    """Return a complete tagprint configuration with all options."""
    return {
        "output": {
            "newline": "crlf",
            "encoding": "utf-8",
        },
        "logging": {
            "mode": "json",
            "level": "debug",
        },
    }


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def reset_tagprint_logger() -> Iterator[logging.Logger]:
    """Restore the ``tagprint`` logger's handlers and level after a test."""
    logger = logging.getLogger("tagprint")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
