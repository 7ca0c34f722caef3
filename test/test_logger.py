"""Tests for the structured logger and the exception hierarchy."""

import logging

from layout_styles.exceptions import (
    LayoutStylesError,
    PropertyValidationError,
    StyleImportError,
    StyleNotFoundError,
    UnknownCategoryError,
    UnknownEditModeError,
    ValidationError,
)
from layout_styles.logger import DefaultLogger
from layout_styles.logger.default_logger import format_fields
from layout_styles.styles import StyleRegistry


def test_format_fields():
    assert format_fields("Style created", {}) == "Style created"
    assert format_fields("Style created", {"category": "text", "custom": True}) == (
        "Style created | category=text custom=True"
    )


def test_default_logger_propagates(caplog):
    logger = DefaultLogger(name="layout_styles.test")
    with caplog.at_level(logging.INFO, logger="layout_styles.test"):
        logger.info("hello", answer=42)
        logger.debug("hidden")

    assert caplog.messages == ["hello | answer=42"]


def test_registry_logs_not_found(caplog, registry: StyleRegistry):
    with caplog.at_level(logging.WARNING, logger="layout_styles"):
        registry.delete("fill", "nope")

    assert any("Style not found for delete" in m and "style_id=nope" in m for m in caplog.messages)


def test_exception_hierarchy():
    assert issubclass(StyleNotFoundError, LayoutStylesError)
    assert issubclass(UnknownCategoryError, ValidationError)
    assert issubclass(UnknownEditModeError, ValidationError)
    assert issubclass(PropertyValidationError, ValidationError)
    assert issubclass(StyleImportError, ValidationError)


def test_exception_to_dict():
    error = StyleNotFoundError("x", category="text", available_styles=["a", "b"])
    data = error.to_dict()

    assert data["code"] == "STYLE_NOT_FOUND"
    assert data["details"] == {"style_id": "x", "category": "text"}
    assert "Available styles in category 'text': a, b." in data["message"]
    assert str(error) == data["message"]
