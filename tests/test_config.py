import json
import logging

import pytest

from vectora_router import RouterConfig, setup_logging
from vectora_router.observability import JSONFormatter


def test_defaults():
    config = RouterConfig()
    assert config.activate_guard == "can_activate"
    assert config.deactivate_guard == "can_deactivate"
    assert config.log_level == "INFO"


def test_from_env_overrides():
    config = RouterConfig.from_env({
        "VECTORA_ROUTER_LOG_LEVEL": "debug",
        "VECTORA_ROUTER_LOG_FORMAT": "JSON",
        "VECTORA_ROUTER_ACTIVATE_GUARD": "may_enter",
    })

    assert config.log_level == "DEBUG"
    assert config.log_format == "json"
    assert config.activate_guard == "may_enter"
    assert config.deactivate_guard == "can_deactivate"


def test_from_env_ignores_blank_values():
    assert RouterConfig.from_env({"VECTORA_ROUTER_LOG_LEVEL": "  "}) == RouterConfig()


def test_from_env_rejects_unknown_format():
    with pytest.raises(ValueError):
        RouterConfig.from_env({"VECTORA_ROUTER_LOG_FORMAT": "xml"})


def test_json_formatter_includes_extras():
    record = logging.LogRecord("vectora_router.guard", logging.INFO, __file__, 1, "denied %s", ("x",), None)
    record.guard = "can_deactivate"

    payload = json.loads(JSONFormatter().format(record))

    assert payload["message"] == "denied x"
    assert payload["guard"] == "can_deactivate"
    assert payload["level"] == "INFO"


def test_setup_logging_sets_level():
    logger = logging.getLogger("vectora_router")
    handler = setup_logging("debug", "json")
    try:
        assert logger.level == logging.DEBUG
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
