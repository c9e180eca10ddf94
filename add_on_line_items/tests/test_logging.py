import pytest
from loguru import logger

from add_on_line_items.config import set_config_for_test
from add_on_line_items.data.interface import CatalogServices
from add_on_line_items.logging import get_logger
from add_on_line_items.services import AddOnLineItemService


@pytest.fixture
def host_sink():
    """A sink configured by the host application before the package is used."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    yield messages
    logger.remove(handler_id)


def test_service_keeps_host_sinks(host_sink):
    set_config_for_test(log_level="WARNING")
    logger.error("before")
    AddOnLineItemService(CatalogServices(None, None, None, None))
    logger.error("after")
    assert [m.strip() for m in host_sink] == ["before", "after"]


def test_level_change_keeps_host_sinks(host_sink):
    set_config_for_test(log_level="WARNING")
    get_logger("pricing")
    set_config_for_test(log_level="DEBUG")
    get_logger("pricing")
    logger.error("still here")
    assert [m.strip() for m in host_sink] == ["still here"]


def test_package_records_reach_host_sink(host_sink):
    set_config_for_test(log_level="WARNING")
    get_logger("pricing").warning("bound logger works")
    assert [m.strip() for m in host_sink] == ["bound logger works"]
