import logging

import pytest

from log_suppression import set_default_config, set_origin


@pytest.fixture(autouse=True)
def reset_suppression_state():
    """Each test starts from environment defaults and no origin tag"""
    set_default_config(None)
    set_origin(None)
    yield
    set_default_config(None)
    set_origin(None)


def make_record(msg, args=(), name="test", level=logging.WARNING):
    return logging.LogRecord(
        name=name,
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )
