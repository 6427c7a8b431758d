import pytest

from ircwire.config.model import WireSettings


@pytest.fixture
def skip_settings() -> WireSettings:
    return WireSettings(on_error="skip")
