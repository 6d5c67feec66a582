import pytest

from rapidocui.protocols import StaticRequestContext
from rapidocui.render import TemplateRenderer
from rapidocui.settings.rapidoc import RapiDocSettings


@pytest.fixture
def rapidoc_settings() -> RapiDocSettings:
    return RapiDocSettings()


@pytest.fixture
def template() -> str:
    return TemplateRenderer().template_source


@pytest.fixture
def root_request() -> StaticRequestContext:
    return StaticRequestContext("")
