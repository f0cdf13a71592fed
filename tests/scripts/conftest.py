import os

import pytest
from typer.testing import CliRunner

EXORD_ENV_VARS = ["EXORD_ORDER", "EXORD_UNKNOWN", "EXORD_SEPARATOR"]


@pytest.fixture(autouse=True)
def clean_exord_env():
    # dotenv files loaded by the CLI write straight into os.environ
    saved = {name: os.environ.pop(name) for name in EXORD_ENV_VARS if name in os.environ}
    yield
    for name in EXORD_ENV_VARS:
        os.environ.pop(name, None)
    os.environ.update(saved)


@pytest.fixture
def runner():
    return CliRunner()
