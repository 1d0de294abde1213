from unittest.mock import patch

import pytest

from app import main

pytestmark = [
    pytest.mark.general,
]


def test_run_serves_app_with_uvicorn():
    with patch.object(main.uvicorn, "run") as mock_run:
        main.run()

    args, kwargs = mock_run.call_args
    assert args == ("app.main:app",)
    assert kwargs["port"] == main.PORT
