import os
import sys

import pytest

# Ensure imports like `from ostransform.main import app` work when pytest is run from repo root
BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient
    from ostransform.main import app

    return TestClient(app)
