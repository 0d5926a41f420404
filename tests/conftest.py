import os
import uuid

import pytest

# Must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def app_id():
    """A per-test application id so local servers never collide."""
    return f"com.example.qt.textdisplay.test-{uuid.uuid4().hex[:12]}"
