import os
import sys
from pathlib import Path

import pytest

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("MESSAGES_BACKEND", "memory")

from chat_functions.messages.service import set_messages_service  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_messages_service():
    set_messages_service(None)
    yield
    set_messages_service(None)
