import pytest

from form_validation import reset_messages


@pytest.fixture(autouse=True)
def restore_messages():
    """Give every test the bundled message catalog and restore it afterwards."""
    reset_messages()
    yield
    reset_messages()
