import pytest


@pytest.fixture
def full_env():
    return {
        "INPUT_GOOGLE-API-SERVICE-ACCOUNT-CREDENTIALS": '{"type": "service_account"}',
        "INPUT_DOCUMENT-ID": "doc-123",
        "INPUT_SHEET-NAME": "Issues",
        "GITHUB_TOKEN": "ghs_test",
        "GITHUB_REPOSITORY": "acme/widgets",
    }
