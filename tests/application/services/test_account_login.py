# tests/application/services/test_account_login.py
from application.services.account_login import LOGIN_PATH, AccountLoginService
from domain.execution import ExecutionResult
from tests.mock_logger import RecordingLogger


class StubSender:
    def __init__(self, result):
        self.result = result
        self.sent = []

    def resolve_endpoint(self, endpoint):
        return "http://api.test" + endpoint

    def request(self, method, url, headers=None, body=None, account_id=None):
        self.sent.append((method, url, body))
        return self.result


class StubAccounts:
    def __init__(self):
        self.saved = {}

    def set(self, slot, data):
        self.saved[slot] = data
        return True


def make_result(**kwargs):
    result = ExecutionResult(url="http://api.test" + LOGIN_PATH, method="POST")
    for k, v in kwargs.items():
        setattr(result, k, v)
    return result


def test_successful_login_stores_tokens():
    # Arrange
    sender = StubSender(
        make_result(status=200, success=True, response_body={"access": "acc", "refresh": "ref", "user": {"pk": 5}})
    )
    accounts = StubAccounts()
    service = AccountLoginService(sender, accounts, RecordingLogger())

    # Act
    outcome = service.login("1", "a@b.c", "pw")

    # Assert
    assert outcome.ok is True
    assert sender.sent == [("POST", "http://api.test/accounts/login/", {"email": "a@b.c", "password": "pw"})]
    assert accounts.saved["1"] == {
        "email": "a@b.c",
        "password": "pw",
        "token": "acc",
        "refresh": "ref",
        "pk": 5,
    }


def test_access_token_key_preferred():
    sender = StubSender(make_result(status=200, success=True, response_body={"access_token": "A", "access": "B"}))
    accounts = StubAccounts()

    AccountLoginService(sender, accounts, RecordingLogger()).login("2", "x@y.z", "pw")

    assert accounts.saved["2"]["token"] == "A"


def test_rejected_login_reports_detail():
    logger = RecordingLogger()
    sender = StubSender(make_result(status=401, success=False, response_body={"detail": "Bad credentials"}))
    accounts = StubAccounts()

    outcome = AccountLoginService(sender, accounts, logger).login("1", "a@b.c", "wrong")

    assert outcome.ok is False
    assert outcome.error == "Bad credentials"
    assert accounts.saved == {}
    assert "account.login_failed" in logger.names()


def test_transport_error_reported():
    sender = StubSender(make_result(status=0, success=False, error="Connection refused"))

    outcome = AccountLoginService(sender, StubAccounts(), RecordingLogger()).login("1", "a@b.c", "pw")

    assert outcome.error == "Connection refused"


def test_missing_credentials_short_circuit():
    sender = StubSender(make_result())
    outcome = AccountLoginService(sender, StubAccounts(), RecordingLogger()).login("1", "", "pw")
    assert outcome.ok is False
    assert sender.sent == []
