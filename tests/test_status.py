import pytest

from smppkit.status import ConnStatus, ConnStatusID


@pytest.mark.parametrize(
    "status, text",
    [
        (ConnStatusID.CONNECTED, "Connected"),
        (ConnStatusID.DISCONNECTED, "Disconnected"),
        (ConnStatusID.CONNECTION_FAILED, "Connection failed"),
        (ConnStatusID.BIND_FAILED, "Bind failed"),
    ],
)
def test_status_text(status, text):
    assert str(status) == text
    assert f"{status}" == text


@pytest.mark.parametrize(
    "value, status",
    [
        (1, ConnStatusID.CONNECTED),
        (2, ConnStatusID.DISCONNECTED),
        (3, ConnStatusID.CONNECTION_FAILED),
        (4, ConnStatusID.BIND_FAILED),
    ],
)
def test_status_ids_start_at_one_in_order(value, status):
    assert ConnStatusID(value) is status
    assert int(status) == value


def test_conn_status_without_error():
    ev = ConnStatus(ConnStatusID.CONNECTED)
    assert ev.status is ConnStatusID.CONNECTED
    assert ev.error is None


def test_conn_status_carries_error():
    err = OSError("refused")
    ev = ConnStatus(ConnStatusID.CONNECTION_FAILED, err)
    assert ev.error is err
    assert str(ev.status) == "Connection failed"


def test_conn_status_is_immutable():
    ev = ConnStatus(ConnStatusID.DISCONNECTED)
    with pytest.raises(AttributeError):
        ev.status = ConnStatusID.CONNECTED
    assert ev.status is ConnStatusID.DISCONNECTED
    assert str(ev.status) == "Disconnected"