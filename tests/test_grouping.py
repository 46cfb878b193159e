import pytest

from account_totals.domain.errors import InvalidRecord
from account_totals.domain.models import AccountRecord
from account_totals.domain.services import group


def make_record(brokerage: str, account: str, balance: float) -> AccountRecord:
    return AccountRecord(brokerage_name=brokerage, account=account, balance=balance)


def test_groups_by_brokerage_then_account():
    records = [
        make_record("Scottrade", "XXXX2222", 230012.23),
        make_record("Etrade", "XXXX2899", 1212.23),
        make_record("Etrade", "XXXX1111", 11350.11),
    ]

    grouped = group(records)

    assert grouped == {
        "Scottrade": {"XXXX2222": 230012.23},
        "Etrade": {"XXXX2899": 1212.23, "XXXX1111": 11350.11},
    }
    assert list(grouped) == ["Scottrade", "Etrade"]
    assert list(grouped["Etrade"]) == ["XXXX2899", "XXXX1111"]


def test_keys_are_exactly_the_input_brokerages():
    records = [
        make_record("Fidelity", "A", 1.0),
        make_record("Etrade", "B", 2.0),
        make_record("Fidelity", "C", 3.0),
        make_record("Vanguard", "D", 4.0),
    ]

    grouped = group(records)

    assert set(grouped) == {record.brokerage_name for record in records}


def test_empty_input():
    assert group([]) == {}


def test_duplicate_account_keeps_last_balance():
    records = [
        make_record("Etrade", "XXXX2899", 1212.23),
        make_record("Etrade", "XXXX1111", 11350.11),
        make_record("Etrade", "XXXX2899", 1212.24),
    ]

    grouped = group(records)

    assert grouped == {"Etrade": {"XXXX2899": 1212.24, "XXXX1111": 11350.11}}
    assert list(grouped["Etrade"]) == ["XXXX2899", "XXXX1111"]


def test_accepts_raw_json_objects():
    grouped = group([{"brokerageName": "Etrade", "account": "XXXX1111", "balance": 5}])

    assert grouped == {"Etrade": {"XXXX1111": 5.0}}
    assert isinstance(grouped["Etrade"]["XXXX1111"], float)


@pytest.mark.parametrize(
    "raw, reason",
    [
        ({"account": "A", "balance": 1.0}, "brokerageName"),
        ({"brokerageName": "Etrade", "balance": 1.0}, "account"),
        ({"brokerageName": "Etrade", "account": "A"}, "balance"),
        ({"brokerageName": "Etrade", "account": "A", "balance": None}, "balance"),
        ({"brokerageName": "Etrade", "account": "A", "balance": "12.5"}, "must be a number"),
        ({"brokerageName": "Etrade", "account": "A", "balance": True}, "must be a number"),
        ({"brokerageName": "Etrade", "account": 42, "balance": 1.0}, "account must be text"),
        ({"brokerageName": "Etrade", "account": "A", "balance": 10**400}, "too large"),
    ],
)
def test_invalid_record_rejected(raw, reason):
    good = {"brokerageName": "Scottrade", "account": "XXXX2222", "balance": 1.0}

    with pytest.raises(InvalidRecord) as excinfo:
        group([good, raw])

    assert excinfo.value.index == 1
    assert reason in excinfo.value.reason


@pytest.mark.parametrize("balance", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_balance_rejected(balance):
    with pytest.raises(InvalidRecord, match="finite"):
        group([make_record("Etrade", "A", balance)])


def test_non_object_entry_rejected():
    with pytest.raises(InvalidRecord, match="JSON object"):
        group(["Etrade"])
