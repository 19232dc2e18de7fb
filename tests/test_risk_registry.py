import pytest

from app.core.errors import InvalidKey, OutOfRange, Unauthorized
from app.models.event import LedgerEvent
from app.services.access_control import set_authorized
from app.services.risk_registry import (
    get_composite_risk_score,
    get_data_age,
    get_risk_data,
    has_risk_data,
    update_risk_data,
)
from tests.constants import ALICE, OWNER, TOKEN_X, TOKEN_Y, UPDATER


@pytest.mark.parametrize(
    "scores",
    [(0, 0, 0), (100, 100, 100), (80, 10, 10), (30, 40, 50), (1, 1, 0), (99, 100, 98)],
)
def test_update_then_read_returns_scores(db, clock, scores) -> None:
    h, l, g = scores
    update_risk_data(db, TOKEN_X, h, l, g, OWNER, clock.now())

    record = get_risk_data(db, TOKEN_X)
    assert (record.holder_concentration, record.liquidity_ownership, record.governance_capture) == scores
    assert record.updater == OWNER
    assert record.last_updated == clock.now()
    assert get_composite_risk_score(db, TOKEN_X) == (h + l + g) // 3


def test_absent_token_reads_as_zero_record(db, clock) -> None:
    record = get_risk_data(db, TOKEN_Y)
    assert record.token_id == TOKEN_Y
    assert record.last_updated == 0
    assert record.updater is None
    assert not has_risk_data(db, TOKEN_Y)
    assert get_composite_risk_score(db, TOKEN_Y) == 0
    assert get_data_age(db, TOKEN_Y, clock.now()) == 0


def test_exists_flips_after_first_update(db, clock) -> None:
    assert has_risk_data(db, TOKEN_X) is False
    update_risk_data(db, TOKEN_X, 10, 20, 30, OWNER, clock.now())
    assert has_risk_data(db, TOKEN_X) is True


def test_out_of_range_leaves_prior_record(db, clock) -> None:
    update_risk_data(db, TOKEN_X, 10, 20, 30, OWNER, clock.now())
    clock.advance(60)

    with pytest.raises(OutOfRange):
        update_risk_data(db, TOKEN_X, 101, 20, 30, OWNER, clock.now())
    with pytest.raises(OutOfRange):
        update_risk_data(db, TOKEN_X, 10, -1, 30, OWNER, clock.now())

    record = get_risk_data(db, TOKEN_X)
    assert (record.holder_concentration, record.liquidity_ownership, record.governance_capture) == (10, 20, 30)
    assert record.last_updated == clock.now() - 60


def test_update_is_full_replace(db, clock) -> None:
    set_authorized(db, UPDATER, True, OWNER, clock.now())
    update_risk_data(db, TOKEN_X, 90, 90, 90, OWNER, clock.now())
    clock.advance(5)
    update_risk_data(db, TOKEN_X, 0, 5, 0, UPDATER, clock.now())

    record = get_risk_data(db, TOKEN_X)
    assert (record.holder_concentration, record.liquidity_ownership, record.governance_capture) == (0, 5, 0)
    assert record.updater == UPDATER
    assert record.last_updated == clock.now()


def test_data_age_tracks_clock(db, clock) -> None:
    update_risk_data(db, TOKEN_X, 10, 10, 10, OWNER, clock.now())
    assert get_data_age(db, TOKEN_X, clock.now()) == 0

    clock.advance(750)
    assert get_data_age(db, TOKEN_X, clock.now()) == 750


def test_unauthorized_caller_is_rejected(db, clock) -> None:
    with pytest.raises(Unauthorized):
        update_risk_data(db, TOKEN_X, 10, 10, 10, ALICE, clock.now())
    assert not has_risk_data(db, TOKEN_X)


def test_authorization_is_checked_before_range(db, clock) -> None:
    with pytest.raises(Unauthorized):
        update_risk_data(db, TOKEN_X, 500, 10, 10, ALICE, clock.now())


def test_null_token_is_rejected(db, clock) -> None:
    with pytest.raises(InvalidKey):
        update_risk_data(db, "0x" + "0" * 40, 10, 10, 10, OWNER, clock.now())
    with pytest.raises(InvalidKey):
        update_risk_data(db, "", 10, 10, 10, OWNER, clock.now())


def test_mixed_case_token_maps_to_one_record(db, clock) -> None:
    update_risk_data(db, "0xABCDEF" + "1" * 34, 10, 20, 30, OWNER, clock.now())
    assert has_risk_data(db, "0xabcdef" + "1" * 34)


def test_update_emits_event(db, clock) -> None:
    update_risk_data(db, TOKEN_X, 80, 10, 10, OWNER, clock.now())

    event = db.query(LedgerEvent).filter_by(name="RiskDataUpdated").one()
    assert event.subject == TOKEN_X
    assert event.timestamp == clock.now()
    assert event.data == {
        "token": TOKEN_X,
        "holder_concentration": 80,
        "liquidity_ownership": 10,
        "governance_capture": 10,
        "updater": OWNER,
    }


def test_failed_update_emits_no_event(db, clock) -> None:
    with pytest.raises(OutOfRange):
        update_risk_data(db, TOKEN_X, 80, 101, 10, OWNER, clock.now())
    assert db.query(LedgerEvent).filter_by(name="RiskDataUpdated").count() == 0
