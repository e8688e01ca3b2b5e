import pytest

from schemas import MaintenanceDeduction, RentDeduction
from services.deposit_settlement import (
    changed_deduction_flags,
    compute_settlement,
    derive_deposit_status,
)


def maintenance(id, cost, included):
    return MaintenanceDeduction(maintenance_id=id, description=f"work {id}", cost=cost, included=included)


def rent(key, balance, included):
    return RentDeduction(group_key=key, period=key, balance=balance, included=included)


def test_only_included_items_are_deducted():
    result = compute_settlement(
        2000,
        [maintenance("m1", 150.10, True), maintenance("m2", 999, False)],
        [rent("r1", 400.20, True), rent("r2", 1000, False)],
    )
    assert result.maintenance_deductions == pytest.approx(150.10)
    assert result.rent_deductions == pytest.approx(400.20)
    assert result.total_deductions == pytest.approx(550.30)
    assert result.final_refund_amount == pytest.approx(1449.70)


def test_toggling_one_item_moves_total_by_its_value():
    items = [maintenance("m1", 0.1, True), maintenance("m2", 0.2, True)]
    rents = [rent("r1", 33.33, True)]
    before = compute_settlement(500, items, rents)
    items[1] = maintenance("m2", 0.2, False)
    after = compute_settlement(500, items, rents)
    assert before.total_deductions - after.total_deductions == pytest.approx(0.2)
    assert after.total_deductions == 33.43


def test_refund_can_be_negative():
    result = compute_settlement(1000, [maintenance("m1", 800, True)], [rent("r1", 700, True)])
    assert result.total_deductions == 1500
    assert result.final_refund_amount == -500


def test_nothing_to_deduct_refunds_full_deposit():
    result = compute_settlement(1800, [], [])
    assert result.total_deductions == 0
    assert result.final_refund_amount == 1800


def test_changed_flags_only_reports_flips():
    current = [maintenance("m1", 10, True), maintenance("m2", 20, False), maintenance("m3", 30, True)]
    saved = {"m1": True, "m2": True, "m3": False}
    assert changed_deduction_flags(current, saved) == {"m2": False, "m3": True}


def test_changed_flags_treats_unknown_as_not_deducted():
    assert changed_deduction_flags([maintenance("new", 5, False)], {}) == {}
    assert changed_deduction_flags([maintenance("new", 5, True)], {}) == {"new": True}


def test_deposit_status_defaults_from_deductions():
    clean = compute_settlement(1000, [], [])
    partial = compute_settlement(1000, [maintenance("m1", 10, True)], [])
    assert derive_deposit_status(clean) == "Remboursé"
    assert derive_deposit_status(partial) == "Partiellement remboursé"
    assert derive_deposit_status(partial, "Payé") == "Payé"
