import datetime
import random

import pytest

from schemas import PaymentRecord, PropertyRecord, TenantRecord
from services.payment_grouping import (
    derive_status,
    group_key,
    group_payments,
    parse_period,
    unpaid_rent_groups,
)


def tenant(id="t1", rent=1000.0, deposit=2000.0, property_id="p1", **kw):
    return TenantRecord(
        id=id, first_name=kw.pop("first_name", "Jean"), last_name=kw.pop("last_name", "Dupont"),
        rent=rent, deposit_amount=deposit, property_id=property_id, **kw,
    )


def payment(id, amount, tenant_id="t1", period="Juillet 2024", status="Payé", type="Loyer",
            rent_due=0.0, day=1, month=7, **kw):
    return PaymentRecord(
        id=id, tenant_id=tenant_id, amount=amount, period=period, status=status, type=type,
        rent_due=rent_due, date=datetime.date(2024, month, day), **kw,
    )


PROPERTIES = [PropertyRecord(id="p1", address="Rue de la Loi 1", base_rent=1000, rent=1000)]


def test_groups_by_tenant_type_and_period():
    payments = [
        payment("a", 500, rent_due=1000),
        payment("b", 500, rent_due=1000, day=15),
        payment("c", 1000, period="Août 2024", rent_due=1000, month=8),
        payment("d", 2000, type="Caution", period="Caution", rent_due=2000),
    ]
    groups = group_payments(payments, [tenant()], PROPERTIES)

    assert {g.group_key for g in groups} == {
        "t1-Loyer-Juillet 2024",
        "t1-Loyer-Août 2024",
        "t1-Caution-Caution",
    }
    july = next(g for g in groups if g.period == "Juillet 2024")
    assert july.total_due == 1000
    assert july.total_paid == 1000
    assert july.status == "Payé"
    assert july.property == "Rue de la Loi 1"
    assert [p.id for p in july.payments] == ["a", "b"]


def test_every_payment_lands_in_exactly_one_group():
    rng = random.Random(7)
    periods = ["Juin 2024", "Juillet 2024", "Août 2024"]
    payments = [
        payment(
            f"p{i}",
            rng.choice([0, 250, 500, 1000]),
            tenant_id=rng.choice(["t1", "t2", "ghost"]),
            period=rng.choice(periods),
            status=rng.choice(["Payé", "En retard"]),
            day=rng.randint(1, 28),
        )
        for i in range(60)
    ]
    groups = group_payments(payments, [tenant("t1"), tenant("t2")], PROPERTIES)

    grouped_ids = [p.id for g in groups for p in g.payments]
    assert sorted(grouped_ids) == sorted(p.id for p in payments)
    for g in groups:
        assert all(group_key(p) == g.group_key for p in g.payments)


def test_only_paid_status_counts_towards_total_paid():
    payments = [
        payment("a", 600, rent_due=1000),
        payment("b", 400, status="En retard", rent_due=1000),
    ]
    [group] = group_payments(payments, [tenant()], PROPERTIES)
    assert group.total_paid == 600
    assert group.status == "Partiel"
    assert len(group.payments) == 2


@pytest.mark.parametrize(
    "due, paid, expected",
    [
        (1000, 1000, "Payé"),
        (1000, 1200, "Payé"),
        (1000, 999.99, "Partiel"),
        (1000, 0, "Non payé"),
        (0, 0, "Non payé"),
        (0, 50, "Partiel"),
    ],
)
def test_derive_status(due, paid, expected):
    assert derive_status(due, paid) == expected


def test_snapshot_due_wins_over_current_rent():
    # Rent went up after the payment was recorded
    payments = [payment("a", 900, rent_due=900)]
    [group] = group_payments(payments, [tenant(rent=1100)], PROPERTIES)
    assert group.total_due == 900
    assert group.status == "Payé"


def test_first_non_zero_snapshot_is_used():
    payments = [
        payment("a", 100, rent_due=0),
        payment("b", 100, rent_due=950, day=2),
        payment("c", 100, rent_due=1200, day=3),
    ]
    [group] = group_payments(payments, [tenant()], PROPERTIES)
    assert group.total_due == 950


def test_falls_back_to_tenant_rent_or_deposit_without_snapshot():
    payments = [
        payment("a", 100),
        payment("b", 100, type="Caution", period="Caution"),
    ]
    groups = {g.type: g for g in group_payments(payments, [tenant(rent=800, deposit=1600)], PROPERTIES)}
    assert groups["Loyer"].total_due == 800
    assert groups["Caution"].total_due == 1600


def test_missing_tenant_degrades_to_stored_fields():
    payments = [
        payment("a", 500, tenant_id="gone", rent_due=1000,
                tenant_first_name="Ancien", tenant_last_name="Locataire", property="Rue Haute 5"),
        payment("b", 500, tenant_id="gone2"),
    ]
    groups = {g.tenant_id: g for g in group_payments(payments, [], PROPERTIES)}

    assert groups["gone"].tenant_first_name == "Ancien"
    assert groups["gone"].property == "Rue Haute 5"
    assert groups["gone"].total_paid == 500

    assert groups["gone2"].tenant_first_name == "N/A"
    assert groups["gone2"].property == "N/A"
    assert groups["gone2"].total_due == 0
    assert groups["gone2"].status == "Partiel"


def test_groups_sorted_newest_period_first():
    payments = [
        payment("a", 1, period="Juillet 2024"),
        payment("b", 1, period="Août 2024"),
        payment("c", 1, period="Décembre 2023"),
        payment("d", 1, period="Janvier 2025"),
        payment("e", 1, type="Caution", period="Caution"),
    ]
    groups = group_payments(payments, [tenant()], PROPERTIES)
    assert [g.period for g in groups] == [
        "Janvier 2025",
        "Août 2024",
        "Juillet 2024",
        "Décembre 2023",
        "Caution",
    ]


def test_payments_within_group_sorted_by_date():
    payments = [payment("late", 1, day=20), payment("early", 1, day=2), payment("mid", 1, day=10)]
    [group] = group_payments(payments, [tenant()], PROPERTIES)
    assert [p.id for p in group.payments] == ["early", "mid", "late"]


def test_regrouping_is_idempotent():
    payments = [payment(f"p{i}", 100 * i, period=p) for i, p in enumerate(["Mai 2024", "Juin 2024"] * 3)]
    tenants = [tenant()]
    first = group_payments(payments, tenants, PROPERTIES)
    second = group_payments(payments, tenants, PROPERTIES)
    assert [g.model_dump() for g in first] == [g.model_dump() for g in second]


@pytest.mark.parametrize(
    "label, expected",
    [
        ("Juillet 2024", (2024, 7)),
        ("août 2024", (2024, 8)),
        ("Aout 2024", (2024, 8)),
        ("2024-03", (2024, 3)),
        ("Caution", None),
        ("Printemps 2024", None),
        ("2024-13", None),
    ],
)
def test_parse_period(label, expected):
    assert parse_period(label) == expected


def test_unpaid_rent_groups_only_lists_open_rent_obligations():
    payments = [
        payment("a", 1000, period="Juin 2024", rent_due=1000),
        payment("b", 400, period="Juillet 2024", rent_due=1000),
        payment("c", 0, period="Août 2024", status="En retard", rent_due=1000),
        payment("d", 500, type="Caution", period="Caution", rent_due=2000),
        payment("e", 100, tenant_id="t2", period="Juillet 2024", rent_due=1000),
    ]
    groups = group_payments(payments, [tenant(), tenant("t2")], PROPERTIES)
    unpaid = unpaid_rent_groups(groups, "t1")
    assert sorted(g.period for g in unpaid) == ["Août 2024", "Juillet 2024"]
    assert {g.balance for g in unpaid} == {600, 1000}
