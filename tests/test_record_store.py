import datetime
import threading

import pytest
from pydantic import ValidationError
from sqlalchemy import text

from services import live_view
from services import (
    ConcurrentUpdateError,
    InvalidRecordError,
    LiveGroupedPayments,
    RecordNotFoundError,
    RecordStore,
    StoreError,
    UnknownCollectionError,
)
from tests.factories import make_maintenance, make_payment, make_property, make_tenant


def test_create_returns_id_and_typed_record(store):
    tenant_id = make_tenant(store, rent=950)
    tenant = store.get("tenants", tenant_id)
    assert tenant.id == tenant_id
    assert tenant.first_name == "Jean"
    assert tenant.rent == 950
    assert tenant.deposit_status == "Non payé"
    assert tenant.version == 1


def test_create_accepts_camel_case_fields(store):
    property_id = store.create("properties", {"address": "Rue Neuve 3", "baseRent": 700, "rent": 750, "commonCharges": 50})
    prop = store.get("properties", property_id)
    assert prop.base_rent == 700
    assert prop.common_charges == 50


def test_create_validates_before_writing(store):
    with pytest.raises(ValidationError):
        store.create("tenants", {"first_name": "Sans", "rent": -5, "deposit_amount": 0})
    assert store.fetch_all("tenants") == []


def test_update_writes_only_given_fields_and_bumps_version(store):
    tenant_id = make_tenant(store, phone="+32 1")
    updated = store.update("tenants", tenant_id, {"rent": 1100})
    assert updated.rent == 1100
    assert updated.phone == "+32 1"
    assert updated.version == 2


def test_update_with_stale_version_is_rejected(store):
    tenant_id = make_tenant(store)
    store.update("tenants", tenant_id, {"rent": 1100}, expected_version=1)
    with pytest.raises(ConcurrentUpdateError) as exc:
        store.update("tenants", tenant_id, {"rent": 1200}, expected_version=1)
    assert exc.value.actual == 2
    assert store.get("tenants", tenant_id).rent == 1100


def test_update_rejects_null_for_required_field(store):
    tenant_id = make_tenant(store)
    with pytest.raises(InvalidRecordError):
        store.update("tenants", tenant_id, {"first_name": None})
    assert store.get("tenants", tenant_id).first_name == "Jean"


def test_missing_records(store):
    with pytest.raises(RecordNotFoundError):
        store.get("tenants", "nope")
    with pytest.raises(RecordNotFoundError):
        store.update("tenants", "nope", {"rent": 1})
    with pytest.raises(RecordNotFoundError):
        store.delete("tenants", "nope")
    assert store.find("tenants", "nope") is None
    assert store.find("tenants", None) is None


def test_unknown_collection(store):
    with pytest.raises(UnknownCollectionError):
        store.fetch_all("invoices")
    with pytest.raises(UnknownCollectionError):
        store.subscribe("invoices", lambda records: None)


def test_delete(store):
    tenant_id = make_tenant(store)
    store.delete("tenants", tenant_id)
    assert store.fetch_all("tenants") == []


def test_database_failure_becomes_store_error(store, session_factory):
    with session_factory() as db:
        db.execute(text("DROP TABLE tenants"))
        db.commit()
    with pytest.raises(StoreError):
        store.fetch_all("tenants")
    with pytest.raises(StoreError):
        make_tenant(store)


def test_subscribe_delivers_current_list_then_every_change(store):
    make_tenant(store, first_name="Anne")
    seen = []
    subscription = store.subscribe("tenants", lambda records: seen.append(sorted(t.first_name for t in records)))
    assert seen == [["Anne"]]

    bob = make_tenant(store, first_name="Bob")
    store.update("tenants", bob, {"rent": 10})
    store.delete("tenants", bob)
    assert seen[1:] == [["Anne", "Bob"], ["Anne", "Bob"], ["Anne"]]

    subscription.cancel()
    subscription.cancel()
    make_tenant(store, first_name="Carl")
    assert len(seen) == 4


def test_subscribers_only_hear_their_collection(store):
    seen = []
    store.subscribe("payments", seen.append)
    make_tenant(store)
    assert seen == [[]]


def test_failing_subscriber_does_not_break_the_write(store):
    def explode(records):
        if records:
            raise RuntimeError("listener bug")

    others = []
    store.subscribe("tenants", explode)
    store.subscribe("tenants", others.append)
    tenant_id = make_tenant(store)
    assert store.get("tenants", tenant_id)
    assert len(others[-1]) == 1


def test_live_view_regroups_on_every_change(store):
    property_id = make_property(store, address="Rue Haute 5")
    tenant_id = make_tenant(store, rent=1000, property_id=property_id)
    live = LiveGroupedPayments(store)
    assert live.groups() == []

    make_payment(store, tenant_id, 400, rent_due=1000)
    [group] = live.groups()
    assert group.status == "Partiel"
    assert group.property == "Rue Haute 5"

    make_payment(store, tenant_id, 600, rent_due=1000, day=datetime.date(2024, 7, 20))
    assert live.groups()[0].status == "Payé"

    store.update("properties", property_id, {"address": "Rue Basse 7"})
    assert live.groups()[0].property == "Rue Basse 7"

    live.close()
    make_payment(store, tenant_id, 1000, period="Août 2024", rent_due=1000)
    assert len(live.groups()) == 1


def test_store_defaults_to_module_session_factory():
    from database import SessionLocal
    assert RecordStore()._session_factory is SessionLocal


def test_update_many_writes_together_and_notifies_once(store):
    property_id = make_property(store)
    tenant_id = make_tenant(store)
    first = make_maintenance(store, property_id, 100, tenant_id=tenant_id)
    second = make_maintenance(store, property_id, 200, tenant_id=tenant_id)
    seen = []
    store.subscribe("maintenances", seen.append)

    tenant, *_ = store.update_many([
        ("tenants", tenant_id, {"deposit_status": "Remboursé"}, 1),
        ("maintenances", first, {"deducted_from_deposit": True}, None),
        ("maintenances", second, {"deducted_from_deposit": True}, None),
    ])
    assert tenant.version == 2
    assert all(m.deducted_from_deposit for m in store.fetch_all("maintenances"))
    assert len(seen) == 2


def test_update_many_is_all_or_nothing(store, session_factory):
    property_id = make_property(store)
    tenant_id = make_tenant(store)
    maintenance_id = make_maintenance(store, property_id, 100, tenant_id=tenant_id)
    with session_factory() as db:
        db.execute(text(
            "CREATE TRIGGER reject_maintenance_write BEFORE UPDATE ON maintenances "
            "BEGIN SELECT RAISE(ABORT, 'write rejected'); END"
        ))
        db.commit()
    seen = []
    store.subscribe("tenants", seen.append)

    with pytest.raises(StoreError):
        store.update_many([
            ("tenants", tenant_id, {"deposit_status": "Remboursé"}, None),
            ("maintenances", maintenance_id, {"deducted_from_deposit": True}, None),
        ])
    tenant = store.get("tenants", tenant_id)
    assert tenant.deposit_status == "Non payé"
    assert tenant.version == 1
    assert store.get("maintenances", maintenance_id).deducted_from_deposit is False
    assert len(seen) == 1


def test_update_many_checks_every_version_before_writing(store):
    tenant_id = make_tenant(store)
    other_id = make_tenant(store, first_name="Anne")
    with pytest.raises(ConcurrentUpdateError):
        store.update_many([
            ("tenants", tenant_id, {"rent": 1}, 1),
            ("tenants", other_id, {"rent": 2}, 7),
        ])
    assert store.get("tenants", tenant_id).rent == 1000


def test_live_view_keeps_latest_result_under_overlapping_writes(store, monkeypatch):
    tenant_id = make_tenant(store, rent=1000)
    live = LiveGroupedPayments(store)

    regrouping = threading.Event()
    resume = threading.Event()
    group_payments = live_view.group_payments

    def slow_first_regroup(payments, tenants, properties):
        if len(payments) == 1 and not regrouping.is_set():
            regrouping.set()
            resume.wait(timeout=5)
        return group_payments(payments, tenants, properties)

    monkeypatch.setattr(live_view, "group_payments", slow_first_regroup)

    first = threading.Thread(target=make_payment, args=(store, tenant_id, 400))
    first.start()
    assert regrouping.wait(timeout=5)
    second = threading.Thread(
        target=make_payment, args=(store, tenant_id, 600), kwargs={"day": datetime.date(2024, 7, 20)}
    )
    second.start()
    second.join(timeout=0.2)
    resume.set()
    first.join(timeout=5)
    second.join(timeout=5)

    [group] = live.groups()
    assert len(group.payments) == 2
    assert group.status == "Payé"
    assert group.balance == 0
    live.close()
