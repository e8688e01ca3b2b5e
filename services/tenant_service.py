# services/tenant_service.py
"""
Tenant Service - tenant creation and security-deposit settlement.

Settlement workflow:
1. ``settlement_candidates`` lists the tenant's maintenance records and
   unpaid rent obligations. Maintenance defaults to its saved
   ``deducted_from_deposit`` flag; rent defaults to not included.
2. ``preview_settlement`` applies a selection and computes the refund.
3. ``commit_settlement`` does the same, then writes the deposit status and
   flips ``deducted_from_deposit`` on the maintenance records whose flag
   changed, all in one transaction.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from schemas import (
     MaintenanceDeduction,
     OwnerInfoRecord,
     OWNER_INFO_ID,
     PrintableDocument,
     RentDeduction,
     SettlementCandidates,
     SettlementCommit,
     SettlementCommitResponse,
     SettlementResult,
     SettlementSelection,
     TenantCreate,
     TenantRecord,
)
from .deposit_settlement import compute_settlement, changed_deduction_flags, derive_deposit_status
from .errors import ConcurrentUpdateError
from .indexation import format_euro
from .payment_grouping import group_payments, unpaid_rent_groups
from .payment_service import issuer_lines
from .record_store import (
     RecordStore,
     TENANTS,
     PROPERTIES,
     PAYMENTS,
     MAINTENANCES,
     OWNER_INFO,
)

logger = logging.getLogger(__name__)

DEFAULT_DEPOSIT_MONTHS = 2


class TenantService:
     """Service class for tenant business rules."""

     @staticmethod
     def create_tenant(store: RecordStore, data: TenantCreate) -> TenantRecord:
          """
          Create a tenant.

          The deposit defaults to two months of rent and the property display
          name is taken from the linked property when there is one.
          """
          fields = data.model_dump()
          if data.deposit_amount is None:
               fields["deposit_amount"] = round(data.rent * DEFAULT_DEPOSIT_MONTHS, 2)
          prop = store.find(PROPERTIES, data.property_id)
          if prop is not None:
               fields["property_name"] = prop.address
          tenant_id = store.create(TENANTS, fields)
          return store.get(TENANTS, tenant_id)

     @staticmethod
     def update_tenant(store: RecordStore, tenant_id: str, changes: dict) -> TenantRecord:
          """Apply an edit; a new property link refreshes the property display name."""
          if changes.get("property_id"):
               prop = store.find(PROPERTIES, changes["property_id"])
               if prop is not None:
                    changes["property_name"] = prop.address
          return store.update(TENANTS, tenant_id, changes)

     # ------------------------------------------------------------------
     # Deposit settlement
     # ------------------------------------------------------------------

     @staticmethod
     def settlement_candidates(store: RecordStore, tenant_id: str) -> SettlementCandidates:
          """
          Maintenance records and unpaid rent obligations that may be deducted
          from the tenant's deposit.

          Raises:
               RecordNotFoundError: If the tenant does not exist
          """
          tenant = store.get(TENANTS, tenant_id)
          maintenance = [
               MaintenanceDeduction(
                    maintenance_id=m.id,
                    description=m.description,
                    date=m.date.isoformat(),
                    cost=m.cost,
                    included=m.deducted_from_deposit,
               )
               for m in store.fetch_all(MAINTENANCES)
               if m.tenant_id == tenant.id
          ]
          groups = group_payments(
               [p for p in store.fetch_all(PAYMENTS) if p.tenant_id == tenant.id],
               [tenant],
               store.fetch_all(PROPERTIES),
          )
          unpaid_rent = [
               RentDeduction(group_key=g.group_key, period=g.period, balance=g.balance)
               for g in unpaid_rent_groups(groups, tenant.id)
          ]
          return SettlementCandidates(
               tenant_id=tenant.id,
               tenant_name=tenant.full_name,
               deposit_amount=tenant.deposit_amount,
               deposit_status=tenant.deposit_status,
               version=tenant.version,
               maintenance=maintenance,
               unpaid_rent=unpaid_rent,
          )

     @staticmethod
     def preview_settlement(
          store: RecordStore, tenant_id: str, selection: SettlementSelection
     ) -> SettlementResult:
          """Compute the refund for a selection without writing anything."""
          candidates = TenantService.settlement_candidates(store, tenant_id)
          maintenance, unpaid_rent = apply_selection(candidates, selection)
          return compute_settlement(candidates.deposit_amount, maintenance, unpaid_rent)

     @staticmethod
     def commit_settlement(
          store: RecordStore, tenant_id: str, commit: SettlementCommit
     ) -> SettlementCommitResponse:
          """
          Compute the settlement and persist it.

          Only maintenance records whose inclusion differs from their saved
          flag are written.

          Raises:
               RecordNotFoundError: If the tenant does not exist
               ConcurrentUpdateError: If ``expected_version`` is given and the
                    tenant was modified since
          """
          candidates = TenantService.settlement_candidates(store, tenant_id)
          if commit.expected_version is not None and commit.expected_version != candidates.version:
               raise ConcurrentUpdateError(TENANTS, tenant_id, commit.expected_version, candidates.version)

          saved_flags = {m.maintenance_id: m.included for m in candidates.maintenance}
          maintenance, unpaid_rent = apply_selection(candidates, commit)
          result = compute_settlement(candidates.deposit_amount, maintenance, unpaid_rent)
          deposit_status = derive_deposit_status(result, commit.deposit_status)

          flips = changed_deduction_flags(maintenance, saved_flags)
          # Status and flag flips commit together or not at all
          store.update_many(
               [(TENANTS, tenant_id, {"deposit_status": deposit_status}, commit.expected_version)]
               + [
                    (MAINTENANCES, maintenance_id, {"deducted_from_deposit": included}, None)
                    for maintenance_id, included in flips.items()
               ]
          )

          logger.info(
               "Settled deposit of tenant %s: status=%s deductions=%.2f refund=%.2f",
               tenant_id, deposit_status, result.total_deductions, result.final_refund_amount,
          )
          return SettlementCommitResponse(
               **result.model_dump(),
               tenant_id=tenant_id,
               deposit_status=deposit_status,
               updated_maintenance_ids=sorted(flips),
          )

     @staticmethod
     def build_statement(
          candidates: SettlementCandidates,
          selection: Optional[SettlementSelection],
          owner: Optional[OwnerInfoRecord],
     ) -> PrintableDocument:
          """Printable deposit settlement statement."""
          if selection is None:
               maintenance, unpaid_rent = candidates.maintenance, candidates.unpaid_rent
          else:
               maintenance, unpaid_rent = apply_selection(candidates, selection)
          result = compute_settlement(candidates.deposit_amount, maintenance, unpaid_rent)

          rows = [
               ("Locataire", candidates.tenant_name),
               ("Caution", format_euro(result.deposit_amount)),
          ]
          rows += [
               (f"Entretien {m.date or ''} : {m.description}".strip(), f"- {format_euro(m.cost)}")
               for m in maintenance if m.included
          ]
          rows += [
               (f"Loyer impayé {r.period}", f"- {format_euro(r.balance)}")
               for r in unpaid_rent if r.included
          ]
          rows += [
               ("Total des déductions", format_euro(result.total_deductions)),
               ("Montant à rembourser", format_euro(result.final_refund_amount)),
          ]
          note = None
          if result.final_refund_amount < 0:
               note = f"Montant restant dû par le locataire : {format_euro(-result.final_refund_amount)}"
          return PrintableDocument(
               title="Décompte de la garantie locative",
               issuer_lines=issuer_lines(owner),
               rows=rows,
               note=note,
          )

     @staticmethod
     def owner_info(store: RecordStore) -> Optional[OwnerInfoRecord]:
          return store.find(OWNER_INFO, OWNER_INFO_ID)


def apply_selection(
     candidates: SettlementCandidates, selection: SettlementSelection
) -> Tuple[List[MaintenanceDeduction], List[RentDeduction]]:
     """
     Candidates with ``included`` set from the selection. Ids that are not
     candidates of this tenant are ignored.
     """
     maintenance_ids = set(selection.maintenance_ids)
     rent_keys = set(selection.rent_group_keys)
     _warn_unknown(maintenance_ids, (m.maintenance_id for m in candidates.maintenance), candidates.tenant_id)
     _warn_unknown(rent_keys, (r.group_key for r in candidates.unpaid_rent), candidates.tenant_id)
     maintenance = [
          m.model_copy(update={"included": m.maintenance_id in maintenance_ids})
          for m in candidates.maintenance
     ]
     unpaid_rent = [
          r.model_copy(update={"included": r.group_key in rent_keys})
          for r in candidates.unpaid_rent
     ]
     return maintenance, unpaid_rent


def _warn_unknown(selected: set, known: Iterable[str], tenant_id: str) -> None:
     unknown = selected - set(known)
     if unknown:
          logger.warning("Ignoring settlement selections not offered to tenant %s: %s", tenant_id, sorted(unknown))
