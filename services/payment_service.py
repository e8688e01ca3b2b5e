# services/payment_service.py
"""
Payment Service - recording payments and building receipts.
"""
from typing import Optional
from urllib.parse import quote

from schemas import (
     OwnerInfoRecord,
     PaymentCreate,
     PaymentRecord,
     PaymentTypeEnum,
     PrintableDocument,
)
from .indexation import format_euro
from .record_store import RecordStore, PAYMENTS, TENANTS, PROPERTIES

DEPOSIT_PERIOD = "Caution"


class PaymentService:
     """Service class for payment business rules."""

     @staticmethod
     def record_payment(store: RecordStore, data: PaymentCreate) -> PaymentRecord:
          """
          Record a payment against a tenant.

          The amount due for the obligation is captured now from the tenant's
          current rent (Loyer) or deposit amount (Caution) and is never
          recomputed afterwards. Tenant identity and property label are
          snapshotted as well.

          Raises:
               RecordNotFoundError: If the tenant does not exist
               ValueError: If a rent payment has no period
          """
          tenant = store.get(TENANTS, data.tenant_id)
          is_deposit = data.type == PaymentTypeEnum.DEPOSIT
          period = DEPOSIT_PERIOD if is_deposit else data.period.strip()
          if not period:
               raise ValueError("A rent payment needs a period, e.g. 'Juillet 2024'")

          prop = store.find(PROPERTIES, tenant.property_id)
          fields = {
               "tenant_id": tenant.id,
               "tenant_first_name": tenant.first_name,
               "tenant_last_name": tenant.last_name,
               "phone": tenant.phone,
               "email": tenant.email,
               "property": prop.address if prop else tenant.property_name,
               "date": data.date,
               "amount": data.amount,
               "status": data.status,
               "period": period,
               "rent_due": tenant.deposit_amount if is_deposit else tenant.rent,
               "type": data.type,
          }
          payment_id = store.create(PAYMENTS, fields)
          return store.get(PAYMENTS, payment_id)

     @staticmethod
     def build_receipt(payment: PaymentRecord, owner: Optional[OwnerInfoRecord]) -> PrintableDocument:
          """Printable rent (or deposit) receipt for one payment."""
          title = "Reçu de Caution" if payment.type == PaymentTypeEnum.DEPOSIT else "Reçu de Loyer"
          return PrintableDocument(
               title=title,
               issuer_lines=issuer_lines(owner),
               rows=[
                    ("Locataire", f"{payment.tenant_first_name} {payment.tenant_last_name}".strip()),
                    ("Propriété", payment.property or "N/A"),
                    ("Date de paiement", payment.date.isoformat()),
                    ("Période", payment.period),
                    ("Montant payé", format_euro(payment.amount)),
               ],
               note="Merci pour votre paiement.",
          )


def issuer_lines(owner: Optional[OwnerInfoRecord]) -> list:
     if owner is None:
          return []
     lines = [owner.name, owner.address]
     if owner.phone:
          lines.append(f"Tél. : {owner.phone}")
     if owner.email:
          lines.append(owner.email)
     if owner.company_number:
          lines.append(f"N° d'entreprise : {owner.company_number}")
     if owner.bank_account:
          lines.append(f"Compte : {owner.bank_account}")
     return [line for line in lines if line]


def whatsapp_receipt_url(payment: PaymentRecord) -> str:
     """wa.me link that opens a chat with the tenant prefilled with the receipt text."""
     name = f"{payment.tenant_first_name} {payment.tenant_last_name}".strip()
     text = (
          f"Bonjour {name},\n\n"
          f"Voici votre reçu pour le loyer de {payment.period}.\n\n"
          f"Montant : {payment.amount:.2f} €\n"
          f"Date de paiement : {payment.date.isoformat()}\n"
          f"Propriété : {payment.property}\n\n"
          f"Merci."
     )
     phone = "".join(ch for ch in payment.phone if ch.isdigit())
     return f"https://wa.me/{phone}?text={quote(text)}"
