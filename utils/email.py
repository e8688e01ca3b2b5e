# utils/email.py
import os

import requests
from dotenv import load_dotenv

load_dotenv()

BREVO_URL = "https://api.brevo.com/v3/smtp/email"


class EmailDeliveryError(Exception):
     """The email provider refused or could not be reached."""


def send_rent_reminder_email(to_email: str, tenant_name: str, amount: float, due_date: str, property_label: str):
     brevo_key = os.getenv("BREVO_API_KEY")
     if not brevo_key:
          raise EmailDeliveryError("BREVO_API_KEY is not set")
     if not to_email:
          raise EmailDeliveryError("Tenant has no email address")

     try:
          response = requests.post(
               BREVO_URL,
               headers={
                    "api-key": brevo_key,
                    "Content-Type": "application/json",
               },
               json={
                    "sender": {"name": "Rentify", "email": os.getenv("MAIL_SENDER", "noreply@rentify.be")},
                    "to": [{"email": to_email, "name": tenant_name}],
                    "subject": "Rappel de paiement du loyer",
                    "htmlContent": f"""
                         <p>Bonjour {tenant_name},</p>
                         <p>Nous vous rappelons que le loyer de <strong>{amount:.2f} €</strong>
                         pour {property_label} est dû le {due_date}.</p>
                         <p>Merci.</p>
                    """,
               },
               timeout=10,
          )
     except requests.RequestException as e:
          raise EmailDeliveryError(f"Brevo unreachable: {e}") from e
     if response.status_code not in (200, 201):
          raise EmailDeliveryError(f"Brevo error: {response.text}")
