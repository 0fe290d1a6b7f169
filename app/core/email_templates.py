# app/core/email_templates.py
"""
HTML bodies for transactional email.

All user-supplied values are escaped before interpolation.
"""

from datetime import datetime, timezone
from html import escape

BRAND = "Elite Digital Cards"
SUPPORT_EMAIL = "info@eliteassociate.in"

_LAYOUT = """<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"><meta name="viewport" content="width=device-width, initial-scale=1.0"></head>
<body style="margin:0;padding:0;font-family:Arial,sans-serif;background-color:#f5f5f5;">
  <table width="100%" cellpadding="0" cellspacing="0" style="background-color:#f5f5f5;">
    <tr><td align="center" style="padding:20px 0;">
      <table width="600" cellpadding="0" cellspacing="0" style="background-color:white;border-radius:8px;">
        <tr><td style="padding:30px 40px;background:linear-gradient(135deg,#667eea 0%,#764ba2 100%);border-radius:8px 8px 0 0;">
          <h1 style="color:white;margin:0;font-size:24px;text-align:center;">{brand}</h1>
          <p style="color:rgba(255,255,255,0.9);margin:10px 0 0 0;text-align:center;font-size:16px;">Digital Business Cards Platform</p>
        </td></tr>
        <tr><td style="padding:40px;color:#555;line-height:1.6;font-size:16px;">{content}</td></tr>
        <tr><td style="padding:30px 40px;background-color:#f8f9fa;border-radius:0 0 8px 8px;text-align:center;color:#666;font-size:14px;">
          <p style="margin:0 0 10px 0;"><strong>Need Help?</strong> Contact <a href="mailto:{support}">{support}</a></p>
          <p style="margin:0;">&copy; {year} {brand}. All rights reserved.</p>
          <p style="margin:10px 0 0 0;font-size:12px;color:#999;">{footer}</p>
        </td></tr>
      </table>
    </td></tr>
  </table>
</body>
</html>"""


def _wrap(content: str, footer: str) -> str:
    return _LAYOUT.format(
        brand=BRAND,
        support=SUPPORT_EMAIL,
        year=datetime.now(timezone.utc).year,
        content=content,
        footer=footer,
    )


def _account_footer(email: str) -> str:
    return f"This email was sent to {escape(email)} regarding your {BRAND} account."


def otp_email(email: str, otp: str, minutes: int, resend: bool = False) -> tuple[str, str]:
    """
    Return (subject, html) for a password-reset code.

    `resend` switches to the resend wording and subject.
    """
    subject = f"Password Reset OTP - {BRAND}"
    intro = "You have requested to reset your password"
    if resend:
        subject += " (Resend)"
        intro = "You have requested to resend the OTP for resetting your password"

    content = f"""
      <h2 style="color:#333;margin:0 0 20px 0;font-size:20px;">Hello,</h2>
      <p>{intro} for your {BRAND} account.</p>
      <p>Please use the following One-Time Password (OTP) to proceed:</p>
      <div style="text-align:center;margin:30px 0;">
        <div style="display:inline-block;padding:15px 25px;background-color:#f8f9fa;border:2px dashed #667eea;border-radius:8px;">
          <h3 style="color:#667eea;margin:0;font-size:24px;letter-spacing:3px;">{escape(otp)}</h3>
        </div>
      </div>
      <p>This OTP will expire in <strong>{minutes} minutes</strong>. If you did not request this, please ignore this email.</p>
      <p style="color:#856404;"><strong>Security Notice:</strong> Never share this OTP with anyone.</p>
    """
    return subject, _wrap(content, _account_footer(email))


def appointment_email(
    owner_email: str,
    client_name: str,
    phone: str,
    appointment_date: datetime,
    notes: str | None,
) -> tuple[str, str]:
    """Return (subject, html) notifying a card owner of a new booking."""
    subject = f"New Appointment Booking - {BRAND}"
    rows = [
        ("Client Name", client_name),
        ("Phone Number", phone),
        ("Appointment Date", appointment_date.strftime("%Y-%m-%d %H:%M")),
        ("Notes", notes or "No additional notes provided"),
    ]
    details = "".join(
        f'<tr><td style="padding:12px 0;border-bottom:1px solid #edf2f7;">'
        f"<strong>{label}:</strong> {escape(str(value))}</td></tr>"
        for label, value in rows
    )
    content = f"""
      <h2 style="color:#2d3748;margin:0 0 25px 0;">New Appointment Booking!</h2>
      <p>Hello <strong>{escape(owner_email)}</strong>,</p>
      <p>A potential client has booked an appointment through your digital business card.</p>
      <table width="100%" cellpadding="0" cellspacing="0">{details}</table>
      <p>Contact the client at your earliest convenience to confirm the details.</p>
    """
    return subject, _wrap(content, _account_footer(owner_email))


def admin_message_email(
    message: str,
    recipient_name: str | None = None,
    recipient_email: str | None = None,
) -> str:
    """
    Wrap an admin-authored message. Each line becomes a paragraph.

    Without a recipient email the footer uses the group wording.
    """
    greeting = f"Dear {escape(recipient_name)}," if recipient_name else "Hello,"
    paragraphs = "".join(
        f'<p style="margin:0 0 20px 0;">{escape(line)}</p>'
        for line in message.split("\n")
    )
    footer = (
        _account_footer(recipient_email)
        if recipient_email
        else "This is a group message sent to multiple recipients."
    )
    content = f'<h2 style="color:#333;margin:0 0 20px 0;">{greeting}</h2>{paragraphs}'
    return _wrap(content, footer)
