"""Subjects and bodies for the transactional emails."""

from html import escape

from portfolio.services.mailer import OutgoingEmail

BRAND = "Portfolio"

BASE_STYLE = """
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); color: white;
              padding: 30px; text-align: center; border-radius: 10px 10px 0 0; }
    .content { background: #f9f9f9; padding: 30px; border-radius: 0 0 10px 10px; }
    .otp-box { background: white; border: 2px dashed #667eea; border-radius: 8px;
               padding: 20px; text-align: center; margin: 20px 0; }
    .otp-code { font-size: 32px; font-weight: bold; color: #667eea; letter-spacing: 8px; }
    .warning { background: #fff3cd; border-left: 4px solid #ffc107; padding: 12px; margin: 20px 0; }
    .field { margin: 8px 0; }
    .label { font-weight: bold; color: #555; }
    .footer { text-align: center; margin-top: 20px; color: #666; font-size: 12px; }
"""


def _layout(title: str, heading: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{BASE_STYLE}</style>
  </head>
  <body>
    <div class="container">
      <div class="header"><h1>{heading}</h1></div>
      <div class="content">
{body}
        <p>Best regards,<br>Your {BRAND} Team</p>
      </div>
      <div class="footer">
        <p>This is an automated email. Please do not reply to this message.</p>
      </div>
    </div>
  </body>
</html>
"""


def _field(label: str, value) -> str:
    if value is None or value == "" or value == []:
        return ""
    if isinstance(value, list):
        value = ", ".join(str(v) for v in value)
    return f'<p class="field"><span class="label">{escape(label)}:</span> {escape(str(value))}</p>'


def otp_email(to: str, otp: str, name: str, expiry_minutes: int = 10) -> OutgoingEmail:
    body = f"""
        <h2>Hello {escape(name)},</h2>
        <p>You requested to login to your account. Please use the following One-Time
        Password (OTP) to complete your login:</p>
        <div class="otp-box">
          <p style="margin: 0; font-size: 14px; color: #666;">Your OTP Code</p>
          <div class="otp-code">{escape(otp)}</div>
          <p style="margin: 10px 0 0 0; font-size: 12px; color: #999;">Valid for {expiry_minutes} minutes</p>
        </div>
        <div class="warning">
          <strong>Security Notice:</strong> Never share this OTP with anyone.
        </div>
        <p>If you didn't request this code, please ignore this email.</p>"""
    text = (
        f"Hello {name},\n\nYour OTP code is: {otp}\n\n"
        f"This code will expire in {expiry_minutes} minutes.\n\n"
        "If you didn't request this code, please ignore this email."
    )
    return OutgoingEmail(
        to=to,
        subject="Your Login OTP Code",
        html=_layout("Your OTP Code", "Login Verification", body),
        text=text,
    )


def welcome_email(to: str, name: str) -> OutgoingEmail:
    body = f"""
        <h2>Hello {escape(name)},</h2>
        <p>Welcome! Your account has been successfully created.</p>
        <p>You can now login using your credentials and an OTP that will be sent to your email.</p>"""
    text = (
        f"Hello {name},\n\nWelcome! Your account has been successfully created.\n\n"
        "You can now login using your credentials and an OTP that will be sent to your email."
    )
    return OutgoingEmail(
        to=to,
        subject=f"Welcome to {BRAND}",
        html=_layout("Welcome", "Welcome!", body),
        text=text,
    )


def user_message_confirmation_email(to: str, name: str, title: str) -> OutgoingEmail:
    body = f"""
        <h2>Hello {escape(name)},</h2>
        <p>Thank you for reaching out. Your message <strong>"{escape(title)}"</strong> has been
        received and I will get back to you as soon as possible.</p>"""
    text = (
        f"Hello {name},\n\nThank you for reaching out. Your message \"{title}\" has been "
        "received and I will get back to you as soon as possible."
    )
    return OutgoingEmail(
        to=to,
        subject="We received your message",
        html=_layout("Message received", "Message Received", body),
        text=text,
    )


def admin_new_message_email(
    admin_email: str, name: str, email: str, title: str, message: str
) -> OutgoingEmail:
    body = f"""
        <h2>New contact message</h2>
        {_field("From", name)}
        {_field("Email", email)}
        {_field("Title", title)}
        <div class="otp-box" style="text-align: left;">{escape(message)}</div>"""
    text = f"New message from {name} <{email}>\nTitle: {title}\n\n{message}"
    return OutgoingEmail(
        to=admin_email,
        subject=f"New message: {title}",
        html=_layout("New message", "New Contact Message", body),
        text=text,
    )


def hire_request_confirmation_email(
    to: str,
    name: str | None,
    project_desc: str,
    budget: str | None = None,
    timeline: str | None = None,
) -> OutgoingEmail:
    greeting = name or "there"
    body = f"""
        <h2>Hello {escape(greeting)},</h2>
        <p>Thank you for your project inquiry. Here is a summary of what you sent:</p>
        {_field("Project", project_desc)}
        {_field("Budget", budget)}
        {_field("Timeline", timeline)}
        <p>I will review the details and get back to you shortly.</p>"""
    lines = [f"Hello {greeting},", "", "Thank you for your project inquiry.", f"Project: {project_desc}"]
    if budget:
        lines.append(f"Budget: {budget}")
    if timeline:
        lines.append(f"Timeline: {timeline}")
    return OutgoingEmail(
        to=to,
        subject="Your project inquiry has been received",
        html=_layout("Hire request received", "Inquiry Received", body),
        text="\n".join(lines),
    )


def admin_hire_request_email(
    admin_email: str,
    client_name: str,
    client_email: str,
    project_desc: str,
    company_name: str | None = None,
    budget: str | None = None,
    timeline: str | None = None,
    core_features: list[str] | None = None,
    tech_suggestion: list[str] | None = None,
) -> OutgoingEmail:
    body = f"""
        <h2>New hire request</h2>
        {_field("Client", client_name)}
        {_field("Email", client_email)}
        {_field("Company", company_name)}
        {_field("Project", project_desc)}
        {_field("Budget", budget)}
        {_field("Timeline", timeline)}
        {_field("Core features", core_features)}
        {_field("Tech suggestions", tech_suggestion)}"""
    text = (
        f"New hire request from {client_name} <{client_email}>\n"
        f"Company: {company_name or '-'}\nProject: {project_desc}\n"
        f"Budget: {budget or '-'}\nTimeline: {timeline or '-'}"
    )
    return OutgoingEmail(
        to=admin_email,
        subject=f"New hire request from {client_name}",
        html=_layout("New hire request", "New Hire Request", body),
        text=text,
    )
