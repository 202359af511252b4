#!/usr/bin/env python3
"""
Print which bot settings are configured.
Secrets are never printed, only whether they are set.
"""
import sys

from app.database import SessionLocal, init_db
from app.services.settings_service import get_settings, settings_report


def main() -> int:
    try:
        init_db()
        db = SessionLocal()
        try:
            report = settings_report(get_settings(db))
        finally:
            db.close()
    except Exception as e:
        print(f"Error checking settings: {e}", file=sys.stderr)
        return 1

    print("--- Current settings in DB ---")
    print(f"Model name: {report['model_name']}")
    print(f"System prompt length: {report['system_prompt_chars']} chars")
    for key in ("api_key", "twilio_account_sid", "twilio_auth_token"):
        print(f"{key}: {'✅ configured' if report[key] else '❌ empty'}")
    print(f"Twilio phone number: {report['twilio_phone_number'] or '❌ empty'}")
    print(f"Support agent phone: {report['support_agent_phone'] or '❌ empty'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
