#!/usr/bin/env python
"""
Delete password reset tokens that are used or past their expiry.
Safe to run on a schedule (e.g. a daily cron job).
"""
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database import SessionLocal
from services.reset_token_service import ResetTokenService


def purge():
    db = SessionLocal()
    try:
        purged = ResetTokenService(db).purge_expired()
        print(f"Purged {purged} reset tokens.")
    finally:
        db.close()


if __name__ == "__main__":
    purge()
