import argparse

from blindaudit.core.config import settings
from blindaudit.db.session import SessionLocal
from blindaudit.models.user import User

def upsert_user(db, email: str, full_name: str) -> User:
    email = email.strip().lower()
    u = db.query(User).filter(User.email == email).one_or_none()
    if u:
        if not u.is_active:
            u.is_active = True
            db.commit()
            db.refresh(u)
        return u

    u = User(email=email, full_name=full_name, is_active=True)
    db.add(u)
    db.commit()
    db.refresh(u)
    return u

def main():
    parser = argparse.ArgumentParser(description="Create the two participant users")
    parser.add_argument("emails", nargs="*", help="Defaults to WHITELIST_EMAILS")
    args = parser.parse_args()

    emails = args.emails or sorted(settings.whitelist)
    if len(emails) != 2:
        raise SystemExit(f"Expected exactly two participant emails, got {len(emails)}")

    db = SessionLocal()
    try:
        print("Seeded users:")
        for email in emails:
            u = upsert_user(db, email, full_name=email.split("@")[0].title())
            print(u.email, u.id)
    finally:
        db.close()

if __name__ == "__main__":
    main()
