"""
Migration Script: legacy document export to SQL
Imports users, contact messages and the portfolio content document from a
JSON export of the old document store, where skillsList/projectsList are
JSON-encoded strings and user passwords are stored in plaintext.

Usage:
    python migrations/import_legacy_content.py [export.json]
"""

import os
import sys
import json
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from schemas import PortfolioContentUpdate, ValidationError, format_validation_errors
from utils.data import create_contact, create_user, get_user_by_username, save_portfolio_content


def parse_date(date_str):
    """Parse date string to datetime object"""
    if not date_str:
        return None
    if isinstance(date_str, dict):
        # Extended JSON: {"$date": "..."}
        date_str = date_str.get('$date')
    formats = [
        '%Y-%m-%dT%H:%M:%S.%fZ',
        '%Y-%m-%dT%H:%M:%SZ',
        '%Y-%m-%dT%H:%M:%S.%f',
        '%Y-%m-%dT%H:%M:%S',
        '%Y-%m-%d %H:%M:%S',
        '%Y-%m-%d'
    ]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except (TypeError, ValueError):
            continue
    return None


def migrate_users(data):
    """Import users, hashing their plaintext passwords"""
    users_data = data.get('users', [])
    print(f"Migrating {len(users_data)} users...")
    created = 0

    for user_json in users_data:
        username = user_json.get('username')
        password = user_json.get('password')
        if not username or not password:
            continue

        if get_user_by_username(username):
            print(f"  User {username} already exists, skipping...")
            continue

        create_user(username, password, role=user_json.get('role', 'user'))
        created += 1

    print(f"  [OK] Created {created} users")
    return created


def migrate_contacts(data):
    """Import contact messages, keeping their original creation time"""
    contacts_data = data.get('contacts', [])
    print(f"Migrating {len(contacts_data)} contact messages...")
    created = 0

    for contact_json in contacts_data:
        if not all(contact_json.get(k) for k in ('name', 'email', 'message')):
            print(f"  Skipping incomplete message: {contact_json.get('_id')}")
            continue
        create_contact(
            contact_json['name'],
            contact_json['email'],
            contact_json['message'],
            created_at=parse_date(contact_json.get('createdAt'))
        )
        created += 1

    print(f"  [OK] Imported {created} contact messages")
    return created


def migrate_content(data):
    """Import the portfolio content document through the singleton upsert"""
    content_json = data.get('portfolioContent')
    if isinstance(content_json, list):
        content_json = content_json[0] if content_json else None
    if not content_json:
        print("  No portfolio content found, skipping...")
        return None

    try:
        update = PortfolioContentUpdate.model_validate(content_json)
    except ValidationError as e:
        for err in format_validation_errors(e):
            print(f"  [ERROR] {err['field']}: {err['message']}")
        return None

    content = save_portfolio_content(update.to_fields())
    print(f"  [OK] Portfolio content imported ({len(content.skills)} skills, {len(content.projects)} projects)")
    return content


def run_migration(data):
    print("\n" + "=" * 60)
    print("STEP 1: Migrating Users")
    print("=" * 60)
    migrate_users(data)

    print("\n" + "=" * 60)
    print("STEP 2: Migrating Contact Messages")
    print("=" * 60)
    migrate_contacts(data)

    print("\n" + "=" * 60)
    print("STEP 3: Migrating Portfolio Content")
    print("=" * 60)
    migrate_content(data)


def main():
    """Main migration function"""
    from app import create_app

    print("=" * 60)
    print("Legacy Export to SQL Migration Script")
    print("=" * 60)

    json_file = sys.argv[1] if len(sys.argv) > 1 else 'export.json'
    if not os.path.exists(json_file):
        print(f"Error: {json_file} not found!")
        return

    app = create_app()
    with app.app_context():
        print(f"\nLoading data from {json_file}...")
        with open(json_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        run_migration(data)

        print("\n" + "=" * 60)
        print("Migration completed successfully!")
        print("=" * 60)


if __name__ == '__main__':
    main()
