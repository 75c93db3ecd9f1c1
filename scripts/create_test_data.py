import sys
import os
import argparse

sys.path.append(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)  # relative imports

from random import choice, randrange
from church_records import create_app
from church_records.services import (
    ChurchService,
    ChurchMemberService,
    FundsTypeService,
    ChurchMemberFundsService,
)

app = create_app()

# Print the database URI the app is configured to use
with app.app_context():
    print(f"INFO: Connecting to database: {app.config['SQLALCHEMY_DATABASE_URI']}")


def create_test_churches():
    """Create test churches and return a list of their IDs"""
    church_data = [
        {"name": "St. Mark", "address": "1 Main St", "phone1": "555-0100"},
        {"name": "Grace Chapel", "address": "22 Hill Rd", "phone1": "555-0101",
         "email": "office@gracechapel.org"},
        {"name": "Providence", "address": "9 River Ln", "phone1": "555-0102"},
    ]
    churches = [ChurchService.create(data) for data in church_data]
    print(f"Created {len(churches)} test churches")
    return [church.id for church in churches]


def create_test_members(church_ids, members_per_church):
    """Create members spread over the given churches and return their IDs"""
    member_ids = []
    for church_id in church_ids:
        for i in range(members_per_church):
            member = ChurchMemberService.create(
                {
                    "name": f"Member{i + 1} Church{church_id}",
                    "email": f"member{i + 1}.church{church_id}@test.com",
                    "address": f"{i + 10} Test Ave",
                    "phone1": f"+1555000{str(i + 1).zfill(4)}",
                    "church_id": church_id,
                }
            )
            member_ids.append(member.id)
    print(f"Created {len(member_ids)} test members")
    return member_ids


def create_test_fund_types():
    """Create the common fund types and return their IDs"""
    fund_types = [
        ("Tithe", "Regular tenth giving"),
        ("Offering", None),
        ("Building Fund", "Contributions toward the building project"),
    ]
    ids = [
        FundsTypeService.create({"name": name, "description": description}).id
        for name, description in fund_types
    ]
    print(f"Created {len(ids)} test fund types")
    return ids


def create_test_funds(member_ids, fund_type_ids, funds_per_member):
    created = 0
    for member_id in member_ids:
        for _ in range(funds_per_member):
            ChurchMemberFundsService.create(
                {
                    "member_id": member_id,
                    "fund_type_id": choice(fund_type_ids),
                    "amount": randrange(500, 50000) / 100,
                    "endow_date": f"2025-{randrange(1, 13):02d}-{randrange(1, 29):02d}",
                }
            )
            created += 1
    print(f"Created {created} test funds")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create test data for church fund records")
    parser.add_argument("--members-per-church", type=int, default=5,
                        help="Members to create for each church (default: 5)")
    parser.add_argument("--funds-per-member", type=int, default=3,
                        help="Funds to create for each member (default: 3)")
    args = parser.parse_args()

    with app.app_context():
        church_ids = create_test_churches()
        member_ids = create_test_members(church_ids, args.members_per_church)
        fund_type_ids = create_test_fund_types()
        create_test_funds(member_ids, fund_type_ids, args.funds_per_member)
        print("Test data created successfully!")
