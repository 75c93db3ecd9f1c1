import pytest

from church_records import create_app
from church_records.extensions import db
from church_records.services import (
    ChurchService,
    ChurchMemberService,
    FundsTypeService,
    ChurchMemberFundsService,
)


@pytest.fixture
def app(tmp_path):
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}",
            "SCHEMA_AUTO_UPGRADE": True,
        }
    )
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def church(app):
    return ChurchService.create(
        {"name": "St. Mark", "address": "1 Main St", "phone1": "555-0100"}
    )


@pytest.fixture
def member(church):
    return ChurchMemberService.create(
        {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "address": "2 Elm St",
            "phone1": "555-0111",
            "church_id": church.id,
        }
    )


@pytest.fixture
def fund_type(app):
    return FundsTypeService.create({"name": "Tithe", "description": "Regular giving"})


@pytest.fixture
def fund(member, fund_type):
    return ChurchMemberFundsService.create(
        {
            "member_id": member.id,
            "fund_type_id": fund_type.id,
            "amount": 125.5,
            "endow_date": "2025-03-02",
        }
    )
