from datetime import date

from church_records.exceptions import NotFoundError
from church_records.models import ChurchMemberFunds, ChurchMemberFundsId
from church_records.repositories import (
    ChurchMemberFundsRepository,
    ChurchMemberRepository,
    FundsTypeRepository,
)
from church_records.services.base_service import BaseService
from church_records.utils.validation import FieldValidator


class ChurchMemberFundsService(BaseService[ChurchMemberFundsId, ChurchMemberFunds]):
    repository = ChurchMemberFundsRepository
    label = "Fund"

    @classmethod
    def _validator(cls, data, existing=None):
        # An omitted endow date defaults to today on create and is kept on update
        default_date = existing.endow_date if existing else date.today().isoformat()
        validator = FieldValidator(data)
        validator.reference("member_id", "Member")
        validator.reference("fund_type_id", "Fund type")
        validator.amount()
        validator.iso_date("endow_date", default=default_date)
        return validator

    @classmethod
    def _check_references(cls, fields):
        member_id = fields["member_id"]
        if not ChurchMemberRepository.find_by_id(member_id):
            raise NotFoundError(f"Church member {member_id} not found")
        fund_type_id = fields["fund_type_id"]
        if not FundsTypeRepository.find_by_id(fund_type_id):
            raise NotFoundError(f"Fund type {fund_type_id} not found")
