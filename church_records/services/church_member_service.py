from church_records.exceptions import NotFoundError
from church_records.models import ChurchMember, ChurchMemberId
from church_records.repositories import ChurchMemberRepository, ChurchRepository
from church_records.services.base_service import BaseService
from church_records.utils.validation import FieldValidator


class ChurchMemberService(BaseService[ChurchMemberId, ChurchMember]):
    repository = ChurchMemberRepository
    label = "Church member"

    @classmethod
    def _validator(cls, data, existing=None):
        validator = FieldValidator(data)
        validator.text("name", required=True, min_length=3)
        validator.email()
        validator.text("address", required=True)
        validator.text("phone1", required=True, label="Phone")
        validator.text("phone2", label="Second phone")
        validator.reference("church_id", "Church")
        return validator

    @classmethod
    def _check_references(cls, fields):
        church_id = fields["church_id"]
        if not ChurchRepository.find_by_id(church_id):
            raise NotFoundError(f"Church {church_id} not found")

    @classmethod
    def _dependents(cls, record_id):
        if ChurchMemberRepository.count_funds(record_id) > 0:
            return "Cannot delete member with funds"
        return None
