from church_records.models import Church, ChurchId
from church_records.repositories import ChurchRepository
from church_records.services.base_service import BaseService
from church_records.utils.validation import FieldValidator


class ChurchService(BaseService[ChurchId, Church]):
    repository = ChurchRepository
    label = "Church"

    @classmethod
    def _validator(cls, data, existing=None):
        validator = FieldValidator(data)
        validator.text("name", required=True, min_length=3)
        validator.email()
        validator.text("address", required=True, min_length=2)
        validator.text("phone1", required=True, label="Phone")
        validator.text("phone2", label="Second phone")
        return validator

    @classmethod
    def _dependents(cls, record_id):
        if ChurchRepository.count_members(record_id) > 0:
            return "Cannot delete church with members"
        return None
