from church_records.models import FundsType, FundTypeId
from church_records.repositories import FundsTypeRepository
from church_records.services.base_service import BaseService
from church_records.utils.validation import FieldValidator


class FundsTypeService(BaseService[FundTypeId, FundsType]):
    repository = FundsTypeRepository
    label = "Fund type"

    @classmethod
    def _validator(cls, data, existing=None):
        validator = FieldValidator(data)
        validator.text("name", required=True, min_length=3)
        validator.text("description")
        return validator

    @classmethod
    def _dependents(cls, record_id):
        if FundsTypeRepository.count_funds(record_id) > 0:
            return "Cannot delete fund type having funds"
        return None
