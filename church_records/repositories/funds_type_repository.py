from church_records.models import FundsType, ChurchMemberFunds
from church_records.repositories.base_repository import BaseRepository, storage_errors


class FundsTypeRepository(BaseRepository):
    model = FundsType

    @staticmethod
    @storage_errors
    def count_funds(fund_type_id: int) -> int:
        """Counts the funds recorded under a fund type."""
        return ChurchMemberFunds.query.filter_by(fund_type_id=fund_type_id).count()
