from church_records.models import ChurchMemberFunds
from church_records.repositories.base_repository import BaseRepository


class ChurchMemberFundsRepository(BaseRepository):
    model = ChurchMemberFunds
