from church_records.services.church_service import ChurchService
from church_records.services.church_member_service import ChurchMemberService
from church_records.services.funds_type_service import FundsTypeService
from church_records.services.church_member_funds_service import (
    ChurchMemberFundsService,
)
from church_records.services.greeting_service import greet
