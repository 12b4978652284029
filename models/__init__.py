from .company_record import Company, CompanyRecord
from .user_record import User, UserRecord
from .ingestion_result import IngestionResult, RecordFailure
from .top_up_result import CompanyTopUp, CreditLine, TopUpRun

__all__ = [
    "Company",
    "CompanyRecord",
    "User",
    "UserRecord",
    "IngestionResult",
    "RecordFailure",
    "CompanyTopUp",
    "CreditLine",
    "TopUpRun",
]
