# Namespace for pipeline steps
from .persist_companies import PersistCompanies  # noqa: F401
from .persist_users import PersistUsers  # noqa: F401
from .load_companies import LoadCompanies  # noqa: F401
from .apply_top_ups import ApplyTopUps  # noqa: F401
