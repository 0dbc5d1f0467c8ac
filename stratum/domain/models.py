"""Import every ORM model so they register on ``Base.metadata``.

Alembic's env script and ``create_all_tables`` rely on this module.
"""

from stratum.domain.items.models import Item
from stratum.domain.users.models import User

__all__ = ["Item", "User"]
