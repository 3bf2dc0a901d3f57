"""ORM Models - SQLAlchemy declarative models for tool configuration and usage.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of usage rows; everything else hangs off tool_type strings

Design Decisions:
    - One file per entity for locality
    - All models imported here so relationship() string references resolve
      before any query runs
"""

from lifeformula.models.tool_config import ToolConfig  # noqa: F401
from lifeformula.models.user import User  # noqa: F401
from lifeformula.models.tool_usage import ToolUsage  # noqa: F401
from lifeformula.models.usage_limit import UsageLimit  # noqa: F401
from lifeformula.models.user_subscription import UserSubscription  # noqa: F401
