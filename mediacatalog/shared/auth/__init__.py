from mediacatalog.shared.auth.config import AuthSettings
from mediacatalog.shared.auth.dependencies import get_current_user_required

__all__ = ["AuthSettings", "get_current_user_required"]
