from .flow import AuthFlow, AuthFlowState
from .models import AuthAttempt, AuthMode, UserIdentity

__all__ = ["AuthFlow", "AuthFlowState", "AuthAttempt", "AuthMode", "UserIdentity"]
