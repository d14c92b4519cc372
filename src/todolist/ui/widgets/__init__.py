"""Widget components."""

from .error_modal import ErrorModal
from .signup_modal import SignupModal

__all__ = [
    "ErrorModal",
    "SignupModal",
]
