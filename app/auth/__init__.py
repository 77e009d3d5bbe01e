from .auth_manager import AuthManager
from .base_form import SubmitResult
from .sign_in_form import SignInForm
from .sign_up_form import SignUpForm

__all__ = ["AuthManager", "SignInForm", "SignUpForm", "SubmitResult"]
