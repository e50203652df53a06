from .authorize_request import AuthorizeRequestUseCase, extract_bearer_token
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .register_user import RegisterUserUseCase, validate_registration

__all__ = [
    "AuthorizeRequestUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "extract_bearer_token",
    "validate_registration",
]
