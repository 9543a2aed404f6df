from .rules import MIN_PASSWORD_LENGTH, is_strong_password, is_valid_email, passwords_match

__all__ = ["MIN_PASSWORD_LENGTH", "is_valid_email", "is_strong_password", "passwords_match"]
