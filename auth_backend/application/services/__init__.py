from .password_hashing import BCRYPT_MAX_PASSWORD_BYTES, BcryptPasswordHasher

__all__ = ["BCRYPT_MAX_PASSWORD_BYTES", "BcryptPasswordHasher"]
