from .jwt_codec import JwtTokenCodec

__all__ = ["JwtTokenCodec"]
