from app.parsers.extract_profile import (
    extract_email,
    extract_name,
    extract_phone,
    extract_profile,
)

__all__ = ["extract_email", "extract_name", "extract_phone", "extract_profile"]
