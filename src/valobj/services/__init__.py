"""Service layer — operations that report through ServiceResult."""
