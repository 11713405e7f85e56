"""Application constants.

Table names, payload field names and the validation messages returned to
API clients.
"""

# ---------------------------------------------------------------------------
# Supabase tables
# ---------------------------------------------------------------------------
STUDENT_TABLE: str = "student"
GENDER_CODE_TABLE: str = "gender_code"
DATA_SOURCE_CODE_TABLE: str = "data_source_code"

# ---------------------------------------------------------------------------
# Field names reported in FieldError.field (public camelCase payload names)
# ---------------------------------------------------------------------------
PEN_FIELD: str = "pen"
GENDER_CODE_FIELD: str = "genderCode"
DATA_SOURCE_CODE_FIELD: str = "dataSourceCode"
EMAIL_FIELD: str = "email"

# ---------------------------------------------------------------------------
# Validation messages
# ---------------------------------------------------------------------------
INVALID_PAYLOAD_MESSAGE: str = "Payload contains invalid data."

PEN_ALREADY_ASSOCIATED: str = "PEN is already associated to a student."
EMAIL_ALREADY_ASSOCIATED: str = "Email is already associated to a student."

INVALID_GENDER_CODE: str = "Invalid Gender Code."
GENDER_CODE_NOT_EFFECTIVE: str = "Gender Code provided is not yet effective."
GENDER_CODE_EXPIRED: str = "Gender Code provided has expired."

INVALID_DATA_SOURCE_CODE: str = "Invalid Data Source Code."
DATA_SOURCE_CODE_NOT_EFFECTIVE: str = "Data Source Code provided is not yet effective."
DATA_SOURCE_CODE_EXPIRED: str = "Data Source Code provided has expired."
