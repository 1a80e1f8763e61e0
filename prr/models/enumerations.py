from enum import Enum

class AnswerResponse(str, Enum):
    YES = "Yes"
    NO = "No"
    NOT_APPLICABLE = "N/A"

class DiagnosticKind(str, Enum):
    UNKNOWN_QUESTION = "unknown_question"            # Answer references no catalog entry
    MISSING_SECTION = "missing_section"              # Catalog entry has no section_id
    UNRECOGNIZED_RESPONSE = "unrecognized_response"  # Not Yes / No / N/A
