"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_*, *_CONFLICT)
- Authorization errors (PERMISSION_*, NOT_EVALUATION_OWNER)
- Business rule violations (*_ARCHIVED, NO_COACH_AVAILABLE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_EMAIL = "invalid_email"
    INVALID_DATE_RANGE = "invalid_date_range"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    INVALID_RATING = "invalid_rating"
    INVALID_SCOPE = "invalid_scope"

    # Resource errors
    CLUB_NOT_FOUND = "club_not_found"
    AGE_GROUP_NOT_FOUND = "age_group_not_found"
    TEAM_NOT_FOUND = "team_not_found"
    PLAYER_NOT_FOUND = "player_not_found"
    COACH_NOT_FOUND = "coach_not_found"
    MATCH_NOT_FOUND = "match_not_found"
    KIT_NOT_FOUND = "kit_not_found"
    DRILL_NOT_FOUND = "drill_not_found"
    DRILL_TEMPLATE_NOT_FOUND = "drill_template_not_found"
    DEVELOPMENT_PLAN_NOT_FOUND = "development_plan_not_found"
    REPORT_NOT_FOUND = "report_not_found"
    EVALUATION_NOT_FOUND = "evaluation_not_found"
    PLAYER_ATTRIBUTES_NOT_FOUND = "player_attributes_not_found"
    USER_NOT_FOUND = "user_not_found"
    MEMBERSHIP_NOT_FOUND = "membership_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    SQUAD_NUMBER_TAKEN = "squad_number_taken"
    PLAYER_ALREADY_ON_TEAM = "player_already_on_team"
    COACH_ALREADY_ASSIGNED = "coach_already_assigned"
    RESOURCE_CONFLICT = "resource_conflict"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    NOT_EVALUATION_OWNER = "not_evaluation_owner"
    AUTHENTICATION_FAILED = "authentication_failed"

    # Business rule violations
    TEAM_ARCHIVED = "team_archived"
    COACH_ARCHIVED = "coach_archived"
    PLAYER_ARCHIVED = "player_archived"
    CLUB_MISMATCH = "club_mismatch"
    NO_COACH_AVAILABLE = "no_coach_available"
