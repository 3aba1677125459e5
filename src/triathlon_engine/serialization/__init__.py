"""Serialization module — convert plans, profiles and history to and from JSON."""

from triathlon_engine.serialization.json_codec import (
    as_json_list,
    as_json_object,
    context_from_dict,
    context_to_dict,
    fatigue_entry_from_dict,
    plan_from_dict,
    plan_to_dict,
    plan_to_json_string,
    profile_from_dict,
    profile_to_dict,
    session_from_dict,
    session_to_dict,
    workout_log_from_dict,
)

__all__ = [
    "as_json_list",
    "as_json_object",
    "context_from_dict",
    "context_to_dict",
    "fatigue_entry_from_dict",
    "plan_from_dict",
    "plan_to_dict",
    "plan_to_json_string",
    "profile_from_dict",
    "profile_to_dict",
    "session_from_dict",
    "session_to_dict",
    "workout_log_from_dict",
]
