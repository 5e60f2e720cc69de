"""JSON export and import of the schedule model."""

import json

from kaigi_schedule.models import Schedule, schedule_to_dict, schedule_from_dict


def render_json(schedule: Schedule) -> str:
    """Pretty-printed JSON keyed by day id. Unset optional fields are omitted."""
    return json.dumps(schedule_to_dict(schedule), indent=2, ensure_ascii=False)


def load_schedule_json(text: str) -> Schedule:
    """Parse JSON produced by render_json back into a Schedule."""
    return schedule_from_dict(json.loads(text))
