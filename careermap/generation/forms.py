## Roadmap request form validation
from careermap.errors import FormValidationError

REQUIRED_FIELDS = ("career", "experience", "goals")


def validate_roadmap_form(career: str, experience: str, goals: str) -> None:
    """Reject the submission if any field is empty or whitespace-only."""
    values = {"career": career, "experience": experience, "goals": goals}
    missing = [name for name in REQUIRED_FIELDS if not (values[name] or "").strip()]
    if missing:
        raise FormValidationError(missing)
