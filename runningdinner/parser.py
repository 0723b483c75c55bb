"""CSV and YAML parsing for runningdinner."""

import csv
from pathlib import Path

import yaml

from runningdinner.config import DinnerConfig
from runningdinner.models import (
    DEFAULT_COURSE_CLASSES,
    UNDEFINED_AGE,
    UNDEFINED_SEATS,
    CourseClass,
    Gender,
    GenderAspect,
    Participant,
)

GENDER_VALUES: dict[str, Gender] = {
    "male": Gender.MALE,
    "m": Gender.MALE,
    "man": Gender.MALE,
    "männlich": Gender.MALE,
    "maennlich": Gender.MALE,
    "mann": Gender.MALE,
    "female": Gender.FEMALE,
    "f": Gender.FEMALE,
    "w": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "weiblich": Gender.FEMALE,
    "frau": Gender.FEMALE,
}


def parse_gender(raw: str) -> Gender:
    """Map a free text gender to Gender, anything unknown is UNDEFINED."""
    return GENDER_VALUES.get(raw.strip().lower(), Gender.UNDEFINED)


def _parse_int(raw: str, default: int, column: str, line: int) -> int:
    raw = raw.strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Line {line}: column {column!r} must be a number, got {raw!r}") from None


def parse_participants_csv(csv_path: Path) -> list[Participant]:
    """
    Parse the participants CSV file.

    Expected columns are Number, Name, Email, Gender, Seats, Age and Address.
    Only Name is required. Rows without a name are skipped, a missing number
    defaults to the position of the participant in the file and missing
    seats mean the hosting capacity is unknown.
    """
    participants: list[Participant] = []

    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or []
        if "Name" not in fieldnames:
            raise ValueError(f"Missing column 'Name' in {csv_path} (found: {', '.join(fieldnames)})")

        # Line 1 is the header
        for line, row in enumerate(reader, start=2):
            name = (row.get("Name") or "").strip()
            if not name:
                continue

            participants.append(
                Participant(
                    participant_number=_parse_int(
                        row.get("Number") or "", len(participants) + 1, "Number", line
                    ),
                    name=name,
                    email=(row.get("Email") or "").strip(),
                    gender=parse_gender(row.get("Gender") or ""),
                    num_seats=_parse_int(row.get("Seats") or "", UNDEFINED_SEATS, "Seats", line),
                    age=_parse_int(row.get("Age") or "", UNDEFINED_AGE, "Age", line),
                    address=(row.get("Address") or "").strip(),
                )
            )

    numbers = [p.participant_number for p in participants]
    if len(set(numbers)) != len(numbers):
        raise ValueError(f"Participant numbers in {csv_path} are not unique")

    return participants


def _parse_course_class(entry) -> CourseClass:
    if isinstance(entry, dict):
        time = entry.get("time")
        return CourseClass(label=str(entry["label"]), time=str(time) if time is not None else None)
    return CourseClass(label=str(entry))


def parse_config_yaml(yaml_path: Path) -> DinnerConfig:
    """Parse the dinner configuration YAML file. Missing keys keep their defaults."""
    with yaml_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        return DinnerConfig()

    course_classes = DEFAULT_COURSE_CLASSES
    if "course_classes" in data:
        course_classes = tuple(_parse_course_class(entry) for entry in data["course_classes"])

    seed = data.get("seed")
    return DinnerConfig(
        course_classes=course_classes,
        team_size=int(data.get("team_size", 2)),
        gender_aspect=GenderAspect(data.get("gender_aspect", GenderAspect.IGNORE.value)),
        force_equal_distributed_capacity=bool(data.get("force_equal_distributed_capacity", True)),
        consider_shortest_paths=bool(data.get("consider_shortest_paths", False)),
        seed=int(seed) if seed is not None else None,
    )


def create_config_template(output_path: Path):
    """Create a dinner configuration template YAML file."""
    template = {
        "team_size": 2,
        "course_classes": [
            {"label": "Appetizer", "time": "19:00"},
            {"label": "Main course", "time": "21:00"},
            {"label": "Dessert", "time": "23:00"},
        ],
        "gender_aspect": GenderAspect.IGNORE.value,
        "force_equal_distributed_capacity": True,
        "consider_shortest_paths": False,
        "seed": None,
    }

    # Add a comment header
    header = f"""\
# Dinner configuration for runningdinner
#
# team_size: number of participants cooking together
# course_classes: courses in the order they are served (label and optional time,
#   quote times like "19:00")
#
# Gender aspect options: {", ".join(a.value for a in GenderAspect)}
#   - ignore: gender is not considered when pairing participants
#   - force_mixed: prefer teams with different genders
#   - force_same: prefer teams with the same gender
#
# force_equal_distributed_capacity: spread participants with enough seats
#   for hosting evenly over all teams
# seed: fix the random seed for reproducible teams (leave empty for random)

"""

    with output_path.open("w", encoding="utf-8") as f:
        f.write(header)
        yaml.dump(template, f, default_flow_style=False, sort_keys=False)
