import json
import sys

from django.core.management.base import BaseCommand, CommandError

from assessments.intake import (
    IncompleteAssessmentError,
    InvalidAssessmentError,
    complete_draft,
    draft_from_dict,
    update_draft,
)
from assessments.scoring import get_risk_scorer
from assessments.storage import get_history_store, new_entry


def _parse_override(raw: str):
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise CommandError(f"Invalid --set {raw!r}, expected field=value.")
    try:
        return name.strip(), json.loads(value)
    except ValueError:
        raise CommandError(f"Invalid value for {name.strip()!r}: {value!r} is not JSON.")


class Command(BaseCommand):
    help = "Score an assessment record read from a JSON file (or '-' for stdin) and print the result."

    def add_arguments(self, parser):
        parser.add_argument("source", help="Path to a JSON record, or '-' to read stdin.")
        parser.add_argument(
            "--set",
            dest="overrides",
            action="append",
            default=[],
            metavar="FIELD=VALUE",
            help="Override one field; VALUE is parsed as JSON (e.g. age=31, family_history=true).",
        )
        parser.add_argument("--save", action="store_true", help="Save the result to assessment history.")

    def handle(self, *args, **options):
        source = options["source"]
        try:
            if source == "-":
                payload = json.load(sys.stdin)
            else:
                with open(source, encoding="utf-8") as fh:
                    payload = json.load(fh)
        except OSError as exc:
            raise CommandError(f"Cannot read {source}: {exc}")
        except ValueError as exc:
            raise CommandError(f"{source} is not valid JSON: {exc}")

        if not isinstance(payload, dict):
            raise CommandError("Assessment record must be a JSON object.")

        draft = draft_from_dict(payload)
        try:
            for raw in options["overrides"]:
                name, value = _parse_override(raw)
                draft = update_draft(draft, **{name: value})
            record = complete_draft(draft)
        except (TypeError, IncompleteAssessmentError, InvalidAssessmentError) as exc:
            raise CommandError(str(exc))

        result = get_risk_scorer().score(record)

        if options["save"]:
            entry = new_entry(record, result)
            get_history_store().save(entry)
            self.stdout.write(json.dumps(entry.to_dict(), indent=2))
            self.stdout.write(self.style.SUCCESS(f"Saved assessment {entry.id}"))
            return

        self.stdout.write(json.dumps(result.to_dict(), indent=2))
