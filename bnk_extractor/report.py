# bnk_extractor/report.py
"""Object reports built from a decoded bank session."""
from typing import List, Optional
import json
import logging
from pathlib import Path

from .chunks.hirc.types import ObjectType, enum_name
from .parser.state import BankSession

logger = logging.getLogger(__name__)

OBJECT_REPORT_NAME = 'objects.txt'
OBJECT_JSON_NAME = 'objects.json'

def format_object_report(session: BankSession) -> str:
    """Render every hierarchy object in decode order.

    Events list their action ids, EventActions their scope, type, target
    and parameters; every other kind shows its numeric type tag.
    """
    lines: List[str] = []

    for obj in session.objects:
        lines.append(f"Object ID: {obj.id}")

        event = session.events.get(obj.id) if obj.is_event else None
        action = session.event_actions.get(obj.id) if obj.is_event_action else None

        if event is not None:
            lines.append("\tType: Event")
            lines.append(f"\tNumber of Actions: {event.action_count}")
            for action_id in event.action_ids:
                lines.append(f"\tAction ID: {action_id}")
        elif action is not None:
            lines.append("\tType: EventAction")
            lines.append(f"\tAction Scope: {action.scope}")
            lines.append(f"\tAction Type: {action.action_type}")
            lines.append(f"\tGame Object ID: {action.game_object_id}")
            lines.append(f"\tNumber of Parameters: {action.parameter_count}")
            for param_type, value in action.parameters:
                lines.append(f"\t\tParameter Type: {param_type}")
                lines.append(f"\t\tParameter: {value}")
        else:
            # Unknown kinds and records whose body could not be decoded
            name = enum_name(ObjectType, obj.type)
            suffix = f" ({name})" if name else ""
            lines.append(f"\tType: {obj.type}{suffix}")

    return "\n".join(lines) + "\n" if lines else ""

def write_object_report(session: BankSession, output_dir: Path) -> Optional[Path]:
    """Write objects.txt into output_dir.

    Returns the report path, or None if it could not be written.
    """
    report_path = Path(output_dir) / OBJECT_REPORT_NAME
    try:
        with open(report_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(format_object_report(session))
    except OSError as e:
        logger.error(f"Unable to write objects file '{report_path}': {e}")
        return None

    logger.info(f"Objects file was written to: {report_path}")
    return report_path

def write_json_report(session: BankSession, output_dir: Path, source: str = '') -> Optional[Path]:
    """Write objects.json with the full decoded model."""
    report_path = Path(output_dir) / OBJECT_JSON_NAME
    result = {
        'file_path': source,
        **session.to_dict()
    }
    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            json.dump(result, f, indent=2)
    except OSError as e:
        logger.error(f"Unable to write JSON report '{report_path}': {e}")
        return None

    logger.info(f"JSON report written to {report_path}")
    return report_path
