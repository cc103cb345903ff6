import os
from dataclasses import dataclass, field
from typing import List

import yaml

from detective.directory import SuspectDirectory
from detective.errors import CaseFileError
from detective.mansion import ClueCatalog, Mansion, build_mansion

CASE_BASE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "cases")
CASE_FILES = ("manifest.yaml", "rooms.yaml", "clues.yaml", "suspects.yaml")


@dataclass
class Case:
    title: str
    mansion: Mansion
    catalog: ClueCatalog
    directory: SuspectDirectory
    candidates: List[str] = field(default_factory=list)
    intro: str = ""


def _read_yaml(case_path, filename):
    with open(os.path.join(case_path, filename), "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_case_data(case_id, base_path=CASE_BASE_PATH):
    """
    Loads the four YAML files of a case into one raw dict, keyed by file stem.
    """
    case_path = os.path.join(base_path, case_id)
    if not os.path.isdir(case_path):
        raise CaseFileError(f"Case '{case_id}' not found in {base_path}.")

    return {os.path.splitext(name)[0]: _read_yaml(case_path, name) for name in CASE_FILES}


def _mapping(case_data, stem):
    """Each case file must hold a mapping; an empty file reads as {}."""
    value = case_data.get(stem, {})
    if not isinstance(value, dict):
        raise CaseFileError(f"{stem}.yaml must be a mapping, not a {type(value).__name__}.")
    return value


def build_case(case_data):
    """Turns raw case data into the mansion, the clue catalog and the suspect directory."""
    manifest = _mapping(case_data, 'manifest')
    rooms = _mapping(case_data, 'rooms')
    clues = _mapping(case_data, 'clues')
    evidence = _mapping(case_data, 'suspects')

    if 'root' not in rooms:
        raise CaseFileError("rooms.yaml must define the mansion under 'root'.")
    mansion = build_mansion(rooms['root'])

    unknown_rooms = [str(name) for name in clues if mansion.find(str(name)) is None]
    if unknown_rooms:
        raise CaseFileError(f"Clues placed in rooms that do not exist: {', '.join(unknown_rooms)}")

    # A room listed with no clue text hides nothing.
    catalog = ClueCatalog({str(k): str(v) for k, v in clues.items() if v is not None})

    unattributed = [str(k) for k, v in evidence.items() if v is None]
    if unattributed:
        raise CaseFileError(f"Clues with no suspect in suspects.yaml: {', '.join(unattributed)}")

    # Seed order is file order; candidates default to suspects in first-seen order.
    directory = SuspectDirectory.from_pairs((str(k), str(v)) for k, v in evidence.items())
    named_in_evidence = list(dict.fromkeys(str(v) for v in evidence.values()))

    listed = manifest.get('suspects', named_in_evidence)
    if not isinstance(listed, list):
        raise CaseFileError("manifest.yaml 'suspects' must be a list of names.")
    candidates = [str(name) for name in listed]
    missing = [name for name in named_in_evidence if name not in candidates]
    if missing:
        raise CaseFileError(f"Suspects implicated by clues but not listed in the manifest: {', '.join(missing)}")

    return Case(
        title=str(manifest.get('title') or "Untitled Case"),
        intro=str(manifest.get('intro') or ""),
        mansion=mansion,
        catalog=catalog,
        directory=directory,
        candidates=candidates,
    )


def load_case(case_id, base_path=CASE_BASE_PATH):
    return build_case(load_case_data(case_id, base_path))
