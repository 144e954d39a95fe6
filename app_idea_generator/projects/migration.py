"""Schema migration for stored project records.

Records are migrated in memory when the collection is loaded; storage is only
rewritten by the next mutation.
"""

import logging

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 2

# Document kind labels used before code/style guides became language-aware
LEGACY_KIND_LABELS = {
    "js": "code",
    "css": "style",
}

ASSOCIATED_KINDS = ("code", "style")


def detect_version(record: dict) -> int:
    """Infer the schema version of a raw project record from its shape."""
    files = record.get("associatedFiles")
    if not isinstance(files, list) or not isinstance(record.get("data"), dict):
        return 1
    for entry in files:
        if not isinstance(entry, dict):
            return 1
        if entry.get("fileType") not in ASSOCIATED_KINDS or "parentId" not in entry:
            return 1
    kinds = [entry["fileType"] for entry in files]
    if len(kinds) != len(set(kinds)):
        return 1
    return SCHEMA_VERSION


def _migrate_v1_to_v2(record: dict) -> dict:
    """Normalize legacy kinds, default missing collections, link files to their project."""
    migrated = dict(record)
    if not isinstance(migrated.get("data"), dict):
        migrated["data"] = {}

    files = migrated.get("associatedFiles")
    if not isinstance(files, list):
        files = []

    # One document per kind; the later entry wins
    by_kind = {}
    for entry in files:
        if not isinstance(entry, dict):
            logger.warning(f"Dropping malformed document in project {record.get('id')}")
            continue
        entry = dict(entry)
        kind = LEGACY_KIND_LABELS.get(entry.get("fileType"), entry.get("fileType"))
        if kind not in ASSOCIATED_KINDS:
            logger.warning(f"Dropping document of unknown kind {kind!r} in project {record.get('id')}")
            continue
        entry["fileType"] = kind
        entry.setdefault("parentId", record.get("id"))
        by_kind.pop(kind, None)
        by_kind[kind] = entry

    migrated["associatedFiles"] = list(by_kind.values())
    return migrated


MIGRATIONS = {
    1: _migrate_v1_to_v2,
}


def migrate_project_record(record: dict) -> dict:
    """Bring a raw project record up to SCHEMA_VERSION."""
    version = detect_version(record)
    while version < SCHEMA_VERSION:
        record = MIGRATIONS[version](record)
        version += 1
    return record
