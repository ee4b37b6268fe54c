from typing import Optional, Tuple

COMPONENTS_REF_PREFIX = "#/components/"
SCHEMA_REF_PREFIX = COMPONENTS_REF_PREFIX + "schemas/"
LEGACY_SCHEMA_REF_PREFIX = "#/definitions/"


def simple_ref(ref: str) -> str:
    """Returns the schema name for a local schema reference, or the reference unchanged."""
    for prefix in (SCHEMA_REF_PREFIX, LEGACY_SCHEMA_REF_PREFIX):
        if ref.startswith(prefix):
            return ref[len(prefix) :]
    return ref


def is_local_name(ref: Optional[str]) -> bool:
    """A simple name has no pointer syntax left in it."""
    return bool(ref) and "#" not in ref and "/" not in ref


def schema_ref(name: str) -> str:
    """Builds the `$ref` string for a schema name."""
    if is_local_name(name):
        return SCHEMA_REF_PREFIX + name
    return name


def local_schema_name(ref: str) -> Optional[str]:
    """Returns the schema name if `ref` points into the local schema table."""
    name = simple_ref(ref)
    return name if is_local_name(name) else None


def component_section_ref(ref: str) -> Optional[Tuple[str, str]]:
    """Splits `#/components/<section>/<name>` into its parts, for sections other than schemas."""
    if not ref.startswith(COMPONENTS_REF_PREFIX):
        return None
    section, _, name = ref[len(COMPONENTS_REF_PREFIX) :].partition("/")
    if not name or section == "schemas":
        return None
    return section, name
