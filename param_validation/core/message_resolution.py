"""Message Resolution — turn field errors into the text a client reads.

Invariants:
    - Registry is static: type name → field name → required message
    - Only NotNull contributes to the registry; other rules on a field are ignored
    - resolve_missing_field_message() never raises — every miss yields the fallback
    - Violation text is "<path>: <message>", multiple violations joined by ", "

Design Decisions:
    - Registry built once from the record rules instead of inspecting the
      record class per request
    - Fallback text mirrors a generic deserializer message so clients without
      a configured message still learn which property was absent
"""

from collections.abc import Iterable, Mapping

from param_validation.core.constraints import FieldRules, NotNull
from param_validation.core.errors import FieldError
from param_validation.core.message_catalog import MessageLocale

RequiredMessages = dict[str, dict[str, str]]


def required_messages(
    rules: FieldRules, locale: MessageLocale = MessageLocale.EN,
) -> dict[str, str]:
    """Field name → NotNull message for every field that declares one."""
    messages = {}
    for field, constraints in rules.items():
        for constraint in constraints:
            if isinstance(constraint, NotNull):
                messages[field] = constraint.message_for(locale)
                break
    return messages


def build_registry(
    records: Mapping[str, FieldRules], locale: MessageLocale = MessageLocale.EN,
) -> RequiredMessages:
    """Build the type → field → required-message registry for a set of records."""
    return {
        type_name: required_messages(rules, locale)
        for type_name, rules in records.items()
    }


def missing_parameter_message(type_name: str, field: str) -> str:
    """Generic text for a required value that was absent during construction."""
    return (
        f"Instantiation of [simple type, class {type_name}] value failed for "
        f"JSON property {field} due to missing (therefore NULL) value for "
        f"creator parameter {field} which is a non-nullable type"
    )


def resolve_missing_field_message(
    type_name: str, field: str, registry: RequiredMessages, fallback: str,
) -> str:
    """Configured required message for type_name.field, else fallback."""
    fields = registry.get(type_name)
    if fields is None:
        return fallback
    return fields.get(field) or fallback


def constraint_violation_message(errors: Iterable[FieldError]) -> str:
    return ", ".join(error.render() for error in errors)
