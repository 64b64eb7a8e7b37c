"""Message Catalog — default constraint messages per locale.

Invariants:
    - Catalog keys are brace-wrapped template keys, e.g. "{constraints.Min.message}"
    - Every locale defines every key; EN is the fallback for unknown locales
    - Attribute placeholders ({value}) are filled after catalog lookup
    - Text that is not a catalog key is treated as a literal custom message

Design Decisions:
    - Dict-per-locale over gettext: two locales, pure data, no file IO
    - Wording follows the standard bean-validation bundle so clients see
      familiar messages ("must be greater than or equal to 0")
"""

import re
from enum import Enum


class MessageLocale(str, Enum):
    """Locales with a full default-message catalog."""
    EN = "en"
    KO = "ko"


MIN_MESSAGE_KEY = "{constraints.Min.message}"
NOT_NULL_MESSAGE_KEY = "{constraints.NotNull.message}"

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

_CATALOG: dict[MessageLocale, dict[str, str]] = {
    MessageLocale.EN: {
        MIN_MESSAGE_KEY: "must be greater than or equal to {value}",
        NOT_NULL_MESSAGE_KEY: "must not be null",
    },
    MessageLocale.KO: {
        MIN_MESSAGE_KEY: "{value} 이상이어야 합니다",
        NOT_NULL_MESSAGE_KEY: "널이어서는 안됩니다",
    },
}


def resolve_locale(value: str | None) -> MessageLocale:
    """Map a configured locale tag ("ko", "ko-KR", "EN") to a catalog locale."""
    if not value:
        return MessageLocale.EN
    primary = value.replace("_", "-").split("-", 1)[0].lower()
    try:
        return MessageLocale(primary)
    except ValueError:
        return MessageLocale.EN


def interpolate(
    template: str, locale: MessageLocale = MessageLocale.EN, **attributes,
) -> str:
    """Resolve a catalog key (or keep literal text) and fill attribute placeholders."""
    text = _CATALOG[locale].get(template, template)
    return _PLACEHOLDER.sub(
        lambda m: str(attributes[m.group(1)]) if m.group(1) in attributes else m.group(0),
        text,
    )
