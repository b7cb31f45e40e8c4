"""Product-management role detection from a free-text job title."""

from services.lexicon import compile_phrases

# Title fragments that denote a product-management role
PRODUCT_ROLE_FRAGMENTS: tuple[str, ...] = (
    "product manager",
    "product management",
    "product owner",
    "product lead",
    "product director",
    "director of product",
    "head of product",
    "vp of product",
    "vp product",
    "vp, product",
    "vice president of product",
    "chief product officer",
    "cpo",
    "pm",
    "apm",
    "gpm",
    "associate product manager",
    "technical product manager",
    "group product manager",
    "principal product manager",
)

_PRODUCT_ROLE_RE = compile_phrases(PRODUCT_ROLE_FRAGMENTS)


def normalize_title(title: str | None) -> str:
    """Lower-case, trim and collapse internal whitespace."""
    return " ".join((title or "").lower().split())


def is_product_role(title: str | None) -> bool:
    """True if ``title`` names a product-management role.

    "Senior Product Manager", "PM" and "VP of Product" match; "Marketing
    Manager", "Registered Nurse" and the empty string do not.
    """
    normalized = normalize_title(title)
    if not normalized:
        return False
    return _PRODUCT_ROLE_RE.search(normalized) is not None
