"""Normalization of raw type tokens into dependency names."""

PRIMITIVE_TYPES = frozenset(
    {"byte", "short", "int", "long", "float", "double", "boolean", "char", "void"}
)

# Keywords a naive token scan can mistake for a type name, plus the
# reserved local type name "var".
EXCLUDED_TOKENS = PRIMITIVE_TYPES | frozenset(
    {
        "new",
        "return",
        "public",
        "protected",
        "private",
        "static",
        "final",
        "abstract",
        "if",
        "else",
        "for",
        "while",
        "switch",
        "case",
        "default",
        "break",
        "continue",
        "try",
        "catch",
        "finally",
        "throw",
        "throws",
        "synchronized",
        "var",
    }
)


def normalize_type(raw: str) -> str | None:
    """Turn a raw type token into a dependency name.

    Strips generic parameters (``Foo<Bar>`` -> ``Foo``), trailing
    array markers (``Foo[]`` -> ``Foo``) and surrounding whitespace.

    Args:
        raw: Type text as it appears in source.

    Returns:
        The dependency name, or None for empty, primitive or keyword tokens.
    """
    name = raw.split("<", 1)[0]
    name = name.strip()
    while name.endswith("[]"):
        name = name[:-2].rstrip()
    if not name or name in EXCLUDED_TOKENS:
        return None
    return name


def filter_primitives(dependencies: list[str]) -> list[str]:
    """Drop primitive type names from a dependency list."""
    return [dep for dep in dependencies if dep not in PRIMITIVE_TYPES]
