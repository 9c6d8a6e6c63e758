"""Classification of embedded resource logical names.

Logical names encode both the resource kind and its relative output path,
e.g. "blazor:css:styles/theme.css". Names without a known prefix belong to
unrelated tooling (localization data and similar) and are ignored.
"""

from .types import ResourceKind

JS_FILE_LOGICAL_NAME_PREFIX = "blazor:js:"
CSS_FILE_LOGICAL_NAME_PREFIX = "blazor:css:"
STATIC_FILE_LOGICAL_NAME_PREFIX = "blazor:file:"

LOGICAL_NAME_PREFIXES: dict[str, ResourceKind] = {
    JS_FILE_LOGICAL_NAME_PREFIX: ResourceKind.SCRIPT,
    CSS_FILE_LOGICAL_NAME_PREFIX: ResourceKind.STYLESHEET,
    STATIC_FILE_LOGICAL_NAME_PREFIX: ResourceKind.STATIC_FILE,
}


def classify_logical_name(logical_name: str) -> tuple[ResourceKind, str] | None:
    """Interpret a logical name as a (kind, relative path) pair.

    Matching is case-sensitive and ordinal.

    Args:
        logical_name: Resource name as stored in the assembly metadata

    Returns:
        The resource kind and the remainder of the name after the prefix,
        or None if the name is not a recognized embedded resource.

    Example:
        >>> classify_logical_name("blazor:js:app.js")
        (<ResourceKind.SCRIPT: 'script'>, 'app.js')
        >>> classify_logical_name("Strings.resources") is None
        True
    """
    for prefix, kind in LOGICAL_NAME_PREFIXES.items():
        if logical_name.startswith(prefix):
            return kind, logical_name[len(prefix):]
    return None
