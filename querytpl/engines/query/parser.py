"""
Parse placeholder kinds from a query template.

Lets callers check how many arguments a template needs (and of what kind)
before building it.
"""

from querytpl.engines.query.scanner import PlaceholderKind, scan_placeholders


def parse_placeholders(template: str) -> list[PlaceholderKind]:
    """
    Return the placeholder kinds in *template*, left to right.

    The length of the result is the number of arguments ``build_query`` consumes.
    """
    return [match.kind for match in scan_placeholders(template)]
