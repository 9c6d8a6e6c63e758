"""Dependency ordering of assemblies.

Resources of a referenced assembly must be written (and listed) before
those of the assemblies referencing it, since a dependent's scripts and
stylesheets may rely on the dependency's being loaded first.

Only direct references between the two assemblies being compared are
considered. There is no transitive closure: for A -> B -> C, A and C are
never compared against each other.
"""

from typing import Iterable

from ..readers.base import AssemblyView


def compare_by_reference(a: AssemblyView, b: AssemblyView) -> int:
    """Three-way comparison putting referenced assemblies first.

    Returns:
        1 if ``a`` references ``b`` (``a`` goes after ``b``),
        -1 if ``b`` references ``a``,
        0 if neither or both reference the other.
    """
    a_refs_b = a.references_assembly(b)
    b_refs_a = b.references_assembly(a)
    if a_refs_b and not b_refs_a:
        return 1
    if b_refs_a and not a_refs_b:
        return -1
    return 0


def order_assemblies(assemblies: Iterable[AssemblyView]) -> list[AssemblyView]:
    """Sort assemblies so that dependencies precede their dependents.

    This is a stable insertion sort driven by compare_by_reference: each
    assembly is placed right before the first already-placed assembly that
    references it, or appended when there is none. Unrelated assemblies keep
    their input order.

    Placed assemblies are never moved, so an assembly is only guaranteed to
    precede the dependents placed before it. A dependency of the inserted
    assembly that was already placed after that insertion point stays
    behind it: for [P1, P2, X] where P1 references X and X references P2,
    the result is [X, P1, P2].
    """
    ordered: list[AssemblyView] = []
    for assembly in assemblies:
        for index, placed in enumerate(ordered):
            if compare_by_reference(assembly, placed) < 0:
                ordered.insert(index, assembly)
                break
        else:
            ordered.append(assembly)
    return ordered
